"""Core functionality for the deployer."""

from deployer.core.exceptions import (
    DeployerError,
    DirtyWorktreeError,
    ExternalCommandFailure,
    NothingToDeploy,
    RecoverableConflict,
    StepExecutionError,
    UsageError,
)
from deployer.core.runner import CommandResult, CommandRunner

__all__ = [
    "DeployerError",
    "DirtyWorktreeError",
    "ExternalCommandFailure",
    "NothingToDeploy",
    "RecoverableConflict",
    "StepExecutionError",
    "UsageError",
    "CommandResult",
    "CommandRunner",
]
