"""Data models for the deployer."""

from deployer.models.deployment import (
    Commit,
    DeploymentReport,
    DeploymentRequest,
    DeploymentTarget,
    LocaleFile,
    MigrationMode,
    StepInfo,
    StepStatus,
)

__all__ = [
    "Commit",
    "DeploymentReport",
    "DeploymentRequest",
    "DeploymentTarget",
    "LocaleFile",
    "MigrationMode",
    "StepInfo",
    "StepStatus",
]
