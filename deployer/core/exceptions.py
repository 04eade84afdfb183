"""Custom exceptions for the deploy pipeline.

Every error carries the process exit status it maps to, so the CLI
never has to guess.
"""

from typing import Any


class DeployerError(Exception):
    """Base exception for the deployer."""

    exit_code: int = 1

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UsageError(DeployerError):
    """Missing or unknown arguments."""

    pass


class DirtyWorktreeError(DeployerError):
    """Uncommitted changes in the working copy."""

    def __init__(self, paths: list[str]):
        super().__init__(
            "Commit or stash your local changes before deploying.",
            {"paths": paths},
        )


class RecoverableConflict(DeployerError):
    """Pulling from upstream failed; the operator resolves it and reruns.

    Exits 0: the tool stops early, but nothing is broken.
    """

    exit_code = 0


class NothingToDeploy(DeployerError):
    """The remote already has every local commit."""

    def __init__(self, remote: str):
        super().__init__("Nothing to deploy", {"remote": remote})


class ExternalCommandFailure(DeployerError):
    """An external command returned a failing status."""

    def __init__(self, command: list[str], returncode: int, output: str = ""):
        super().__init__(
            f"Command failed with exit code {returncode}: {' '.join(command)}",
            {"command": command, "returncode": returncode, "output": output},
        )
        self.command = command
        self.returncode = returncode
        self.output = output
        if returncode < 0:
            # Killed by a signal: report it the way a shell does
            self.exit_code = 128 - returncode
        else:
            self.exit_code = returncode or 1


class StepExecutionError(DeployerError):
    """A pipeline step crashed outside the error taxonomy."""

    def __init__(self, step: str, message: str):
        super().__init__(
            f"Step '{step}' failed: {message}",
            {"step": step},
        )
        self.step = step
