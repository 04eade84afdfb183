"""Base class for pipeline steps."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from deployer.config import Settings
from deployer.models.deployment import DeploymentReport, DeploymentRequest, DeploymentTarget
from deployer.services import GitClient, HerokuClient, LocaleappClient, SecurityScanner
from deployer.utils.logging import get_logger


@dataclass
class DeploymentContext:
    """Everything a step may touch during one run."""

    request: DeploymentRequest
    settings: Settings
    report: DeploymentReport
    git: GitClient
    heroku: HerokuClient
    localeapp: LocaleappClient
    scanner: SecurityScanner
    confirm: Callable[[], Any]
    echo: Callable[[str], Any]
    root: Path
    target: DeploymentTarget | None = None

    @property
    def remote(self) -> str:
        """The validated remote name once the target is resolved."""
        if self.target:
            return self.target.remote
        return self.request.remote

    @property
    def main_ref(self) -> str:
        """``<remote>/<remote_branch>``, the last fetched state of the target."""
        if self.target:
            return self.target.main_ref
        return f"{self.request.remote}/{self.settings.remote_branch}"


class BaseStep(ABC):
    """A single fallible step of the deploy pipeline.

    Subclasses implement:
    - name: Step identifier, used as the key in the report
    - description: What the step does
    - execute(): Do the work, raising a DeployerError to stop the pipeline

    ``execute`` may return a dict that is stored as the step's metadata.
    """

    def __init__(self):
        self.logger = get_logger(f"step.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Step name/identifier."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this step does."""
        pass

    def should_run(self, context: DeploymentContext) -> bool:
        """Whether the step applies to this run; skipped steps are recorded."""
        return True

    @abstractmethod
    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        """Execute the step.

        Args:
            context: Shared state for the current run

        Returns:
            Optional metadata for the report
        """
        pass
