"""Deployment data models."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

SKIP_MIGRATIONS_ARGUMENT = "no-migrations"


class MigrationMode(str, Enum):
    """Whether the migrate step runs."""

    RUN = "run-migrations"
    SKIP = "skip-migrations"

    @classmethod
    def from_argument(cls, value: str | None) -> "MigrationMode":
        """Only the literal ``no-migrations`` skips; anything else runs."""
        if value == SKIP_MIGRATIONS_ARGUMENT:
            return cls.SKIP
        return cls.RUN


class DeploymentRequest(BaseModel):
    """What the operator asked for."""

    remote: str = ""
    migration_mode: MigrationMode = MigrationMode.RUN
    branch: str = Field(default="master", min_length=1, pattern=r"^\S+$")
    debug: bool = False

    @property
    def runs_migrations(self) -> bool:
        return self.migration_mode == MigrationMode.RUN


class DeploymentTarget(BaseModel):
    """The git remote being deployed to."""

    remote: str
    remote_branch: str = "master"
    exists: bool = False
    is_production: bool = False

    @property
    def main_ref(self) -> str:
        """Remote-tracking ref of the deployed branch, e.g. ``prod/master``."""
        return f"{self.remote}/{self.remote_branch}"


class Commit(BaseModel):
    """An undeployed commit."""

    short_hash: str
    relative_time: str
    subject: str
    author: str

    def format(self) -> str:
        return f"{self.short_hash} | {self.relative_time}: {self.subject} ({self.author})"


class LocaleFile(BaseModel):
    """A translation file tracked for one locale."""

    code: str
    path: str
    changed: bool | None = None
    pushed: bool = False
    error: str | None = None


class StepStatus(str, Enum):
    """Individual step status."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


class StepInfo(BaseModel):
    """Information about a pipeline step."""

    status: StepStatus = StepStatus.PENDING
    started_at: datetime | None = None
    completed_at: datetime | None = None
    duration_ms: int | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None


class DeploymentReport(BaseModel):
    """Outcome of a deploy run, step by step."""

    request: DeploymentRequest
    target: DeploymentTarget | None = None
    current_step: str | None = None
    steps: dict[str, StepInfo] = Field(default_factory=dict)
    commits: list[Commit] = Field(default_factory=list)
    locales: list[LocaleFile] = Field(default_factory=list)

    exit_code: int = 0
    error: str | None = None
    error_code: str | None = None

    started_at: datetime = Field(default_factory=datetime.utcnow)
    completed_at: datetime | None = None

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0 and not any(
            info.status == StepStatus.FAILED for info in self.steps.values()
        )

    @property
    def failed_step(self) -> str | None:
        for name, info in self.steps.items():
            if info.status == StepStatus.FAILED:
                return name
        return None

    def update_step(
        self,
        step: str,
        status: StepStatus,
        error: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Update a step's status."""
        now = datetime.utcnow()
        info = self.steps.setdefault(step, StepInfo())

        if status == StepStatus.IN_PROGRESS:
            info.started_at = now
            self.current_step = step
        elif status in (StepStatus.COMPLETED, StepStatus.FAILED):
            info.completed_at = now
            if info.started_at:
                info.duration_ms = int((now - info.started_at).total_seconds() * 1000)

        info.status = status
        if error:
            info.error = error
        if metadata:
            info.metadata.update(metadata)
