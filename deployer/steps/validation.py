"""Pre-flight checks: arguments, remote, platform login, clean worktree."""

from typing import Any

from deployer.core.exceptions import DirtyWorktreeError, UsageError
from deployer.models.deployment import DeploymentTarget
from deployer.steps.base import BaseStep, DeploymentContext


class ValidateStep(BaseStep):
    """Refuse to touch anything unless the remote is real."""

    @property
    def name(self) -> str:
        return "validate"

    @property
    def description(self) -> str:
        return "Check the target remote exists"

    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        remote = context.request.remote.strip()
        if not remote:
            raise UsageError("Missing remote name")

        remotes = context.git.remotes()
        if remote not in remotes:
            raise UsageError(
                f"No git remote named '{remote}'",
                {"remote": remote, "remotes": remotes},
            )

        context.target = DeploymentTarget(
            remote=remote,
            remote_branch=context.settings.remote_branch,
            exists=True,
            is_production=context.settings.is_production(remote),
        )
        context.report.target = context.target

        if context.settings.check_platform_auth:
            account = context.heroku.whoami()
            self.logger.info("step.validate.platform_auth", account=account)

        return {"remote": remote, "is_production": context.target.is_production}


class CleanWorktreeStep(BaseStep):
    """Make sure nothing uncommitted gets left out of (or tangled into) the deploy."""

    @property
    def name(self) -> str:
        return "clean_worktree"

    @property
    def description(self) -> str:
        return "Require a clean working copy"

    def should_run(self, context: DeploymentContext) -> bool:
        return context.settings.require_clean_worktree

    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        paths = context.git.dirty_paths()
        if paths:
            raise DirtyWorktreeError(paths)
        return None
