"""Keep upstream (origin) in step with what gets deployed."""

from typing import Any

from deployer.core.exceptions import RecoverableConflict
from deployer.steps.base import BaseStep, DeploymentContext

CONFLICT_MESSAGE = (
    "Resolve merge conflicts with {remote}, and commit them, before running the "
    "deploy script again. To ensure the latest version of {remote} matches {target}."
)


class PullUpstreamStep(BaseStep):
    """Merge other developers' work first so the preview shows everything."""

    @property
    def name(self) -> str:
        return "pull_upstream"

    @property
    def description(self) -> str:
        return "Pull the latest upstream branch"

    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        settings = context.settings
        if not context.git.pull(settings.upstream_remote, settings.upstream_branch):
            raise RecoverableConflict(
                CONFLICT_MESSAGE.format(remote=settings.upstream_remote, target=context.remote),
                {"remote": settings.upstream_remote, "branch": settings.upstream_branch},
            )
        return None


class PushUpstreamStep(BaseStep):
    """Upstream stays the source of truth; nobody should pull from production."""

    @property
    def name(self) -> str:
        return "push_upstream"

    @property
    def description(self) -> str:
        return "Push the branch to upstream"

    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        settings = context.settings
        refspec = f"{context.request.branch}:{settings.upstream_branch}"
        context.git.push(settings.upstream_remote, refspec)
        return {"refspec": refspec}
