"""Push the branch to the deployment remote."""

from typing import Any

from deployer.steps.base import BaseStep, DeploymentContext


class DeployStep(BaseStep):
    """Production history is never rewritten; other targets are disposable."""

    @property
    def name(self) -> str:
        return "deploy"

    @property
    def description(self) -> str:
        return "Push the branch to the deployment remote"

    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        force = not context.settings.is_production(context.remote)
        refspec = f"{context.request.branch}:{context.settings.remote_branch}"

        self.logger.info(
            "step.deploy.pushing",
            remote=context.remote,
            refspec=refspec,
            force=force,
        )
        context.git.push(context.remote, refspec, force=force)

        return {"refspec": refspec, "force": force}
