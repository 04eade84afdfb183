"""Show what is about to go out and wait for the operator."""

from typing import Any

from deployer.core.exceptions import NothingToDeploy
from deployer.steps.base import BaseStep, DeploymentContext


class PreviewStep(BaseStep):
    @property
    def name(self) -> str:
        return "preview"

    @property
    def description(self) -> str:
        return "List undeployed commits and ask for confirmation"

    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        context.git.fetch(context.remote)

        revision_range = f"{context.main_ref}..{context.request.branch}"
        commits = context.git.log_range(revision_range)
        context.report.commits = commits

        if not commits:
            context.echo("Nothing to deploy")
            raise NothingToDeploy(context.remote)

        context.echo("Undeployed commits:\n")
        for commit in commits:
            context.echo(commit.format())

        self.logger.info(
            "step.preview.awaiting_confirmation",
            range=revision_range,
            commits=len(commits),
        )
        context.confirm()

        return {"range": revision_range, "commits": len(commits)}
