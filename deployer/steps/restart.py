"""Restart the application."""

from typing import Any

from deployer.steps.base import BaseStep, DeploymentContext


class RestartStep(BaseStep):
    @property
    def name(self) -> str:
        return "restart"

    @property
    def description(self) -> str:
        return "Restart the deployed application"

    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        context.heroku.restart(context.remote)
        return None
