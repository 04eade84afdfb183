"""Database migrations inside a maintenance window."""

from typing import Any

from deployer.core.exceptions import ExternalCommandFailure
from deployer.steps.base import BaseStep, DeploymentContext


class MigrateStep(BaseStep):
    """Turn maintenance on, migrate, turn maintenance off.

    With ``release_maintenance_on_failure`` (the default) maintenance is
    turned off on every exit path, including a bad migration command or
    an interrupt; the original error still stops the pipeline.
    """

    @property
    def name(self) -> str:
        return "migrate"

    @property
    def description(self) -> str:
        return "Run database migrations in maintenance mode"

    def should_run(self, context: DeploymentContext) -> bool:
        return context.request.runs_migrations

    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        remote = context.remote
        command = context.settings.migration_command

        context.heroku.maintenance_on(remote)
        try:
            context.heroku.run_command(command, remote)
        except BaseException:
            if context.settings.release_maintenance_on_failure:
                self._release_maintenance(context)
            else:
                self.logger.error("step.migrate.maintenance_left_on", remote=remote)
            raise

        context.heroku.maintenance_off(remote)
        return {"command": command}

    def _release_maintenance(self, context: DeploymentContext) -> None:
        # The migration error is what gets reported; a failure here is only logged
        try:
            context.heroku.maintenance_off(context.remote)
        except ExternalCommandFailure as e:
            self.logger.error(
                "step.migrate.maintenance_off_failed",
                remote=context.remote,
                returncode=e.returncode,
            )
