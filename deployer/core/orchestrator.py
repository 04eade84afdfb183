"""Deploy Orchestrator.

Runs the deploy steps in order and stops at the first failure.
"""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import click

from deployer.config import Settings, get_settings
from deployer.core.exceptions import DeployerError, StepExecutionError
from deployer.core.runner import CommandRunner
from deployer.models.deployment import DeploymentReport, DeploymentRequest, StepInfo, StepStatus
from deployer.services import GitClient, HerokuClient, LocaleappClient, SecurityScanner
from deployer.steps import BaseStep, DeploymentContext, default_pipeline
from deployer.utils.logging import get_logger
from deployer.utils.records import save_deploy_record


def prompt_to_continue() -> None:
    """Block until the operator presses enter."""
    click.prompt(
        "\nPress enter to continue...",
        default="",
        show_default=False,
        prompt_suffix=" ",
    )


class DeploymentOrchestrator:
    """Orchestrates the deploy pipeline.

    Pipeline steps:
    1. validate - Remote given and configured
    2. clean_worktree - Optional uncommitted-changes check
    3. security_scan - Advisory scanner run
    4. pull_upstream - Merge upstream
    5. preview - Show undeployed commits, wait for confirmation
    6. push_upstream - Push to upstream
    7. push_translations - Push changed locale files
    8. deploy - Push to the deployment remote
    9. migrate - Migrations inside maintenance mode
    10. restart - Restart the app
    """

    def __init__(
        self,
        settings: Settings | None = None,
        runner: CommandRunner | None = None,
        steps: list[BaseStep] | None = None,
        confirm: Callable[[], Any] | None = None,
        echo: Callable[[str], Any] | None = None,
        root: Path | None = None,
    ):
        self.settings = settings or get_settings()
        self.runner = runner or CommandRunner(cwd=root, trace=self.settings.debug)
        self.steps = steps if steps is not None else default_pipeline()
        self.confirm = confirm or prompt_to_continue
        self.echo = echo or click.echo
        self.root = root or self.runner.cwd or Path.cwd()
        self.logger = get_logger("orchestrator")

        self.git = GitClient(self.runner)
        self.heroku = HerokuClient(self.runner, executable=self.settings.platform_cli)
        self.localeapp = LocaleappClient(self.runner, executable=self.settings.translation_cli)
        self.scanner = SecurityScanner(self.runner, executable=self.settings.security_scanner)

    def run(self, request: DeploymentRequest) -> DeploymentReport:
        """Run the complete pipeline for a deploy request.

        Errors never escape: the report's ``exit_code`` carries the
        outcome. Interrupts (Ctrl-C at the prompt) do propagate.

        Args:
            request: The remote, branch and migration mode to deploy

        Returns:
            The report, with one entry per step
        """
        if request.debug:
            self.runner.trace = True

        report = DeploymentReport(request=request)
        for step in self.steps:
            report.steps[step.name] = StepInfo()

        context = DeploymentContext(
            request=request,
            settings=self.settings,
            report=report,
            git=self.git,
            heroku=self.heroku,
            localeapp=self.localeapp,
            scanner=self.scanner,
            confirm=self.confirm,
            echo=self.echo,
            root=self.root,
        )

        self.logger.info(
            "orchestrator.pipeline.started",
            remote=request.remote,
            branch=request.branch,
            migrations=request.runs_migrations,
        )

        try:
            for step in self.steps:
                self._run_step(step, context)
        except DeployerError as e:
            report.exit_code = e.exit_code
            report.error = e.message
            report.error_code = type(e).__name__
            self._log_stop(report, e)
        else:
            self.logger.info(
                "orchestrator.pipeline.completed",
                remote=request.remote,
                commits=len(report.commits),
            )
        finally:
            report.completed_at = datetime.utcnow()

        self._record(report)
        return report

    def _run_step(self, step: BaseStep, context: DeploymentContext) -> None:
        report = context.report

        if not step.should_run(context):
            report.update_step(step.name, StepStatus.SKIPPED)
            self.logger.info("orchestrator.step.skipped", step=step.name)
            return

        report.update_step(step.name, StepStatus.IN_PROGRESS)
        self.logger.info("orchestrator.step.started", step=step.name)

        try:
            metadata = step.execute(context)
        except DeployerError as e:
            report.update_step(step.name, StepStatus.FAILED, error=e.message)
            raise
        except Exception as e:
            report.update_step(step.name, StepStatus.FAILED, error=str(e))
            self.logger.exception("orchestrator.step.crashed", step=step.name)
            raise StepExecutionError(step.name, str(e)) from e

        report.update_step(step.name, StepStatus.COMPLETED, metadata=metadata)
        self.logger.info(
            "orchestrator.step.completed",
            step=step.name,
            duration_ms=report.steps[step.name].duration_ms,
        )

    def _log_stop(self, report: DeploymentReport, error: DeployerError) -> None:
        fields = {
            "step": report.failed_step,
            "exit_code": error.exit_code,
            "error": error.message,
        }
        if error.exit_code == 0:
            self.logger.info("orchestrator.pipeline.stopped", **fields)
        else:
            self.logger.error("orchestrator.pipeline.failed", **fields)

    def _record(self, report: DeploymentReport) -> None:
        """Write a deploy record once the remote has actually received the push."""
        directory = self.settings.deploy_log_directory
        deploy = report.steps.get("deploy")
        if not directory or not deploy or deploy.status != StepStatus.COMPLETED:
            return

        save_deploy_record(directory, report)
