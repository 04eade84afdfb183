"""Command-line entry point.

    heroku-deploy <remote> [no-migrations]

Run it from the application's root directory.
"""

import sys

import click

from deployer import __version__
from deployer.config import get_settings
from deployer.core.exceptions import NothingToDeploy, RecoverableConflict, UsageError
from deployer.core.orchestrator import DeploymentOrchestrator
from deployer.core.runner import CommandRunner
from deployer.models.deployment import DeploymentReport, DeploymentRequest, MigrationMode
from deployer.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

USAGE = """\
Usage: [BRANCH=master] heroku-deploy <remote> [no-migrations]

        remote         Name of git remote for Heroku app
        no-migrations  Deploy without running migrations
"""


def _report_outcome(report: DeploymentReport) -> None:
    """Tell the operator why the run stopped."""
    if report.error_code == UsageError.__name__:
        click.echo(f"{report.error}\n", err=True)
        click.echo(USAGE, err=True)
    elif report.error_code == RecoverableConflict.__name__:
        click.echo(report.error)
    elif report.exit_code != 0 and report.error_code != NothingToDeploy.__name__:
        click.echo(f"Deploy stopped at '{report.failed_step}': {report.error}", err=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("remote", required=False, default="")
@click.argument("migration_mode", required=False, metavar="[no-migrations]")
@click.option(
    "--branch",
    envvar="BRANCH",
    default=None,
    help="Local branch to deploy (default: BRANCH or master).",
)
@click.option("--debug", is_flag=True, default=False, help="Trace every external command.")
@click.version_option(__version__, prog_name="heroku-deploy")
def cli(remote: str, migration_mode: str | None, branch: str | None, debug: bool) -> None:
    """Pull, preview, push, migrate and restart a Heroku app."""
    settings = get_settings()
    debug = debug or settings.debug
    configure_logging(settings, debug=debug)

    request = DeploymentRequest(
        remote=remote or "",
        migration_mode=MigrationMode.from_argument(migration_mode),
        branch=(branch or "").strip() or settings.branch,
        debug=debug,
    )
    logger.debug(
        "deploy.starting",
        version=__version__,
        remote=request.remote,
        branch=request.branch,
    )

    orchestrator = DeploymentOrchestrator(
        settings=settings,
        runner=CommandRunner(trace=debug),
    )
    report = orchestrator.run(request)

    _report_outcome(report)
    sys.exit(report.exit_code)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
