"""Deploy records: one JSON file per deploy that reached the remote."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from deployer.models.deployment import DeploymentReport
from deployer.utils.logging import get_logger

logger = get_logger(__name__)


def _remote(report: DeploymentReport) -> str:
    return report.target.remote if report.target else report.request.remote


def build_deploy_record(report: DeploymentReport) -> dict[str, Any]:
    """Summarise a report for the deploy log."""
    return {
        "remote": _remote(report),
        "branch": report.request.branch,
        "migration_mode": report.request.migration_mode.value,
        "commits": [commit.model_dump() for commit in report.commits],
        "locales_pushed": [locale.code for locale in report.locales if locale.pushed],
        "steps": {name: info.status.value for name, info in report.steps.items()},
        "exit_code": report.exit_code,
        "error": report.error,
        "started_at": report.started_at.isoformat(),
        "completed_at": report.completed_at.isoformat() if report.completed_at else None,
    }


def save_deploy_record(
    directory: Path | str,
    report: DeploymentReport,
    pretty: bool = True,
) -> Path:
    """Save a deploy record to a local file.

    Args:
        directory: Where deploy records are kept
        report: The finished deploy report
        pretty: Whether to pretty-print the JSON

    Returns:
        Path to the saved file
    """
    record_dir = Path(directory)
    record_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.utcnow().strftime("%Y%m%d_%H%M%S")
    filepath = record_dir / f"{_remote(report)}_{timestamp}.json"

    with open(filepath, "w") as f:
        if pretty:
            json.dump(build_deploy_record(report), f, indent=2, default=str)
        else:
            json.dump(build_deploy_record(report), f, default=str)

    logger.info(
        "records.deploy_saved",
        remote=_remote(report),
        filepath=str(filepath),
    )

    return filepath
