"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from deployer.config import Settings
from deployer.core.exceptions import ExternalCommandFailure
from deployer.core.orchestrator import DeploymentOrchestrator
from deployer.core.runner import CommandResult
from deployer.models.deployment import DeploymentReport, DeploymentRequest
from deployer.services import GitClient, HerokuClient, LocaleappClient, SecurityScanner
from deployer.services.git import LOG_FORMAT
from deployer.steps import DeploymentContext


class FakeRunner:
    """Scripted stand-in for CommandRunner.

    Every call is recorded in ``calls``; ``events`` also receives the
    ``confirm`` marker so ordering against the prompt can be asserted.
    """

    def __init__(self, remotes: str = "origin\nprod\nstaging\n"):
        self.cwd: Path | None = None
        self.trace = False
        self.calls: list[list[str]] = []
        self.events: list[str] = []
        self.installed: set[str] = set()
        self._responses: list[tuple[list[str], str, int]] = []
        self.respond(["git", "remote"], stdout=remotes)

    def respond(self, prefix: list[str], stdout: str = "", returncode: int = 0) -> None:
        """Script the result of commands starting with ``prefix``. Later rules win."""
        self._responses.insert(0, (prefix, stdout, returncode))

    def run(self, args: list[str], capture: bool = False, check: bool = True) -> CommandResult:
        self.calls.append(list(args))
        self.events.append(" ".join(args))

        stdout, returncode = "", 0
        for prefix, scripted_stdout, scripted_code in self._responses:
            if args[: len(prefix)] == prefix:
                stdout, returncode = scripted_stdout, scripted_code
                break

        if check and returncode != 0:
            raise ExternalCommandFailure(list(args), returncode, stdout)
        return CommandResult(args=list(args), returncode=returncode, stdout=stdout)

    def which(self, program: str) -> str | None:
        if program in self.installed:
            return f"/usr/local/bin/{program}"
        return None

    def commands(self, *prefix: str) -> list[list[str]]:
        """Recorded calls starting with ``prefix``."""
        return [call for call in self.calls if call[: len(prefix)] == list(prefix)]


def _log_line(short_hash: str, relative_time: str, subject: str, author: str) -> str:
    """One line of ``git log`` output in the format GitClient requests."""
    return (
        LOG_FORMAT.replace("%h", short_hash)
        .replace("%cr", relative_time)
        .replace("%s", subject)
        .replace("%an", author)
    )


def _log_command(remote: str, branch: str = "master") -> str:
    return f"git log --reverse --pretty=format:{LOG_FORMAT} {remote}/master..{branch}"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's environment."""
    return Settings(
        _env_file=None,
        branch="master",
        debug=False,
        locales=["en", "nb"],
        deploy_log_directory=None,
    )


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def echoed() -> list[str]:
    """Lines the pipeline printed for the operator."""
    return []


@pytest.fixture
def make_orchestrator(
    settings: Settings, runner: FakeRunner, echoed: list[str], tmp_path: Path
) -> Callable[..., DeploymentOrchestrator]:
    """Build an orchestrator whose confirmation prompt is recorded, not awaited."""

    def factory(**overrides) -> DeploymentOrchestrator:
        options = {
            "settings": settings,
            "runner": runner,
            "confirm": lambda: runner.events.append("confirm"),
            "echo": echoed.append,
            "root": tmp_path,
        }
        options.update(overrides)
        return DeploymentOrchestrator(**options)

    return factory


@pytest.fixture
def make_context(
    settings: Settings, runner: FakeRunner, echoed: list[str], tmp_path: Path
) -> Callable[..., DeploymentContext]:
    """Build a step context around the fake runner."""

    def factory(**request_fields) -> DeploymentContext:
        request = DeploymentRequest(**{"remote": "staging", **request_fields})
        return DeploymentContext(
            request=request,
            settings=settings,
            report=DeploymentReport(request=request),
            git=GitClient(runner),
            heroku=HerokuClient(runner),
            localeapp=LocaleappClient(runner),
            scanner=SecurityScanner(runner),
            confirm=lambda: runner.events.append("confirm"),
            echo=echoed.append,
            root=tmp_path,
        )

    return factory


@pytest.fixture
def log_line() -> Callable[..., str]:
    """Format a fake ``git log`` line: log_line(hash, when, subject, author)."""
    return _log_line


@pytest.fixture
def log_command() -> Callable[..., str]:
    """The ``git log`` command the preview runs: log_command(remote, branch)."""
    return _log_command
