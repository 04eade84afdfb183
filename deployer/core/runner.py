"""External command execution.

Every git, heroku, localeapp and scanner invocation goes through
:class:`CommandRunner`, so a run can be traced (``DEBUG``) or faked in tests.
"""

import shlex
import shutil
import subprocess
from pathlib import Path

from pydantic import BaseModel

from deployer.core.exceptions import ExternalCommandFailure
from deployer.utils.logging import get_logger

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


class CommandResult(BaseModel):
    """Result of an external command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined output for error reporting."""
        parts = []
        if self.stderr:
            parts.append(f"STDERR:\n{self.stderr}")
        if self.stdout:
            parts.append(f"STDOUT:\n{self.stdout}")
        return "\n".join(parts)


class CommandRunner:
    """Runs external commands synchronously.

    With ``capture=False`` the child inherits the terminal, so the
    operator sees git and heroku output as it happens. With
    ``capture=True`` stdout/stderr are collected for parsing.
    """

    def __init__(self, cwd: Path | str | None = None, trace: bool = False):
        self.cwd = Path(cwd) if cwd else None
        self.trace = trace
        self.logger = get_logger("runner")

    def run(
        self,
        args: list[str],
        capture: bool = False,
        check: bool = True,
    ) -> CommandResult:
        """Run a command and return its result.

        Raises:
            ExternalCommandFailure: if ``check`` and the command fails or
                cannot be started
        """
        cmd_display = shlex.join(args)
        if self.trace:
            self.logger.info(f"+ {cmd_display}")

        try:
            completed = subprocess.run(
                args,
                cwd=str(self.cwd) if self.cwd else None,
                capture_output=capture,
                text=True,
            )
        except FileNotFoundError:
            result = CommandResult(
                args=args,
                returncode=COMMAND_NOT_FOUND,
                stderr=f"{args[0]}: command not found",
            )
        else:
            result = CommandResult(
                args=args,
                returncode=completed.returncode,
                stdout=completed.stdout or "",
                stderr=completed.stderr or "",
            )

        self.logger.debug(
            "runner.command.finished",
            cmd=cmd_display,
            returncode=result.returncode,
        )

        if check and not result.ok:
            self.logger.error(
                "runner.command.failed",
                cmd=cmd_display,
                returncode=result.returncode,
                error_preview=result.output[:500] or None,
            )
            raise ExternalCommandFailure(args, result.returncode, result.output)

        return result

    def which(self, program: str) -> str | None:
        """Locate an optional executable on PATH."""
        return shutil.which(program)
