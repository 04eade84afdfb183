"""Heroku CLI client.

Every call names its target with ``--remote`` instead of relying on the
app that happens to match the current directory.
"""

import shlex

from deployer.core.runner import CommandResult, CommandRunner


class HerokuClient:
    """Wrapper over the ``heroku`` executable."""

    def __init__(self, runner: CommandRunner, executable: str = "heroku"):
        self.runner = runner
        self.executable = executable

    def whoami(self) -> str:
        result = self.runner.run([self.executable, "auth:whoami"], capture=True)
        return result.stdout.strip()

    def maintenance_on(self, remote: str) -> None:
        self.runner.run([self.executable, "maintenance:on", "--remote", remote])

    def maintenance_off(self, remote: str) -> None:
        self.runner.run([self.executable, "maintenance:off", "--remote", remote])

    def run_command(self, command: str, remote: str) -> CommandResult:
        """Run a one-off command on a dyno.

        ``--exit-code`` makes the CLI return the dyno's status, so a failed
        migration fails the pipeline.
        """
        return self.runner.run(
            [self.executable, "run", "--exit-code", *shlex.split(command), "--remote", remote]
        )

    def restart(self, remote: str) -> None:
        self.runner.run([self.executable, "restart", "--remote", remote])
