"""Localeapp client for pushing translation files."""

from deployer.core.runner import CommandRunner


class LocaleappClient:
    def __init__(self, runner: CommandRunner, executable: str = "localeapp"):
        self.runner = runner
        self.executable = executable

    def push(self, path: str) -> None:
        """Push a single translation file to localeapp.com."""
        self.runner.run([self.executable, "push", path])
