"""Optional static security scanner (brakeman by default)."""

from deployer.core.runner import CommandResult, CommandRunner


class SecurityScanner:
    def __init__(self, runner: CommandRunner, executable: str = "brakeman"):
        self.runner = runner
        self.executable = executable

    def available(self) -> bool:
        return self.runner.which(self.executable) is not None

    def scan(self) -> CommandResult:
        """Run the scanner with no arguments; its output goes to the terminal."""
        return self.runner.run([self.executable], check=False)
