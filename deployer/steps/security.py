"""Advisory security scan."""

from typing import Any

from deployer.steps.base import BaseStep, DeploymentContext


class SecurityScanStep(BaseStep):
    """Run the scanner when it is installed. Never stops the deploy."""

    @property
    def name(self) -> str:
        return "security_scan"

    @property
    def description(self) -> str:
        return "Run the static security scanner if installed"

    def should_run(self, context: DeploymentContext) -> bool:
        if context.scanner.available():
            return True
        self.logger.info(
            "step.security_scan.not_installed",
            scanner=context.scanner.executable,
        )
        return False

    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        result = context.scanner.scan()
        if not result.ok:
            self.logger.warning(
                "step.security_scan.findings",
                scanner=context.scanner.executable,
                returncode=result.returncode,
            )
        return {"returncode": result.returncode}
