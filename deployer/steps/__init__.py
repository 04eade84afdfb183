"""Deploy pipeline steps."""

from deployer.steps.base import BaseStep, DeploymentContext
from deployer.steps.deploy import DeployStep
from deployer.steps.migrations import MigrateStep
from deployer.steps.preview import PreviewStep
from deployer.steps.restart import RestartStep
from deployer.steps.security import SecurityScanStep
from deployer.steps.translations import PushTranslationsStep, resolve_locales
from deployer.steps.upstream import PullUpstreamStep, PushUpstreamStep
from deployer.steps.validation import CleanWorktreeStep, ValidateStep


def default_pipeline() -> list[BaseStep]:
    """The deploy steps, in the order they must run."""
    return [
        ValidateStep(),
        CleanWorktreeStep(),
        SecurityScanStep(),
        PullUpstreamStep(),
        PreviewStep(),
        PushUpstreamStep(),
        PushTranslationsStep(),
        DeployStep(),
        MigrateStep(),
        RestartStep(),
    ]


__all__ = [
    "BaseStep",
    "DeploymentContext",
    "default_pipeline",
    "resolve_locales",
    "CleanWorktreeStep",
    "DeployStep",
    "MigrateStep",
    "PreviewStep",
    "PullUpstreamStep",
    "PushTranslationsStep",
    "PushUpstreamStep",
    "RestartStep",
    "SecurityScanStep",
    "ValidateStep",
]
