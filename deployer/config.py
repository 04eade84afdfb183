"""Deployment configuration using pydantic-settings."""

from functools import lru_cache
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".deploy.env"

# Load the per-repository deploy file; real environment variables win
load_dotenv(ENV_FILE)


class Settings(BaseSettings):
    """Deployment settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Source branch and tracing
    branch: str = "master"
    debug: bool = False

    # Git remotes
    upstream_remote: str = "origin"
    upstream_branch: str = "master"
    remote_branch: str = "master"
    production_remote: str = "prod"

    # Translations
    locales: list[str] = Field(default_factory=lambda: ["en", "nb"])
    locale_directory: str = "config/locales"
    discover_locales: bool = False

    # External tools
    security_scanner: str = "brakeman"
    platform_cli: str = "heroku"
    translation_cli: str = "localeapp"
    migration_command: str = "rake db:migrate"

    # Safety
    release_maintenance_on_failure: bool = True
    require_clean_worktree: bool = False
    check_platform_auth: bool = False

    # Deploy records
    deploy_log_directory: str | None = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] = "console"

    @field_validator("branch", mode="before")
    @classmethod
    def _blank_branch_means_default(cls, value: Any) -> Any:
        # BRANCH="" falls back like `${BRANCH:-master}`; an empty refspec deletes
        if isinstance(value, str) and not value.strip():
            return "master"
        return value.strip() if isinstance(value, str) else value

    @field_validator("debug", mode="before")
    @classmethod
    def _non_empty_means_on(cls, value: Any) -> Any:
        # DEBUG=<anything non-empty> turns tracing on, like `[ -n "$DEBUG" ]`
        if isinstance(value, str):
            return bool(value.strip())
        return value

    def is_production(self, remote: str) -> bool:
        """Check if a remote is the reserved production remote."""
        return remote == self.production_remote


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
