"""Configuration management for i18nmail.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once at startup
and is immutable during runtime.
"""

import re
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPLATE_ROOT = "/identity/email"
DEFAULT_EMAIL_LOCALE = "en_US"

# Display names may only hold alphanumerics and whitespace.
EMAIL_TEMPLATE_TYPE_REGEX = r"^[a-zA-Z0-9\s]+$"
# Characters the registry cannot store in a path segment.
REGISTRY_INVALID_CHARS_REGEX = r"[~!@#;%^*()+={}|<>\\\"'/,]+"


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="I18NMAIL_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "i18nmail"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Template Registry Settings
    template_root: str = Field(
        default=DEFAULT_TEMPLATE_ROOT,
        description="Registry path under which all template types are stored",
    )
    default_locale: str = Field(
        default=DEFAULT_EMAIL_LOCALE,
        description="Locale used when a requested translation is missing",
    )
    template_name_regex: str = EMAIL_TEMPLATE_TYPE_REGEX
    registry_invalid_chars_regex: str = REGISTRY_INVALID_CHARS_REGEX
    default_templates_file: str | None = Field(
        default=None,
        description="Optional JSON file overriding the built-in default templates",
    )

    @field_validator("template_root")
    @classmethod
    def validate_template_root(cls, v: str) -> str:
        """Ensure the root is absolute and has no trailing separator."""
        v = v.strip()
        if not v.startswith("/"):
            raise ValueError("template_root must be an absolute registry path")
        return v.rstrip("/") or "/"

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Reject a blank default locale."""
        if not v or not v.strip():
            raise ValueError("default_locale cannot be blank")
        return v.strip()

    @field_validator("template_name_regex", "registry_invalid_chars_regex")
    @classmethod
    def validate_regex(cls, v: str) -> str:
        """Fail at startup on a pattern that does not compile."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid regular expression '{v}': {e}") from e
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
