"""Unit tests for application settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from i18nmail.core.config import (
    DEFAULT_EMAIL_LOCALE,
    DEFAULT_TEMPLATE_ROOT,
    Settings,
    get_settings,
)


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    settings = Settings(_env_file=None)

    assert settings.app_name == "i18nmail"
    assert settings.environment == "development"
    assert settings.template_root == DEFAULT_TEMPLATE_ROOT
    assert settings.default_locale == DEFAULT_EMAIL_LOCALE
    assert settings.default_templates_file is None
    assert settings.is_development is True
    assert settings.is_production is False
    assert settings.is_testing is False


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(os.environ, {
        "I18NMAIL_ENVIRONMENT": "production",
        "I18NMAIL_DEFAULT_LOCALE": "fr_FR",
        "I18NMAIL_TEMPLATE_ROOT": "/tenant/mail/",
        "I18NMAIL_LOG_LEVEL": "DEBUG",
    }):
        settings = Settings(_env_file=None)

        assert settings.is_production is True
        assert settings.default_locale == "fr_FR"
        assert settings.template_root == "/tenant/mail"
        assert settings.log_level == "DEBUG"


def test_template_root_must_be_absolute():
    """Test that a relative template root is rejected."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, template_root="identity/email")


def test_blank_default_locale_rejected():
    """Test that a blank default locale is rejected."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_locale="   ")


def test_invalid_regex_rejected():
    """Test that a pattern which does not compile fails at startup."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, template_name_regex="[a-z")


def test_get_settings_is_cached():
    """Test that get_settings returns the same instance."""
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
