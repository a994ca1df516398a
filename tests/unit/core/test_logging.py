"""Unit tests for structured logging setup."""

import pytest
import structlog

from i18nmail.core.config import Settings
from i18nmail.core.logging import LoggingContext, clear_context, configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
    clear_context()


def test_configure_logging_json(capsys):
    """Test that production settings emit JSON log lines."""
    configure_logging(Settings(_env_file=None, environment="production", log_format="json"))

    get_logger("i18nmail.test").info("template added", tenant_domain="carbon.super")

    out = capsys.readouterr().out
    assert '"message": "template added"' in out
    assert '"tenant_domain": "carbon.super"' in out
    assert '"level": "info"' in out


def test_configure_logging_filters_level(capsys):
    """Test that entries below the configured level are dropped."""
    configure_logging(
        Settings(_env_file=None, environment="production", log_format="json", log_level="WARNING")
    )

    get_logger("i18nmail.test").info("hidden")

    assert "hidden" not in capsys.readouterr().out


def test_logging_context_binds_and_restores():
    """Test that LoggingContext only binds values inside the block."""
    clear_context()

    with LoggingContext(tenant_domain="carbon.super"):
        assert structlog.contextvars.get_contextvars()["tenant_domain"] == "carbon.super"

    assert "tenant_domain" not in structlog.contextvars.get_contextvars()
