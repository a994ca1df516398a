"""Pytest configuration for all tests."""

import pytest

from i18nmail.application.services.email_template_manager import EmailTemplateManager
from i18nmail.core.config import Settings
from i18nmail.domain.entities.email_template import EmailTemplate
from i18nmail.infrastructure.registry.memory_registry import InMemoryResourceStore

TENANT = "carbon.super"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, environment="testing")


@pytest.fixture
def store() -> InMemoryResourceStore:
    return InMemoryResourceStore()


@pytest.fixture
def manager(store: InMemoryResourceStore, settings: Settings) -> EmailTemplateManager:
    return EmailTemplateManager(store, settings=settings)


@pytest.fixture
def tenant() -> str:
    return TENANT


@pytest.fixture
def make_template():
    """Factory for valid email templates."""

    def _make(
        display_name: str = "Account Confirmation",
        locale: str = "en_US",
        subject: str = "Confirm your account",
        body: str = "Hi {{user-name}}, please confirm.",
        footer: str = "Regards",
        **kwargs,
    ) -> EmailTemplate:
        return EmailTemplate(
            display_name=display_name,
            locale=locale,
            subject=subject,
            body=body,
            footer=footer,
            **kwargs,
        )

    return _make
