"""Command-line interface for i18nmail.

This module provides commands for inspecting template names and the
default template set.
"""

import json
import sys
from typing import NoReturn

import click

from i18nmail.application.services.email_template_manager import EmailTemplateManager
from i18nmail.core.config import get_settings
from i18nmail.core.logging import LoggingContext, configure_logging, get_logger
from i18nmail.domain.exceptions import EmailTemplateError
from i18nmail.domain.services.default_templates import load_default_templates
from i18nmail.domain.services.template_name_validator import (
    TemplateNameValidator,
    ValidationPatterns,
    normalize_template_name,
)
from i18nmail.infrastructure.registry.memory_registry import InMemoryResourceStore


@click.group()
@click.version_option(version="0.1.0", prog_name="i18nmail")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides I18NMAIL_LOG_LEVEL)",
)
def cli(log_level: str | None) -> None:
    """i18nmail - per-tenant, localized email notification templates."""
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)


@cli.command()
@click.argument("display_name")
def normalize(display_name: str) -> None:
    """Print the registry name derived from a template type display name."""
    click.echo(normalize_template_name(display_name))


@cli.command("validate-name")
@click.argument("display_name")
@click.option("--locale", type=str, default=None, help="Also validate a locale code")
def validate_name(display_name: str, locale: str | None) -> None:
    """Check a template type display name (and optionally a locale)."""
    validator = TemplateNameValidator(ValidationPatterns.from_settings(get_settings()))
    try:
        template_type = validator.validate_template_type(display_name)
        if locale is not None:
            validator.validate_locale(locale)
    except EmailTemplateError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(f"OK: '{template_type.display_name}' -> {template_type.normalized_name}")


@cli.command()
@click.option("--json", "as_json", is_flag=True, default=False, help="Print templates as JSON")
def defaults(as_json: bool) -> None:
    """List the default templates every tenant is seeded with."""
    settings = get_settings()
    try:
        templates = load_default_templates(settings.default_templates_file)
    except (OSError, ValueError) as e:
        click.echo(f"Error: cannot load default templates: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([t.to_dict() for t in templates], indent=2, ensure_ascii=False))
        return

    for template in templates:
        click.echo(f"{template.display_name} [{template.locale}]: {template.subject}")


@cli.command("seed-preview")
@click.argument("tenant_domain")
def seed_preview(tenant_domain: str) -> None:
    """Seed a throwaway in-memory registry and show the resulting template types."""
    logger = get_logger(__name__)
    manager = EmailTemplateManager(InMemoryResourceStore(), settings=get_settings())

    with LoggingContext(tenant_domain=tenant_domain):
        try:
            added = manager.seed_defaults(tenant_domain)
            template_types = manager.list_template_types(tenant_domain)
        except EmailTemplateError as e:
            logger.error("Seeding failed", **e.to_dict())
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)

    click.echo(f"Added {added} default templates to '{tenant_domain}':")
    for display_name in template_types:
        click.echo(f"  - {display_name}")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `i18nmail` command is run
    or when using `python -m i18nmail`.
    """
    cli()
