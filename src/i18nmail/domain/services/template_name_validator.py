"""Template name and locale validation.

Display names must pass an allowed-character whitelist and must not contain
any character the registry cannot store. Locale codes are only checked
against the registry blacklist.
"""

import re
from dataclasses import dataclass
from typing import Any

from i18nmail.domain.entities.email_template import EmailTemplate, TemplateType
from i18nmail.domain.exceptions import EmailTemplateError

WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_template_name(display_name: str) -> str:
    """Derive the path-safe template type name from a display name.

    Examples:
        >>> normalize_template_name("Account Confirmation")
        'accountconfirmation'
        >>> normalize_template_name("  Password  Reset ")
        'passwordreset'
    """
    return WHITESPACE_PATTERN.sub("", display_name).lower()


def is_blank(value: str | None) -> bool:
    """Check whether a value is None, empty or whitespace only."""
    return value is None or not value.strip()


@dataclass(frozen=True)
class ValidationPatterns:
    """Compiled whitelist and blacklist patterns.

    Built once when a template manager is created and never mutated.

    Attributes:
        template_name: Pattern a display name must fully match.
        registry_invalid_chars: Pattern that must not occur anywhere in a
            display name or locale code.
    """

    template_name: re.Pattern[str]
    registry_invalid_chars: re.Pattern[str]

    @classmethod
    def from_settings(cls, settings: Any) -> "ValidationPatterns":
        return cls(
            template_name=re.compile(settings.template_name_regex),
            registry_invalid_chars=re.compile(settings.registry_invalid_chars_regex),
        )

    def is_valid(self, value: str) -> bool:
        """Whitelist matches and blacklist does not."""
        return bool(self.template_name.match(value)) and self.is_valid_over_blacklist(value)

    def is_valid_over_blacklist(self, value: str) -> bool:
        return self.registry_invalid_chars.search(value) is None


class TemplateNameValidator:
    """Validates display names, locale codes and whole templates.

    Every violation raises an ``EmailTemplateError`` of kind CLIENT.
    """

    def __init__(self, patterns: ValidationPatterns) -> None:
        self.patterns = patterns

    def validate_template_type(self, display_name: str | None) -> TemplateType:
        """Validate a template type display name.

        Args:
            display_name: The display name to validate.

        Returns:
            The template type with its normalized name.

        Raises:
            EmailTemplateError: CLIENT if the name is blank or has invalid characters.
        """
        if is_blank(display_name):
            raise EmailTemplateError.client("Email template type display name cannot be blank.")

        if not self.patterns.is_valid(display_name):
            raise EmailTemplateError.client(
                f"Invalid characters exist in the email template display name: {display_name}"
            )

        return TemplateType(
            display_name=display_name,
            normalized_name=normalize_template_name(display_name),
        )

    def validate_locale(self, locale: str | None) -> None:
        """Validate a locale code.

        Raises:
            EmailTemplateError: CLIENT if the locale is blank or has registry invalid characters.
        """
        if is_blank(locale):
            raise EmailTemplateError.client("Locale code cannot be blank.")

        if not self.patterns.is_valid_over_blacklist(locale):
            raise EmailTemplateError.client(f"Locale code contains invalid characters: {locale}")

    def validate_template(self, template: EmailTemplate | None) -> TemplateType:
        """Validate an email template before it is persisted.

        A template whose ``template_type`` does not match its normalized
        display name is corrected in place.

        Args:
            template: The template to validate.

        Returns:
            The template type the template belongs to.

        Raises:
            EmailTemplateError: CLIENT on any invalid or missing field.
        """
        if template is None:
            raise EmailTemplateError.client("Email template cannot be None.")

        template_type = self.validate_template_type(template.display_name)
        if (template.template_type or "").lower() != template_type.normalized_name:
            template.template_type = template_type.normalized_name

        self.validate_locale(template.locale)

        if is_blank(template.subject) or is_blank(template.body) or is_blank(template.footer):
            raise EmailTemplateError.client(
                "Subject, body and footer sections of an email template cannot be empty."
            )

        return template_type
