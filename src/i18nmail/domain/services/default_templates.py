"""Built-in default email templates.

Every tenant is seeded with this set. Deployments can replace it with a JSON
file (``I18NMAIL_DEFAULT_TEMPLATES_FILE``) holding a list of objects with the
``EmailTemplate.to_dict`` keys.
"""

import json
from pathlib import Path

from i18nmail.core.logging import get_logger
from i18nmail.domain.entities.email_template import EmailTemplate
from i18nmail.domain.services.template_name_validator import normalize_template_name

logger = get_logger(__name__)

DEFAULT_TEMPLATE_LOCALE = "en_US"

FOOTER = "---\nBest Regards,\nThe {{tenant-domain}} Team"

_DEFAULTS: list[dict[str, str]] = [
    {
        "display_name": "Account Confirmation",
        "subject": "Confirm your account",
        "body": (
            "Hi {{user-name}},\n\n"
            "Please confirm your account by clicking the link below.\n\n"
            "{{confirmation-url}}\n\n"
            "If clicking the link doesn't work, copy it into a new browser window."
        ),
    },
    {
        "display_name": "Resend Account Confirmation",
        "subject": "Confirm your account",
        "body": (
            "Hi {{user-name}},\n\n"
            "You asked us to send the account confirmation link again.\n\n"
            "{{confirmation-url}}"
        ),
    },
    {
        "display_name": "Password Reset",
        "subject": "Password reset request",
        "body": (
            "Hi {{user-name}},\n\n"
            "We received a request to reset the password of your account.\n"
            "Use the link below to choose a new password.\n\n"
            "{{password-reset-url}}\n\n"
            "If you did not request a reset you can ignore this email."
        ),
    },
    {
        "display_name": "Account Id Recovery",
        "subject": "Your account username",
        "body": (
            "Hi {{first-name}},\n\n"
            "Your username for {{tenant-domain}} is {{user-name}}."
        ),
    },
    {
        "display_name": "Account Lock",
        "subject": "Your account has been locked",
        "body": (
            "Hi {{user-name}},\n\n"
            "Your account has been locked after too many failed sign-in attempts.\n"
            "Contact your administrator to unlock it."
        ),
    },
    {
        "display_name": "Account Unlock",
        "subject": "Your account has been unlocked",
        "body": (
            "Hi {{user-name}},\n\n"
            "Your account has been unlocked. You can sign in again."
        ),
    },
    {
        "display_name": "Ask Password",
        "subject": "Set the password for your new account",
        "body": (
            "Hi {{user-name}},\n\n"
            "An account was created for you. Set your password using the link below.\n\n"
            "{{password-setup-url}}"
        ),
    },
]


def builtin_default_templates() -> list[EmailTemplate]:
    """Return fresh copies of the built-in default templates."""
    return [
        EmailTemplate(
            display_name=item["display_name"],
            template_type=normalize_template_name(item["display_name"]),
            locale=DEFAULT_TEMPLATE_LOCALE,
            subject=item["subject"],
            body=item["body"],
            footer=FOOTER,
        )
        for item in _DEFAULTS
    ]


def load_default_templates(path: str | Path | None = None) -> list[EmailTemplate]:
    """Load the default template set.

    Args:
        path: Optional JSON file with a list of template objects. When not
            given, the built-in set is returned.

    Returns:
        List of default email templates.

    Raises:
        ValueError: If the file is not a JSON list of template objects.
        OSError: If the file cannot be read.
    """
    if path is None:
        return builtin_default_templates()

    file_path = Path(path)
    data = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Default templates file '{file_path}' must contain a JSON list")

    templates: list[EmailTemplate] = []
    for index, item in enumerate(data):
        try:
            templates.append(EmailTemplate.from_dict(item))
        except (KeyError, TypeError) as e:
            raise ValueError(
                f"Invalid template at index {index} in '{file_path}': {e!r}"
            ) from e

    logger.debug("Loaded default email templates", path=str(file_path), count=len(templates))
    return templates
