"""Email template entities.

An email template is one translation (locale) of a notification email that
belongs to a template type, for example the ``en_US`` version of
"Account Confirmation".
"""

import json
from dataclasses import dataclass, field
from typing import Any

DEFAULT_CONTENT_TYPE = "text/plain"


@dataclass(frozen=True)
class TemplateType:
    """A named category of notification email.

    Attributes:
        display_name: Human-readable name (e.g., 'Account Confirmation').
        normalized_name: Path-safe name derived from the display name
            (e.g., 'accountconfirmation').
    """

    display_name: str
    normalized_name: str


@dataclass
class EmailTemplate:
    """Email template entity for one template type in one locale.

    Attributes:
        display_name: Display name of the template type.
        locale: Language/locale code (e.g., 'en_US', 'fr_FR').
        subject: Email subject line.
        body: Email body.
        footer: Email footer.
        template_type: Normalized template type name. Corrected to match the
            display name when the template is validated.
        content_type: MIME type of the body.
    """

    display_name: str
    locale: str
    subject: str
    body: str
    footer: str
    template_type: str = ""
    content_type: str = field(default=DEFAULT_CONTENT_TYPE)

    def to_dict(self) -> dict[str, Any]:
        return {
            "template_type": self.template_type,
            "display_name": self.display_name,
            "locale": self.locale,
            "content_type": self.content_type,
            "subject": self.subject,
            "body": self.body,
            "footer": self.footer,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmailTemplate":
        return cls(
            display_name=str(data["display_name"]),
            locale=str(data["locale"]),
            subject=str(data["subject"]),
            body=str(data["body"]),
            footer=str(data["footer"]),
            template_type=str(data.get("template_type") or ""),
            content_type=str(data.get("content_type") or DEFAULT_CONTENT_TYPE),
        )
