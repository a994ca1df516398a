"""Domain entities for i18nmail.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from i18nmail.domain.entities.email_template import (
    DEFAULT_CONTENT_TYPE,
    EmailTemplate,
    TemplateType,
)

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "EmailTemplate",
    "TemplateType",
]
