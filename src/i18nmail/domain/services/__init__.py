"""Domain services for i18nmail.

Services contain business logic that doesn't naturally fit within a single entity.
They have no dependencies on infrastructure.
"""

from i18nmail.domain.services.default_templates import (
    DEFAULT_TEMPLATE_LOCALE,
    builtin_default_templates,
    load_default_templates,
)
from i18nmail.domain.services.template_name_validator import (
    TemplateNameValidator,
    ValidationPatterns,
    is_blank,
    normalize_template_name,
)

__all__ = [
    "DEFAULT_TEMPLATE_LOCALE",
    "TemplateNameValidator",
    "ValidationPatterns",
    "builtin_default_templates",
    "is_blank",
    "load_default_templates",
    "normalize_template_name",
]
