"""i18nmail - per-tenant, localized email notification templates.

Validates template names and locales, maps them onto a registry-like
resource store and falls back to a default locale when a translation
is missing.
"""

__version__ = "0.1.0"

from i18nmail.application.services.email_template_manager import EmailTemplateManager
from i18nmail.domain.entities.email_template import EmailTemplate
from i18nmail.domain.exceptions import EmailTemplateError, ErrorKind
from i18nmail.infrastructure.registry import InMemoryResourceStore, ResourceStore

__all__ = [
    "EmailTemplate",
    "EmailTemplateError",
    "EmailTemplateManager",
    "ErrorKind",
    "InMemoryResourceStore",
    "ResourceStore",
    "__version__",
]
