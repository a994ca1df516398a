"""Domain layer: entities, error taxonomy and validation services."""

from i18nmail.domain.exceptions import EmailTemplateError, ErrorKind

__all__ = [
    "EmailTemplateError",
    "ErrorKind",
]
