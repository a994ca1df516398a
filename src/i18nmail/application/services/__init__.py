"""Application services for i18nmail."""

from i18nmail.application.services.email_template_manager import EmailTemplateManager

__all__ = ["EmailTemplateManager"]
