"""Infrastructure layer for i18nmail."""
