"""Email template manager.

Manages per-tenant email notification templates stored in a registry
resource store:

    <root>/<normalized type name>            collection tagged with the display name
    <root>/<normalized type name>/<locale>   one translation of the template

Validation failures are raised before the store is touched. Store failures
are logged and re-raised as SERVER errors, except during ``seed_defaults``,
which is best effort (see its docstring).
"""

from typing import Any

from i18nmail.core.config import get_settings
from i18nmail.core.logging import get_logger
from i18nmail.domain.entities.email_template import EmailTemplate
from i18nmail.domain.exceptions import EmailTemplateError, ErrorKind, TemplateResourceError
from i18nmail.domain.services.default_templates import load_default_templates
from i18nmail.domain.services.template_name_validator import (
    TemplateNameValidator,
    ValidationPatterns,
    is_blank,
    normalize_template_name,
)
from i18nmail.infrastructure.registry.base import (
    Collection,
    ResourceStore,
    ResourceStoreError,
    join_path,
    locale_path,
)
from i18nmail.infrastructure.registry.template_resources import (
    EMAIL_TEMPLATE_TYPE_DISPLAY_NAME,
    create_template_resource,
    create_template_type,
    get_email_template,
)

logger = get_logger(__name__)


class EmailTemplateManager:
    """Manage email template types and their translations for each tenant."""

    def __init__(
        self,
        store: ResourceStore,
        patterns: ValidationPatterns | None = None,
        settings: Any | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            store: Resource store holding the templates.
            patterns: Whitelist/blacklist patterns. Built from settings when omitted.
            settings: Optional settings instance. If not provided, will load from environment.
        """
        if settings is None:
            settings = get_settings()

        self.store = store
        self.template_root = settings.template_root
        self.default_locale = settings.default_locale
        self.default_templates_file = settings.default_templates_file
        self.validator = TemplateNameValidator(patterns or ValidationPatterns.from_settings(settings))

    def _type_path(self, display_name: str) -> str:
        return join_path(self.template_root, normalize_template_name(display_name))

    def _server_error(self, message: str, cause: Exception) -> EmailTemplateError:
        logger.error(message, error=str(cause))
        return EmailTemplateError.server(message, cause)

    def add_template_type(self, display_name: str, tenant_domain: str) -> None:
        """Create a template type.

        Args:
            display_name: Display name of the new type.
            tenant_domain: Tenant to create it in.

        Raises:
            EmailTemplateError: CLIENT on an invalid name, ALREADY_EXISTS if the
                type is present, SERVER on store failure.
        """
        template_type = self.validator.validate_template_type(display_name)
        path = join_path(self.template_root, template_type.normalized_name)

        try:
            if self.store.exists(path, tenant_domain):
                raise EmailTemplateError.already_exists(
                    f"Email template type '{display_name}' already exists in tenant '{tenant_domain}'."
                )

            collection = create_template_type(template_type.normalized_name, display_name)
            self.store.put(collection, path, tenant_domain)
        except ResourceStoreError as e:
            raise self._server_error(
                f"Error adding template type '{display_name}' to tenant '{tenant_domain}'.", e
            ) from e

        logger.debug("Template type added", display_name=display_name, tenant_domain=tenant_domain)

    def delete_template_type(self, display_name: str, tenant_domain: str) -> None:
        """Delete a template type together with all of its translations."""
        template_type = self.validator.validate_template_type(display_name)
        path = join_path(self.template_root, template_type.normalized_name)

        try:
            self.store.delete(path, tenant_domain)
        except ResourceStoreError as e:
            raise self._server_error(
                f"Error deleting template type '{display_name}' from tenant '{tenant_domain}'.", e
            ) from e

    def list_template_types(self, tenant_domain: str) -> list[str]:
        """List the display names of all template types of a tenant.

        Order follows the store's child order. A tenant without any template
        type yields an empty list.
        """
        try:
            root = self.store.get(self.template_root, tenant_domain)
            if not isinstance(root, Collection):
                return []

            display_names = []
            for type_path in root.children:
                resource = self.store.get(type_path, tenant_domain)
                if resource is None:
                    continue
                display_name = resource.get_property(EMAIL_TEMPLATE_TYPE_DISPLAY_NAME)
                if display_name is not None:
                    display_names.append(display_name)
            return display_names
        except ResourceStoreError as e:
            raise self._server_error(
                f"Error retrieving email template types of tenant '{tenant_domain}'.", e
            ) from e

    def template_type_exists(self, display_name: str, tenant_domain: str) -> bool:
        """Check whether a template type exists.

        A blank name never exists.

        Raises:
            EmailTemplateError: SERVER on store failure.
        """
        if is_blank(display_name):
            return False

        path = self._type_path(display_name)
        try:
            return self.store.get(path, tenant_domain) is not None
        except ResourceStoreError as e:
            raise EmailTemplateError.server(
                f"Error checking template type '{display_name}' in tenant '{tenant_domain}'.", e
            ) from e

    def ensure_template_type(self, display_name: str, tenant_domain: str) -> bool:
        """Create a template type unless it already exists.

        Returns:
            True if this call created the type.
        """
        template_type = self.validator.validate_template_type(display_name)
        path = join_path(self.template_root, template_type.normalized_name)
        try:
            if self.store.exists(path, tenant_domain):
                return False
        except ResourceStoreError as e:
            raise self._server_error(
                f"Error checking template type '{display_name}' in tenant '{tenant_domain}'.", e
            ) from e

        try:
            self.add_template_type(display_name, tenant_domain)
        except EmailTemplateError as e:
            if e.kind is not ErrorKind.ALREADY_EXISTS:
                raise
            # Lost a race with another writer.
            return False

        return True

    def list_all_templates(self, tenant_domain: str) -> list[EmailTemplate]:
        """List every template of every type in a tenant.

        Resources that cannot be read back as templates are logged and skipped.
        """
        templates: list[EmailTemplate] = []

        try:
            root = self.store.get(self.template_root, tenant_domain)
            if not isinstance(root, Collection):
                return templates

            for type_path in root.children:
                template_type = self.store.get(type_path, tenant_domain)
                if not isinstance(template_type, Collection):
                    continue

                for template_path in template_type.children:
                    resource = self.store.get(template_path, tenant_domain)
                    if resource is None:
                        continue
                    try:
                        templates.append(get_email_template(resource))
                    except TemplateResourceError as e:
                        logger.error(
                            "Skipping unreadable email template",
                            path=e.path,
                            reason=e.reason,
                            tenant_domain=tenant_domain,
                        )
        except ResourceStoreError as e:
            raise EmailTemplateError.server(
                f"Error retrieving email templates of tenant '{tenant_domain}'.", e
            ) from e

        return templates

    def get_template(self, display_name: str, locale: str, tenant_domain: str) -> EmailTemplate:
        """Get a template, falling back to the default locale.

        Args:
            display_name: Display name of the template type.
            locale: Requested locale.
            tenant_domain: Tenant to read from.

        Returns:
            The template in the requested locale, or in the default locale if
            the requested translation does not exist.

        Raises:
            EmailTemplateError: CLIENT on invalid input, NOT_FOUND if the
                template is missing in the default locale too, SERVER on
                store failure.
        """
        template_type = self.validator.validate_template_type(display_name)
        self.validator.validate_locale(locale)

        path = join_path(self.template_root, template_type.normalized_name)
        try:
            resource = self.store.get(path, tenant_domain, locale)
        except ResourceStoreError as e:
            raise self._server_error(
                f"Error retrieving '{display_name}:{locale}' template from tenant '{tenant_domain}'.", e
            ) from e

        if resource is not None:
            try:
                return get_email_template(resource)
            except TemplateResourceError as e:
                raise self._server_error(
                    f"Stored '{display_name}:{locale}' template of tenant '{tenant_domain}' is corrupt.", e
                ) from e

        if locale.lower() == self.default_locale.lower():
            raise EmailTemplateError.not_found(
                f"Cannot find '{display_name}' template in the default '{locale}' locale "
                f"for tenant '{tenant_domain}'."
            )

        logger.debug(
            "Template not found in requested locale, trying default locale",
            display_name=display_name,
            locale=locale,
            default_locale=self.default_locale,
            tenant_domain=tenant_domain,
        )
        return self.get_template(display_name, self.default_locale, tenant_domain)

    def put_template(self, template: EmailTemplate, tenant_domain: str) -> None:
        """Write a template translation, replacing any existing one.

        The template type must already exist; use ``add_template`` to create
        it on demand.
        """
        template_type = self.validator.validate_template(template)
        path = join_path(self.template_root, template_type.normalized_name)
        resource = create_template_resource(template)

        try:
            self.store.put(resource, path, tenant_domain, template.locale)
        except ResourceStoreError as e:
            raise self._server_error(
                f"Error adding '{template.display_name}' template in '{template.locale}' locale "
                f"to tenant '{tenant_domain}'.",
                e,
            ) from e

    def add_template(self, template: EmailTemplate, tenant_domain: str) -> None:
        """Add or update a template, creating its type when needed.

        This is two writes (type, then translation) and is not transactional:
        if the second write fails a newly created, empty type is left behind.

        Raises:
            EmailTemplateError: CLIENT before any store access when the
                template is invalid, SERVER on store failure.
        """
        self.validator.validate_template(template)
        self.ensure_template_type(template.display_name, tenant_domain)
        self.put_template(template, tenant_domain)

    def delete_template(self, display_name: str, locale: str, tenant_domain: str) -> None:
        """Delete one translation of a template."""
        if is_blank(display_name):
            raise EmailTemplateError.client("Cannot delete template. Template display name cannot be blank.")

        if is_blank(locale):
            raise EmailTemplateError.client("Cannot delete template. Locale cannot be blank.")

        path = self._type_path(display_name)
        try:
            self.store.delete(path, tenant_domain, locale)
        except ResourceStoreError as e:
            raise self._server_error(
                f"Error deleting '{display_name}:{locale}' template from tenant '{tenant_domain}'.", e
            ) from e

    def template_exists(self, display_name: str, locale: str, tenant_domain: str) -> bool:
        """Check whether a template exists in exactly the given locale.

        A blank name or locale never exists.

        Raises:
            EmailTemplateError: SERVER on store failure.
        """
        if is_blank(display_name) or is_blank(locale):
            return False

        path = locale_path(self._type_path(display_name), locale)
        try:
            return self.store.get(path, tenant_domain) is not None
        except ResourceStoreError as e:
            raise EmailTemplateError.server(
                f"Error checking '{display_name}:{locale}' template in tenant '{tenant_domain}'.", e
            ) from e

    def seed_defaults(self, tenant_domain: str) -> int:
        """Add the default templates to a tenant.

        A default is only added when its template type does not exist yet, so
        types created earlier (and their customized translations) are never
        overwritten. Running this again is a no-op.

        This is best effort: an unreadable defaults file or a store failure
        while probing for existing types is logged and ends the pass without
        raising. Errors raised while adding a template still propagate.

        Returns:
            Number of templates added.
        """
        try:
            defaults = load_default_templates(self.default_templates_file)
        except (OSError, ValueError) as e:
            logger.error(
                "Error loading default email templates",
                path=self.default_templates_file,
                tenant_domain=tenant_domain,
                error=str(e),
            )
            return 0

        added = 0

        try:
            for template in defaults:
                path = self._type_path(template.display_name)
                if self.store.exists(path, tenant_domain):
                    continue

                # ensure_template_type absorbs ALREADY_EXISTS, but subclasses
                # overriding add_template may still raise it.
                try:
                    self.add_template(template, tenant_domain)
                except EmailTemplateError as e:
                    if e.kind is not ErrorKind.ALREADY_EXISTS:
                        raise
                    logger.warning(
                        "Default template already exists, skipping",
                        display_name=template.display_name,
                        tenant_domain=tenant_domain,
                    )
                    continue

                added += 1
                logger.debug(
                    "Default template added",
                    display_name=template.display_name,
                    locale=template.locale,
                    tenant_domain=tenant_domain,
                )
        except ResourceStoreError as e:
            logger.error(
                "Error checking for default email templates",
                tenant_domain=tenant_domain,
                error=str(e),
            )
            return added

        logger.info("Default email templates added", count=added, tenant_domain=tenant_domain)
        return added
