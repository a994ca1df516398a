"""Mapping between email templates and registry resources.

A template type is stored as a collection tagged with its display name.
A template is stored as a resource whose properties describe it and whose
content is a JSON array of ``[subject, body, footer]``.
"""

import json

from i18nmail.domain.entities.email_template import DEFAULT_CONTENT_TYPE, EmailTemplate
from i18nmail.domain.exceptions import TemplateResourceError
from i18nmail.infrastructure.registry.base import Collection, Resource

EMAIL_TEMPLATE_NAME = "templateType"
EMAIL_TEMPLATE_TYPE_DISPLAY_NAME = "display"
TEMPLATE_LOCALE = "locale"
TEMPLATE_CONTENT_TYPE = "emailContentType"

CONTENT_ENCODING = "utf-8"


def create_template_type(normalized_name: str, display_name: str) -> Collection:
    """Build the collection representing a template type."""
    collection = Collection()
    collection.set_property(EMAIL_TEMPLATE_NAME, normalized_name)
    collection.set_property(EMAIL_TEMPLATE_TYPE_DISPLAY_NAME, display_name)
    return collection


def create_template_resource(template: EmailTemplate) -> Resource:
    """Build the resource that stores one locale of a template."""
    resource = Resource()
    resource.set_property(EMAIL_TEMPLATE_NAME, template.template_type)
    resource.set_property(EMAIL_TEMPLATE_TYPE_DISPLAY_NAME, template.display_name)
    resource.set_property(TEMPLATE_LOCALE, template.locale)
    resource.set_property(TEMPLATE_CONTENT_TYPE, template.content_type)

    contents = [template.subject, template.body, template.footer]
    resource.content = json.dumps(contents, ensure_ascii=False).encode(CONTENT_ENCODING)
    return resource


def get_email_template(resource: Resource) -> EmailTemplate:
    """Read an email template back from its resource.

    Raises:
        TemplateResourceError: If a property is missing or the content is not
            a JSON array of three strings.
    """
    path = resource.path or "<unknown>"

    required = (EMAIL_TEMPLATE_NAME, EMAIL_TEMPLATE_TYPE_DISPLAY_NAME, TEMPLATE_LOCALE)
    missing = [key for key in required if not resource.get_property(key)]
    if missing:
        raise TemplateResourceError(path, f"missing properties {missing}")

    if resource.content is None:
        raise TemplateResourceError(path, "resource has no content")

    try:
        contents = json.loads(resource.content.decode(CONTENT_ENCODING))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TemplateResourceError(path, f"content is not valid JSON: {e}") from e

    if (
        not isinstance(contents, list)
        or len(contents) != 3
        or not all(isinstance(part, str) for part in contents)
    ):
        raise TemplateResourceError(path, "content must be a list of subject, body and footer")

    subject, body, footer = contents
    return EmailTemplate(
        template_type=resource.properties[EMAIL_TEMPLATE_NAME],
        display_name=resource.properties[EMAIL_TEMPLATE_TYPE_DISPLAY_NAME],
        locale=resource.properties[TEMPLATE_LOCALE],
        content_type=resource.get_property(TEMPLATE_CONTENT_TYPE) or DEFAULT_CONTENT_TYPE,
        subject=subject,
        body=body,
        footer=footer,
    )
