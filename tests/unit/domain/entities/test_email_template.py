"""Unit tests for email template entities."""

import json

import pytest

from i18nmail.domain.entities.email_template import DEFAULT_CONTENT_TYPE, EmailTemplate


class TestEmailTemplate:
    """Tests for EmailTemplate dataclass."""

    def test_defaults(self):
        """Test default template type and content type."""
        template = EmailTemplate(
            display_name="Password Reset",
            locale="en_US",
            subject="Reset",
            body="Body",
            footer="Footer",
        )

        assert template.template_type == ""
        assert template.content_type == DEFAULT_CONTENT_TYPE

    def test_to_json(self):
        """Test converting a template to JSON."""
        template = EmailTemplate(
            display_name="Password Reset",
            template_type="passwordreset",
            locale="en_US",
            subject="Reset",
            body="Body",
            footer="Footer",
            content_type="text/html",
        )

        parsed = json.loads(template.to_json())

        assert parsed["template_type"] == "passwordreset"
        assert parsed["display_name"] == "Password Reset"
        assert parsed["content_type"] == "text/html"
        assert parsed["footer"] == "Footer"

    def test_from_dict_fills_optional_fields(self):
        """Test creating a template from a dict without optional keys."""
        template = EmailTemplate.from_dict({
            "display_name": "Account Lock",
            "locale": "fr_FR",
            "subject": "Compte verrouillé",
            "body": "Bonjour",
            "footer": "Merci",
        })

        assert template.locale == "fr_FR"
        assert template.template_type == ""
        assert template.content_type == DEFAULT_CONTENT_TYPE

    def test_from_dict_missing_required_key(self):
        """Test that a missing required key raises KeyError."""
        with pytest.raises(KeyError):
            EmailTemplate.from_dict({"display_name": "Account Lock", "locale": "en_US"})
