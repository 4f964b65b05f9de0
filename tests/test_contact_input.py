"""
Contactbook — Validation & Sanitization Unit Tests
===================================================

What we test:
    ✅ Required-field presence (firstName, lastName)
    ✅ Optional fields never affect validation
    ✅ Script and event-handler markup removed from every field
    ✅ Absent optional fields become empty strings; unknown keys dropped
    ✅ Configurable tag allow-list
"""

import pytest

from contactbook.services.contact_input import (
    CONTACT_FIELDS,
    sanitize_contact_data,
    sanitize_value,
    validate_contact_data,
)


class TestValidateContactData:
    """Tests for required-field presence."""

    def test_both_names_present(self):
        """Both names present passes validation."""
        assert validate_contact_data({"firstName": "Ann", "lastName": "Lee"}) is True

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"firstName": "Ann"},
            {"lastName": "Lee"},
            {"firstName": "", "lastName": "Lee"},
            {"firstName": "Ann", "lastName": ""},
            {"firstName": None, "lastName": "Lee"},
        ],
    )
    def test_missing_or_empty_name_fails(self, data):
        """A missing, empty or None name fails validation."""
        assert validate_contact_data(data) is False

    def test_optional_fields_are_not_checked(self):
        """Empty optional fields do not affect the result."""
        data = {"firstName": "Ann", "lastName": "Lee", "emailAddress": "", "notes": ""}
        assert validate_contact_data(data) is True

    def test_email_format_is_not_checked(self):
        """Any email text is accepted."""
        data = {"firstName": "Ann", "lastName": "Lee", "emailAddress": "not-an-email"}
        assert validate_contact_data(data) is True


class TestSanitizeContactData:
    """Tests for the nh3-backed field sanitizer."""

    def test_script_tag_removed_with_content(self):
        """Script elements are dropped together with their body."""
        result = sanitize_contact_data(
            {"firstName": "<script>alert(1)</script>Bob", "lastName": "Lee"}
        )
        assert "<script" not in result["firstName"]
        assert "alert" not in result["firstName"]
        assert result["firstName"] == "Bob"

    def test_each_field_sanitized_independently(self):
        """Every field is cleaned on its own; harmless text survives."""
        result = sanitize_contact_data(
            {
                "firstName": "Ann",
                "lastName": "<script>x()</script>Lee",
                "emailAddress": '<img src="x" onerror="alert(1)">a@x.com',
                "notes": '<a href="javascript:alert(1)">click</a>',
            }
        )
        assert result["firstName"] == "Ann"
        assert result["lastName"] == "Lee"
        assert "onerror" not in result["emailAddress"]
        assert "a@x.com" in result["emailAddress"]
        assert "javascript:" not in result["notes"]
        assert "click" in result["notes"]

    def test_plain_values_unchanged(self, sample_form_data):
        """Text without markup passes through untouched."""
        assert sanitize_contact_data(sample_form_data) == sample_form_data

    def test_absent_optional_fields_become_empty(self):
        """Missing emailAddress and notes come back as empty strings."""
        result = sanitize_contact_data({"firstName": "Ann", "lastName": "Lee"})
        assert result["emailAddress"] == ""
        assert result["notes"] == ""

    def test_unknown_keys_dropped(self):
        """Only the four contact fields are returned."""
        result = sanitize_contact_data(
            {"firstName": "Ann", "lastName": "Lee", "id": "forged", "isAdmin": "1"}
        )
        assert set(result) == set(CONTACT_FIELDS)

    def test_returns_new_mapping(self, sample_form_data):
        """The input mapping is never mutated."""
        result = sanitize_contact_data(sample_form_data)
        result["firstName"] = "Changed"
        assert sample_form_data["firstName"] == "Ann"

    def test_empty_allow_list_strips_all_tags(self):
        """An empty allow-list keeps text and drops every tag."""
        result = sanitize_contact_data(
            {"firstName": "<b>Bob</b>", "lastName": "Lee"}, allowed_tags=set()
        )
        assert result["firstName"] == "Bob"

    def test_allowed_inline_tag_kept(self):
        """Allow-listed tags are kept in the stored value."""
        assert sanitize_value("<b>Bob</b>", allowed_tags={"b"}) == "<b>Bob</b>"

    def test_none_value(self):
        assert sanitize_value(None) == ""
