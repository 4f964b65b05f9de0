"""
Contactbook — Contact Form Validation & Sanitization
=====================================================

What:  The two pure functions applied to every submitted contact form.
How:   validate_contact_data() checks required-field presence;
       sanitize_contact_data() runs each free-text field through nh3 (ammonia).
Who:   Called by ContactService before any repository write.

Sanitizer behavior (nh3.clean):
    - <script> and <style> elements are removed together with their content
    - Event-handler attributes and javascript: URLs are dropped
    - Tags outside the allow-list are stripped, their text kept
    - Text is HTML-escaped where needed (& → &amp;)

The allow-list only controls what is stored. Templates autoescape every field,
so an allowed tag such as <b> is displayed as literal text, not as markup.
"""

from typing import Any, Dict, Mapping, Optional, Set

import nh3

from contactbook.config import settings

REQUIRED_FIELDS = ("firstName", "lastName")
CONTACT_FIELDS = ("firstName", "lastName", "emailAddress", "notes")


def validate_contact_data(data: Mapping[str, Any]) -> bool:
    """
    Check that both required name fields are present and non-empty.

    Args:
        data: Submitted form fields keyed by their HTML names.

    Returns:
        False when firstName or lastName is absent or falsy, True otherwise.
        Optional fields are never inspected.
    """
    return all(data.get(field) for field in REQUIRED_FIELDS)


def sanitize_value(value: Any, allowed_tags: Optional[Set[str]] = None) -> str:
    """Sanitize one field; None becomes an empty string."""
    if value is None:
        return ""
    if allowed_tags is None:
        return nh3.clean(str(value))
    return nh3.clean(str(value), tags=allowed_tags)


def sanitize_contact_data(
    data: Mapping[str, Any],
    allowed_tags: Optional[Set[str]] = None,
) -> Dict[str, str]:
    """
    Return a new mapping holding only the sanitized contact fields.

    Args:
        data:         Submitted form fields. Expected to have passed
                      validate_contact_data(); optional fields may be absent.
        allowed_tags: Override for the tag allow-list. Defaults to
                      settings.sanitize_allowed_tags (nh3 defaults when unset).

    Returns:
        {"firstName", "lastName", "emailAddress", "notes"} → sanitized strings.
        Keys outside this set are dropped.
    """
    if allowed_tags is None:
        allowed_tags = settings.sanitize_allowed_tags_set
    return {field: sanitize_value(data.get(field), allowed_tags) for field in CONTACT_FIELDS}
