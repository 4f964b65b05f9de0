"""
Contactbook — Settings Tests
=============================
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from contactbook.config import Settings


def test_store_name_is_normalized():
    """Store names are case-insensitive."""
    assert Settings(contact_store="MEMORY").contact_store == "memory"


def test_unknown_store_rejected():
    """Only memory and database are accepted."""
    with pytest.raises(PydanticValidationError):
        Settings(contact_store="redis")


def test_log_level_is_upper_cased():
    """Log level is normalized to upper case."""
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_rejected():
    """Unknown log levels fail validation."""
    with pytest.raises(PydanticValidationError):
        Settings(log_level="chatty")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, None),
        ("", set()),
        ("b, I ,em", {"b", "i", "em"}),
    ],
)
def test_sanitize_allowed_tags_set(raw, expected):
    """Unset keeps nh3 defaults, empty allows nothing, a list is normalized."""
    assert Settings(sanitize_allowed_tags=raw).sanitize_allowed_tags_set == expected


def test_sqlite_detection():
    """SQLite URLs are recognized by scheme."""
    assert Settings(database_url="sqlite+aiosqlite:///./x.db").uses_sqlite is True
    assert Settings(database_url="postgresql+asyncpg://u:p@h/db").uses_sqlite is False
