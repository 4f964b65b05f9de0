"""
Contactbook — Application Configuration
========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and exposes a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.
"""

from typing import Optional, Set

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Storage ───────────────────────────────────────────────────────────
    # What: Which repository implementation backs the contact routes
    # Values: "memory" (process-local dict) or "database" (async SQLAlchemy)
    contact_store: str = Field(default="database")

    # What: Async SQLAlchemy connection string
    # Format: sqlite+aiosqlite:///./file.db or postgresql+asyncpg://user:pw@host/db
    database_url: str = Field(
        default="sqlite+aiosqlite:///./contactbook.db",
        description="Async SQLAlchemy connection URL",
    )

    # What: Validates pooled connections before use with a lightweight query
    db_pool_pre_ping: bool = Field(default=True)

    # What: Run Base.metadata.create_all during startup
    # Alembic remains the tool for schema changes on existing databases
    create_tables_on_startup: bool = Field(default=True)

    @field_validator("contact_store")
    @classmethod
    def validate_contact_store(cls, v: str) -> str:
        """Ensures the store name is one we can build."""
        valid_stores = {"memory", "database"}
        lower = v.lower()
        if lower not in valid_stores:
            raise ValueError(f"Invalid contact_store '{v}'. Must be one of: {valid_stores}")
        return lower

    # ── Sanitization ──────────────────────────────────────────────────────
    # What: Comma-separated list of HTML tags kept by the sanitizer
    # None: use nh3's default allow-list; "": strip every tag
    sanitize_allowed_tags: Optional[str] = Field(default=None)

    @property
    def sanitize_allowed_tags_set(self) -> Optional[Set[str]]:
        """Splits the configured tag list into the set nh3 expects."""
        if self.sanitize_allowed_tags is None:
            return None
        return {tag.strip().lower() for tag in self.sanitize_allowed_tags.split(",") if tag.strip()}

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
    }

    @property
    def uses_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


# Singleton instance, imported throughout the application
settings = Settings()
