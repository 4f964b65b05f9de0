"""
Contactbook — Pydantic Contact Schemas
=======================================

What:  Pydantic models for the contact entity, the submitted HTML form, and
       the health endpoint.
How:   `Contact` is the record passed between routes, services and repositories.
       `ContactForm` is the explicit input struct for the camelCase form fields.
Who:   Route handlers, ContactService, both repository implementations.

Design Decision:
    Schemas are separate from the SQLAlchemy row so the in-memory store and the
    templates never depend on the ORM.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Entity
# ══════════════════════════════════════════════════════════════════════════


class Contact(BaseModel):
    """
    What:  One address-book entry.
    When:  Built fresh per request from sanitized fields; `id` is None until the
           repository assigns one.
    """
    id: Optional[str] = Field(default=None, description="Repository-assigned identifier")
    first_name: str = Field(description="Required, non-empty")
    last_name: str = Field(description="Required, non-empty")
    email_address: str = Field(default="", description="Optional free text")
    notes: str = Field(default="", description="Optional free text")

    model_config = ConfigDict(from_attributes=True)


# ══════════════════════════════════════════════════════════════════════════
# Form Input
# ══════════════════════════════════════════════════════════════════════════


class ContactForm(BaseModel):
    """
    What:  Submitted contact form, every field optional.
    How:   Aliases match the HTML input names; unknown form keys are ignored.
           Presence of the required fields is checked by the validator, not here,
           so a missing name re-renders the form instead of failing with 422.
    """
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email_address: Optional[str] = Field(default=None, alias="emailAddress")
    notes: Optional[str] = Field(default=None, alias="notes")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_form_data(self) -> Dict[str, Any]:
        """Returns the camelCase mapping the validator and sanitizer consume."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ══════════════════════════════════════════════════════════════════════════
# Health
# ══════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and repository status.
    Who:   Returned by GET /health for monitoring probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    repository: str = Field(description="Repository status: available, unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")
