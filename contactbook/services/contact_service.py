"""
Contactbook — Contact Service (Business Logic Orchestrator)
============================================================

What:  Coordinates validate → sanitize → construct → persist for every contact
       operation and turns repository outcomes into typed results.
How:   Wraps a ContactRepository. Missing records become NotFoundError, falsy
       write results become ContactOperationError, incomplete forms become
       ValidationError raised before the repository is touched.
Who:   Called by the contact route handlers through get_contact_service().

Orchestration Flow (POST /contacts/):
    ┌──────────┐    ┌────────────┐    ┌────────────┐    ┌──────────────┐
    │  Form    │───▶│  Validate  │───▶│  Sanitize  │───▶│  Repository  │
    │  (Route) │    │  (names)   │    │  (nh3)     │    │  create      │
    └──────────┘    └────────────┘    └────────────┘    └──────────────┘
"""

import logging
from typing import Any, List, Mapping, Optional

from contactbook.exceptions import ContactOperationError, NotFoundError, ValidationError
from contactbook.repositories import ContactRepository, build_contact_repository
from contactbook.schemas.contact import Contact
from contactbook.services.contact_input import sanitize_contact_data, validate_contact_data

logger = logging.getLogger(__name__)


class ContactService:
    """
    Business logic layer for contact operations.

    Responsibilities:
        - list_contacts(): every stored contact
        - get_contact(): single contact with not-found handling
        - create_contact() / update_contact(): validated, sanitized writes
        - delete_contact(): removal with failure reporting
    """

    def __init__(self, repository: ContactRepository):
        self.repository = repository

    def build_contact(
        self,
        data: Mapping[str, Any],
        contact_id: Optional[str] = None,
    ) -> Contact:
        """
        Validate and sanitize submitted fields into a transient Contact.

        Raises:
            ValidationError: firstName or lastName missing or empty.
        """
        if not validate_contact_data(data):
            raise ValidationError(context={"contact_id": contact_id})

        sanitized = sanitize_contact_data(data)
        return Contact(
            id=contact_id,
            first_name=sanitized["firstName"],
            last_name=sanitized["lastName"],
            email_address=sanitized["emailAddress"],
            notes=sanitized["notes"],
        )

    def draft_contact(self, data: Mapping[str, Any], contact_id: Optional[str] = None) -> Contact:
        """Sanitize without validating, for re-rendering a rejected form."""
        sanitized = sanitize_contact_data(data)
        return Contact.model_construct(
            id=contact_id,
            first_name=sanitized["firstName"],
            last_name=sanitized["lastName"],
            email_address=sanitized["emailAddress"],
            notes=sanitized["notes"],
        )

    async def list_contacts(self) -> List[Contact]:
        contacts = await self.repository.get_all_contacts()
        return list(contacts)

    async def get_contact(self, contact_id: str, resource: str = "Contact") -> Contact:
        """
        Retrieve a single contact.

        Args:
            contact_id: Identifier from the URL.
            resource:   Name used in the not-found message
                        ("Contact", "Generated Contact").

        Raises:
            NotFoundError: The repository has no contact with this id (→ 404).
        """
        contact = await self.repository.get_contact_by_id(contact_id)
        if not contact:
            raise NotFoundError(resource=resource, resource_id=contact_id)
        return contact

    async def create_contact(self, data: Mapping[str, Any]) -> Contact:
        """
        Create a contact from submitted form fields.

        Raises:
            ValidationError:       required fields missing (repository untouched)
            ContactOperationError: repository returned a falsy result (→ 500)
        """
        contact = self.build_contact(data)
        created = await self.repository.create_contact(contact)
        if not created:
            logger.error("Repository refused to create contact")
            raise ContactOperationError("create")
        return created

    async def update_contact(self, contact_id: str, data: Mapping[str, Any]) -> Contact:
        """
        Replace an existing contact with the submitted fields.

        The id always comes from the URL, never from the form body.

        Raises:
            ValidationError:       required fields missing (repository untouched)
            ContactOperationError: repository returned False (→ 500)
        """
        contact = self.build_contact(data, contact_id=contact_id)
        success = await self.repository.update_contact(contact)
        if not success:
            logger.error("Repository refused to update contact %s", contact_id)
            raise ContactOperationError("update", context={"contact_id": contact_id})
        return contact

    async def delete_contact(self, contact_id: str) -> None:
        """
        Raises:
            ContactOperationError: repository returned False (→ 500)
        """
        success = await self.repository.delete_contact(contact_id)
        if not success:
            logger.error("Repository refused to delete contact %s", contact_id)
            raise ContactOperationError("delete", context={"contact_id": contact_id})


# ── Singleton Instance ────────────────────────────────────────────────────
_contact_service: Optional[ContactService] = None


def get_contact_service() -> ContactService:
    """
    FastAPI dependency returning the process-wide ContactService.

    The repository is built on first use from settings.contact_store.
    Tests replace this dependency through app.dependency_overrides.
    """
    global _contact_service
    if _contact_service is None:
        _contact_service = ContactService(build_contact_repository())
    return _contact_service
