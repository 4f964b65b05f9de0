"""
Contactbook — Abstract Contact Repository
==========================================

What:  Abstract base class defining the persistence contract for contacts.
How:   Concrete stores inherit from ContactRepository and implement the five
       CRUD operations plus a health probe.
Who:   Called by ContactService; selected at startup from settings.contact_store.

Implementations:
    - InMemoryContactRepository: process-local dict (development, tests)
    - SqlAlchemyContactRepository: async SQLAlchemy (SQLite, PostgreSQL)
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from contactbook.schemas.contact import Contact


class ContactRepository(ABC):
    """
    Abstract interface for contact storage.

    Contract:
        - The repository owns identity: create_contact() assigns the id
        - Writes report failure through their return value; only unexpected
          faults raise (wrapped in DatabaseError by the SQL store)
        - Returned Contact objects are copies; mutating them never changes storage
    """

    @abstractmethod
    async def get_all_contacts(self) -> Sequence[Contact]:
        """Return every stored contact in creation order."""
        ...

    @abstractmethod
    async def get_contact_by_id(self, contact_id: str) -> Optional[Contact]:
        """Return the contact with this id, or None when it does not exist."""
        ...

    @abstractmethod
    async def create_contact(self, contact: Contact) -> Optional[Contact]:
        """
        Persist a new contact.

        Args:
            contact: Sanitized contact; any id it carries is replaced.

        Returns:
            The stored contact with its assigned id, or None when the store
            refused the write.
        """
        ...

    @abstractmethod
    async def update_contact(self, contact: Contact) -> bool:
        """
        Replace the stored record whose id equals `contact.id`.

        Returns:
            True on success, False when no record has that id.
        """
        ...

    @abstractmethod
    async def delete_contact(self, contact_id: str) -> bool:
        """Remove a contact. Returns False when no record has that id."""
        ...

    async def health_check(self) -> bool:
        """
        Check whether the storage medium is reachable.

        Who:     Called by the health check endpoint.
        Returns: True if reachable, False otherwise.
        """
        return True
