"""
Contactbook — In-Memory Contact Repository
===========================================

What:  Dict-backed ContactRepository living inside the server process.
Who:   Used when settings.contact_store == "memory" and by the route tests.

Concurrency:
    No method awaits between reading and writing the dict, so each operation
    runs to completion on the event loop without interleaving.
    Data is lost on restart and is not shared between worker processes.
"""

import logging
import uuid
from typing import Dict, List, Optional

from contactbook.repositories.base import ContactRepository
from contactbook.schemas.contact import Contact

logger = logging.getLogger(__name__)


class InMemoryContactRepository(ContactRepository):

    def __init__(self) -> None:
        # Insertion-ordered: listing returns creation order
        self._contacts: Dict[str, Contact] = {}

    async def get_all_contacts(self) -> List[Contact]:
        return [contact.model_copy() for contact in self._contacts.values()]

    async def get_contact_by_id(self, contact_id: str) -> Optional[Contact]:
        contact = self._contacts.get(contact_id)
        return contact.model_copy() if contact is not None else None

    async def create_contact(self, contact: Contact) -> Optional[Contact]:
        stored = contact.model_copy(update={"id": str(uuid.uuid4())})
        self._contacts[stored.id] = stored
        logger.debug("Stored contact %s in memory", stored.id)
        return stored.model_copy()

    async def update_contact(self, contact: Contact) -> bool:
        if contact.id is None or contact.id not in self._contacts:
            return False
        self._contacts[contact.id] = contact.model_copy()
        return True

    async def delete_contact(self, contact_id: str) -> bool:
        return self._contacts.pop(contact_id, None) is not None

    def __len__(self) -> int:
        return len(self._contacts)
