# Repositories package init
"""
Contactbook — Repositories Layer
=================================

What:  Storage implementations behind the ContactRepository interface.
How:   build_contact_repository() picks the implementation named by
       settings.contact_store.

Repository Inventory:
    - ContactRepository (abstract): the CRUD contract
    - InMemoryContactRepository: dict in the server process
    - SqlAlchemyContactRepository: `contacts` table via async SQLAlchemy
"""

from typing import Optional

from contactbook.config import Settings, settings as default_settings
from contactbook.repositories.base import ContactRepository
from contactbook.repositories.memory import InMemoryContactRepository


def build_contact_repository(settings: Optional[Settings] = None) -> ContactRepository:
    """Create the repository configured by `settings.contact_store`."""
    settings = settings or default_settings
    if settings.contact_store == "memory":
        return InMemoryContactRepository()

    # Imported lazily so the memory store never creates a database engine
    from contactbook.repositories.sql import SqlAlchemyContactRepository
    return SqlAlchemyContactRepository()


__all__ = [
    "ContactRepository",
    "InMemoryContactRepository",
    "build_contact_repository",
]
