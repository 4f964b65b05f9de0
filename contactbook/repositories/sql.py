"""
Contactbook — SQLAlchemy Contact Repository
============================================

What:  ContactRepository backed by the `contacts` table through async SQLAlchemy.
How:   Opens one AsyncSession per operation from the injected session factory,
       commits on success, rolls back and wraps the error in DatabaseError on
       failure.
Who:   Used when settings.contact_store == "database".

Query plan:
    - get_all_contacts: SELECT ... ORDER BY created_at (idx_contacts_created_at)
    - get/update/delete by id: primary key lookup
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import asc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from contactbook.exceptions import DatabaseError
from contactbook.models.contact import ContactRow
from contactbook.repositories.base import ContactRepository
from contactbook.schemas.contact import Contact

logger = logging.getLogger(__name__)


class SqlAlchemyContactRepository(ContactRepository):
    """
    Async SQLAlchemy implementation of ContactRepository.

    Error Handling Strategy:
        SQLAlchemyError from any operation is logged with the contact id and
        re-raised as DatabaseError, which the global handler turns into a
        generic 500. Missing rows are not errors: they yield None / False.
    """

    def __init__(self, session_factory: Optional[async_sessionmaker[AsyncSession]] = None):
        if session_factory is None:
            from contactbook.database import async_session_factory
            session_factory = async_session_factory
        self._session_factory = session_factory

    async def get_all_contacts(self) -> List[Contact]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(ContactRow).order_by(asc(ContactRow.created_at))
                )
                return [Contact.model_validate(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing contacts: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve contacts.",
                context={"error_type": type(e).__name__},
            )

    async def get_contact_by_id(self, contact_id: str) -> Optional[Contact]:
        try:
            async with self._session_factory() as session:
                row = await session.get(ContactRow, contact_id)
                return Contact.model_validate(row) if row is not None else None
        except SQLAlchemyError as e:
            logger.error("Database error fetching contact %s: %s", contact_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the contact.",
                context={"contact_id": contact_id, "error_type": type(e).__name__},
            )

    async def create_contact(self, contact: Contact) -> Optional[Contact]:
        row = ContactRow(
            id=str(uuid.uuid4()),
            first_name=contact.first_name,
            last_name=contact.last_name,
            email_address=contact.email_address,
            notes=contact.notes,
        )
        try:
            async with self._session_factory() as session:
                session.add(row)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating contact: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not store the contact.",
                context={"error_type": type(e).__name__},
            )
        logger.info("Contact %s created", row.id)
        return Contact.model_validate(row)

    async def update_contact(self, contact: Contact) -> bool:
        if contact.id is None:
            return False
        try:
            async with self._session_factory() as session:
                row = await session.get(ContactRow, contact.id)
                if row is None:
                    return False
                row.first_name = contact.first_name
                row.last_name = contact.last_name
                row.email_address = contact.email_address
                row.notes = contact.notes
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating contact %s: %s", contact.id, str(e))
            raise DatabaseError(
                message="Could not update the contact.",
                context={"contact_id": contact.id, "error_type": type(e).__name__},
            )
        logger.info("Contact %s updated", contact.id)
        return True

    async def delete_contact(self, contact_id: str) -> bool:
        try:
            async with self._session_factory() as session:
                row = await session.get(ContactRow, contact_id)
                if row is None:
                    return False
                await session.delete(row)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting contact %s: %s", contact_id, str(e))
            raise DatabaseError(
                message="Could not delete the contact.",
                context={"contact_id": contact_id, "error_type": type(e).__name__},
            )
        logger.info("Contact %s deleted", contact_id)
        return True

    async def health_check(self) -> bool:
        try:
            async with self._session_factory() as session:
                await session.execute(select(1))
            return True
        except SQLAlchemyError as e:
            logger.warning("Contact store unreachable: %s", str(e))
            return False
