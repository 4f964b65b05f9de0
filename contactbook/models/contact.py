"""
Contactbook — Contact SQLAlchemy Model
=======================================

What:  ORM model representing the `contacts` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SqlAlchemyContactRepository and by Alembic for schema management.

Table Design:
    - id: UUID4 string assigned by the repository (portable across SQLite and PostgreSQL)
    - first_name / last_name: required, sanitized text
    - email_address / notes: optional; stored as '' when not submitted
    - created_at: listing order; updated_at: last replacement time
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from contactbook.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContactRow(Base):
    """
    One address-book entry as stored in the database.

    Lifecycle:
        1. Inserted by create_contact() with a fresh UUID
        2. Every column except id/created_at replaced by update_contact()
        3. Removed by delete_contact()
    """

    __tablename__ = "contacts"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Contact identifier — UUID4 string",
    )

    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)

    email_address: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Free text; no format check is applied",
    )

    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    # created_at index backs the list page ordering
    __table_args__ = (
        Index("idx_contacts_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return (
            f"<ContactRow(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}')>"
        )
