"""Create contacts table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `contacts` table holding one row per address-book entry.
How:   Portable column types only, so the same revision runs on SQLite and PostgreSQL.

Rollback: downgrade() drops the table entirely (destructive — all data lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the contacts table and its listing index."""
    op.create_table(
        "contacts",

        # UUID4 string assigned by the repository
        sa.Column(
            "id",
            sa.String(36),
            nullable=False,
            comment="Contact identifier — UUID4 string",
        ),

        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),

        sa.Column(
            "email_address",
            sa.Text(),
            nullable=False,
            server_default=sa.text("''"),
            comment="Free text; no format check is applied",
        ),
        sa.Column(
            "notes",
            sa.Text(),
            nullable=False,
            server_default=sa.text("''"),
        ),

        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),

        sa.PrimaryKeyConstraint("id"),
    )

    # Backs the list page ordering (ORDER BY created_at)
    op.create_index("idx_contacts_created_at", "contacts", ["created_at"])


def downgrade() -> None:
    """Drop the contacts table. WARNING: all contact data is permanently lost."""
    op.drop_index("idx_contacts_created_at", table_name="contacts")
    op.drop_table("contacts")
