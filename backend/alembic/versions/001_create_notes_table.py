"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `notes` table and the is_pinned index used by the
       pinned-first listing.

Rollback: downgrade() drops the table entirely (all notes are lost).
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
    """Create the notes table. See pinnote/models/note.py for column docs."""
    op.create_table(
        "notes",

        # UUID generated by the application on insert
        sa.Column("id", sa.Uuid(), nullable=False),

        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),

        # JSON array of strings
        sa.Column("tags", sa.JSON(), nullable=False),

        sa.Column(
            "is_pinned",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
        ),

        sa.Column(
            "created_on",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),

        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index(
        "idx_notes_is_pinned",
        "notes",
        [sa.text("is_pinned DESC")],
    )


def downgrade() -> None:
    op.drop_index("idx_notes_is_pinned", table_name="notes")
    op.drop_table("notes")
