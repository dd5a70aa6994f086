"""
Pinnote Backend: Note SQLAlchemy Model
========================================

What:  ORM model representing the `notes` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by NoteService for CRUD operations and by Alembic for schema management.

Table Design:
    - id: UUID generated in Python, so the same model works on PostgreSQL and SQLite
    - title / content: TEXT, never empty for a stored note (checked by NoteService)
    - tags: JSON array of strings, defaults to []
    - is_pinned: NOT NULL boolean, defaults to false
    - created_on: UTC with timezone, set once at insert

    Index on is_pinned DESC serves the pinned-first listing.
"""

import uuid
from datetime import datetime, timezone
from typing import List

from sqlalchemy import JSON, Boolean, DateTime, Index, Text, Uuid, false, text
from sqlalchemy.orm import Mapped, mapped_column

from pinnote.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A single user note.

    Lifecycle:
        1. Created by POST /add-note (is_pinned = false)
        2. Mutated in place by PUT /edit-note/{id} and PUT /update-note-pinned/{id}
        3. Removed by DELETE /delete-note/{id} (hard delete, no tombstone)

    Query Patterns:
        - List:   SELECT ... ORDER BY is_pinned DESC
        - Lookup: SELECT ... WHERE id = :uuid
        - Search: SELECT ... WHERE lower(title) LIKE :q OR lower(content) LIKE :q
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    # Ordered list of free-text tags; replaced wholesale on edit
    tags: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    is_pinned: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    # All storage in UTC; conversion to local time happens in the client
    created_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_notes_is_pinned", is_pinned.desc()),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, title='{self.title}', "
            f"is_pinned={self.is_pinned})>"
        )
