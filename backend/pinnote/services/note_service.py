"""
Pinnote Backend: Note Service (Business Logic)
================================================

What:  The six note operations behind the HTTP contract: add, edit, list,
       delete, set pinned, search.
How:   Each method validates its input, performs one lookup-or-write through
       the async session, and returns response models.
Who:   Called by route handlers in pinnote.routes.notes.

Per-operation flow:
    ┌────────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────┐
    │  Validate  │───▶│  Existence   │───▶│  Mutate /    │───▶│ Response │
    │  (no I/O)  │    │  read (id)   │    │  query       │    │  model   │
    └────────────┘    └──────────────┘    └──────────────┘    └──────────┘

    Validate fails      → ValidationError (400), store never touched
    Existence read None → NotFoundError (404)
    Store raises        → DatabaseError (500), logged with traceback

NoteService is stateless. It receives the db session for each call and is
shared as the module-level `note_service` singleton. The session commit
happens in get_db_session after the route returns; methods only flush.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from pinnote.exceptions import DatabaseError, NotFoundError, PinnoteError, ValidationError
from pinnote.models.note import Note
from pinnote.schemas.note import NoteResponse

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on read; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_response(note: Note) -> NoteResponse:
    """Build the wire representation of a stored note."""
    return NoteResponse(
        id=note.id,
        title=note.title,
        content=note.content,
        tags=list(note.tags or []),
        is_pinned=bool(note.is_pinned),
        created_on=_as_utc(note.created_on),
    )


def _parse_note_id(note_id: str) -> Optional[UUID]:
    # An id that is not a UUID cannot resolve to a stored note
    try:
        return UUID(str(note_id))
    except ValueError:
        return None


class NoteService:
    """
    Business logic layer for note operations.

    Error Handling Strategy:
        PinnoteError subclasses propagate unchanged. Anything else raised while
        talking to the store is logged and wrapped in DatabaseError, whose
        message is the fixed "Internal Server Error".
    """

    async def _find(self, db: AsyncSession, note_id: str) -> Note:
        """Existence read used by every id-addressed operation."""
        uid = _parse_note_id(note_id)
        if uid is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))

        result = await db.execute(select(Note).where(Note.id == uid))
        note = result.scalar_one_or_none()
        if note is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))
        return note

    def _store_failure(self, operation: str, exc: Exception, **context) -> DatabaseError:
        logger.error("Database error in %s: %s", operation, str(exc), exc_info=True)
        context["error_type"] = type(exc).__name__
        return DatabaseError(context=context)

    async def add_note(
        self,
        db: AsyncSession,
        title: Optional[str],
        content: Optional[str],
        tags: Optional[List[str]] = None,
    ) -> NoteResponse:
        """
        Create a note.

        Raises:
            ValidationError: title or content missing/empty (title checked first)
            DatabaseError: insert failed
        """
        if not title:
            raise ValidationError("Title is required", field="title")
        if not content:
            raise ValidationError("Content is required", field="content")

        try:
            note = Note(title=title, content=content, tags=tags or [], is_pinned=False)
            db.add(note)
            await db.flush()  # Assigns id and created_on without committing
            logger.info("Note created: %s", note.id)
            return to_response(note)
        except PinnoteError:
            raise
        except Exception as e:
            raise self._store_failure("add_note", e)

    async def edit_note(
        self,
        db: AsyncSession,
        note_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[List[str]] = None,
        is_pinned: Optional[bool] = None,
    ) -> NoteResponse:
        """
        Partially update a note.

        Only truthy values are applied: "" and [] count as not provided, and
        is_pinned can set the flag but never clear it here. A request that
        carries nothing but is_pinned fails the "no changes" check, since
        that check only looks at title, content and tags.

        Raises:
            ValidationError: none of title/content/tags provided
            NotFoundError: id does not resolve to a note
            DatabaseError: lookup or update failed
        """
        if not title and not content and not tags:
            raise ValidationError("No changes provided")

        try:
            note = await self._find(db, note_id)

            if title:
                note.title = title
            if content:
                note.content = content
            if tags:
                note.tags = list(tags)
            if is_pinned:
                note.is_pinned = is_pinned

            await db.flush()
            logger.info("Note updated: %s", note.id)
            return to_response(note)
        except PinnoteError:
            raise
        except Exception as e:
            raise self._store_failure("edit_note", e, note_id=str(note_id))

    async def list_notes(self, db: AsyncSession) -> List[NoteResponse]:
        """
        Return every note, pinned first.

        No secondary ordering: ties come back in whatever order the store yields.
        """
        try:
            result = await db.execute(select(Note).order_by(Note.is_pinned.desc()))
            return [to_response(note) for note in result.scalars().all()]
        except Exception as e:
            raise self._store_failure("list_notes", e)

    async def delete_note(self, db: AsyncSession, note_id: str) -> None:
        """
        Remove exactly one note.

        Raises:
            NotFoundError: id does not resolve to a note (also on a repeated delete)
            DatabaseError: lookup or delete failed
        """
        try:
            note = await self._find(db, note_id)
            await db.delete(note)
            await db.flush()
            logger.info("Note deleted: %s", note.id)
        except PinnoteError:
            raise
        except Exception as e:
            raise self._store_failure("delete_note", e, note_id=str(note_id))

    async def update_pinned(
        self,
        db: AsyncSession,
        note_id: str,
        is_pinned: bool,
    ) -> NoteResponse:
        """
        Overwrite the pin flag of one note, leaving every other field alone.

        Raises:
            NotFoundError: id does not resolve to a note
            DatabaseError: lookup or update failed
        """
        try:
            note = await self._find(db, note_id)
            note.is_pinned = bool(is_pinned)
            await db.flush()
            logger.info("Note %s pinned=%s", note.id, note.is_pinned)
            return to_response(note)
        except PinnoteError:
            raise
        except Exception as e:
            raise self._store_failure("update_pinned", e, note_id=str(note_id))

    async def search_notes(self, db: AsyncSession, query: Optional[str]) -> List[NoteResponse]:
        """
        Case-insensitive substring search over title and content.

        The query is matched literally (LIKE wildcards are escaped).
        No ranking, no pagination.

        Raises:
            ValidationError: query missing or empty
            DatabaseError: query failed
        """
        if not query:
            raise ValidationError("Search query is required", field="query")

        try:
            result = await db.execute(
                select(Note).where(
                    or_(
                        Note.title.icontains(query, autoescape=True),
                        Note.content.icontains(query, autoescape=True),
                    )
                )
            )
            return [to_response(note) for note in result.scalars().all()]
        except Exception as e:
            raise self._store_failure("search_notes", e, query=query)


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
