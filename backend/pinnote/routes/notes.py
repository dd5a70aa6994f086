"""
Pinnote Backend: Notes Route Handlers
=======================================

What:  The HTTP contract of the notes API.
How:   Extracts path/query/body data, delegates to NoteService, wraps the
       result in the `{error: false, ...}` envelope.
Who:   Called by the notes client (pinnote.client) and the browser front end.

Routes:
    GET    /                          greeting
    POST   /add-note                  create
    PUT    /edit-note/{note_id}       partial update
    GET    /get-all-notes             list, pinned first
    DELETE /delete-note/{note_id}     delete
    PUT    /update-note-pinned/{note_id}  set pin flag
    GET    /search-notes?query=       substring search

Every route answers 200 on success. Error statuses come from the global
exception handlers in pinnote.main.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from pinnote.database import get_db_session
from pinnote.schemas.note import (
    ErrorResponse,
    GreetingResponse,
    MessageEnvelope,
    NoteCreate,
    NoteEnvelope,
    NoteListEnvelope,
    NoteUpdate,
    PinUpdate,
)
from pinnote.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])

_400 = {"description": "Missing or invalid input", "model": ErrorResponse}
_404 = {"description": "Note not found", "model": ErrorResponse}
_500 = {"description": "Server error", "model": ErrorResponse}


@router.get("/", response_model=GreetingResponse, summary="Greeting")
async def greet() -> GreetingResponse:
    return GreetingResponse()


@router.post(
    "/add-note",
    response_model=NoteEnvelope,
    responses={400: _400, 500: _500},
    summary="Create a note",
)
async def add_note(
    body: NoteCreate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    """Create a note with is_pinned=false. Title and content are required."""
    note = await note_service.add_note(
        db=db,
        title=body.title,
        content=body.content,
        tags=body.tags,
    )
    return NoteEnvelope(note=note, message="Note added successfully")


@router.put(
    "/edit-note/{note_id}",
    response_model=NoteEnvelope,
    responses={400: _400, 404: _404, 500: _500},
    summary="Edit a note",
    description=(
        "Applies any non-empty subset of title, content and tags. isPinned is "
        "applied when true, but does not count as a change on its own."
    ),
)
async def edit_note(
    note_id: str,
    body: NoteUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    note = await note_service.edit_note(
        db=db,
        note_id=note_id,
        title=body.title,
        content=body.content,
        tags=body.tags,
        is_pinned=body.is_pinned,
    )
    return NoteEnvelope(note=note, message="Note update successfully")


@router.get(
    "/get-all-notes",
    response_model=NoteListEnvelope,
    responses={500: _500},
    summary="List all notes, pinned first",
)
async def get_all_notes(
    db: AsyncSession = Depends(get_db_session),
) -> NoteListEnvelope:
    notes = await note_service.list_notes(db=db)
    return NoteListEnvelope(notes=notes, message="All note retrieved successfully")


@router.delete(
    "/delete-note/{note_id}",
    response_model=MessageEnvelope,
    responses={404: _404, 500: _500},
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageEnvelope:
    await note_service.delete_note(db=db, note_id=note_id)
    return MessageEnvelope(message="Note deleted successfully")


@router.put(
    "/update-note-pinned/{note_id}",
    response_model=NoteEnvelope,
    responses={400: _400, 404: _404, 500: _500},
    summary="Set the pin flag of a note",
)
async def update_note_pinned(
    note_id: str,
    body: PinUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    note = await note_service.update_pinned(db=db, note_id=note_id, is_pinned=body.is_pinned)
    return NoteEnvelope(note=note, message="Note update successfully")


@router.get(
    "/search-notes",
    response_model=NoteListEnvelope,
    responses={400: _400, 500: _500},
    summary="Search notes by title or content",
)
@router.get("/search-notes/", response_model=NoteListEnvelope, include_in_schema=False)
async def search_notes(
    query: Optional[str] = Query(
        default=None,
        description="Case-insensitive substring matched against title and content",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> NoteListEnvelope:
    notes = await note_service.search_notes(db=db, query=query)
    return NoteListEnvelope(
        notes=notes,
        message="Notes matching the search query retrieved successfully",
    )
