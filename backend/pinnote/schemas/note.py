"""
Pinnote Backend: Pydantic Request/Response Schemas
====================================================

What:  Pydantic models defining the HTTP contract between the notes client
       and the API service.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate OpenAPI documentation. The Python client parses responses
       with the same models.

Wire names:
    The JSON contract keeps the original document field names (`_id`,
    `isPinned`, `createdOn`). Python code uses snake_case attributes; the
    aliases map between the two. `populate_by_name` lets both spellings in.

Request bodies keep title/content/tags optional at the schema level. Missing
values are reported by NoteService as 400 "Title is required" and friends,
rather than by FastAPI's automatic 422.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /add-note."""
    title: Optional[str] = Field(default=None, description="Note title (required)")
    content: Optional[str] = Field(default=None, description="Note body (required)")
    tags: Optional[List[str]] = Field(default=None, description="Optional tags, defaults to []")


class NoteUpdate(BaseModel):
    """
    Body of PUT /edit-note/{id}.

    Every field is optional. A field counts as provided only when it is
    truthy, so "" and [] leave the stored value alone.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    is_pinned: Optional[bool] = Field(default=None, alias="isPinned")


class PinUpdate(BaseModel):
    """
    Body of PUT /update-note-pinned/{id}.

    An absent isPinned stores false. Values pydantic cannot read as a
    boolean are rejected with 400.
    """
    model_config = ConfigDict(populate_by_name=True)

    is_pinned: bool = Field(default=False, alias="isPinned")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    Full representation of a note, as stored.

    Returned inside every envelope that carries a note or a list of notes.
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: uuid.UUID = Field(alias="_id", description="Unique note identifier (UUID)")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    tags: List[str] = Field(default_factory=list, description="Tags in insertion order")
    is_pinned: bool = Field(default=False, alias="isPinned", description="Pinned notes sort first")
    created_on: datetime = Field(alias="createdOn", description="Creation timestamp (UTC ISO 8601)")


class NoteEnvelope(BaseModel):
    """`{error: false, note, message}` returned by add, edit and pin."""
    error: bool = False
    note: NoteResponse
    message: str


class NoteListEnvelope(BaseModel):
    """`{error: false, notes, message}` returned by list and search."""
    error: bool = False
    notes: List[NoteResponse]
    message: str


class MessageEnvelope(BaseModel):
    """`{error: false, message}` returned by delete."""
    error: bool = False
    message: str


class GreetingResponse(BaseModel):
    """Body of GET /."""
    data: str = "hello"


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": true,
            "message": "Note not found",
            "request_id": "1f0c9a2b"
        }
    """
    error: bool = Field(default=True, description="Always true for errors")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    Health check response showing service and database status.
    Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
