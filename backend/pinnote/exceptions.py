"""
Pinnote Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the three failure kinds of the
       notes API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the `{error: true, message}` envelope with the right status.
Who:   Raised by NoteService; caught by global handlers.

Exception Hierarchy:
    PinnoteError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error (generic message)

Ordering guarantees:
    ValidationError is raised before the store is touched.
    NotFoundError comes from an existence read made before any mutation.
    DatabaseError wraps every store failure; nothing is retried.
"""

from typing import Any, Dict, Optional


class PinnoteError(Exception):
    """
    Base exception for all Pinnote application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PinnoteError):
    """
    Raised when client input is missing or insufficient.

    When:    Missing title/content on create, no changes on edit,
             missing search query, malformed request body.
    HTTP:    400 Bad Request

    Example response:
        {"error": true, "message": "Title is required"}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(PinnoteError):
    """
    Raised when a referenced note does not exist.

    What:    The id in the path does not resolve to a stored note. Ids that
             are not even valid UUIDs land here too.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource_id = resource_id


class DatabaseError(PinnoteError):
    """
    Raised when a store operation fails unexpectedly.

    What:    A query, insert, update or delete failed.
    HTTP:    500 Internal Server Error

    The message returned to the client is always the fixed
    "Internal Server Error". The original exception type is kept in
    `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "Internal Server Error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
