"""
Notes API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the error cases the API reports.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right HTTP status.
Who:   Raised by the validator and the note service; caught by global handlers.

Exception Hierarchy:
    NotesApiError (base)
    ├── ValidationError    → 400 Bad Request (missing/empty content, missing body)
    ├── MalformedIdError   → 400 Bad Request (identifier is not a UUID)
    ├── NotFoundError      → 404 Not Found
    └── DatabaseError      → 500 Internal Server Error

Services raise instead of returning error values; handlers in main.py do
the HTTP translation, so route functions stay free of try/except.
"""

from typing import Any, Dict, Optional


class NotesApiError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesApiError):
    """
    Raised when client input fails validation.

    When:    Missing request body, `content` absent, not a string, or empty.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "content is required and must be a non-empty string",
            "details": {"field": "content"}
        }
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


class MalformedIdError(NotesApiError):
    """
    Raised when a client-supplied note identifier is not a valid UUID.

    HTTP:    400 Bad Request

    Distinct from NotFoundError: a malformed id can never name a record,
    so the client must fix the request rather than retry.
    """

    def __init__(
        self,
        note_id: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["id"] = note_id
        super().__init__(message=f"Malformed note id '{note_id}'", context=ctx)
        self.note_id = note_id


class NotFoundError(NotesApiError):
    """
    Raised when a requested resource does not exist.

    When:    GET or PUT /api/notes/{id} with a well-formed id that has no row.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records; the service converts that
    into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(NotesApiError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, database unavailable, constraint violation.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Context (operation,
    original exception type) is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
