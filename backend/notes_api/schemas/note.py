"""
Notes API — Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract, plus the single validation
       function shared by the create and update paths.
How:   Route handlers accept the raw JSON body and hand it to validate_note(),
       which either returns a NoteIn or raises the application's
       ValidationError (rendered as HTTP 400, not FastAPI's default 422).
Who:   Used by route handlers and NoteService.
"""

import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from notes_api.exceptions import ValidationError


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What clients send
# ══════════════════════════════════════════════════════════════════════════


class NoteIn(BaseModel):
    """
    Writable fields of a note, as accepted by POST and PUT.

    `important` defaults to false. NoteService checks `model_fields_set`
    on update so that an omitted flag leaves the stored value alone.
    Unknown keys (including a client-sent `id`) are ignored.
    """
    content: StrictStr = Field(min_length=1, description="Note text (non-empty)")
    important: bool = Field(default=False, description="Flag the note as important")


def validate_note(candidate: Any) -> NoteIn:
    """
    Validate a request body for note creation or update.

    Pure function: no I/O, no database access. Both the create and the
    update path call it, so the non-empty-content rule lives in one place.

    Args:
        candidate: The decoded JSON body (None when the client sent no body)

    Returns:
        NoteIn with validated fields

    Raises:
        ValidationError: body missing or not an object, `content` missing,
                         not a string, or empty; `important` not a boolean
    """
    if candidate is None:
        raise ValidationError(message="Request body is required", field="body")
    if not isinstance(candidate, dict):
        raise ValidationError(message="Request body must be a JSON object", field="body")

    try:
        return NoteIn.model_validate(candidate)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        if field == "content":
            message = "content is required and must be a non-empty string"
        else:
            message = f"Invalid value for '{field}': {first['msg']}"
        raise ValidationError(
            message=message,
            field=field,
            context={"errors": [err["msg"] for err in e.errors()]},
        ) from e


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    Public representation of a stored note.

    Example:
        {"id": "3f0c...", "content": "HTML is easy", "important": true}
    """
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    content: str = Field(description="Note text")
    important: bool = Field(description="Whether the note is flagged as important")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "malformed_id")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
