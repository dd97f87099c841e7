"""
Notes API — Notes Route Handlers
=================================

What:  CRUD endpoints under /api/notes.
How:   Parse the path id and the raw JSON body, delegate to NoteService,
       return JSON. Errors are raised, never returned, and rendered by the
       global handlers registered in main.py.

Endpoints:
    GET    /api/notes        → 200 list of notes
    GET    /api/notes/{id}   → 200 note | 400 malformed id | 404
    POST   /api/notes        → 201 created note | 400 invalid body
    PUT    /api/notes/{id}   → 200 updated note | 400 malformed id / invalid body | 404
    DELETE /api/notes/{id}   → 204 | 400 malformed id

The id is declared as `str` so that malformed ids reach NoteService and come
back as 400 `malformed_id` instead of FastAPI's 422. Bodies are taken as raw
JSON for the same reason and checked by validate_note().
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.database import get_db_session
from notes_api.schemas.note import ErrorResponse, NoteResponse, validate_note
from notes_api.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notes", tags=["Notes"])

_BODY_EXAMPLE = {"content": "HTML is easy", "important": True}


@router.get(
    "",
    response_model=List[NoteResponse],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all notes",
)
async def list_notes(
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    return await note_service.list_notes(db)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Malformed note id", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.get_note(db, note_service.parse_note_id(note_id))


@router.post(
    "",
    status_code=201,
    response_model=NoteResponse,
    responses={
        400: {"description": "Missing or empty content", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: Any = Body(default=None, examples=[_BODY_EXAMPLE]),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Create a note from `{content, important?}`.

    `important` defaults to false. Nothing is written when validation fails.
    """
    data = validate_note(payload)
    return await note_service.create_note(db, data)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Malformed id, missing body or empty content", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update a note",
)
async def update_note(
    note_id: str,
    payload: Any = Body(default=None, examples=[_BODY_EXAMPLE]),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Replace a note's content, and its importance flag when supplied.

    The id is checked before the body, so a request with both problems
    reports the malformed id.
    """
    uuid_ = note_service.parse_note_id(note_id)
    data = validate_note(payload)
    return await note_service.update_note(db, uuid_, data)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses={
        400: {"description": "Malformed note id", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """Delete a note. Succeeds whether or not the note existed."""
    await note_service.delete_note(db, note_service.parse_note_id(note_id))
    return Response(status_code=204)
