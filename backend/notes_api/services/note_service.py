"""
Notes API — Note Service (Note Store)
======================================

What:  CRUD operations over the `notes` table.
How:   Each method receives the request's AsyncSession, runs one statement
       (plus commit for writes) and returns NoteResponse models.
Who:   Called by route handlers in routes/notes.py.

Outcome mapping (rendered by the handlers in main.py):
    ┌───────────────────────────┬──────────────────────┬────────┐
    │ Situation                 │ Raised               │ HTTP   │
    ├───────────────────────────┼──────────────────────┼────────┤
    │ id is not a UUID          │ MalformedIdError     │ 400    │
    │ get/update: no such row   │ NotFoundError        │ 404    │
    │ delete: no such row       │ (nothing, no-op)     │ 204    │
    │ driver/database failure   │ DatabaseError        │ 500    │
    └───────────────────────────┴──────────────────────┴────────┘

Body validation happens before these methods are called (validate_note);
they only ever see a NoteIn that already satisfies the content rule.

NoteService is stateless; concurrent requests touching the same note
resolve as last write wins.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.exceptions import (
    DatabaseError,
    MalformedIdError,
    NotFoundError,
)
from notes_api.models.note import Note
from notes_api.schemas.note import NoteIn, NoteResponse

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes():  every note, in insertion order
        - create_note(): persist a validated note
        - get_note():    single note lookup
        - update_note(): replace content (and importance when supplied)
        - delete_note(): idempotent removal

    Error Handling Strategy:
        Application exceptions propagate unchanged. Anything else raised
        while talking to the database is logged and wrapped in
        DatabaseError so no driver details reach the client.
    """

    @staticmethod
    def parse_note_id(raw_id: str) -> UUID:
        """
        Convert a path parameter into a UUID.

        Raises:
            MalformedIdError: raw_id is not a UUID string (e.g. "invalidID")
        """
        try:
            return UUID(raw_id)
        except (ValueError, TypeError, AttributeError) as e:
            raise MalformedIdError(note_id=str(raw_id)) from e

    async def list_notes(self, db: AsyncSession) -> List[NoteResponse]:
        """
        Return every stored note.

        No filtering or pagination. Ordered by creation time, with the id
        as a tie-breaker so repeated calls return the same order.
        """
        try:
            result = await db.execute(
                select(Note).order_by(Note.created_at, Note.id)
            )
            notes = result.scalars().all()
        except Exception as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [NoteResponse.model_validate(note) for note in notes]

    async def create_note(self, db: AsyncSession, data: NoteIn) -> NoteResponse:
        """
        Persist a new note and return it with its assigned id.

        Args:
            db: Async database session
            data: Output of validate_note()
        """
        note = Note(content=data.content, important=data.important)
        try:
            db.add(note)
            await db.commit()
        except Exception as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the note. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Note created: %s", note.id)
        return NoteResponse.model_validate(note)

    async def get_note(self, db: AsyncSession, note_id: UUID) -> NoteResponse:
        """
        Retrieve a single note by id.

        Raises:
            NotFoundError: no note with this id (→ 404)
            DatabaseError: query execution failed (→ 500)
        """
        note = await self._fetch(db, note_id)
        return NoteResponse.model_validate(note)

    async def update_note(
        self,
        db: AsyncSession,
        note_id: UUID,
        data: NoteIn,
    ) -> NoteResponse:
        """
        Replace the mutable fields of an existing note.

        `content` is always replaced. `important` is only replaced when the
        client sent it; an omitted flag keeps the stored value.

        Raises:
            NotFoundError: no stored note with this id (→ 404)
            DatabaseError: query or commit failed (→ 500)
        """
        note = await self._fetch(db, note_id)

        note.content = data.content
        if "important" in data.model_fields_set:
            note.important = data.important

        try:
            await db.commit()
        except Exception as e:
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": str(note_id), "error_type": type(e).__name__},
            )

        logger.info("Note updated: %s", note_id)
        return NoteResponse.model_validate(note)

    async def delete_note(self, db: AsyncSession, note_id: UUID) -> None:
        """
        Remove a note if it exists.

        Deleting an id that matches nothing still succeeds, so repeated
        DELETEs are safe.

        Raises:
            DatabaseError: statement or commit failed (→ 500)
        """
        try:
            result = await db.execute(delete(Note).where(Note.id == note_id))
            await db.commit()
        except Exception as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": str(note_id), "error_type": type(e).__name__},
            )

        if result.rowcount:
            logger.info("Note deleted: %s", note_id)
        else:
            logger.debug("Delete of absent note %s ignored", note_id)

    async def _fetch(self, db: AsyncSession, note_id: UUID) -> Note:
        """Load a note row or raise NotFoundError."""
        try:
            result = await db.execute(select(Note).where(Note.id == note_id))
            note = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": str(note_id)},
            )

        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))
        return note


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
