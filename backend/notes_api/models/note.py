"""
Notes API — Note SQLAlchemy Model
==================================

What:  ORM model representing the `notes` table.
How:   Inherits from the shared DeclarativeBase; Alembic and init_db() read
       its metadata for schema management.
Who:   Used by NoteService for CRUD operations.

Table Design:
    - UUID primary key, generated in Python so it is known before INSERT
      and works the same on PostgreSQL and SQLite
    - content: required, never empty (enforced by validate_note before writes)
    - important: defaults to false
    - created_at: UTC insertion time; the list endpoint orders by it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, Text, Uuid, false, text
from sqlalchemy.orm import Mapped, mapped_column

from notes_api.database import Base


class Note(Base):
    """
    A short text note.

    Lifecycle:
        1. Created through POST /api/notes after validation
        2. Content (and optionally importance) replaced through PUT
        3. Removed through DELETE; nothing is kept after deletion
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier assigned at creation",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note text; never empty",
    )

    important: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="Whether the note is flagged as important",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this note was created (UTC)",
    )

    __table_args__ = (
        Index("idx_notes_created_at", created_at),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, important={self.important})>"
