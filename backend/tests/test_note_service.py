"""
Notes API — Note Service Unit Tests
====================================

What:  Tests for NoteService against a mocked AsyncSession (no database).

What we test:
    ✅ Id parsing accepts UUIDs and rejects everything else
    ✅ Create adds, commits and returns the stored note
    ✅ Get/update raise NotFoundError when the row is missing
    ✅ Update leaves `important` alone unless it was supplied
    ✅ Delete is a no-op for absent rows
    ✅ Driver failures surface as DatabaseError
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import OperationalError

from notes_api.exceptions import DatabaseError, MalformedIdError, NotFoundError
from notes_api.schemas.note import NoteIn
from notes_api.services.note_service import NoteService


def _mock_note(content: str = "stored", important: bool = False) -> MagicMock:
    note = MagicMock()
    note.id = uuid4()
    note.content = content
    note.important = important
    return note


def _result_with(note) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = note
    return result


class TestParseNoteId:

    def test_accepts_uuid_string(self):
        raw = str(uuid4())
        assert NoteService.parse_note_id(raw) == UUID(raw)

    @pytest.mark.parametrize("raw", ["invalidID", "wrongId", "", "1234"])
    def test_rejects_malformed_ids(self, raw):
        with pytest.raises(MalformedIdError) as exc_info:
            NoteService.parse_note_id(raw)
        assert exc_info.value.context["id"] == raw
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestNoteServiceCreate:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_create_note_success(self, mock_db_session):
        """The ORM default assigns the id on flush; emulate that in add()."""
        mock_db_session.add.side_effect = lambda note: setattr(note, "id", uuid4())

        result = await self.service.create_note(
            mock_db_session, NoteIn(content="Hello world", important=True)
        )

        assert result.content == "Hello world"
        assert result.important is True
        assert isinstance(result.id, UUID)
        mock_db_session.add.assert_called_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_note_commit_failure(self, mock_db_session):
        mock_db_session.commit = AsyncMock(
            side_effect=OperationalError("INSERT", {}, Exception("database is down"))
        )

        with pytest.raises(DatabaseError):
            await self.service.create_note(mock_db_session, NoteIn(content="lost"))


class TestNoteServiceGet:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_get_note_found(self, mock_db_session):
        note = _mock_note(content="HTML is easy test")
        mock_db_session.execute.return_value = _result_with(note)

        result = await self.service.get_note(mock_db_session, note.id)

        assert result.id == note.id
        assert result.content == "HTML is easy test"

    @pytest.mark.asyncio
    async def test_get_note_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.get_note(mock_db_session, uuid4())

    @pytest.mark.asyncio
    async def test_get_note_database_failure(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("database is down"))
        )

        with pytest.raises(DatabaseError):
            await self.service.get_note(mock_db_session, uuid4())


class TestNoteServiceUpdate:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_update_replaces_content_and_keeps_flag(self, mock_db_session):
        note = _mock_note(content="old", important=True)
        mock_db_session.execute.return_value = _result_with(note)

        result = await self.service.update_note(mock_db_session, note.id, NoteIn(content="new"))

        assert note.content == "new"
        assert note.important is True
        assert result.important is True
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_replaces_flag_when_supplied(self, mock_db_session):
        note = _mock_note(important=True)
        mock_db_session.execute.return_value = _result_with(note)

        await self.service.update_note(
            mock_db_session, note.id, NoteIn(content="new", important=False)
        )

        assert note.important is False

    @pytest.mark.asyncio
    async def test_update_missing_note_raises(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.update_note(mock_db_session, uuid4(), NoteIn(content="x"))
        mock_db_session.commit.assert_not_awaited()


class TestNoteServiceDelete:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_delete_absent_note_succeeds(self, mock_db_session):
        result = MagicMock()
        result.rowcount = 0
        mock_db_session.execute.return_value = result

        assert await self.service.delete_note(mock_db_session, uuid4()) is None
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_database_failure(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("DELETE", {}, Exception("database is down"))
        )

        with pytest.raises(DatabaseError):
            await self.service.delete_note(mock_db_session, uuid4())


class TestNoteServiceList:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_list_notes_empty(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        assert await self.service.list_notes(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_list_notes_with_results(self, mock_db_session):
        mock_notes = [_mock_note(content=f"Note {i}") for i in range(3)]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = mock_notes
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_notes(mock_db_session)

        assert [note.content for note in result] == ["Note 0", "Note 1", "Note 2"]
