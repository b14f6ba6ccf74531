"""
Tests for SessionService and DirectoryService orchestration.

Runs against the in-memory database; storage failures are simulated by
patching the CRUD singletons.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from therapy_dashboard.application.services import DirectoryService, SessionService
from therapy_dashboard.application.services import directory_service as directory_service_module
from therapy_dashboard.application.services import session_service as session_service_module
from therapy_dashboard.boundary.db.models import SessionModel, SessionStatus
from therapy_dashboard.core.exceptions import (
    InvalidReferenceError,
    SessionNotFoundError,
    StorageUnavailableError,
)


async def _session_count(db) -> int:
    return (await db.execute(select(func.count(SessionModel.id)))).scalar_one()


class TestCreateSession:
    @pytest.mark.asyncio
    async def test_create_returns_joined_row(self, seeded_db) -> None:
        service = SessionService(seeded_db)
        when = datetime(2031, 3, 4, 15, 30, tzinfo=timezone.utc)

        created = await service.create_session(therapist_id=2, patient_id=4, date=when)

        assert created["id"] == 6
        assert created["status"] == "Scheduled"
        assert created["therapist_name"] == "Becca OT"
        assert created["patient_name"] == "Elsa Frost"
        assert created["date"] == datetime(2031, 3, 4, 15, 30)

    @pytest.mark.asyncio
    async def test_offset_dates_are_stored_as_utc(self, seeded_db) -> None:
        service = SessionService(seeded_db)
        when = datetime(2031, 3, 4, 10, 0, tzinfo=timezone(timedelta(hours=-5)))

        created = await service.create_session(therapist_id=1, patient_id=1, date=when)

        assert created["date"] == datetime(2031, 3, 4, 15, 0)

    @pytest.mark.asyncio
    async def test_unknown_therapist_is_rejected_without_insert(self, seeded_db) -> None:
        service = SessionService(seeded_db)
        before = await _session_count(seeded_db)

        with pytest.raises(InvalidReferenceError) as exc_info:
            await service.create_session(therapist_id=99, patient_id=1, date=datetime(2031, 1, 1))

        assert exc_info.value.message == "Invalid therapist ID"
        assert exc_info.value.field == "therapist_id"
        assert await _session_count(seeded_db) == before

    @pytest.mark.asyncio
    async def test_unknown_patient_is_rejected_without_insert(self, seeded_db) -> None:
        service = SessionService(seeded_db)
        before = await _session_count(seeded_db)

        with pytest.raises(InvalidReferenceError) as exc_info:
            await service.create_session(therapist_id=1, patient_id=99, date=datetime(2031, 1, 1))

        assert exc_info.value.message == "Invalid patient ID"
        assert await _session_count(seeded_db) == before

    @pytest.mark.asyncio
    async def test_failed_read_back_rolls_back_insert(self, seeded_db, monkeypatch) -> None:
        failing = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("gone")))
        monkeypatch.setattr(session_service_module.session_crud, "get_with_details", failing)
        service = SessionService(seeded_db)

        with pytest.raises(StorageUnavailableError) as exc_info:
            await service.create_session(therapist_id=1, patient_id=1, date=datetime(2031, 1, 1))

        assert exc_info.value.details["operation"] == "create_session"
        assert await _session_count(seeded_db) == 5

    @pytest.mark.asyncio
    async def test_joined_row_is_read_before_commit(self, seeded_db, monkeypatch) -> None:
        calls = []
        read = session_service_module.session_crud.get_with_details

        async def recording_read(db, session_id):
            calls.append("read")
            return await read(db, session_id)

        async def recording_commit():
            calls.append("commit")

        monkeypatch.setattr(session_service_module.session_crud, "get_with_details", recording_read)
        monkeypatch.setattr(seeded_db, "commit", recording_commit)

        await SessionService(seeded_db).create_session(therapist_id=1, patient_id=1, date=datetime(2031, 1, 1))

        assert calls == ["read", "commit"]


class TestUpdateStatus:
    @pytest.mark.asyncio
    async def test_changes_status(self, seeded_db) -> None:
        service = SessionService(seeded_db)

        session, changed = await service.update_status(1, SessionStatus.COMPLETED)

        assert changed is True
        assert session["status"] == "Completed"

    @pytest.mark.asyncio
    async def test_same_status_is_a_no_op(self, seeded_db) -> None:
        service = SessionService(seeded_db)

        first, first_changed = await service.update_status(2, "Completed")
        second, second_changed = await service.update_status(2, "Completed")

        assert first_changed is True
        assert second_changed is False
        assert first == second

    @pytest.mark.asyncio
    async def test_missing_session_raises_not_found(self, seeded_db) -> None:
        service = SessionService(seeded_db)

        with pytest.raises(SessionNotFoundError) as exc_info:
            await service.update_status(999999, SessionStatus.COMPLETED)

        assert exc_info.value.session_id == 999999

    @pytest.mark.asyncio
    async def test_storage_failure_is_wrapped(self, seeded_db, monkeypatch) -> None:
        failing = AsyncMock(side_effect=OperationalError("UPDATE", {}, Exception("disk I/O error")))
        monkeypatch.setattr(session_service_module.session_crud, "update_status", failing)
        service = SessionService(seeded_db)

        with pytest.raises(StorageUnavailableError) as exc_info:
            await service.update_status(1, SessionStatus.COMPLETED)

        assert exc_info.value.details["operation"] == "update_status"
        assert isinstance(exc_info.value.__cause__, OperationalError)


class TestListing:
    @pytest.mark.asyncio
    async def test_list_sessions_returns_dicts(self, seeded_db) -> None:
        sessions = await SessionService(seeded_db).list_sessions()

        assert len(sessions) == 5
        assert set(sessions[0]) == {
            "id", "therapist_id", "patient_id", "date", "status", "therapist_name", "patient_name",
        }

    @pytest.mark.asyncio
    async def test_list_sessions_storage_failure(self, seeded_db, monkeypatch) -> None:
        failing = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("gone")))
        monkeypatch.setattr(session_service_module.session_crud, "list_with_details", failing)

        with pytest.raises(StorageUnavailableError):
            await SessionService(seeded_db).list_sessions()

    @pytest.mark.asyncio
    async def test_directory_listings(self, seeded_db) -> None:
        service = DirectoryService(seeded_db)

        therapists = await service.list_therapists()
        patients = await service.list_patients()

        assert therapists[0] == {"id": 1, "name": "Anna SLP", "specialty": "Speech Therapy"}
        assert [p["name"] for p in patients][0] == "Ariel Underwood"

    @pytest.mark.asyncio
    async def test_directory_storage_failure(self, seeded_db, monkeypatch) -> None:
        failing = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("gone")))
        monkeypatch.setattr(directory_service_module.patient_crud, "list_by_name", failing)

        with pytest.raises(StorageUnavailableError):
            await DirectoryService(seeded_db).list_patients()
