"""
Test suite for BaseCRUD generic database operations.

Tests basic CRUD functionality: create, read (by ID and all), update, exists.
Uses a mocked AsyncSession to verify the calls made against it.

System role: Verification of generic database layer foundation
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from therapy_dashboard.boundary.db.CRUD.base_crud import BaseCRUD
from therapy_dashboard.boundary.db.models import TherapistModel


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(TherapistModel)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


def _result_with_scalar(value: Any) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    @pytest.mark.asyncio
    async def test_create_should_add_flush_and_refresh(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        instance = await base_crud.create(mock_session, name="Anna SLP", specialty="Speech Therapy")

        assert isinstance(instance, TherapistModel)
        assert instance.name == "Anna SLP"
        mock_session.add.assert_called_once_with(instance)
        mock_session.flush.assert_awaited_once()
        mock_session.refresh.assert_awaited_once_with(instance)

    @pytest.mark.asyncio
    async def test_create_should_flush_before_refresh(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Flush must precede refresh so the generated id is loaded."""
        call_order = []

        async def flush_effect(*args: Any) -> None:
            call_order.append("flush")

        async def refresh_effect(obj: Any) -> None:
            call_order.append("refresh")

        mock_session.flush.side_effect = flush_effect
        mock_session.refresh.side_effect = refresh_effect

        await base_crud.create(mock_session, name="Becca OT")

        assert call_order == ["flush", "refresh"]


class TestBaseCRUDRead:
    """Test suite for get_by_id() and exists()."""

    @pytest.mark.asyncio
    async def test_get_by_id_returns_row(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        therapist = TherapistModel(id=1, name="Anna SLP")
        mock_session.execute.return_value = _result_with_scalar(therapist)

        assert await base_crud.get_by_id(mock_session, 1) is therapist
        mock_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_by_id_returns_none_when_missing(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        mock_session.execute.return_value = _result_with_scalar(None)

        assert await base_crud.get_by_id(mock_session, 42) is None

    @pytest.mark.asyncio
    async def test_exists_reflects_query_result(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        mock_session.execute.return_value = _result_with_scalar(7)
        assert await base_crud.exists(mock_session, 7) is True

        mock_session.execute.return_value = _result_with_scalar(None)
        assert await base_crud.exists(mock_session, 8) is False


class TestBaseCRUDUpdate:
    """Test suite for update_by_id()."""

    @pytest.mark.asyncio
    async def test_update_by_id_sets_fields(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        therapist = TherapistModel(id=1, name="Anna SLP", specialty=None)
        mock_session.execute.return_value = _result_with_scalar(therapist)

        updated = await base_crud.update_by_id(mock_session, 1, specialty="Speech Therapy")

        assert updated is therapist
        assert therapist.specialty == "Speech Therapy"
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_by_id_returns_none_without_flushing_when_missing(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        mock_session.execute.return_value = _result_with_scalar(None)

        assert await base_crud.update_by_id(mock_session, 99, name="x") is None
        mock_session.flush.assert_not_awaited()
