"""Tests for StatusChangeCommand apply / confirm / revert."""

from datetime import datetime

import pytest

from therapy_dashboard.client import view_state as vs
from therapy_dashboard.client.reconciliation import StatusChangeCommand
from therapy_dashboard.models.session import (
    SessionResponse,
    SessionStatus,
    SessionWithDetailsResponse,
)


def _row(id: int, status: str = "Scheduled") -> SessionWithDetailsResponse:
    return SessionWithDetailsResponse(
        id=id,
        therapist_id=1,
        patient_id=id,
        date=datetime(2025, 11, 8, 9 + id),
        status=status,
        therapist_name="Anna SLP",
        patient_name=f"Patient {id}",
    )


@pytest.fixture
def state() -> vs.DashboardViewState:
    return vs.DashboardViewState(sessions=(_row(1), _row(2), _row(3, "Completed")))


def _status(state, session_id: int) -> SessionStatus:
    return vs.find_session(state, session_id).status


def test_capture_records_current_status(state):
    command = StatusChangeCommand.capture(state, 1, SessionStatus.COMPLETED)

    assert command == StatusChangeCommand(1, SessionStatus.SCHEDULED, SessionStatus.COMPLETED)


def test_capture_missing_row(state):
    assert StatusChangeCommand.capture(state, 99, SessionStatus.COMPLETED) is None


def test_apply_shows_target_and_marks_pending(state):
    command = StatusChangeCommand.capture(state, 1, SessionStatus.COMPLETED)

    applied = command.apply(state)

    assert _status(applied, 1) is SessionStatus.COMPLETED
    assert vs.is_pending(applied, 1)
    assert applied.sessions[1:] == state.sessions[1:]


def test_confirm_keeps_change(state):
    command = StatusChangeCommand.capture(state, 1, SessionStatus.COMPLETED)

    confirmed = command.confirm(command.apply(state))

    assert _status(confirmed, 1) is SessionStatus.COMPLETED
    assert confirmed.pending == frozenset()


def test_confirm_adopts_server_status(state):
    command = StatusChangeCommand.capture(state, 1, SessionStatus.COMPLETED)
    server = SessionResponse(
        id=1, therapist_id=1, patient_id=1, date=datetime(2025, 11, 8, 10), status="Scheduled"
    )

    confirmed = command.confirm(command.apply(state), server)

    assert _status(confirmed, 1) is SessionStatus.SCHEDULED


def test_revert_restores_original(state):
    command = StatusChangeCommand.capture(state, 1, SessionStatus.COMPLETED)

    reverted = command.revert(command.apply(state))

    assert reverted.sessions == state.sessions
    assert reverted.pending == frozenset()


def test_revert_leaves_other_rows_alone(state):
    first = StatusChangeCommand.capture(state, 1, SessionStatus.COMPLETED)
    second = StatusChangeCommand.capture(state, 2, SessionStatus.COMPLETED)

    state = second.apply(first.apply(state))
    state = second.confirm(state)
    state = first.revert(state)

    assert _status(state, 1) is SessionStatus.SCHEDULED
    assert _status(state, 2) is SessionStatus.COMPLETED
    assert _status(state, 3) is SessionStatus.COMPLETED
    assert state.pending == frozenset()
