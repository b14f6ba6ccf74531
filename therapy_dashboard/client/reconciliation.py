"""
Optimistic status-change reconciliation.

A StatusChangeCommand captures a row's status before an optimistic change so
the change can later be confirmed or rolled back without touching other rows.

Dependencies: therapy_dashboard.client.view_state
System role: Client-side optimistic update protocol
"""

from dataclasses import dataclass

from therapy_dashboard.models.session import SessionResponse, SessionStatus
from therapy_dashboard.client.view_state import (
    DashboardViewState,
    clear_pending,
    find_session,
    mark_pending,
    with_session_status,
)


@dataclass(frozen=True)
class StatusChangeCommand:
    """
    Two-phase status change for a single session row.

    Usage:
        command = StatusChangeCommand.capture(state, session_id, SessionStatus.COMPLETED)
        state = command.apply(state)
        # ... send PATCH ...
        state = command.confirm(state) if ok else command.revert(state)
    """

    session_id: int
    original_status: SessionStatus
    target_status: SessionStatus

    @classmethod
    def capture(
        cls,
        state: DashboardViewState,
        session_id: int,
        target_status: SessionStatus,
    ) -> "StatusChangeCommand | None":
        """Record the row's current status; None when the row is not loaded."""
        session = find_session(state, session_id)
        if session is None:
            return None
        return cls(
            session_id=session_id,
            original_status=SessionStatus(session.status),
            target_status=SessionStatus(target_status),
        )

    def apply(self, state: DashboardViewState) -> DashboardViewState:
        """Show the target status immediately and mark the row pending."""
        state = with_session_status(state, self.session_id, self.target_status)
        return mark_pending(state, self.session_id)

    def confirm(
        self,
        state: DashboardViewState,
        server_session: SessionResponse | None = None,
    ) -> DashboardViewState:
        """Keep the change; adopt the server's status when it returned the row."""
        if server_session is not None:
            state = with_session_status(state, self.session_id, server_session.status)
        return clear_pending(state, self.session_id)

    def revert(self, state: DashboardViewState) -> DashboardViewState:
        """Restore the captured status and clear this row's pending flag."""
        state = with_session_status(state, self.session_id, self.original_status)
        return clear_pending(state, self.session_id)
