"""
Dashboard view state.

An immutable snapshot of everything the dashboard displays, plus pure
functions that derive the visible rows (filter, then sort, then paginate)
and produce updated snapshots.

Dependencies: therapy_dashboard.models.session
System role: Client-side state model
"""

import math
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, tzinfo
from enum import Enum
from typing import Iterable

from therapy_dashboard.core.scheduling import as_utc
from therapy_dashboard.models.session import SessionStatus, SessionWithDetailsResponse


class StatusFilter(str, Enum):
    ALL = "All"
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"


class SortKey(str, Enum):
    DATE = "date"
    THERAPIST = "therapist"
    PATIENT = "patient"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class BannerKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Banner:
    """Transient message shown above the table until expires_at."""

    kind: BannerKind
    message: str
    expires_at: datetime


@dataclass(frozen=True)
class DashboardViewState:
    """
    Snapshot of the dashboard.

    Attributes:
        sessions: Server rows (possibly carrying optimistic status changes)
        search: Case-insensitive therapist/patient name search
        status_filter: Status restriction
        sort_key: Column the rows are ordered by
        sort_order: Ascending or descending
        page: 1-based page number
        page_size: Rows per page
        pending: Session ids with an in-flight status change
        banner: Current transient message, if any
        load_error: Message from the last failed list fetch
        loading: True while the session list is being fetched
    """

    sessions: tuple[SessionWithDetailsResponse, ...] = ()
    search: str = ""
    status_filter: StatusFilter = StatusFilter.ALL
    sort_key: SortKey = SortKey.DATE
    sort_order: SortOrder = SortOrder.ASC
    page: int = 1
    page_size: int = 10
    pending: frozenset[int] = field(default_factory=frozenset)
    banner: Banner | None = None
    load_error: str | None = None
    loading: bool = False


def filter_sessions(
    sessions: Iterable[SessionWithDetailsResponse],
    search: str = "",
    status_filter: StatusFilter = StatusFilter.ALL,
) -> list[SessionWithDetailsResponse]:
    """Keep rows whose therapist or patient name contains search and whose status matches."""
    needle = search.strip().casefold()
    status_filter = StatusFilter(status_filter)
    rows = []
    for session in sessions:
        if needle and needle not in session.therapist_name.casefold() \
                and needle not in session.patient_name.casefold():
            continue
        if status_filter is not StatusFilter.ALL and session.status.value != status_filter.value:
            continue
        rows.append(session)
    return rows


def _sort_value(session: SessionWithDetailsResponse, key: SortKey):
    if key is SortKey.THERAPIST:
        return session.therapist_name.casefold()
    if key is SortKey.PATIENT:
        return session.patient_name.casefold()
    return as_utc(session.date)


def sort_sessions(
    sessions: Iterable[SessionWithDetailsResponse],
    key: SortKey = SortKey.DATE,
    order: SortOrder = SortOrder.ASC,
) -> list[SessionWithDetailsResponse]:
    """Stable sort by the given column."""
    key = SortKey(key)
    return sorted(
        sessions,
        key=lambda s: _sort_value(s, key),
        reverse=SortOrder(order) is SortOrder.DESC,
    )


def page_count(total: int, page_size: int) -> int:
    """Number of pages; an empty list still has one (empty) page."""
    return max(1, math.ceil(total / page_size))


def paginate(
    sessions: list[SessionWithDetailsResponse],
    page: int,
    page_size: int,
) -> list[SessionWithDetailsResponse]:
    """Rows of a 1-based page, clamped to the valid range."""
    page = min(max(page, 1), page_count(len(sessions), page_size))
    start = (page - 1) * page_size
    return sessions[start:start + page_size]


def visible_sessions(state: DashboardViewState) -> list[SessionWithDetailsResponse]:
    """All rows matching the current filters, in display order."""
    filtered = filter_sessions(state.sessions, state.search, state.status_filter)
    return sort_sessions(filtered, state.sort_key, state.sort_order)


def current_page(state: DashboardViewState) -> list[SessionWithDetailsResponse]:
    """Rows shown on the current page."""
    return paginate(visible_sessions(state), state.page, state.page_size)


def session_count(state: DashboardViewState) -> int:
    """Number of rows matching the current filters."""
    return len(visible_sessions(state))


def has_active_filters(state: DashboardViewState) -> bool:
    return bool(state.search) or state.status_filter is not StatusFilter.ALL


def clear_filters(state: DashboardViewState) -> DashboardViewState:
    return replace(state, search="", status_filter=StatusFilter.ALL, page=1)


def with_search(state: DashboardViewState, search: str) -> DashboardViewState:
    return replace(state, search=search, page=1)


def with_status_filter(state: DashboardViewState, status_filter: StatusFilter) -> DashboardViewState:
    return replace(state, status_filter=StatusFilter(status_filter), page=1)


def with_sort(
    state: DashboardViewState,
    key: SortKey,
    order: SortOrder | None = None,
) -> DashboardViewState:
    """
    Change the sort column.

    Without an explicit order, choosing the current column flips the order
    and choosing a new column sorts ascending.
    """
    key = SortKey(key)
    if order is None:
        if key is state.sort_key:
            order = SortOrder.DESC if state.sort_order is SortOrder.ASC else SortOrder.ASC
        else:
            order = SortOrder.ASC
    return replace(state, sort_key=key, sort_order=SortOrder(order))


def with_page(state: DashboardViewState, page: int) -> DashboardViewState:
    last = page_count(session_count(state), state.page_size)
    return replace(state, page=min(max(page, 1), last))


def with_sessions(
    state: DashboardViewState,
    sessions: Iterable[SessionWithDetailsResponse],
) -> DashboardViewState:
    """Replace the row set after a fetch, keeping the page in range."""
    new_state = replace(state, sessions=tuple(sessions), load_error=None)
    return with_page(new_state, new_state.page)


def find_session(state: DashboardViewState, session_id: int) -> SessionWithDetailsResponse | None:
    for session in state.sessions:
        if session.id == session_id:
            return session
    return None


def with_session_status(
    state: DashboardViewState,
    session_id: int,
    status: SessionStatus,
) -> DashboardViewState:
    """Set the status of one row; other rows are untouched."""
    status = SessionStatus(status)
    sessions = tuple(
        s.model_copy(update={"status": status}) if s.id == session_id else s
        for s in state.sessions
    )
    return replace(state, sessions=sessions)


def is_pending(state: DashboardViewState, session_id: int) -> bool:
    return session_id in state.pending


def mark_pending(state: DashboardViewState, session_id: int) -> DashboardViewState:
    return replace(state, pending=state.pending | {session_id})


def clear_pending(state: DashboardViewState, session_id: int) -> DashboardViewState:
    return replace(state, pending=state.pending - {session_id})


def show_banner(
    state: DashboardViewState,
    kind: BannerKind,
    message: str,
    now: datetime,
    seconds: float = 3.0,
) -> DashboardViewState:
    banner = Banner(kind=BannerKind(kind), message=message, expires_at=now + timedelta(seconds=seconds))
    return replace(state, banner=banner)


def dismiss_expired_banner(state: DashboardViewState, now: datetime) -> DashboardViewState:
    """Drop the banner once its display time has passed."""
    if state.banner is not None and now >= state.banner.expires_at:
        return replace(state, banner=None)
    return state


def format_session_date(value: datetime, tz: tzinfo | None = None) -> str:
    """
    Human-readable appointment time, e.g. "Nov 8, 2025 9:00 AM".

    Args:
        value: Appointment time (naive values are UTC)
        tz: Display timezone (defaults to UTC)
    """
    local = as_utc(value)
    if tz is not None:
        local = local.astimezone(tz)
    hour = local.hour % 12 or 12
    return f"{local:%b} {local.day}, {local.year} {hour}:{local:%M} {local:%p}"
