"""
Session dashboard controller.

Owns the current DashboardViewState and performs the user actions: loading
the list, marking a session completed (optimistically), and creating a
session (refetch after success). All awaits happen at network calls only;
state changes between them are synchronous.

Dependencies: therapy_dashboard.client, therapy_dashboard.configs
System role: Headless dashboard behaviour
"""

import asyncio
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable

from therapy_dashboard.configs import get_settings
from therapy_dashboard.core.scheduling import utcnow
from therapy_dashboard.models.directory import PatientResponse, TherapistResponse
from therapy_dashboard.models.session import SessionStatus, SessionWithDetailsResponse
from therapy_dashboard.client import view_state as vs
from therapy_dashboard.client.api_client import DashboardApiClient
from therapy_dashboard.client.create_form import (
    CreateSessionForm,
    parse_form_date,
    validate_create_form,
)
from therapy_dashboard.client.reconciliation import StatusChangeCommand
from therapy_dashboard.client.results import ApiResult, Err, ErrorKind, Ok

logger = logging.getLogger(__name__)

MARK_COMPLETED_MESSAGE = "Session marked as completed"
UPDATE_FAILED_MESSAGE = "Failed to update session. Please try again."
CREATED_MESSAGE = "Session created successfully"

# Server fields that map onto form inputs.
FORM_FIELDS = ("therapist_id", "patient_id", "date")


@dataclass(frozen=True)
class FormOptions:
    therapists: tuple[TherapistResponse, ...] = ()
    patients: tuple[PatientResponse, ...] = ()


@dataclass(frozen=True)
class CreateSessionOutcome:
    """
    Result of submitting the create-session form.

    On failure the entered values are returned unchanged in `form`. When the
    server rejected an unknown therapist or patient, `form_options` holds the
    reloaded dropdown data.
    """

    form: CreateSessionForm
    session: SessionWithDetailsResponse | None = None
    field_errors: dict[str, str] = field(default_factory=dict)
    form_error: str | None = None
    error_kind: ErrorKind | None = None
    form_options: FormOptions | None = None

    @property
    def ok(self) -> bool:
        return self.session is not None


class SessionDashboard:
    """
    Headless dashboard.

    Usage:
        async with DashboardApiClient() as api:
            dashboard = SessionDashboard(api)
            await dashboard.refresh()
            await dashboard.mark_completed(3)
            rows = dashboard.page_rows()
    """

    def __init__(
        self,
        api: DashboardApiClient,
        page_size: int | None = None,
        banner_seconds: float | None = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """
        Initialize the dashboard.

        Args:
            api: API client
            page_size: Rows per page (defaults to DASHBOARD_PAGE_SIZE)
            banner_seconds: Banner lifetime (defaults to DASHBOARD_BANNER_SECONDS)
            clock: Current-time source for banners and lead-time checks
        """
        client_settings = get_settings().client
        self.api = api
        self.banner_seconds = banner_seconds or client_settings.banner_seconds
        self.clock = clock
        self._state = vs.DashboardViewState(page_size=page_size or client_settings.page_size)

    @property
    def state(self) -> vs.DashboardViewState:
        return self._state

    def _banner(self, kind: vs.BannerKind, message: str) -> None:
        self._state = vs.show_banner(self._state, kind, message, self.clock(), self.banner_seconds)

    async def refresh(self) -> ApiResult[list[SessionWithDetailsResponse]]:
        """Fetch the session list; on failure the previous rows stay and load_error is set."""
        self._state = replace(self._state, loading=True)
        result = await self.api.list_sessions()
        if isinstance(result, Ok):
            self._state = vs.with_sessions(self._state, result.value)
        else:
            logger.warning("Session list fetch failed", extra={"kind": result.kind.value})
            self._state = replace(self._state, load_error=result.message)
        self._state = replace(self._state, loading=False)
        return result

    async def load_form_options(self) -> ApiResult[FormOptions]:
        """Fetch therapists and patients for the create form."""
        therapists, patients = await asyncio.gather(
            self.api.list_therapists(),
            self.api.list_patients(),
        )
        if isinstance(therapists, Err):
            return therapists
        if isinstance(patients, Err):
            return patients
        return Ok(FormOptions(tuple(therapists.value), tuple(patients.value)))

    async def mark_completed(self, session_id: int) -> ApiResult | None:
        """
        Optimistically mark a session completed.

        Returns None without sending a request when the row already has a
        change in flight or is not loaded.
        """
        if vs.is_pending(self._state, session_id):
            logger.debug("Status change suppressed, already pending", extra={"session_id": session_id})
            return None

        command = StatusChangeCommand.capture(self._state, session_id, SessionStatus.COMPLETED)
        if command is None:
            return None

        self._state = command.apply(self._state)
        result = await self.api.update_session_status(session_id, SessionStatus.COMPLETED)

        if isinstance(result, Ok):
            self._state = command.confirm(self._state, result.value.session)
            self._banner(vs.BannerKind.SUCCESS, MARK_COMPLETED_MESSAGE)
        else:
            logger.warning(
                "Status change failed, reverting",
                extra={"session_id": session_id, "kind": result.kind.value},
            )
            self._state = command.revert(self._state)
            self._banner(vs.BannerKind.ERROR, UPDATE_FAILED_MESSAGE)
        return result

    async def create_session(self, form: CreateSessionForm) -> CreateSessionOutcome:
        """
        Validate and submit the create form.

        Nothing is inserted locally; the list is refetched after the server
        accepts the session.
        """
        errors = validate_create_form(form, now=self.clock())
        if errors:
            return CreateSessionOutcome(
                form=form,
                field_errors={e.field: e.message for e in errors},
                error_kind=ErrorKind.INVALID_INPUT,
            )

        result = await self.api.create_session(
            therapist_id=form.therapist_id,
            patient_id=form.patient_id,
            date=parse_form_date(form.date),
        )
        if isinstance(result, Err):
            form_options = None
            if result.kind is ErrorKind.CONSTRAINT_VIOLATION:
                # The selected therapist or patient is gone; refresh the dropdowns.
                options = await self.load_form_options()
                if isinstance(options, Ok):
                    form_options = options.value
            field_errors = {k: v for k, v in result.field_errors().items() if k in FORM_FIELDS}
            return CreateSessionOutcome(
                form=form,
                field_errors=field_errors,
                form_error=None if field_errors else result.message,
                error_kind=result.kind,
                form_options=form_options,
            )

        await self.refresh()
        self._banner(vs.BannerKind.SUCCESS, CREATED_MESSAGE)
        return CreateSessionOutcome(form=CreateSessionForm(), session=result.value)

    def dismiss_expired_banner(self) -> None:
        self._state = vs.dismiss_expired_banner(self._state, self.clock())

    # View controls

    def set_search(self, search: str) -> None:
        self._state = vs.with_search(self._state, search)

    def set_status_filter(self, status_filter: vs.StatusFilter) -> None:
        self._state = vs.with_status_filter(self._state, status_filter)

    def set_sort(self, key: vs.SortKey, order: vs.SortOrder | None = None) -> None:
        self._state = vs.with_sort(self._state, key, order)

    def set_page(self, page: int) -> None:
        self._state = vs.with_page(self._state, page)

    def clear_filters(self) -> None:
        self._state = vs.clear_filters(self._state)

    def page_rows(self) -> list[SessionWithDetailsResponse]:
        return vs.current_page(self._state)
