"""
Headless dashboard client.

Exports the API client, the result types and the dashboard controller.
"""

from therapy_dashboard.client.api_client import DashboardApiClient
from therapy_dashboard.client.create_form import CreateSessionForm, validate_create_form
from therapy_dashboard.client.dashboard import CreateSessionOutcome, FormOptions, SessionDashboard
from therapy_dashboard.client.reconciliation import StatusChangeCommand
from therapy_dashboard.client.results import ApiResult, Err, ErrorKind, Ok
from therapy_dashboard.client.view_state import DashboardViewState

__all__ = [
    "ApiResult",
    "CreateSessionForm",
    "CreateSessionOutcome",
    "DashboardApiClient",
    "DashboardViewState",
    "Err",
    "ErrorKind",
    "FormOptions",
    "Ok",
    "SessionDashboard",
    "StatusChangeCommand",
    "validate_create_form",
]
