"""
Create-session form model and client-side validation.

Dependencies: therapy_dashboard.core
System role: Pre-submission checks for new sessions
"""

from dataclasses import dataclass
from datetime import datetime

from therapy_dashboard.core.exceptions import FieldError
from therapy_dashboard.core.scheduling import lead_time_error


@dataclass(frozen=True)
class CreateSessionForm:
    """
    Values entered in the create-session form.

    date is the text as entered (ISO 8601, e.g. "2025-11-08T09:00");
    values without an offset are taken as UTC.
    """

    therapist_id: int | None = None
    patient_id: int | None = None
    date: str = ""


def parse_form_date(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def validate_create_form(form: CreateSessionForm, now: datetime | None = None) -> list[FieldError]:
    """
    Check the form before submission.

    Args:
        form: Entered values
        now: Reference time for the lead-time rule

    Returns:
        list[FieldError]: Empty when the form may be submitted
    """
    errors: list[FieldError] = []
    if not form.therapist_id:
        errors.append(FieldError("therapist_id", "Please select a therapist"))
    if not form.patient_id:
        errors.append(FieldError("patient_id", "Please select a patient"))

    if not form.date.strip():
        errors.append(FieldError("date", "Date is required"))
    else:
        scheduled_for = parse_form_date(form.date)
        if scheduled_for is None:
            errors.append(FieldError("date", "Invalid date format"))
        else:
            lead_error = lead_time_error(scheduled_for, now=now)
            if lead_error:
                errors.append(FieldError("date", lead_error))
    return errors
