"""
Scheduling policy shared by the API and the dashboard client.

Dependencies: None (pure domain layer)
System role: Appointment lead-time rule and UTC normalisation
"""

from datetime import datetime, timedelta, timezone

MIN_LEAD_TIME = timedelta(hours=1)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_naive_utc(value: datetime) -> datetime:
    """Convert to the naive-UTC form stored in the sessions table."""
    return as_utc(value).replace(tzinfo=None)


def lead_time_error(
    scheduled_for: datetime,
    now: datetime | None = None,
    min_lead: timedelta = MIN_LEAD_TIME,
) -> str | None:
    """
    Check the minimum lead-time rule for a new appointment.

    The appointment must be strictly later than ``now + min_lead``.

    Args:
        scheduled_for: Requested appointment time
        now: Reference time (defaults to current UTC time)
        min_lead: Minimum lead time

    Returns:
        str | None: Error message, or None when the time is acceptable
    """
    now = as_utc(now or utcnow())
    if as_utc(scheduled_for) <= now + min_lead:
        hours = min_lead.total_seconds() / 3600
        label = f"{hours:g} hour" + ("" if hours == 1 else "s")
        return f"Session must be scheduled at least {label} in advance"
    return None
