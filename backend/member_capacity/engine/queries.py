"""Engagement and time-off selection helpers."""
from datetime import date, timedelta
from typing import Iterable, Literal

from member_capacity.config import Settings, get_settings
from member_capacity.engine.intervals import as_date, clamp_overlap, days_in_range
from member_capacity.errors import CapacityInputError
from member_capacity.schemas.engagement import Engagement
from member_capacity.schemas.time_off import TimeOffEntry, TimeOffType

EngagementStatus = Literal["upcoming", "active", "completed", "inactive"]


def _horizon_end(now: date, horizon_days: int | None, default: int) -> date:
    days = default if horizon_days is None else horizon_days
    if days < 0:
        raise CapacityInputError(f"horizon_days must be >= 0, got {days}")
    try:
        return now + timedelta(days=days)
    except OverflowError:
        raise CapacityInputError(f"horizon of {days} days from {now} is past the last representable date")


def get_upcoming_engagements(
    engagements: Iterable[Engagement],
    now: date,
    horizon_days: int | None = None,
    settings: Settings | None = None,
) -> list[Engagement]:
    """Engagements whose start_date falls in [now, now + horizon_days]."""
    settings = settings or get_settings()
    today = as_date(now)
    until = _horizon_end(today, horizon_days, settings.engagement_horizon_days)
    return [e for e in engagements if today <= e.start_date <= until]


def get_ending_engagements(
    engagements: Iterable[Engagement],
    now: date,
    horizon_days: int | None = None,
    settings: Settings | None = None,
) -> list[Engagement]:
    """Engagements with an end_date in [now, now + horizon_days]. Ongoing ones never end."""
    settings = settings or get_settings()
    today = as_date(now)
    until = _horizon_end(today, horizon_days, settings.engagement_horizon_days)
    return [e for e in engagements if e.end_date is not None and today <= e.end_date <= until]


def get_upcoming_time_off(
    entries: Iterable[TimeOffEntry],
    now: date,
    horizon_days: int | None = None,
    settings: Settings | None = None,
) -> list[TimeOffEntry]:
    """Approved time-off starting after today and no later than now + horizon_days."""
    settings = settings or get_settings()
    today = as_date(now)
    until = _horizon_end(today, horizon_days, settings.time_off_horizon_days)
    return [t for t in entries if t.is_approved and today < t.start_date <= until]


def get_engagement_status(engagement: Engagement, now: date) -> EngagementStatus:
    if not engagement.is_active:
        return "inactive"
    today = as_date(now)
    if engagement.start_date > today:
        return "upcoming"
    if engagement.end_date is not None and engagement.end_date < today:
        return "completed"
    return "active"


def engagement_duration_days(engagement: Engagement) -> int | None:
    """Days between start and end; None for an ongoing engagement."""
    if engagement.end_date is None:
        return None
    return (engagement.end_date - engagement.start_date).days


def time_off_days_in_period(entries: Iterable[TimeOffEntry], start: date, end: date) -> int:
    """Calendar days of the given entries that fall inside [start, end], summed per entry."""
    total = 0
    for entry in entries:
        clamped = clamp_overlap(entry.start_date, entry.end_date, start, end)
        if clamped is not None:
            total += days_in_range(*clamped)
    return total


def vacation_days_used(entries: Iterable[TimeOffEntry], year: int) -> int:
    """Approved vacation days that fall inside the given calendar year."""
    vacations = [t for t in entries if t.type == TimeOffType.VACATION and t.is_approved]
    return time_off_days_in_period(vacations, date(year, 1, 1), date(year, 12, 31))
