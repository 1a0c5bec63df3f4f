"""Engagement and time-off validation.

Business-rule violations are returned as messages, never raised, so a caller
can show every problem at once. Results are only as fresh as the profile they
were computed from: the persistence layer must repeat validation against a
transaction-consistent read right before committing.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Iterable

from member_capacity.config import Settings, get_settings
from member_capacity.engine.calculator import CapacityCalculator, require_profile
from member_capacity.engine.intervals import as_date, clamp_overlap, days_in_range, overlaps
from member_capacity.engine.queries import vacation_days_used
from member_capacity.errors import CapacityInputError
from member_capacity.schemas.engagement import Engagement, EngagementCandidate
from member_capacity.schemas.profile import MemberCapacityProfile
from member_capacity.schemas.time_off import (
    TimeOffCandidate,
    TimeOffEntry,
    TimeOffStatus,
    TimeOffType,
    TimeOffValidationResult,
)

logger = logging.getLogger(__name__)

HOURS_NOT_POSITIVE = "Hours per week must be greater than 0"
HOURS_EXCEED_WORKING_HOURS = "Hours per week cannot exceed total working hours"
TOTAL_EXCEEDS_WORKING_HOURS = "Total engagement hours would exceed working hours per week"
END_NOT_AFTER_START = "End date must be after start date"

START_TOO_FAR_IN_PAST = "Start date cannot be more than {years} years in the past"
END_TOO_FAR_IN_FUTURE = "End date cannot be more than {years} years in the future"

TIME_OFF_END_BEFORE_START = "End date must not be before start date"
TIME_OFF_OVERLAP = "Time-off period overlaps with existing time-off entries"


def validate_engagement_capacity(
    profile: MemberCapacityProfile,
    candidate: EngagementCandidate,
    exclude_engagement_id: str | None = None,
    settings: Settings | None = None,
) -> list[str]:
    """Check a proposed engagement against the member's working hours.

    Pass ``exclude_engagement_id`` when editing an existing engagement so its
    current hours are not counted against its new value.
    """
    if not isinstance(candidate, EngagementCandidate):
        raise CapacityInputError(f"Expected an EngagementCandidate, got {type(candidate).__name__}")
    working_hours = CapacityCalculator(settings).resolve_capacity(profile)
    hours = candidate.hours_per_week
    errors: list[str] = []

    if hours <= 0:
        errors.append(HOURS_NOT_POSITIVE)

    if hours > working_hours:
        errors.append(HOURS_EXCEED_WORKING_HOURS)

    other_active_hours = sum(
        (
            e.hours_per_week
            for e in profile.engagements
            if e.is_active and (exclude_engagement_id is None or e.id != exclude_engagement_id)
        ),
        Decimal(0),
    )
    if other_active_hours + hours > working_hours:
        errors.append(TOTAL_EXCEEDS_WORKING_HOURS)

    if (
        candidate.start_date is not None
        and candidate.end_date is not None
        and candidate.end_date <= candidate.start_date
    ):
        errors.append(END_NOT_AFTER_START)

    logger.debug(
        "engagement validation member=%s candidate=%s excluded=%s violations=%d",
        profile.member_id,
        candidate.id,
        exclude_engagement_id,
        len(errors),
    )
    return errors


def _shift_years(day: date, years: int) -> date:
    """Same calendar day `years` away; Feb 29 falls back to Feb 28. Clamped to the date range."""
    year = day.year + years
    if year < date.min.year:
        return date.min
    if year > date.max.year:
        return date.max
    try:
        return day.replace(year=year)
    except ValueError:
        return day.replace(year=year, day=28)


def validate_engagement_dates(
    candidate: EngagementCandidate,
    now: date,
    settings: Settings | None = None,
) -> list[str]:
    """Reject engagement dates implausibly far from ``now``.

    Opt-in companion to validate_engagement_capacity: the start may not be more
    than ``engagement_date_range_years`` before today and the end not more than
    that many years after it. Missing dates are not checked.
    """
    settings = settings or get_settings()
    today = as_date(now)
    years = settings.engagement_date_range_years
    errors: list[str] = []
    if candidate.start_date is not None and candidate.start_date < _shift_years(today, -years):
        errors.append(START_TOO_FAR_IN_PAST.format(years=years))
    if candidate.end_date is not None and candidate.end_date > _shift_years(today, years):
        errors.append(END_TOO_FAR_IN_FUTURE.format(years=years))
    return errors


def find_conflicting_engagements(
    profile: MemberCapacityProfile,
    candidate: EngagementCandidate,
    exclude_engagement_id: str | None = None,
) -> list[Engagement]:
    """Active engagements on the candidate's project whose dates overlap it."""
    require_profile(profile)
    if candidate.project_id is None or candidate.start_date is None:
        return []
    return [
        e
        for e in profile.engagements
        if e.is_active
        and e.project_id == candidate.project_id
        and (exclude_engagement_id is None or e.id != exclude_engagement_id)
        and overlaps(e.start_date, e.end_date, candidate.start_date, candidate.end_date)
    ]


def validate_time_off_entry(
    entries: Iterable[TimeOffEntry],
    candidate: TimeOffCandidate,
    exclude_entry_id: str | None = None,
    settings: Settings | None = None,
) -> TimeOffValidationResult:
    settings = settings or get_settings()
    others = [e for e in entries if exclude_entry_id is None or e.id != exclude_entry_id]
    errors: list[str] = []
    warnings: list[str] = []

    dates_valid = candidate.end_date >= candidate.start_date
    if not dates_valid:
        errors.append(TIME_OFF_END_BEFORE_START)

    # Rejected requests never block a new one.
    if dates_valid and any(
        e.status != TimeOffStatus.REJECTED
        and overlaps(e.start_date, e.end_date, candidate.start_date, candidate.end_date)
        for e in others
    ):
        errors.append(TIME_OFF_OVERLAP)

    if dates_valid and candidate.type == TimeOffType.VACATION:
        year = candidate.start_date.year
        used = vacation_days_used(others, year)
        year_span = clamp_overlap(
            candidate.start_date,
            candidate.end_date,
            candidate.start_date.replace(month=1, day=1),
            candidate.start_date.replace(month=12, day=31),
        )
        requested = days_in_range(*year_span) if year_span else 0
        allowance = settings.annual_vacation_allowance_days
        if used + requested > allowance:
            warnings.append(
                f"This vacation request will result in {used + requested} vacation days in {year}, "
                f"which exceeds the annual allowance of {allowance} days"
            )

    return TimeOffValidationResult(valid=not errors, errors=errors, warnings=warnings)
