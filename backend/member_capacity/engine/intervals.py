"""Date-interval helpers. All intervals are closed; an end of None means ongoing."""
from datetime import date, datetime

from member_capacity.errors import CapacityInputError


def as_date(value: date) -> date:
    """Reduce a caller-supplied instant to its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise CapacityInputError(f"Expected a date, got {type(value).__name__}")


def overlaps(a_start: date, a_end: date | None, b_start: date, b_end: date | None) -> bool:
    """True if the two intervals share at least one day."""
    if a_end is not None and a_end < b_start:
        return False
    if b_end is not None and b_end < a_start:
        return False
    return True


def contains(start: date, end: date | None, day: date) -> bool:
    return start <= day and (end is None or day <= end)


def clamp_overlap(
    start: date,
    end: date | None,
    window_start: date,
    window_end: date,
) -> tuple[date, date] | None:
    """Intersection of an interval with a window, or None if they are disjoint."""
    if window_end < window_start:
        return None
    if not overlaps(start, end, window_start, window_end):
        return None
    clamped_end = window_end if end is None else min(end, window_end)
    return (max(start, window_start), clamped_end)


def working_days_in_window(start: date, end: date) -> int:
    """Count Monday-Friday days in the inclusive range. No holiday calendar is applied."""
    if end < start:
        return 0
    total_days = (end - start).days + 1
    full_weeks, remainder = divmod(total_days, 7)
    count = full_weeks * 5
    first_weekday = start.weekday()
    for offset in range(remainder):
        if (first_weekday + offset) % 7 < 5:
            count += 1
    return count


def days_in_range(start: date, end: date) -> int:
    """Inclusive calendar-day count; 0 for an inverted range."""
    if end < start:
        return 0
    return (end - start).days + 1
