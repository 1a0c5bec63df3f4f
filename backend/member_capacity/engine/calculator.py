"""Capacity calculation engine - deterministic, Decimal only. Hours are per week."""
import calendar
import logging
from datetime import date
from decimal import Decimal

from member_capacity.config import Settings, get_settings
from member_capacity.engine.intervals import (
    as_date,
    clamp_overlap,
    contains,
    overlaps,
    working_days_in_window,
)
from member_capacity.engine.queries import get_upcoming_time_off, time_off_days_in_period
from member_capacity.errors import CapacityInputError
from member_capacity.schemas.availability import AvailabilityResult, PeriodAvailability
from member_capacity.schemas.engagement import Engagement
from member_capacity.schemas.profile import MemberCapacityProfile

logger = logging.getLogger(__name__)

ZERO = Decimal(0)
HUNDRED = Decimal(100)


def require_profile(profile) -> MemberCapacityProfile:
    if not isinstance(profile, MemberCapacityProfile):
        raise CapacityInputError(f"Expected a MemberCapacityProfile, got {type(profile).__name__}")
    return profile


def _sum_hours(engagements: list[Engagement]) -> Decimal:
    return sum((e.hours_per_week for e in engagements), ZERO)


class CapacityCalculator:
    """Aggregate and period-scoped availability for one member."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def resolve_capacity(self, profile: MemberCapacityProfile) -> Decimal:
        """Working hours per week: profile value or configured default."""
        require_profile(profile)
        if profile.working_hours_per_week is not None:
            return profile.working_hours_per_week
        return Decimal(str(self.settings.default_working_hours_per_week))

    @staticmethod
    def utilization_pct(engaged: Decimal, capacity: Decimal) -> Decimal:
        """Utilization % = Engaged / Capacity × 100. Unrounded; display layer rounds."""
        if capacity <= 0:
            return ZERO
        return engaged / capacity * HUNDRED

    def aggregate_availability(self, profile: MemberCapacityProfile, now: date) -> AvailabilityResult:
        """Availability against every engagement flagged active.

        Engagement dates are not compared with ``now``: an active engagement that
        has not started yet, or whose end date has passed, still counts in full.
        """
        today = as_date(now)
        capacity = self.resolve_capacity(profile)

        active = [e for e in profile.engagements if e.is_active]
        engaged = _sum_hours(active)

        approved = [t for t in profile.time_off_entries if t.is_approved]
        on_time_off = any(contains(t.start_date, t.end_date, today) for t in approved)

        month_end = date(today.year, today.month, calendar.monthrange(today.year, today.month)[1])
        days_this_month = time_off_days_in_period(approved, today.replace(day=1), month_end)
        days_this_year = time_off_days_in_period(approved, date(today.year, 1, 1), date(today.year, 12, 31))

        logger.debug(
            "aggregate availability member=%s capacity=%s engaged=%s active=%d",
            profile.member_id,
            capacity,
            engaged,
            len(active),
        )
        return AvailabilityResult(
            capacity=capacity,
            engaged_hours=engaged,
            available_hours=max(ZERO, capacity - engaged),
            utilization_pct=self.utilization_pct(engaged, capacity),
            overallocated=engaged > capacity,
            on_approved_time_off_now=on_time_off,
            active_engagements_count=len(active),
            time_off_days_this_month=days_this_month,
            time_off_days_this_year=days_this_year,
            upcoming_time_off=get_upcoming_time_off(approved, today, settings=self.settings),
        )

    def time_off_reduction(
        self,
        profile: MemberCapacityProfile,
        capacity: Decimal,
        window_start: date,
        window_end: date,
    ) -> tuple[Decimal, int]:
        """Capacity lost to approved time-off in the window, and the working days it covers.

        Each entry removes capacity in proportion to the share of the window's
        working days it overlaps. The total never exceeds capacity.
        """
        window_days = working_days_in_window(window_start, window_end)
        reduction = ZERO
        time_off_days = 0
        for entry in profile.time_off_entries:
            if not entry.is_approved:
                continue
            clamped = clamp_overlap(entry.start_date, entry.end_date, window_start, window_end)
            if clamped is None:
                continue
            days = working_days_in_window(*clamped)
            time_off_days += days
            if window_days > 0:
                reduction += capacity * Decimal(days) / Decimal(window_days)
        return min(reduction, capacity), time_off_days

    def period_availability(
        self,
        profile: MemberCapacityProfile,
        window_start: date,
        window_end: date,
    ) -> PeriodAvailability:
        """Availability within [window_start, window_end].

        Every engagement overlapping the window counts, whether or not it is
        flagged active; ongoing engagements extend indefinitely.
        """
        start = as_date(window_start)
        end = as_date(window_end)
        if end < start:
            raise CapacityInputError(f"Window end {end} is before window start {start}")

        capacity = self.resolve_capacity(profile)
        overlapping = [e for e in profile.engagements if overlaps(e.start_date, e.end_date, start, end)]
        engaged = _sum_hours(overlapping)

        reduction, time_off_days = self.time_off_reduction(profile, capacity, start, end)
        effective = max(ZERO, capacity - reduction)

        logger.debug(
            "period availability member=%s window=%s..%s effective=%s engaged=%s",
            profile.member_id,
            start,
            end,
            effective,
            engaged,
        )
        return PeriodAvailability(
            start_date=start,
            end_date=end,
            capacity=capacity,
            time_off_reduction=reduction,
            effective_capacity=effective,
            engaged_hours=engaged,
            available_hours=max(ZERO, effective - engaged),
            utilization_pct=self.utilization_pct(engaged, effective),
            overallocated=engaged > effective,
            working_days=working_days_in_window(start, end),
            time_off_days=time_off_days,
            engagements_count=len(overlapping),
        )


def calculate_aggregate_availability(
    profile: MemberCapacityProfile,
    now: date,
    settings: Settings | None = None,
) -> AvailabilityResult:
    return CapacityCalculator(settings).aggregate_availability(profile, now)


def calculate_period_availability(
    profile: MemberCapacityProfile,
    window_start: date,
    window_end: date,
    settings: Settings | None = None,
) -> PeriodAvailability:
    return CapacityCalculator(settings).period_availability(profile, window_start, window_end)
