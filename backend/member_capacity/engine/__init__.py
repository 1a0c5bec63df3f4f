"""Member capacity and availability engine."""
from member_capacity.engine.calculator import (
    CapacityCalculator,
    calculate_aggregate_availability,
    calculate_period_availability,
)
from member_capacity.engine.intervals import clamp_overlap, overlaps, working_days_in_window
from member_capacity.engine.presenter import (
    format_availability_summary,
    format_hours,
    format_hours_per_week,
    format_utilization,
    get_availability_status,
)
from member_capacity.engine.queries import (
    engagement_duration_days,
    get_ending_engagements,
    get_engagement_status,
    get_upcoming_engagements,
    get_upcoming_time_off,
    vacation_days_used,
)
from member_capacity.engine.team import calculate_team_availability
from member_capacity.engine.validator import (
    find_conflicting_engagements,
    validate_engagement_capacity,
    validate_engagement_dates,
    validate_time_off_entry,
)

__all__ = [
    "CapacityCalculator",
    "calculate_aggregate_availability",
    "calculate_period_availability",
    "calculate_team_availability",
    "clamp_overlap",
    "overlaps",
    "working_days_in_window",
    "format_availability_summary",
    "format_hours",
    "format_hours_per_week",
    "format_utilization",
    "get_availability_status",
    "engagement_duration_days",
    "get_ending_engagements",
    "get_engagement_status",
    "get_upcoming_engagements",
    "get_upcoming_time_off",
    "vacation_days_used",
    "find_conflicting_engagements",
    "validate_engagement_capacity",
    "validate_engagement_dates",
    "validate_time_off_entry",
]
