"""Pydantic schemas."""
from member_capacity.schemas.availability import (
    AvailabilityResult,
    AvailabilityStatus,
    MemberAvailability,
    PeriodAvailability,
    TeamAvailability,
    UtilizationSnapshot,
)
from member_capacity.schemas.engagement import Engagement, EngagementCandidate, EngagementValidation
from member_capacity.schemas.profile import MemberCapacityProfile
from member_capacity.schemas.time_off import (
    TimeOffCandidate,
    TimeOffEntry,
    TimeOffStatus,
    TimeOffType,
    TimeOffValidationResult,
)

__all__ = [
    "AvailabilityResult",
    "AvailabilityStatus",
    "MemberAvailability",
    "PeriodAvailability",
    "TeamAvailability",
    "UtilizationSnapshot",
    "Engagement",
    "EngagementCandidate",
    "EngagementValidation",
    "MemberCapacityProfile",
    "TimeOffCandidate",
    "TimeOffEntry",
    "TimeOffStatus",
    "TimeOffType",
    "TimeOffValidationResult",
]
