"""Request and response bodies for the availability API."""
from datetime import date

from pydantic import BaseModel, Field

from member_capacity.schemas.availability import (
    AvailabilityResult,
    AvailabilityStatus,
    PeriodAvailability,
)
from member_capacity.schemas.engagement import Engagement, EngagementCandidate
from member_capacity.schemas.profile import MemberCapacityProfile
from member_capacity.schemas.time_off import TimeOffCandidate, TimeOffEntry


class AggregateAvailabilityRequest(BaseModel):
    profile: MemberCapacityProfile
    now: date


class AggregateAvailabilityResponse(BaseModel):
    availability: AvailabilityResult
    status: AvailabilityStatus
    summary: str


class PeriodAvailabilityRequest(BaseModel):
    profile: MemberCapacityProfile
    start_date: date
    end_date: date


class PeriodAvailabilityResponse(BaseModel):
    availability: PeriodAvailability
    status: AvailabilityStatus
    summary: str


class EngagementValidationRequest(BaseModel):
    profile: MemberCapacityProfile
    candidate: EngagementCandidate
    exclude_engagement_id: str | None = None
    # When set, dates too far from this day are also reported
    now: date | None = None


class EngagementQueryRequest(BaseModel):
    engagements: list[Engagement]
    now: date
    horizon_days: int | None = Field(default=None, ge=0)


class TimeOffValidationRequest(BaseModel):
    entries: list[TimeOffEntry] = []
    candidate: TimeOffCandidate
    exclude_entry_id: str | None = None


class TeamAvailabilityRequest(BaseModel):
    profiles: list[MemberCapacityProfile]
    now: date
