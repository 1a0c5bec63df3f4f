"""Availability result schemas."""
from abc import abstractmethod
from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel

from member_capacity.schemas.time_off import TimeOffEntry

AvailabilityBucket = Literal["low", "moderate", "good", "high", "over"]


class UtilizationSnapshot(BaseModel):
    """Fields shared by aggregate and period results."""

    engaged_hours: Decimal
    available_hours: Decimal
    utilization_pct: Decimal
    overallocated: bool

    @property
    @abstractmethod
    def capacity_basis(self) -> Decimal:
        """Capacity that utilization_pct was computed against."""


class AvailabilityResult(UtilizationSnapshot):
    capacity: Decimal
    on_approved_time_off_now: bool
    active_engagements_count: int = 0
    time_off_days_this_month: int = 0
    time_off_days_this_year: int = 0
    upcoming_time_off: list[TimeOffEntry] = []

    @property
    def capacity_basis(self) -> Decimal:
        return self.capacity


class PeriodAvailability(UtilizationSnapshot):
    start_date: date
    end_date: date
    capacity: Decimal
    time_off_reduction: Decimal
    effective_capacity: Decimal
    working_days: int
    time_off_days: int
    engagements_count: int

    @property
    def capacity_basis(self) -> Decimal:
        return self.effective_capacity


class AvailabilityStatus(BaseModel):
    bucket: AvailabilityBucket
    label: str


class MemberAvailability(BaseModel):
    member_id: str | None
    availability: AvailabilityResult
    status: AvailabilityStatus


class TeamAvailability(BaseModel):
    members: list[MemberAvailability]
    total_capacity: Decimal
    total_engaged: Decimal
    total_available: Decimal
    average_utilization_pct: Decimal
    overallocated_members: list[str | None]
