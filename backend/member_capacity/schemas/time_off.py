"""Time-off schemas."""
from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class TimeOffType(str, Enum):
    VACATION = "vacation"
    PARENTAL_LEAVE = "parental_leave"
    SICK_LEAVE = "sick_leave"
    PAID_TIME_OFF = "paid_time_off"
    UNPAID_TIME_OFF = "unpaid_time_off"
    OTHER = "other"


class TimeOffStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TimeOffEntry(BaseModel):
    """Period of unavailability. Only approved entries reduce capacity."""

    id: str = Field(..., min_length=1)
    type: TimeOffType
    start_date: date
    end_date: date
    status: TimeOffStatus = TimeOffStatus.PENDING
    description: str | None = None

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "TimeOffEntry":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def is_approved(self) -> bool:
        return self.status == TimeOffStatus.APPROVED

    class Config:
        from_attributes = True
        frozen = True


class TimeOffCandidate(BaseModel):
    id: str | None = None
    type: TimeOffType
    start_date: date
    end_date: date
    status: TimeOffStatus = TimeOffStatus.PENDING
    description: str | None = None

    class Config:
        frozen = True


class TimeOffValidationResult(BaseModel):
    valid: bool
    errors: list[str]
    warnings: list[str]
