"""Engagement schemas."""
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator


class Engagement(BaseModel):
    """A member's weekly-hour commitment to one project, as loaded from the store."""

    id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)
    role: str | None = None
    hours_per_week: Decimal = Field(..., gt=0, allow_inf_nan=False)
    start_date: date
    end_date: date | None = None
    is_active: bool = True

    @model_validator(mode="after")
    def _end_after_start(self) -> "Engagement":
        if self.end_date is not None and self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self

    @property
    def is_ongoing(self) -> bool:
        return self.end_date is None

    class Config:
        from_attributes = True
        frozen = True


class EngagementCandidate(BaseModel):
    """Proposed or edited engagement.

    Hours and dates are deliberately unconstrained here: the validator reports
    them as violations instead of rejecting the payload.
    """

    id: str | None = None
    project_id: str | None = None
    role: str | None = None
    hours_per_week: Decimal = Field(..., allow_inf_nan=False)
    start_date: date | None = None
    end_date: date | None = None
    is_active: bool = True

    class Config:
        frozen = True


class EngagementValidation(BaseModel):
    valid: bool
    errors: list[str]
    conflicting_engagements: list[Engagement] = []
