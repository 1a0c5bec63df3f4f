"""Member capacity profile schema."""
from decimal import Decimal

from pydantic import BaseModel, Field

from member_capacity.schemas.engagement import Engagement
from member_capacity.schemas.time_off import TimeOffEntry


class MemberCapacityProfile(BaseModel):
    """Working-hours baseline plus the member's engagements and time-off.

    Assembled by the caller per invocation. ``working_hours_per_week`` left as
    None resolves to the configured default.
    """

    member_id: str | None = None
    working_hours_per_week: Decimal | None = Field(default=None, ge=0, allow_inf_nan=False)
    engagements: list[Engagement] = []
    time_off_entries: list[TimeOffEntry] = []

    class Config:
        frozen = True
