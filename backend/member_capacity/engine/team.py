"""Team-level roll-up of member availability."""
import logging
from datetime import date
from decimal import Decimal
from typing import Iterable

from member_capacity.config import Settings
from member_capacity.engine.calculator import CapacityCalculator
from member_capacity.engine.presenter import get_availability_status
from member_capacity.schemas.availability import MemberAvailability, TeamAvailability
from member_capacity.schemas.profile import MemberCapacityProfile

logger = logging.getLogger(__name__)


def calculate_team_availability(
    profiles: Iterable[MemberCapacityProfile],
    now: date,
    settings: Settings | None = None,
) -> TeamAvailability:
    """Aggregate availability per member plus team totals.

    average_utilization_pct is the unweighted mean of member percentages.
    """
    calculator = CapacityCalculator(settings)
    members: list[MemberAvailability] = []
    for profile in profiles:
        result = calculator.aggregate_availability(profile, now)
        members.append(
            MemberAvailability(
                member_id=profile.member_id,
                availability=result,
                status=get_availability_status(result),
            )
        )

    total_capacity = sum((m.availability.capacity for m in members), Decimal(0))
    total_engaged = sum((m.availability.engaged_hours for m in members), Decimal(0))
    total_available = sum((m.availability.available_hours for m in members), Decimal(0))
    if members:
        average = sum((m.availability.utilization_pct for m in members), Decimal(0)) / len(members)
    else:
        average = Decimal(0)

    logger.debug("team availability members=%d capacity=%s engaged=%s", len(members), total_capacity, total_engaged)
    return TeamAvailability(
        members=members,
        total_capacity=total_capacity,
        total_engaged=total_engaged,
        total_available=total_available,
        average_utilization_pct=average,
        overallocated_members=[m.member_id for m in members if m.availability.overallocated],
    )
