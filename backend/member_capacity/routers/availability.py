"""Availability API routes. Stateless: every request carries the data it is computed from."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from member_capacity.config import Settings, get_settings
from member_capacity.engine.calculator import CapacityCalculator
from member_capacity.engine.presenter import format_availability_summary, get_availability_status
from member_capacity.engine.queries import get_ending_engagements, get_upcoming_engagements
from member_capacity.engine.team import calculate_team_availability
from member_capacity.engine.validator import (
    find_conflicting_engagements,
    validate_engagement_capacity,
    validate_engagement_dates,
    validate_time_off_entry,
)
from member_capacity.errors import CapacityInputError
from member_capacity.schemas.availability import TeamAvailability
from member_capacity.schemas.engagement import Engagement, EngagementValidation
from member_capacity.schemas.requests import (
    AggregateAvailabilityRequest,
    AggregateAvailabilityResponse,
    EngagementQueryRequest,
    EngagementValidationRequest,
    PeriodAvailabilityRequest,
    PeriodAvailabilityResponse,
    TeamAvailabilityRequest,
    TimeOffValidationRequest,
)
from member_capacity.schemas.time_off import TimeOffValidationResult

router = APIRouter(prefix="/availability", tags=["availability"])


@router.post("/aggregate", response_model=AggregateAvailabilityResponse)
async def aggregate_availability(
    data: AggregateAvailabilityRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    try:
        result = CapacityCalculator(settings).aggregate_availability(data.profile, data.now)
    except CapacityInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return AggregateAvailabilityResponse(
        availability=result,
        status=get_availability_status(result),
        summary=format_availability_summary(result),
    )


@router.post("/period", response_model=PeriodAvailabilityResponse)
async def period_availability(
    data: PeriodAvailabilityRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    try:
        result = CapacityCalculator(settings).period_availability(data.profile, data.start_date, data.end_date)
    except CapacityInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return PeriodAvailabilityResponse(
        availability=result,
        status=get_availability_status(result),
        summary=format_availability_summary(result),
    )


@router.post("/engagements/validate", response_model=EngagementValidation)
async def validate_engagement(
    data: EngagementValidationRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Capacity rules plus same-project conflicts. Re-validate inside the commit transaction."""
    errors = validate_engagement_capacity(data.profile, data.candidate, data.exclude_engagement_id, settings)
    if data.now is not None:
        errors += validate_engagement_dates(data.candidate, data.now, settings)
    conflicts = find_conflicting_engagements(data.profile, data.candidate, data.exclude_engagement_id)
    return EngagementValidation(valid=not errors, errors=errors, conflicting_engagements=conflicts)


@router.post("/engagements/upcoming", response_model=list[Engagement])
async def upcoming_engagements(
    data: EngagementQueryRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    try:
        return get_upcoming_engagements(data.engagements, data.now, data.horizon_days, settings)
    except CapacityInputError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/engagements/ending", response_model=list[Engagement])
async def ending_engagements(
    data: EngagementQueryRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    try:
        return get_ending_engagements(data.engagements, data.now, data.horizon_days, settings)
    except CapacityInputError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/time-off/validate", response_model=TimeOffValidationResult)
async def validate_time_off(
    data: TimeOffValidationRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    return validate_time_off_entry(data.entries, data.candidate, data.exclude_entry_id, settings)


@router.post("/team", response_model=TeamAvailability)
async def team_availability(
    data: TeamAvailabilityRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    try:
        return calculate_team_availability(data.profiles, data.now, settings)
    except CapacityInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
