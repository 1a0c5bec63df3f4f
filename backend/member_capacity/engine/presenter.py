"""Display helpers for availability results."""
from decimal import Decimal, ROUND_HALF_UP

from member_capacity.schemas.availability import AvailabilityStatus, UtilizationSnapshot

ONE_PLACE = Decimal("0.1")

# Lower bound of each band; the band runs up to the next bound.
_BANDS = (
    (Decimal(90), "high", "High utilization"),
    (Decimal(70), "good", "Good utilization"),
    (Decimal(40), "moderate", "Moderate utilization"),
)


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def get_availability_status(result: UtilizationSnapshot) -> AvailabilityStatus:
    """Bucket utilization: [0,40) low, [40,70) moderate, [70,90) good, [90,100] high, above 100 over."""
    pct = result.utilization_pct
    if pct > 100:
        return AvailabilityStatus(bucket="over", label="Overallocated")
    for lower, bucket, label in _BANDS:
        if pct >= lower:
            return AvailabilityStatus(bucket=bucket, label=label)
    return AvailabilityStatus(bucket="low", label="Low utilization")


def format_hours(hours, include_unit: bool = True) -> str:
    """8 -> "8h", 8.5 -> "8.5h", 8.25 -> "8.3h"."""
    rounded = _to_decimal(hours).quantize(ONE_PLACE, rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        text = str(int(rounded))
    else:
        text = str(rounded)
    return f"{text}h" if include_unit else text


def format_hours_per_week(hours) -> str:
    return f"{format_hours(hours)}/week"


def format_utilization(percentage) -> str:
    rounded = _to_decimal(percentage).quantize(ONE_PLACE, rounding=ROUND_HALF_UP)
    return f"{rounded}%"


def format_availability_summary(result: UtilizationSnapshot) -> str:
    """e.g. "Available 20h / 40h (50.0% utilized)". Rounding happens here only."""
    return (
        f"Available {format_hours(result.available_hours)} / {format_hours(result.capacity_basis)} "
        f"({format_utilization(result.utilization_pct)} utilized)"
    )
