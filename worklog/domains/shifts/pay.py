"""
Pay computation for shifts: hourly rate resolution, per-shift figures and
day/month totals.
"""
import math
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from worklog.db.document_store import DocumentStore
from worklog.domains.employers.repository import EmployerRepository
from worklog.models.shift import PayFigures, Shift, ShiftWithComputed

EMPLOYERS_COLLECTION = EmployerRepository.collection_name

# Current field name first, then the legacy one
RATE_FIELDS = ("hourlyRate", "hourly_rate")

SECONDS_PER_HOUR = 3600


def round2(value: float) -> float:
    """
    Round to 2 decimal places, halves rounding toward positive infinity.
    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value * 100 + 0.5) / 100


def _is_usable_rate(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def extract_hourly_rate(employer_data: Optional[Mapping[str, Any]]) -> float:
    """
    Read the hourly rate from a stored employer document.

    Args:
        employer_data: Employer document fields, or None if the employer is gone

    Returns:
        First positive numeric rate found, or 0.0
    """
    if not employer_data:
        return 0.0
    for field_name in RATE_FIELDS:
        value = employer_data.get(field_name)
        if _is_usable_rate(value):
            return float(value)
    return 0.0


async def resolve_hourly_rate(
        store: DocumentStore,
        employer_id: Optional[str],
        rate_cache: Dict[str, float]
) -> float:
    """
    Look up an employer's hourly rate, at most once per employer per cache.

    A missing employer or a missing rate resolves to 0.0, so the shift is
    still listed and earns its tips only.

    Args:
        store: Document store holding employers
        employer_id: Employer to resolve
        rate_cache: Rates already resolved during the current call

    Returns:
        Hourly rate, >= 0
    """
    if not employer_id:
        return 0.0
    if employer_id in rate_cache:
        return rate_cache[employer_id]

    snapshot = await store.get_document_by_id(EMPLOYERS_COLLECTION, employer_id)
    employer_data = snapshot.data() if snapshot is not None and snapshot.exists else None

    rate = extract_hourly_rate(employer_data)
    rate_cache[employer_id] = rate
    return rate


def shift_duration_hours(shift: Shift) -> float:
    """
    Unrounded shift duration in hours; NaN when either time is missing.
    End before start gives a negative duration.
    """
    if not isinstance(shift.start_time, datetime) or not isinstance(shift.end_time, datetime):
        return math.nan
    return (shift.end_time - shift.start_time).total_seconds() / SECONDS_PER_HOUR


def compute_pay(shift: Shift, hourly_rate: float) -> PayFigures:
    """
    Compute hours and pay for one shift.

    Hours are rounded first and pay is derived from the rounded hours:
    pay = round2(round2(hours) * rate + tips).

    Args:
        shift: Shift to price
        hourly_rate: Employer hourly rate

    Returns:
        Rounded hours and pay
    """
    hours = round2(shift_duration_hours(shift))
    pay = round2(hours * hourly_rate + (shift.tips or 0))
    return PayFigures.model_construct(hours=hours, pay=pay)


def enrich_shift(shift: Shift, figures: PayFigures) -> ShiftWithComputed:
    """Attach computed hours and pay to a shift."""
    return ShiftWithComputed.model_construct(
        **dict(shift),
        hours=figures.hours,
        pay=figures.pay,
    )


def aggregate_totals(
        shifts: Iterable[ShiftWithComputed],
        key_fn: Callable[[datetime], str]
) -> Dict[str, PayFigures]:
    """
    Sum hours and pay per bucket.

    The bucket of a shift is key_fn(start_time). Sums are rounded once per
    bucket after accumulation. Shifts without a start time belong to no bucket.

    Args:
        shifts: Shifts with computed hours and pay
        key_fn: Maps a start instant to a bucket key

    Returns:
        Bucket key to rounded totals
    """
    sums: Dict[str, Dict[str, float]] = {}

    for shift in shifts:
        if not isinstance(shift.start_time, datetime):
            continue
        bucket = sums.setdefault(key_fn(shift.start_time), {"hours": 0.0, "pay": 0.0})
        bucket["hours"] += shift.hours
        bucket["pay"] += shift.pay

    return {
        key: PayFigures.model_construct(hours=round2(bucket["hours"]), pay=round2(bucket["pay"]))
        for key, bucket in sums.items()
    }
