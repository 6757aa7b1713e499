"""
Shift service for business logic.
"""
from typing import Any, Dict, Optional

from worklog.db.document_store import DocumentStore
from worklog.domains.shifts.pay import aggregate_totals, compute_pay, enrich_shift, resolve_hourly_rate
from worklog.domains.shifts.repository import ShiftRepository
from worklog.models.shift import Shift, ShiftListResult, ShiftTotals
from worklog.utils.datetime_handler import DateTimeHandler

TIME_FIELDS = ("start_time", "end_time")


class ShiftService:
    """
    Service for shift-related business logic.
    Lists shifts with their computed pay and totals, and manages single shifts
    on behalf of their owner.
    """

    def __init__(self, store: DocumentStore, shift_repo: Optional[ShiftRepository] = None):
        """
        Initialize with a document store.

        Args:
            store: Document store holding shifts and employers
            shift_repo: Optional shift repository instance
        """
        self.store = store
        self.shift_repo = shift_repo or ShiftRepository(store)

    async def get_all_shifts(
            self,
            owner_user_id: str,
            employer_id: Optional[str] = None,
            include_totals: bool = False
    ) -> ShiftListResult:
        """
        Get the owner's shifts, each with computed hours and pay.

        Args:
            owner_user_id: Caller identity
            employer_id: Only return shifts for this employer
            include_totals: Also return hours and pay per day and per month

        Returns:
            Shifts in store order, plus totals when requested
        """
        shifts = await self.shift_repo.find_all(owner_user_id, employer_id=employer_id)

        # Scoped to this call so rates are never stale across requests
        rate_cache: Dict[str, float] = {}

        items = []
        for shift in shifts:
            hourly_rate = await resolve_hourly_rate(self.store, shift.employer_id, rate_cache)
            items.append(enrich_shift(shift, compute_pay(shift, hourly_rate)))

        if not include_totals:
            return ShiftListResult.model_construct(items=items, totals=None)

        totals = ShiftTotals.model_construct(
            by_day=aggregate_totals(items, DateTimeHandler.format_iso_date),
            by_month=aggregate_totals(items, DateTimeHandler.format_year_month),
        )
        return ShiftListResult.model_construct(items=items, totals=totals)

    async def get_shift_by_id(self, owner_user_id: str, shift_id: str) -> Shift:
        """
        Get a shift by ID.

        Raises:
            NotFoundError: If the shift does not exist or belongs to another user
        """
        return await self.shift_repo.get_by_id(owner_user_id, shift_id)

    async def create_shift(self, owner_user_id: str, shift_data: Dict[str, Any]) -> Shift:
        """
        Create a new shift.

        Args:
            owner_user_id: Caller identity
            shift_data: employer_id, start_time, end_time and optional tips;
                times may be ISO strings or datetimes

        Returns:
            Created shift
        """
        values = {
            "employer_id": shift_data.get("employer_id"),
            "start_time": DateTimeHandler.parse_datetime(shift_data["start_time"]),
            "end_time": DateTimeHandler.parse_datetime(shift_data["end_time"]),
            "tips": shift_data.get("tips"),
        }
        return await self.shift_repo.create(owner_user_id, values)

    async def update_shift(self, owner_user_id: str, shift_id: str, shift_data: Dict[str, Any]) -> Shift:
        """
        Update only the provided fields of a shift.

        Args:
            owner_user_id: Caller identity
            shift_id: Shift ID
            shift_data: Fields to change; None values are ignored

        Returns:
            Shift with the changes merged in

        Raises:
            NotFoundError: If the shift does not exist or belongs to another user
        """
        changes = {
            name: shift_data.get(name)
            for name in ("employer_id", "start_time", "end_time", "tips")
        }
        for name in TIME_FIELDS:
            if changes[name] is not None:
                changes[name] = DateTimeHandler.parse_datetime(changes[name])

        return await self.shift_repo.update(owner_user_id, shift_id, changes)

    async def delete_shift(self, owner_user_id: str, shift_id: str) -> None:
        """
        Delete a shift.

        Raises:
            NotFoundError: If the shift does not exist or belongs to another user
        """
        await self.shift_repo.delete(owner_user_id, shift_id)
