"""
Adjustment service for business logic.
"""
from typing import Any, Dict, List, Optional

from worklog.db.document_store import DocumentStore
from worklog.domains.adjustments.repository import AdjustmentRepository
from worklog.models.adjustment import Adjustment
from worklog.utils.datetime_handler import DateTimeHandler

EDITABLE_FIELDS = ("date", "amount", "employer_id", "shift_id", "note")


class AdjustmentService:
    """
    Service for adjustment-related business logic.
    """

    def __init__(self, store: DocumentStore, adjustment_repo: Optional[AdjustmentRepository] = None):
        self.adjustment_repo = adjustment_repo or AdjustmentRepository(store)

    def _prepare(self, adjustment_data: Dict[str, Any]) -> Dict[str, Any]:
        values = {name: adjustment_data.get(name) for name in EDITABLE_FIELDS}
        if values["date"] is not None:
            values["date"] = DateTimeHandler.parse_datetime(values["date"])
        return values

    async def get_all_adjustments(
            self,
            owner_user_id: str,
            employer_id: Optional[str] = None,
            shift_id: Optional[str] = None
    ) -> List[Adjustment]:
        """
        Get the owner's adjustments.

        Args:
            owner_user_id: Caller identity
            employer_id: Only adjustments linked to this employer
            shift_id: Only adjustments linked to this shift

        Returns:
            Adjustments in store order
        """
        return await self.adjustment_repo.find_all(owner_user_id, employer_id=employer_id, shift_id=shift_id)

    async def get_adjustment_by_id(self, owner_user_id: str, adjustment_id: str) -> Adjustment:
        """
        Get an adjustment by ID.

        Raises:
            NotFoundError: If the adjustment does not exist or belongs to another user
        """
        return await self.adjustment_repo.get_by_id(owner_user_id, adjustment_id)

    async def create_adjustment(self, owner_user_id: str, adjustment_data: Dict[str, Any]) -> Adjustment:
        """
        Create a new adjustment. The date may be an ISO string or a datetime.
        """
        return await self.adjustment_repo.create(owner_user_id, self._prepare(adjustment_data))

    async def update_adjustment(
            self,
            owner_user_id: str,
            adjustment_id: str,
            adjustment_data: Dict[str, Any]
    ) -> Adjustment:
        """
        Update only the provided fields of an adjustment.

        Raises:
            NotFoundError: If the adjustment does not exist or belongs to another user
        """
        return await self.adjustment_repo.update(owner_user_id, adjustment_id, self._prepare(adjustment_data))

    async def delete_adjustment(self, owner_user_id: str, adjustment_id: str) -> None:
        await self.adjustment_repo.delete(owner_user_id, adjustment_id)
