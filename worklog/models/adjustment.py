# worklog/models/adjustment.py
from datetime import datetime
from typing import ClassVar, Optional, Tuple
from pydantic import Field

from worklog.models.owned_entity import OwnedEntity


class Adjustment(OwnedEntity):
    """
    An allowance or deduction not tied to hours directly.
    Positive amounts are bonuses, negative amounts are deductions.
    Linked to an employer, a shift, or both.
    """
    date: Optional[datetime] = None
    amount: Optional[float] = None
    employer_id: Optional[str] = Field(None, alias="employerId")
    shift_id: Optional[str] = Field(None, alias="shiftId")
    note: Optional[str] = None

    time_fields: ClassVar[Tuple[str, ...]] = ("date", "created_at", "updated_at")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "id": "66f1c2a9e4b0a1b2c3d4e5f8",
                "ownerUserId": "demo-user",
                "date": "2025-11-05T00:00:00Z",
                "amount": -15.0,
                "employerId": "66f1c2a9e4b0a1b2c3d4e5f6",
                "note": "Uniform deduction",
                "createdAt": "2025-11-05T12:00:00Z",
                "updatedAt": "2025-11-05T12:00:00Z"
            }
        }
    }
