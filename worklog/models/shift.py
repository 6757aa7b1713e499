# worklog/models/shift.py
import math
from datetime import datetime
from typing import ClassVar, Dict, List, Optional, Tuple
from pydantic import BaseModel, Field, field_serializer

from worklog.models.owned_entity import OwnedEntity


class Shift(OwnedEntity):
    """
    A work shift recorded by a user for an employer.
    employer_id is a reference only; the employer may have been deleted since.
    """
    employer_id: Optional[str] = Field(None, alias="employerId")
    start_time: Optional[datetime] = Field(None, alias="startTime")
    end_time: Optional[datetime] = Field(None, alias="endTime")
    tips: Optional[float] = None

    time_fields: ClassVar[Tuple[str, ...]] = ("start_time", "end_time", "created_at", "updated_at")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "id": "66f1c2a9e4b0a1b2c3d4e5f7",
                "ownerUserId": "demo-user",
                "employerId": "66f1c2a9e4b0a1b2c3d4e5f6",
                "startTime": "2025-01-01T09:00:00Z",
                "endTime": "2025-01-01T17:00:00Z",
                "tips": 10,
                "createdAt": "2025-01-01T17:00:00Z",
                "updatedAt": "2025-01-01T17:00:00Z"
            }
        }
    }


class PayFigures(BaseModel):
    """Hours worked and money earned, both rounded to cents."""
    hours: float
    pay: float

    @field_serializer("hours", "pay")
    def serialize_figure(self, value: float) -> Optional[float]:
        # Figures of malformed shifts are NaN; JSON has no NaN
        return value if value is not None and math.isfinite(value) else None


class ShiftWithComputed(Shift):
    """A shift enriched with its derived hours and pay."""
    hours: float = 0.0
    pay: float = 0.0

    @field_serializer("hours", "pay")
    def serialize_figure(self, value: float) -> Optional[float]:
        return value if value is not None and math.isfinite(value) else None


class ShiftTotals(BaseModel):
    """Hours and pay summed per calendar day and per calendar month (UTC)."""
    by_day: Dict[str, PayFigures] = Field(default_factory=dict, alias="byDay")
    by_month: Dict[str, PayFigures] = Field(default_factory=dict, alias="byMonth")

    model_config = {"populate_by_name": True}


class ShiftListResult(BaseModel):
    """Result of listing a user's shifts."""
    items: List[ShiftWithComputed] = Field(default_factory=list)
    totals: Optional[ShiftTotals] = None
