# worklog/schemas/adjustment.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from worklog.schemas.shift import parse_time_value


class AdjustmentCreate(BaseModel):
    """Schema for creating an adjustment; link it to an employer, a shift or both"""
    date: datetime
    amount: float
    employer_id: Optional[str] = Field(None, alias="employerId")
    shift_id: Optional[str] = Field(None, alias="shiftId")
    note: Optional[str] = Field(None, max_length=200)

    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
        "json_schema_extra": {
            "example": {
                "date": "2025-11-05",
                "amount": 25.0,
                "employerId": "66f1c2a9e4b0a1b2c3d4e5f6",
                "note": "Holiday bonus"
            }
        }
    }

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value):
        return parse_time_value(value)

    @model_validator(mode="after")
    def validate_link(self):
        if not self.employer_id and not self.shift_id:
            raise ValueError("Provide at least one of employerId or shiftId for creation")
        return self


class AdjustmentUpdate(BaseModel):
    """Schema for updating an adjustment; only provided fields change"""
    date: Optional[datetime] = None
    amount: Optional[float] = None
    employer_id: Optional[str] = Field(None, alias="employerId")
    shift_id: Optional[str] = Field(None, alias="shiftId")
    note: Optional[str] = Field(None, max_length=200)

    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
        "extra": "ignore"
    }

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value):
        return parse_time_value(value)
