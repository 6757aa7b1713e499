# worklog/schemas/shift.py
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from worklog.core.errors import ValidationError
from worklog.utils.datetime_handler import DateTimeHandler


def parse_time_value(value: Any) -> Any:
    """Accept ISO-8601 or human-readable strings such as "Jan 5 2025 9:00 AM"."""
    if isinstance(value, str):
        return DateTimeHandler.parse_datetime(value)
    if isinstance(value, datetime):
        return DateTimeHandler.to_utc(value)
    return value


class ShiftCreate(BaseModel):
    """Schema for creating a shift"""
    employer_id: str = Field(..., alias="employerId", min_length=1)
    start_time: datetime = Field(..., alias="startTime")
    end_time: datetime = Field(..., alias="endTime")
    tips: Optional[float] = Field(None, ge=0)

    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
        "json_schema_extra": {
            "example": {
                "employerId": "66f1c2a9e4b0a1b2c3d4e5f6",
                "startTime": "2025-01-01T09:00:00Z",
                "endTime": "2025-01-01T17:00:00Z",
                "tips": 10
            }
        }
    }

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def validate_times(cls, value):
        return parse_time_value(value)


class ShiftUpdate(BaseModel):
    """Schema for updating a shift; only provided fields change"""
    employer_id: Optional[str] = Field(None, alias="employerId", min_length=1)
    start_time: Optional[datetime] = Field(None, alias="startTime")
    end_time: Optional[datetime] = Field(None, alias="endTime")
    tips: Optional[float] = Field(None, ge=0)

    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
        "extra": "ignore"
    }

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def validate_times(cls, value):
        return parse_time_value(value)


TRUE_VALUES = ("true", "1")
FALSE_VALUES = ("false", "0")


def parse_include_totals(raw: Optional[str]) -> bool:
    """
    Parse the includeTotals query parameter.

    Raises:
        ValidationError: If the value is not true/false/1/0
    """
    if raw is None:
        return False
    normalized = raw.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValidationError(
        "Validation failed",
        details=[{
            "part": "Query",
            "message": 'Query.includeTotals must be "true" or "false"',
            "path": "includeTotals",
        }],
    )
