# worklog/schemas/employer.py
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from worklog.domains.shifts.pay import round2


def _normalize_rate(value: Optional[float]) -> Optional[float]:
    # Rates are kept to cents
    if value is None:
        return value
    rounded = round2(value)
    if rounded <= 0:
        raise ValueError("Hourly rate must be positive")
    return rounded


class EmployerCreate(BaseModel):
    """Schema for creating an employer"""
    name: str = Field(..., min_length=1, max_length=80)
    hourly_rate: float = Field(..., alias="hourlyRate", gt=0)

    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
        "str_strip_whitespace": True,
        "json_schema_extra": {
            "example": {
                "name": "Guarana Restaurant",
                "hourlyRate": 16.5
            }
        }
    }

    @field_validator("hourly_rate")
    @classmethod
    def validate_hourly_rate(cls, value):
        return _normalize_rate(value)


class EmployerUpdate(BaseModel):
    """Schema for updating an employer; at least one field is required"""
    name: Optional[str] = Field(None, min_length=1, max_length=80)
    hourly_rate: Optional[float] = Field(None, alias="hourlyRate", gt=0)

    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
        "str_strip_whitespace": True,
        "extra": "ignore"
    }

    @field_validator("hourly_rate")
    @classmethod
    def validate_hourly_rate(cls, value):
        return _normalize_rate(value)

    @model_validator(mode="after")
    def validate_not_empty(self):
        if self.name is None and self.hourly_rate is None:
            raise ValueError("Provide at least one of name or hourlyRate")
        return self
