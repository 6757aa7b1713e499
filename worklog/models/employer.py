# worklog/models/employer.py
from typing import Optional
from pydantic import Field

from worklog.models.owned_entity import OwnedEntity


class Employer(OwnedEntity):
    """An employer the owner works for, with a fixed hourly pay rate."""
    name: Optional[str] = None
    hourly_rate: Optional[float] = Field(None, alias="hourlyRate")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "id": "66f1c2a9e4b0a1b2c3d4e5f6",
                "ownerUserId": "demo-user",
                "name": "Guarana Restaurant",
                "hourlyRate": 16.5,
                "createdAt": "2025-01-01T12:00:00Z",
                "updatedAt": "2025-01-01T12:00:00Z"
            }
        }
    }
