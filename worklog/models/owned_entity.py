# worklog/models/owned_entity.py
from datetime import datetime
from typing import ClassVar, Optional, Tuple
from pydantic import BaseModel, Field


class OwnedEntity(BaseModel):
    """
    Fields shared by every record that belongs to a single user.
    Attributes are snake_case; stored documents and API JSON use the camelCase aliases.
    """
    id: Optional[str] = None
    owner_user_id: Optional[str] = Field(None, alias="ownerUserId")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    # Stored fields holding instants, coerced on read
    time_fields: ClassVar[Tuple[str, ...]] = ("created_at", "updated_at")

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
    }
