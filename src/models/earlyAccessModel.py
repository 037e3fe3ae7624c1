from datetime import datetime, timezone
from typing import Optional

from beanie import Document, PydanticObjectId
from pydantic import Field, ConfigDict

COLLECTION_NAME = "early_access"


class EarlyAccessModel(Document):
    """One early access sign-up. Rows are insert-only."""
    id: Optional[PydanticObjectId] = Field(None, alias="_id")
    name: str
    email: str
    phone: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = COLLECTION_NAME
        indexes = [
            [("email", 1)],
        ]

    model_config = ConfigDict(populate_by_name=True)
