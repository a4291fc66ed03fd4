"""Pydantic models for access keys.

``AccessKeyConfig`` is an entry of the static redemption table;
``AccessKeyRecord`` is a row of the admin-managed ``access_keys`` collection.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AccessKeyConfig(BaseModel):
    """Static table entry: which domain a key unlocks and how many profiles."""
    domain: str
    count: int = Field(ge=0)
    description: str


class AccessKeyCreate(BaseModel):
    """Payload for creating an access key record."""
    key: str = ""
    domain: str = "DS"
    count: int = Field(default=5, ge=0)
    description: str = ""


class AccessKeyUpdate(BaseModel):
    """Activate / deactivate payload."""
    is_active: bool


class AccessKeyRecord(BaseModel):
    """Full ``access_keys`` record returned from the store."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    key: str
    domain: str
    count: int = Field(ge=0)
    description: str
    is_active: bool = True
    created_at: datetime
    usage_count: int = 0
