"""
Parcel Pydantic schemas.

Defines the in-memory parcel record the store reads and writes.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def utc_timestamp() -> str:
    """Current UTC time in RFC3339 form, e.g. 2024-01-01T00:00:00Z."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ParcelCreate(BaseModel):
    """Schema for a parcel that has not been stored yet."""
    client: int = Field(..., description="Owning client identifier")
    status: str = Field(..., min_length=1, description="Parcel status")
    address: str = Field(..., description="Delivery address")
    created_at: str = Field(default_factory=utc_timestamp, description="Creation time (ISO-8601)")


class ParcelRead(ParcelCreate):
    """Schema for a stored parcel."""
    number: int
    # Any persisted status reads back as-is; set_status does not validate
    status: str = Field(..., description="Parcel status")
    
    class Config:
        from_attributes = True
