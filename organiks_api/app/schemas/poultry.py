"""
Pydantic schemas for poultry records.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .egg import U32_MAX


class PoultryRecordPayload(BaseModel):
    """Fields supplied when creating or replacing a poultry record.

    Updates are full replacements, so every field is required.
    """

    breed: str = Field(..., examples=["Leghorn"])
    age: int = Field(..., ge=0, le=U32_MAX, description="Age of the flock in weeks", examples=[10])
    egg_production: bool = Field(..., description="Whether the birds are currently laying")


class PoultryRecord(PoultryRecordPayload):
    """Schema for reading a poultry record."""

    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
