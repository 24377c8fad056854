"""
Pydantic schemas for egg inventory records.

An egg record counts the eggs collected for one egg type, along with
how many of them were cracked.  The two counts are stored exactly as
supplied; no relationship between them is enforced.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# Counts and ages are unsigned 32-bit values.
U32_MAX = 2**32 - 1


class EggType(str, Enum):
    """Kind of egg tracked in inventory, pricing and orders."""

    KIENYEJI = "Kienyeji"
    GRADE = "Grade"


class EggRecordPayload(BaseModel):
    """Fields supplied when creating or replacing an egg record."""

    egg_type: EggType = Field(..., examples=["Grade"])
    total_egg_count: int = Field(..., ge=0, le=U32_MAX, examples=[120])
    cracked_egg_count: int = Field(..., ge=0, le=U32_MAX, examples=[3])


class EggRecord(EggRecordPayload):
    """Schema for reading an egg record."""

    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
