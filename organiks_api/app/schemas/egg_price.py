"""
Pydantic schemas for egg prices.

Several prices may exist for the same egg type.  Order placement uses
the one with the lowest id.
"""

from pydantic import BaseModel, ConfigDict, Field

from .egg import EggType


class EggPricePayload(BaseModel):
    egg_type: EggType = Field(..., examples=["Grade"])
    price: float = Field(..., description="Price of a single egg in currency units", examples=[0.5])


class EggPrice(EggPricePayload):
    """Schema for reading an egg price."""

    id: int

    # Prices are plain floats; keep inf/NaN as JSON constants so stored
    # records read back unchanged.
    model_config = ConfigDict(ser_json_inf_nan="constants")
