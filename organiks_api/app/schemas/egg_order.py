"""
Pydantic schemas for egg orders.

Orders are immutable once placed.  ``total_price`` is computed from the
egg price in effect at placement time and is never recomputed, even if
that price is later changed or deleted.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .egg import U32_MAX, EggType


class EggOrderPayload(BaseModel):
    """Schema for placing an order."""

    customer_name: str = Field(..., examples=["Alice"])
    egg_type: EggType = Field(..., examples=["Grade"])
    quantity: int = Field(..., ge=0, le=U32_MAX, examples=[12])


class EggOrder(EggOrderPayload):
    """Schema for reading a placed order."""

    id: int
    total_price: float
    created_at: datetime

    # price * quantity can overflow to inf.
    model_config = ConfigDict(ser_json_inf_nan="constants")
