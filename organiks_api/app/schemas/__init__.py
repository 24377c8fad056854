"""
Pydantic schema definitions for records and payloads.

Each entity kind (poultry, eggs, egg prices, egg orders) defines a
payload model holding the caller-supplied fields and a record model
that adds the server-assigned id and timestamps.  The record models are
also the persisted representation inside the entity stores.
"""

from .egg import EggRecord, EggRecordPayload, EggType
from .egg_order import EggOrder, EggOrderPayload
from .egg_price import EggPrice, EggPricePayload
from .poultry import PoultryRecord, PoultryRecordPayload

__all__ = [
    "EggOrder",
    "EggOrderPayload",
    "EggPrice",
    "EggPricePayload",
    "EggRecord",
    "EggRecordPayload",
    "EggType",
    "PoultryRecord",
    "PoultryRecordPayload",
]
