"""
Service layer abstraction.

Each service encapsulates the record operations for one entity kind
and works against an injected ``Repository``, so the same code runs
on the production database file and on isolated in-memory databases
in tests.  ``RecordService`` bundles them behind the public operation
names.
"""

from .egg_order_service import EggOrderService
from .egg_price_service import EggPriceService
from .egg_service import EggRecordService
from .poultry_service import PoultryService
from .record_service import RecordService

__all__ = [
    "EggOrderService",
    "EggPriceService",
    "EggRecordService",
    "PoultryService",
    "RecordService",
]
