"""
Repository owning every record store and the id allocator.

One ``Repository`` is built per process (per test, using ``:memory:``)
and handed to the services explicitly.  It holds a single SQLite
connection; all access goes through ``transaction()``, which serialises
callers with a re-entrant lock and commits or rolls back as a unit.
"""

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator, Optional

from organiks_api.app.core.db import get_connection, init_db
from organiks_api.app.schemas import EggOrder, EggPrice, EggRecord, PoultryRecord
from organiks_api.app.store.entity_store import EntityStore
from organiks_api.app.store.id_allocator import IdAllocator

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Repository:
    """Container for the four entity stores and the shared allocator."""

    def __init__(self, database_url: Optional[str] = None, clock: Optional[Clock] = None):
        self._conn = get_connection(database_url)
        self._lock = threading.RLock()
        self._depth = 0
        self._clock = clock or utc_now

        self.schema_version = init_db(self._conn)
        self.ids = IdAllocator(self._conn)
        self.poultry: EntityStore[PoultryRecord] = EntityStore(self._conn, "poultry_records", PoultryRecord)
        self.eggs: EntityStore[EggRecord] = EntityStore(self._conn, "egg_records", EggRecord)
        self.egg_prices: EntityStore[EggPrice] = EntityStore(self._conn, "egg_prices", EggPrice)
        self.egg_orders: EntityStore[EggOrder] = EntityStore(self._conn, "egg_orders", EggOrder)
        logger.info("Repository opened (schema version %s)", self.schema_version)

    def now(self) -> datetime:
        """Current host time as supplied by the configured clock."""
        return self._clock()

    @contextmanager
    def transaction(self) -> Iterator["Repository"]:
        """Run a block with exclusive access to every store.

        Nested blocks join the outermost one; only the outermost block
        commits, and an exception anywhere rolls back all of it.
        """
        with self._lock:
            self._depth += 1
            try:
                yield self
            except BaseException:
                if self._depth == 1:
                    self._conn.rollback()
                raise
            else:
                if self._depth == 1:
                    self._conn.commit()
            finally:
                self._depth -= 1

    def close(self) -> None:
        with self._lock:
            self._conn.close()
        logger.info("Repository closed")
