"""
Process-wide identifier allocation.

All four entity kinds draw their ids from a single persisted counter,
so an id identifies one record across the whole store.  Ids start at 1
and are never reused, even after the record holding them is deleted.
"""

import logging
import sqlite3

from organiks_api.app.core.exceptions import IdExhaustedError

logger = logging.getLogger(__name__)

# Ids are stored in SQLite INTEGER columns, which are signed 64-bit.
MAX_ID = 2**63 - 1


class IdAllocator:
    """Monotonic counter persisted in the ``id_counter`` table.

    The allocator writes through the shared connection without
    committing; callers allocate inside ``Repository.transaction`` so
    the increment and the insert that uses the id commit together.
    """

    def __init__(self, conn: sqlite3.Connection, name: str = "records"):
        self._conn = conn
        self.name = name

    def current(self) -> int:
        """Return the last allocated id (0 if none was allocated yet)."""
        row = self._conn.execute(
            "SELECT value FROM id_counter WHERE name = ?", (self.name,)
        ).fetchone()
        return row["value"] if row else 0

    def next_id(self) -> int:
        """Increment the counter and return the new value."""
        current = self.current()
        if current >= MAX_ID:
            raise IdExhaustedError(f"cannot increment id counter '{self.name}'")
        new_value = current + 1
        self._conn.execute(
            "INSERT INTO id_counter (name, value) VALUES (?, ?)"
            " ON CONFLICT(name) DO UPDATE SET value = excluded.value",
            (self.name, new_value),
        )
        logger.debug("Allocated id %s", new_value)
        return new_value
