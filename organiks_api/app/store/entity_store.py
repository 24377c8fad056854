"""
Generic persistent store for one record type.

An ``EntityStore`` maps the integer record id to a pydantic record in
its own SQLite table.  Records are encoded with pydantic's JSON
serializer, so the store needs nothing from the record type beyond an
``id`` attribute and the model class used to decode rows.  Iteration
always follows ascending id order.
"""

import json
import sqlite3
from typing import Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from organiks_api.app.store.id_allocator import MAX_ID

R = TypeVar("R", bound=BaseModel)


class EntityStore(Generic[R]):
    """Ordered id -> record mapping backed by a single table.

    Like ``IdAllocator``, the store never commits on its own; mutations
    become durable when the enclosing ``Repository.transaction`` ends.
    """

    def __init__(self, conn: sqlite3.Connection, table: str, model: Type[R]):
        self._conn = conn
        self.table = table
        self.model = model

    def put(self, record: R) -> None:
        """Insert the record, replacing any record stored under its id."""
        self._conn.execute(
            f"INSERT OR REPLACE INTO {self.table} (id, data) VALUES (?, ?)",
            (record.id, record.model_dump_json()),
        )

    def get(self, record_id: int) -> Optional[R]:
        # Ids outside the allocator's range can never be stored.
        if not 0 <= record_id <= MAX_ID:
            return None
        row = self._conn.execute(
            f"SELECT data FROM {self.table} WHERE id = ?", (record_id,)
        ).fetchone()
        if row is None:
            return None
        return self._decode(row)

    def remove(self, record_id: int) -> Optional[R]:
        """Delete the record and return it, or ``None`` if it was absent."""
        record = self.get(record_id)
        if record is not None:
            self._conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (record_id,))
        return record

    def scan(self) -> List[R]:
        """Return every record, ordered by ascending id."""
        rows = self._conn.execute(f"SELECT data FROM {self.table} ORDER BY id ASC").fetchall()
        return [self._decode(row) for row in rows]

    def __len__(self) -> int:
        row = self._conn.execute(f"SELECT COUNT(*) AS total FROM {self.table}").fetchone()
        return row["total"]

    def _decode(self, row: sqlite3.Row) -> R:
        # json.loads accepts the Infinity/NaN constants written for
        # non-finite floats.
        return self.model.model_validate(json.loads(row["data"]))
