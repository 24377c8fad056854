"""
Service layer for poultry records.

Provides add, lookup, listing, full-replacement update and delete for
the flocks kept on the farm.  Every operation runs inside a repository
transaction, so a returned record is already durable.
"""

import logging
from typing import List

from organiks_api.app.schemas.poultry import PoultryRecord, PoultryRecordPayload
from organiks_api.app.services.base import BaseRecordService

logger = logging.getLogger(__name__)


class PoultryService(BaseRecordService):
    """Service class for managing poultry records."""

    def add(self, data: PoultryRecordPayload) -> PoultryRecord:
        """Store a new poultry record and return it.

        The record receives the next shared id and the current time as
        ``created_at``; ``updated_at`` stays empty until the first
        update.
        """
        with self.repository.transaction() as repo:
            record = PoultryRecord(
                id=repo.ids.next_id(),
                created_at=repo.now(),
                updated_at=None,
                **data.model_dump(),
            )
            repo.poultry.put(record)
        logger.info("Created poultry record %s", record.id)
        return record

    def get(self, record_id: int) -> PoultryRecord:
        with self.repository.transaction() as repo:
            record = repo.poultry.get(record_id)
        return self._found(record, f"a poultry record with id={record_id} not found")

    def get_all(self) -> List[PoultryRecord]:
        with self.repository.transaction() as repo:
            records = repo.poultry.scan()
        logger.debug("Listed %s poultry records", len(records))
        return self._non_empty(records, "No poultry records found.")

    def update(self, record_id: int, data: PoultryRecordPayload) -> PoultryRecord:
        """Replace breed, age and egg production of an existing record.

        ``id`` and ``created_at`` are kept; ``updated_at`` is set to
        the current time.
        """
        with self.repository.transaction() as repo:
            current = self._found(
                repo.poultry.get(record_id),
                f"couldn't update a poultry record with id={record_id}. record not found",
            )
            record = current.model_copy(update={**data.model_dump(), "updated_at": repo.now()})
            repo.poultry.put(record)
        logger.info("Updated poultry record %s", record_id)
        return record

    def delete(self, record_id: int) -> PoultryRecord:
        """Remove a record and return what was removed."""
        with self.repository.transaction() as repo:
            record = self._found(
                repo.poultry.remove(record_id),
                f"couldn't delete a poultry record with id={record_id}. record not found.",
            )
        logger.info("Deleted poultry record %s", record_id)
        return record
