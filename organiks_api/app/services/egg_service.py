"""
Service layer for egg inventory records.

Egg records count collected and cracked eggs per egg type.  Counts are
stored as given; the service does not check that the cracked count
stays within the total.
"""

import logging
from typing import List

from organiks_api.app.schemas.egg import EggRecord, EggRecordPayload, EggType
from organiks_api.app.services.base import BaseRecordService

logger = logging.getLogger(__name__)


class EggRecordService(BaseRecordService):
    """Service class for managing egg inventory records."""

    def add(self, data: EggRecordPayload) -> EggRecord:
        with self.repository.transaction() as repo:
            record = EggRecord(
                id=repo.ids.next_id(),
                created_at=repo.now(),
                updated_at=None,
                **data.model_dump(),
            )
            repo.eggs.put(record)
        logger.info("Created egg record %s (%s)", record.id, record.egg_type.value)
        return record

    def get(self, record_id: int) -> EggRecord:
        with self.repository.transaction() as repo:
            record = repo.eggs.get(record_id)
        return self._found(record, f"an egg record with id={record_id} not found")

    def get_all(self) -> List[EggRecord]:
        with self.repository.transaction() as repo:
            records = repo.eggs.scan()
        return self._non_empty(records, "No egg records found.")

    def search_by_egg_type(self, egg_type: EggType) -> List[EggRecord]:
        """Return the records for ``egg_type`` in ascending id order."""
        with self.repository.transaction() as repo:
            records = [record for record in repo.eggs.scan() if record.egg_type == egg_type]
        logger.debug("Found %s egg records for %s", len(records), egg_type.value)
        return self._non_empty(records, f"no egg records found for egg type: {egg_type.value}")

    def update(self, record_id: int, data: EggRecordPayload) -> EggRecord:
        with self.repository.transaction() as repo:
            current = self._found(
                repo.eggs.get(record_id),
                f"couldn't update an egg record with id={record_id}. record not found",
            )
            record = current.model_copy(update={**data.model_dump(), "updated_at": repo.now()})
            repo.eggs.put(record)
        logger.info("Updated egg record %s", record_id)
        return record

    def delete(self, record_id: int) -> EggRecord:
        with self.repository.transaction() as repo:
            record = self._found(
                repo.eggs.remove(record_id),
                f"couldn't delete an egg record with id={record_id}. record not found.",
            )
        logger.info("Deleted egg record %s", record_id)
        return record
