"""
Tests for egg inventory records.
"""

import pytest

from organiks_api.app.core.exceptions import NotFoundError
from organiks_api.app.schemas import EggRecordPayload, EggType


class TestEggRecords:

    def test_add_and_get(self, service):
        record = service.add_egg_record(
            EggRecordPayload(egg_type=EggType.GRADE, total_egg_count=120, cracked_egg_count=4)
        )
        assert record.updated_at is None
        assert service.get_egg_record(record.id) == record

    def test_cracked_count_is_not_checked_against_total(self, service):
        record = service.add_egg_record(
            EggRecordPayload(egg_type=EggType.KIENYEJI, total_egg_count=5, cracked_egg_count=9)
        )
        assert record.cracked_egg_count == 9

    def test_get_missing(self, service):
        with pytest.raises(NotFoundError, match="an egg record with id=8 not found"):
            service.get_egg_record(8)

    def test_get_all_empty(self, service):
        with pytest.raises(NotFoundError, match="No egg records found."):
            service.get_all_egg_records()

    def test_search_returns_matching_subset_in_id_order(self, service):
        grade_a = service.add_egg_record(EggRecordPayload(egg_type=EggType.GRADE, total_egg_count=10, cracked_egg_count=0))
        service.add_egg_record(EggRecordPayload(egg_type=EggType.KIENYEJI, total_egg_count=20, cracked_egg_count=0))
        grade_b = service.add_egg_record(EggRecordPayload(egg_type=EggType.GRADE, total_egg_count=30, cracked_egg_count=0))

        assert service.search_egg_record_by_egg_type(EggType.GRADE) == [grade_a, grade_b]

    def test_search_without_matches_names_the_type(self, service):
        service.add_egg_record(EggRecordPayload(egg_type=EggType.KIENYEJI, total_egg_count=20, cracked_egg_count=0))
        with pytest.raises(NotFoundError) as excinfo:
            service.search_egg_record_by_egg_type(EggType.GRADE)
        assert excinfo.value.message == "no egg records found for egg type: Grade"

    def test_update_can_change_egg_type(self, service, clock):
        record = service.add_egg_record(EggRecordPayload(egg_type=EggType.GRADE, total_egg_count=10, cracked_egg_count=0))
        clock.advance(hours=3)

        updated = service.update_egg_record(
            record.id,
            EggRecordPayload(egg_type=EggType.KIENYEJI, total_egg_count=12, cracked_egg_count=1),
        )

        assert updated.egg_type == EggType.KIENYEJI
        assert updated.total_egg_count == 12
        assert updated.cracked_egg_count == 1
        assert updated.created_at == record.created_at
        assert updated.updated_at == clock.current
        assert service.search_egg_record_by_egg_type(EggType.KIENYEJI) == [updated]

    def test_update_missing(self, service):
        with pytest.raises(NotFoundError, match="couldn't update an egg record with id=1"):
            service.update_egg_record(1, EggRecordPayload(egg_type=EggType.KIENYEJI, total_egg_count=1, cracked_egg_count=0))

    def test_delete(self, service):
        record = service.add_egg_record(EggRecordPayload(egg_type=EggType.KIENYEJI, total_egg_count=1, cracked_egg_count=0))
        assert service.delete_egg_record(record.id) == record
        with pytest.raises(NotFoundError, match="couldn't delete an egg record"):
            service.delete_egg_record(record.id)

    def test_payload_requires_egg_type(self):
        with pytest.raises(ValueError):
            EggRecordPayload(total_egg_count=1, cracked_egg_count=0)

    @pytest.mark.parametrize("field", ["total_egg_count", "cracked_egg_count"])
    def test_counts_are_limited_to_32_bits(self, field):
        counts = {"total_egg_count": 1, "cracked_egg_count": 0}
        counts[field] = 2**32
        with pytest.raises(ValueError):
            EggRecordPayload(egg_type=EggType.GRADE, **counts)

    def test_ids_outside_range_are_not_found(self, service):
        payload = EggRecordPayload(egg_type=EggType.GRADE, total_egg_count=1, cracked_egg_count=0)
        for record_id in (-1, 2**63):
            with pytest.raises(NotFoundError):
                service.get_egg_record(record_id)
            with pytest.raises(NotFoundError):
                service.update_egg_record(record_id, payload)
            with pytest.raises(NotFoundError):
                service.delete_egg_record(record_id)
