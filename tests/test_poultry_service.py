"""
Tests for poultry record operations.
"""

import pytest

from organiks_api.app.core.exceptions import NotFoundError
from organiks_api.app.schemas import PoultryRecordPayload


def leghorn(age: int = 10, egg_production: bool = True) -> PoultryRecordPayload:
    return PoultryRecordPayload(breed="Leghorn", age=age, egg_production=egg_production)


class TestPoultryRecords:

    def test_add_assigns_id_and_created_at(self, service, clock):
        record = service.add_poultry_record(leghorn())
        assert record.id == 1
        assert record.breed == "Leghorn"
        assert record.created_at == clock.current
        assert record.updated_at is None

    def test_get_returns_added_record(self, service):
        record = service.add_poultry_record(leghorn())
        assert service.get_poultry_record(record.id) == record

    def test_get_missing_mentions_id(self, service):
        with pytest.raises(NotFoundError) as excinfo:
            service.get_poultry_record(42)
        assert excinfo.value.message == "a poultry record with id=42 not found"

    def test_get_all_empty_is_not_found(self, service):
        with pytest.raises(NotFoundError, match="No poultry records found."):
            service.get_all_poultry_records()

    def test_get_all_after_one_add(self, service):
        record = service.add_poultry_record(leghorn())
        assert service.get_all_poultry_records() == [record]

    def test_update_replaces_payload_and_stamps_updated_at(self, service, clock):
        created = service.add_poultry_record(leghorn(age=10))
        later = clock.advance(days=7)

        updated = service.update_poultry_record(created.id, leghorn(age=11))

        assert updated.age == 11
        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.updated_at == later
        assert service.get_poultry_record(created.id) == updated

    def test_update_missing(self, service):
        with pytest.raises(NotFoundError, match="couldn't update a poultry record with id=3"):
            service.update_poultry_record(3, leghorn())

    def test_delete_twice(self, service):
        record = service.add_poultry_record(leghorn())
        assert service.delete_poultry_record(record.id) == record
        with pytest.raises(NotFoundError, match="couldn't delete a poultry record"):
            service.delete_poultry_record(record.id)
        with pytest.raises(NotFoundError):
            service.get_poultry_record(record.id)

    def test_deleted_ids_are_not_reused(self, service):
        first = service.add_poultry_record(leghorn())
        service.delete_poultry_record(first.id)
        second = service.add_poultry_record(leghorn())
        assert second.id > first.id

    def test_negative_age_rejected_by_payload(self):
        with pytest.raises(ValueError):
            PoultryRecordPayload(breed="Leghorn", age=-1, egg_production=True)

    def test_age_is_limited_to_32_bits(self):
        assert leghorn(age=2**32 - 1).age == 2**32 - 1
        with pytest.raises(ValueError):
            leghorn(age=2**32)


@pytest.mark.parametrize("record_id", [-1, 2**63, 2**64 - 1])
def test_ids_outside_range_are_not_found(service, record_id):
    service.add_poultry_record(leghorn())
    with pytest.raises(NotFoundError):
        service.get_poultry_record(record_id)
    with pytest.raises(NotFoundError):
        service.update_poultry_record(record_id, leghorn())
    with pytest.raises(NotFoundError):
        service.delete_poultry_record(record_id)
    assert len(service.get_all_poultry_records()) == 1
