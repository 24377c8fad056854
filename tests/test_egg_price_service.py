"""
Tests for egg prices.
"""

import pytest

from organiks_api.app.core.exceptions import NotFoundError
from organiks_api.app.schemas import EggPricePayload, EggType


class TestEggPrices:

    def test_set_and_get(self, service):
        price = service.set_egg_price(EggPricePayload(egg_type=EggType.GRADE, price=0.5))
        assert price.id == 1
        assert service.get_egg_price(price.id) == price

    def test_get_missing(self, service):
        with pytest.raises(NotFoundError, match="egg price with id=4 not found"):
            service.get_egg_price(4)

    def test_get_all_empty(self, service):
        with pytest.raises(NotFoundError, match="No egg prices found."):
            service.get_all_egg_prices()

    def test_duplicate_prices_per_type_are_allowed(self, service):
        first = service.set_egg_price(EggPricePayload(egg_type=EggType.GRADE, price=0.5))
        second = service.set_egg_price(EggPricePayload(egg_type=EggType.GRADE, price=0.6))
        assert service.get_egg_price_by_egg_type(EggType.GRADE) == [first, second]
        assert service.get_all_egg_prices() == [first, second]

    def test_get_by_type_without_matches(self, service):
        service.set_egg_price(EggPricePayload(egg_type=EggType.GRADE, price=0.5))
        with pytest.raises(NotFoundError) as excinfo:
            service.get_egg_price_by_egg_type(EggType.KIENYEJI)
        assert excinfo.value.message == "No egg prices found for egg type: Kienyeji"

    def test_update_replaces_type_and_price(self, service):
        price = service.set_egg_price(EggPricePayload(egg_type=EggType.GRADE, price=0.5))
        updated = service.update_egg_price(price.id, EggPricePayload(egg_type=EggType.KIENYEJI, price=0.9))
        assert updated.id == price.id
        assert updated.egg_type == EggType.KIENYEJI
        assert updated.price == 0.9

    def test_update_missing(self, service):
        with pytest.raises(NotFoundError, match="couldn't update egg price with id=2. price not found"):
            service.update_egg_price(2, EggPricePayload(egg_type=EggType.GRADE, price=1.0))

    def test_delete(self, service):
        price = service.set_egg_price(EggPricePayload(egg_type=EggType.GRADE, price=0.5))
        assert service.delete_egg_price(price.id) == price
        with pytest.raises(NotFoundError, match="couldn't delete egg price"):
            service.delete_egg_price(price.id)

    def test_current_price_is_lowest_id(self, service):
        service.set_egg_price(EggPricePayload(egg_type=EggType.KIENYEJI, price=0.9))
        first = service.set_egg_price(EggPricePayload(egg_type=EggType.GRADE, price=0.5))
        service.set_egg_price(EggPricePayload(egg_type=EggType.GRADE, price=0.7))
        assert service.prices.current_price(EggType.GRADE) == first

    def test_current_price_missing(self, service):
        assert service.prices.current_price(EggType.GRADE) is None

    def test_payload_requires_egg_type(self):
        with pytest.raises(ValueError):
            EggPricePayload(price=1.0)

    def test_ids_outside_range_are_not_found(self, service):
        payload = EggPricePayload(egg_type=EggType.GRADE, price=1.0)
        for price_id in (-1, 2**63):
            with pytest.raises(NotFoundError):
                service.get_egg_price(price_id)
            with pytest.raises(NotFoundError):
                service.update_egg_price(price_id, payload)
            with pytest.raises(NotFoundError):
                service.delete_egg_price(price_id)
