"""
Service layer for egg prices.

No uniqueness is enforced per egg type: setting a price always creates
a new price record.  When more than one price exists for a type, the
price with the lowest id is the one applied to new orders (see
``current_price``).
"""

import logging
from typing import List, Optional

from organiks_api.app.schemas.egg import EggType
from organiks_api.app.schemas.egg_price import EggPrice, EggPricePayload
from organiks_api.app.services.base import BaseRecordService

logger = logging.getLogger(__name__)


class EggPriceService(BaseRecordService):
    """Service class for managing egg prices."""

    def set_price(self, data: EggPricePayload) -> EggPrice:
        with self.repository.transaction() as repo:
            egg_price = EggPrice(id=repo.ids.next_id(), **data.model_dump())
            repo.egg_prices.put(egg_price)
        logger.info("Set egg price %s: %s at %s", egg_price.id, egg_price.egg_type.value, egg_price.price)
        return egg_price

    def get(self, price_id: int) -> EggPrice:
        with self.repository.transaction() as repo:
            egg_price = repo.egg_prices.get(price_id)
        return self._found(egg_price, f"egg price with id={price_id} not found")

    def get_all(self) -> List[EggPrice]:
        with self.repository.transaction() as repo:
            prices = repo.egg_prices.scan()
        return self._non_empty(prices, "No egg prices found.")

    def get_by_egg_type(self, egg_type: EggType) -> List[EggPrice]:
        with self.repository.transaction() as repo:
            prices = [price for price in repo.egg_prices.scan() if price.egg_type == egg_type]
        return self._non_empty(prices, f"No egg prices found for egg type: {egg_type.value}")

    def current_price(self, egg_type: EggType) -> Optional[EggPrice]:
        """Return the first price for ``egg_type`` in ascending id order."""
        with self.repository.transaction() as repo:
            return next((price for price in repo.egg_prices.scan() if price.egg_type == egg_type), None)

    def update(self, price_id: int, data: EggPricePayload) -> EggPrice:
        """Replace egg type and price.  Prices carry no timestamps."""
        with self.repository.transaction() as repo:
            current = self._found(
                repo.egg_prices.get(price_id),
                f"couldn't update egg price with id={price_id}. price not found",
            )
            egg_price = current.model_copy(update=data.model_dump())
            repo.egg_prices.put(egg_price)
        logger.info("Updated egg price %s", price_id)
        return egg_price

    def delete(self, price_id: int) -> EggPrice:
        """Remove a price.  Orders already placed keep their totals."""
        with self.repository.transaction() as repo:
            egg_price = self._found(
                repo.egg_prices.remove(price_id),
                f"couldn't delete egg price with id={price_id}. price not found.",
            )
        logger.info("Deleted egg price %s", price_id)
        return egg_price
