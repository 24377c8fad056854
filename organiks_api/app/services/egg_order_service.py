"""
Service layer for egg orders.

Orders are placed once and never modified or removed.  Placing an
order prices it from the egg price store; egg inventory records are
not consulted or decremented.
"""

import logging
from typing import List

from organiks_api.app.core.exceptions import NotFoundError
from organiks_api.app.schemas.egg_order import EggOrder, EggOrderPayload
from organiks_api.app.services.base import BaseRecordService
from organiks_api.app.services.egg_price_service import EggPriceService

logger = logging.getLogger(__name__)


class EggOrderService(BaseRecordService):
    """Service class for placing and reading egg orders."""

    def place_order(self, data: EggOrderPayload) -> EggOrder:
        """Price and store a new order.

        The id is allocated first, then the first price for the
        requested egg type (lowest id) is looked up and multiplied by
        the quantity.  If no price exists the whole transaction rolls
        back, so the id allocation is undone as well.

        Raises
        ------
        NotFoundError
            If no price is set for the requested egg type.
        """
        prices = EggPriceService(self.repository)
        with self.repository.transaction() as repo:
            order_id = repo.ids.next_id()
            egg_price = prices.current_price(data.egg_type)
            if egg_price is None:
                logger.warning("Rejected order for %s: no price set", data.egg_type.value)
                raise NotFoundError(f"Egg price not found for egg type {data.egg_type.value}")
            order = EggOrder(
                id=order_id,
                total_price=egg_price.price * data.quantity,
                created_at=repo.now(),
                **data.model_dump(),
            )
            repo.egg_orders.put(order)
        logger.info(
            "Placed order %s for %s: %s x %s = %s",
            order.id,
            order.customer_name,
            order.quantity,
            order.egg_type.value,
            order.total_price,
        )
        return order

    def get(self, order_id: int) -> EggOrder:
        with self.repository.transaction() as repo:
            order = repo.egg_orders.get(order_id)
        return self._found(order, f"Egg order with id={order_id} not found")

    def get_all(self) -> List[EggOrder]:
        with self.repository.transaction() as repo:
            orders = repo.egg_orders.scan()
        return self._non_empty(orders, "No egg orders found.")
