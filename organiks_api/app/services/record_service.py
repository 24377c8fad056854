"""
Facade exposing every record operation under its public name.

``RecordService`` composes the per-entity services over one
``Repository``.  Transports (the HTTP routers, scripts, tests) depend on
this class only, so each operation is reachable by the same name
everywhere: ``add_poultry_record``, ``place_egg_order`` and so on.
"""

from typing import List

from organiks_api.app.schemas import (
    EggOrder,
    EggOrderPayload,
    EggPrice,
    EggPricePayload,
    EggRecord,
    EggRecordPayload,
    EggType,
    PoultryRecord,
    PoultryRecordPayload,
)
from organiks_api.app.services.egg_order_service import EggOrderService
from organiks_api.app.services.egg_price_service import EggPriceService
from organiks_api.app.services.egg_service import EggRecordService
from organiks_api.app.services.poultry_service import PoultryService
from organiks_api.app.store.repository import Repository


class RecordService:
    """CRUD and query operations over poultry, eggs, prices and orders."""

    def __init__(self, repository: Repository):
        self.repository = repository
        self.poultry = PoultryService(repository)
        self.eggs = EggRecordService(repository)
        self.prices = EggPriceService(repository)
        self.orders = EggOrderService(repository)

    # --- Poultry records ---

    def add_poultry_record(self, payload: PoultryRecordPayload) -> PoultryRecord:
        return self.poultry.add(payload)

    def get_poultry_record(self, record_id: int) -> PoultryRecord:
        return self.poultry.get(record_id)

    def get_all_poultry_records(self) -> List[PoultryRecord]:
        return self.poultry.get_all()

    def update_poultry_record(self, record_id: int, payload: PoultryRecordPayload) -> PoultryRecord:
        return self.poultry.update(record_id, payload)

    def delete_poultry_record(self, record_id: int) -> PoultryRecord:
        return self.poultry.delete(record_id)

    # --- Egg records ---

    def add_egg_record(self, payload: EggRecordPayload) -> EggRecord:
        return self.eggs.add(payload)

    def get_egg_record(self, record_id: int) -> EggRecord:
        return self.eggs.get(record_id)

    def get_all_egg_records(self) -> List[EggRecord]:
        return self.eggs.get_all()

    def search_egg_record_by_egg_type(self, egg_type: EggType) -> List[EggRecord]:
        return self.eggs.search_by_egg_type(egg_type)

    def update_egg_record(self, record_id: int, payload: EggRecordPayload) -> EggRecord:
        return self.eggs.update(record_id, payload)

    def delete_egg_record(self, record_id: int) -> EggRecord:
        return self.eggs.delete(record_id)

    # --- Egg prices ---

    def set_egg_price(self, payload: EggPricePayload) -> EggPrice:
        return self.prices.set_price(payload)

    def get_egg_price(self, price_id: int) -> EggPrice:
        return self.prices.get(price_id)

    def get_all_egg_prices(self) -> List[EggPrice]:
        return self.prices.get_all()

    def get_egg_price_by_egg_type(self, egg_type: EggType) -> List[EggPrice]:
        return self.prices.get_by_egg_type(egg_type)

    def update_egg_price(self, price_id: int, payload: EggPricePayload) -> EggPrice:
        return self.prices.update(price_id, payload)

    def delete_egg_price(self, price_id: int) -> EggPrice:
        return self.prices.delete(price_id)

    # --- Egg orders ---

    def place_egg_order(self, payload: EggOrderPayload) -> EggOrder:
        return self.orders.place_order(payload)

    def get_egg_order(self, order_id: int) -> EggOrder:
        return self.orders.get(order_id)

    def get_all_orders(self) -> List[EggOrder]:
        return self.orders.get_all()
