"""
Egg order endpoints for API v1.

Orders can be placed, fetched and listed.  There are no update or
delete routes: an order is immutable once placed.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from organiks_api.app.api.dependencies import get_record_service
from organiks_api.app.core.exceptions import NotFoundError
from organiks_api.app.schemas.egg_order import EggOrder, EggOrderPayload
from organiks_api.app.services.record_service import RecordService

router = APIRouter()


@router.post("/", response_model=EggOrder, status_code=status.HTTP_201_CREATED)
async def place_egg_order(
    payload: EggOrderPayload,
    service: RecordService = Depends(get_record_service),
) -> EggOrder:
    """Place an order priced from the current egg price.

    Returns HTTP 404 if no price is set for the requested egg type.
    """
    try:
        return service.place_egg_order(payload)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.get("/", response_model=List[EggOrder])
async def get_all_orders(
    service: RecordService = Depends(get_record_service),
) -> List[EggOrder]:
    try:
        return service.get_all_orders()
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.get("/{order_id}", response_model=EggOrder)
async def get_egg_order(
    order_id: int,
    service: RecordService = Depends(get_record_service),
) -> EggOrder:
    try:
        return service.get_egg_order(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
