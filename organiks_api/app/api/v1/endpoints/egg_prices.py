"""
Egg price endpoints for API v1.

``POST /`` always creates a new price record, even if a price for the
same egg type already exists.  Orders use the price with the lowest id
for their egg type.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from organiks_api.app.api.dependencies import get_record_service
from organiks_api.app.core.exceptions import NotFoundError
from organiks_api.app.schemas.egg import EggType
from organiks_api.app.schemas.egg_price import EggPrice, EggPricePayload
from organiks_api.app.services.record_service import RecordService

router = APIRouter()


@router.post("/", response_model=EggPrice, status_code=status.HTTP_201_CREATED)
async def set_egg_price(
    payload: EggPricePayload,
    service: RecordService = Depends(get_record_service),
) -> EggPrice:
    return service.set_egg_price(payload)


@router.get("/", response_model=List[EggPrice])
async def get_all_egg_prices(
    service: RecordService = Depends(get_record_service),
) -> List[EggPrice]:
    try:
        return service.get_all_egg_prices()
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.get("/search", response_model=List[EggPrice])
async def get_egg_price_by_egg_type(
    egg_type: EggType = Query(...),
    service: RecordService = Depends(get_record_service),
) -> List[EggPrice]:
    try:
        return service.get_egg_price_by_egg_type(egg_type)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.get("/{price_id}", response_model=EggPrice)
async def get_egg_price(
    price_id: int,
    service: RecordService = Depends(get_record_service),
) -> EggPrice:
    try:
        return service.get_egg_price(price_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.put("/{price_id}", response_model=EggPrice)
async def update_egg_price(
    price_id: int,
    payload: EggPricePayload,
    service: RecordService = Depends(get_record_service),
) -> EggPrice:
    try:
        return service.update_egg_price(price_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.delete("/{price_id}", response_model=EggPrice)
async def delete_egg_price(
    price_id: int,
    service: RecordService = Depends(get_record_service),
) -> EggPrice:
    """Delete a price.  Previously placed orders keep their totals."""
    try:
        return service.delete_egg_price(price_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
