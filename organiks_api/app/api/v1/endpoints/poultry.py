"""
Poultry endpoints for API v1.

CRUD routes for poultry records.  Listing an empty store answers 404,
matching the service contract.  Updates are full replacements, hence
``PUT`` with the complete payload.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from organiks_api.app.api.dependencies import get_record_service
from organiks_api.app.core.exceptions import NotFoundError
from organiks_api.app.schemas.poultry import PoultryRecord, PoultryRecordPayload
from organiks_api.app.services.record_service import RecordService

router = APIRouter()


@router.post("/", response_model=PoultryRecord, status_code=status.HTTP_201_CREATED)
async def add_poultry_record(
    payload: PoultryRecordPayload,
    service: RecordService = Depends(get_record_service),
) -> PoultryRecord:
    return service.add_poultry_record(payload)


@router.get("/", response_model=List[PoultryRecord])
async def get_all_poultry_records(
    service: RecordService = Depends(get_record_service),
) -> List[PoultryRecord]:
    try:
        return service.get_all_poultry_records()
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.get("/{record_id}", response_model=PoultryRecord)
async def get_poultry_record(
    record_id: int,
    service: RecordService = Depends(get_record_service),
) -> PoultryRecord:
    try:
        return service.get_poultry_record(record_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.put("/{record_id}", response_model=PoultryRecord)
async def update_poultry_record(
    record_id: int,
    payload: PoultryRecordPayload,
    service: RecordService = Depends(get_record_service),
) -> PoultryRecord:
    """Replace breed, age and egg production of a poultry record."""
    try:
        return service.update_poultry_record(record_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.delete("/{record_id}", response_model=PoultryRecord)
async def delete_poultry_record(
    record_id: int,
    service: RecordService = Depends(get_record_service),
) -> PoultryRecord:
    """Delete a poultry record and return the removed record."""
    try:
        return service.delete_poultry_record(record_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
