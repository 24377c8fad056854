"""
Egg inventory endpoints for API v1.

These routes expose egg records: collected and cracked egg counts per
egg type.  ``/search`` filters by egg type and must be declared before
the ``/{record_id}`` routes.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from organiks_api.app.api.dependencies import get_record_service
from organiks_api.app.core.exceptions import NotFoundError
from organiks_api.app.schemas.egg import EggRecord, EggRecordPayload, EggType
from organiks_api.app.services.record_service import RecordService

router = APIRouter()


@router.post("/", response_model=EggRecord, status_code=status.HTTP_201_CREATED)
async def add_egg_record(
    payload: EggRecordPayload,
    service: RecordService = Depends(get_record_service),
) -> EggRecord:
    return service.add_egg_record(payload)


@router.get("/", response_model=List[EggRecord])
async def get_all_egg_records(
    service: RecordService = Depends(get_record_service),
) -> List[EggRecord]:
    try:
        return service.get_all_egg_records()
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.get("/search", response_model=List[EggRecord])
async def search_egg_record_by_egg_type(
    egg_type: EggType = Query(...),
    service: RecordService = Depends(get_record_service),
) -> List[EggRecord]:
    """Return every egg record of the given egg type, ordered by id."""
    try:
        return service.search_egg_record_by_egg_type(egg_type)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.get("/{record_id}", response_model=EggRecord)
async def get_egg_record(
    record_id: int,
    service: RecordService = Depends(get_record_service),
) -> EggRecord:
    try:
        return service.get_egg_record(record_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.put("/{record_id}", response_model=EggRecord)
async def update_egg_record(
    record_id: int,
    payload: EggRecordPayload,
    service: RecordService = Depends(get_record_service),
) -> EggRecord:
    try:
        return service.update_egg_record(record_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.delete("/{record_id}", response_model=EggRecord)
async def delete_egg_record(
    record_id: int,
    service: RecordService = Depends(get_record_service),
) -> EggRecord:
    try:
        return service.delete_egg_record(record_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
