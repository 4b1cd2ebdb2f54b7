"""
Admin API endpoints. Every route requires a valid bearer token; any
authenticated admin has full access regardless of role.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies
from core.db import Database, get_db
from leads import repository as leads_repository
from leads import schemas as leads_schemas
from leads import service as leads_service

from . import schemas, service

router = APIRouter(
    prefix="/api/admin",
    dependencies=[Depends(auth_dependencies.get_current_admin)],
)


@router.get("/stats")
async def get_stats(db: Database = Depends(get_db)) -> dict:
    return await service.stats(db)


@router.get("/contacts")
async def list_contacts(db: Database = Depends(get_db)) -> dict:
    return {"contacts": await leads_repository.list_contacts(db)}


@router.patch("/contacts/{contact_id}")
async def update_contact(
    contact_id: int,
    payload: leads_schemas.StatusUpdateRequest,
    db: Database = Depends(get_db),
) -> dict:
    new_status = leads_service.require_status(payload)
    return await service.update_contact_status(db, contact_id, new_status)


@router.get("/test-drives")
async def list_test_drives(db: Database = Depends(get_db)) -> dict:
    return {"testDrives": await leads_repository.list_test_drives(db)}


@router.patch("/test-drives/{test_drive_id}")
async def update_test_drive(
    test_drive_id: int,
    payload: leads_schemas.StatusUpdateRequest,
    db: Database = Depends(get_db),
) -> dict:
    new_status = leads_service.require_status(payload)
    return await service.update_test_drive_status(db, test_drive_id, new_status)


@router.delete("/test-drives/{test_drive_id}")
async def delete_test_drive(test_drive_id: int, db: Database = Depends(get_db)) -> dict:
    return await service.delete_test_drive(db, test_drive_id)


@router.post("/cars", status_code=status.HTTP_201_CREATED)
async def create_car(
    payload: schemas.CarCreateRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.create_car(db, payload)


@router.patch("/cars/{car_id}")
async def update_car(
    car_id: int,
    payload: schemas.CarUpdateRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.update_car(db, car_id, payload)


@router.delete("/cars/{car_id}")
async def delete_car(car_id: int, db: Database = Depends(get_db)) -> dict:
    return await service.delete_car(db, car_id)
