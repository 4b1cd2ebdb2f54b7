"""
Admin business logic: dashboard stats, lead triage and car inventory.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import HTTPException, status

from catalog import repository as catalog_repository
from core.db import Database
from leads import repository as leads_repository

from . import repository, schemas

logger = logging.getLogger(__name__)

NOT_NULL_CAR_FIELDS = ("name", "featured", "active")


async def stats(db: Database) -> dict:
    # Independent reads; the counts may drift relative to each other under writes.
    # Every count runs to completion before the first failure is raised.
    results = await asyncio.gather(
        repository.count_contacts(db),
        repository.count_test_drives(db),
        catalog_repository.count_active_cars(db),
        repository.count_contacts_with_status(db, "new"),
        repository.count_test_drives_with_status(db, "pending"),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    total_contacts, total_test_drives, total_cars, new_contacts, pending_test_drives = results
    return {
        "totalContacts": total_contacts,
        "totalTestDrives": total_test_drives,
        "totalCars": total_cars,
        "newContacts": new_contacts,
        "pendingTestDrives": pending_test_drives,
    }


async def create_car(db: Database, payload: schemas.CarCreateRequest) -> dict:
    name = (payload.name or "").strip()
    if not name or not payload.price:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name and price are required",
        )

    car_id = await catalog_repository.insert_car(
        db,
        name=name,
        price=payload.price,
        tagline=payload.tagline,
        description=payload.description,
        horsepower=payload.horsepower,
        acceleration=payload.acceleration,
        top_speed=payload.top_speed,
        image_url=payload.image_url,
        featured=payload.featured or 0,
    )
    logger.info("car_created car_id=%s", car_id)
    return {"message": "Car added successfully", "id": car_id}


async def update_car(db: Database, car_id: int, payload: schemas.CarUpdateRequest) -> dict:
    fields = payload.model_dump(exclude_unset=True)
    if not fields:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No updatable fields provided",
        )
    nulled = sorted(col for col in NOT_NULL_CAR_FIELDS if col in fields and fields[col] is None)
    if nulled:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Fields cannot be null: {', '.join(nulled)}",
        )

    try:
        changes = await catalog_repository.update_car(db, car_id, fields)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    logger.info("car_updated car_id=%s fields=%s changes=%s", car_id, ",".join(sorted(fields)), changes)
    return {"message": "Car updated", "changes": changes}


async def delete_car(db: Database, car_id: int) -> dict:
    changes = await catalog_repository.soft_delete_car(db, car_id)
    logger.info("car_deactivated car_id=%s changes=%s", car_id, changes)
    return {"message": "Car deleted", "changes": changes}


async def update_contact_status(db: Database, contact_id: int, new_status: str) -> dict:
    changes = await leads_repository.update_contact_status(db, contact_id, new_status)
    return {"message": "Contact updated", "changes": changes}


async def update_test_drive_status(db: Database, test_drive_id: int, new_status: str) -> dict:
    changes = await leads_repository.update_test_drive_status(db, test_drive_id, new_status)
    return {"message": "Test drive updated", "changes": changes}


async def delete_test_drive(db: Database, test_drive_id: int) -> dict:
    changes = await leads_repository.delete_test_drive(db, test_drive_id)
    logger.info("test_drive_deleted test_drive_id=%s changes=%s", test_drive_id, changes)
    return {"message": "Test drive deleted", "changes": changes}
