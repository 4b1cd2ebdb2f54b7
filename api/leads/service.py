"""
Lead intake business logic.

Scope:
- contact form submissions (status starts at "new")
- test-drive bookings (status starts at "pending") with a booking reference
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database

from . import repository, schemas

logger = logging.getLogger(__name__)

BOOKING_REFERENCE_PREFIX = "APEX-TD-"


def booking_reference(test_drive_id: int) -> str:
    return f"{BOOKING_REFERENCE_PREFIX}{test_drive_id:06d}"


def _clean(value: str | None) -> str | None:
    value = (value or "").strip()
    return value or None


async def submit_contact(db: Database, payload: schemas.ContactRequest) -> dict:
    name = _clean(payload.name)
    email = _clean(payload.email)
    if not name or not email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name and email are required",
        )

    contact_id = await repository.insert_contact(
        db,
        name=name,
        email=email,
        phone=_clean(payload.phone),
        model_interest=_clean(payload.model_interest),
        message=_clean(payload.message),
    )
    logger.info("contact_submitted contact_id=%s", contact_id)
    return {
        "message": "Contact submission received successfully",
        "id": contact_id,
    }


async def book_test_drive(db: Database, payload: schemas.TestDriveRequest) -> dict:
    required = {
        "name": _clean(payload.name),
        "email": _clean(payload.email),
        "phone": _clean(payload.phone),
        "model": _clean(payload.model),
        "preferred_date": _clean(payload.preferred_date),
    }
    if not all(required.values()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Required fields: name, email, phone, model, preferred_date",
        )

    test_drive_id = await repository.insert_test_drive(
        db,
        **required,
        preferred_time=_clean(payload.preferred_time),
        notes=_clean(payload.notes),
    )
    reference = booking_reference(test_drive_id)
    logger.info("test_drive_booked test_drive_id=%s reference=%s", test_drive_id, reference)
    return {
        "message": "Test drive booked successfully",
        "id": test_drive_id,
        "booking_reference": reference,
    }


def require_status(payload: schemas.StatusUpdateRequest) -> str:
    value = _clean(payload.status)
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Status is required",
        )
    return value
