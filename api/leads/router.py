"""
Public lead endpoints: contact form and test-drive booking.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter(prefix="/api")


@router.post("/contact", status_code=status.HTTP_201_CREATED)
async def submit_contact(
    payload: schemas.ContactRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.submit_contact(db, payload)


@router.post("/test-drive", status_code=status.HTTP_201_CREATED)
async def book_test_drive(
    payload: schemas.TestDriveRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.book_test_drive(db, payload)
