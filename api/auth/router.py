"""
Admin login endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_db

from . import schemas, service

router = APIRouter(prefix="/api/admin")


@router.post("/login")
async def login(
    payload: schemas.LoginRequest,
    db: Database = Depends(get_db),
) -> schemas.LoginResponse:
    return await service.login(db, payload)
