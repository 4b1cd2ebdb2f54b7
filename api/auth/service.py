"""
Auth business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database

from . import repository, schemas, security

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def _to_admin_user(admin_row: dict) -> schemas.AdminUser:
    return schemas.AdminUser(
        id=int(admin_row["id"]),
        username=str(admin_row["username"]),
        email=admin_row.get("email"),
        role=str(admin_row.get("role") or "admin"),
    )


async def login(db: Database, payload: schemas.LoginRequest) -> schemas.LoginResponse:
    username = (payload.username or "").strip()
    password = payload.password or ""
    if not username or not password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password required",
        )

    # Unknown user and wrong password share one response.
    admin_row = await repository.get_admin_by_username(db, username)
    if admin_row is None or not security.verify_password(password, str(admin_row.get("password") or "")):
        logger.info("login_failed username=%s", username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )

    user = _to_admin_user(admin_row)
    token = security.build_access_token(admin_id=user.id, username=user.username, role=user.role)
    logger.info("login_succeeded admin_id=%s", user.id)
    return schemas.LoginResponse(token=token, user=user)


def claims_from_access_token(access_token: str) -> dict:
    """
    Decode a bearer token into the `{id, username, role}` claims it carries.
    """
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token.",
        ) from exc

    return {
        "id": payload.get("id"),
        "username": payload.get("username"),
        "role": payload.get("role"),
    }
