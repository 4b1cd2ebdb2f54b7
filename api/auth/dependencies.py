"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException, Request, status

from . import service

NO_TOKEN = "Access denied. No token provided."


def _extract_bearer_token(authorization: str | None) -> str:
    parts = (authorization or "").strip().split(None, 1)
    token = parts[1].strip() if len(parts) == 2 else ""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NO_TOKEN,
        )

    if parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token.",
        )
    return token


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def get_current_admin(request: Request, access_token: str = Depends(get_bearer_token)) -> dict:
    claims = service.claims_from_access_token(access_token)
    request.state.admin = claims
    return claims
