"""
Static site routes.

The public site and admin panel are single-page apps: known files under the
public directory are served as-is and any other non-API path falls back to
`index.html` so client-side routing can take over.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from core import config

router = APIRouter()


def _page(name: str) -> FileResponse:
    path = config.public_dir() / name
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(path)


def _resolve_public_file(relative: str) -> Path | None:
    root = config.public_dir().resolve()
    candidate = (root / relative).resolve()
    # Reject anything that escapes the public directory.
    if root not in candidate.parents or not candidate.is_file():
        return None
    return candidate


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    return _page("index.html")


@router.get("/admin", include_in_schema=False)
async def admin_panel() -> FileResponse:
    return _page("admin.html")


@router.get("/{full_path:path}", include_in_schema=False)
async def spa_fallback(full_path: str) -> FileResponse:
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not found")
    path = _resolve_public_file(full_path)
    if path is not None:
        return FileResponse(path)
    return _page("index.html")
