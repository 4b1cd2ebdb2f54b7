"""
Exception handlers that render every failure as `{"error": <message>}`.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    messages: list[str] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        field = ".".join(loc)
        if err.get("type") == "extra_forbidden":
            messages.append(f"Unknown field: {field}")
        elif field:
            messages.append(f"{field}: {err.get('msg')}")
        else:
            messages.append(str(err.get("msg")))
    return "; ".join(messages) or "Invalid request."


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(400, _describe_validation_error(exc))


async def store_exception_handler(request: Request, exc: asyncpg.PostgresError) -> JSONResponse:
    message = str(exc.args[0]) if exc.args else type(exc).__name__
    logger.error("store_error path=%s error=%s", request.url.path, message)
    return error_response(500, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error path=%s", request.url.path, exc_info=exc)
    return error_response(500, "Something went wrong!")


def register(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(asyncpg.PostgresError, store_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
