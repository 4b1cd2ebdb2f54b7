"""
Environment-driven configuration helpers.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent.parent


def env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def public_dir() -> Path:
    raw = os.environ.get("PUBLIC_DIR", "").strip()
    return Path(raw) if raw else REPO_ROOT / "public"


def cors_origins() -> list[str]:
    raw = env_str("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def server_port() -> int:
    return env_int("PORT", 3000)


def configure_logging() -> None:
    level = env_str("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
