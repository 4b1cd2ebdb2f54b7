"""
Admin account persistence helpers.
"""

from __future__ import annotations

from core.db import Database


async def get_admin_by_username(db: Database, username: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, password, email, role, created_at
        FROM admins
        WHERE username = $1
        """,
        username,
    )

