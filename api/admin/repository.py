"""
Dashboard counters (raw SQL).
"""

from __future__ import annotations

from core.db import Database


async def _count(db: Database, sql: str, *args) -> int:
    return int(await db.fetch_val(sql, *args) or 0)


async def count_contacts(db: Database) -> int:
    return await _count(db, "SELECT COUNT(*) FROM contacts")


async def count_test_drives(db: Database) -> int:
    return await _count(db, "SELECT COUNT(*) FROM test_drives")


async def count_contacts_with_status(db: Database, status: str) -> int:
    return await _count(db, "SELECT COUNT(*) FROM contacts WHERE status = $1", status)


async def count_test_drives_with_status(db: Database, status: str) -> int:
    return await _count(db, "SELECT COUNT(*) FROM test_drives WHERE status = $1", status)
