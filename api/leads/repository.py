"""
Lead persistence (raw SQL): contact requests and test-drive bookings.
"""

from __future__ import annotations

from core.db import Database, fits_int4


async def insert_contact(
    db: Database,
    *,
    name: str,
    email: str,
    phone: str | None = None,
    model_interest: str | None = None,
    message: str | None = None,
) -> int:
    contact_id = await db.fetch_val(
        """
        INSERT INTO contacts (name, email, phone, model_interest, message, status)
        VALUES ($1, $2, $3, $4, $5, 'new')
        RETURNING id
        """,
        name,
        email,
        phone,
        model_interest,
        message,
    )
    if contact_id is None:
        raise RuntimeError("Failed to insert contact.")
    return int(contact_id)


async def list_contacts(db: Database) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name, email, phone, model_interest, message, status, created_at
        FROM contacts
        ORDER BY created_at DESC, id DESC
        """
    )


async def update_contact_status(db: Database, contact_id: int, status: str) -> int:
    if not fits_int4(contact_id):
        return 0
    return await db.execute(
        "UPDATE contacts SET status = $1 WHERE id = $2",
        status,
        contact_id,
    )


async def insert_test_drive(
    db: Database,
    *,
    name: str,
    email: str,
    phone: str,
    model: str,
    preferred_date: str,
    preferred_time: str | None = None,
    notes: str | None = None,
) -> int:
    test_drive_id = await db.fetch_val(
        """
        INSERT INTO test_drives (name, email, phone, model, preferred_date,
                                 preferred_time, notes, status)
        VALUES ($1, $2, $3, $4, $5, $6, $7, 'pending')
        RETURNING id
        """,
        name,
        email,
        phone,
        model,
        preferred_date,
        preferred_time,
        notes,
    )
    if test_drive_id is None:
        raise RuntimeError("Failed to insert test drive.")
    return int(test_drive_id)


async def list_test_drives(db: Database) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name, email, phone, model, preferred_date, preferred_time,
               status, notes, created_at
        FROM test_drives
        ORDER BY created_at DESC, id DESC
        """
    )


async def update_test_drive_status(db: Database, test_drive_id: int, status: str) -> int:
    if not fits_int4(test_drive_id):
        return 0
    return await db.execute(
        "UPDATE test_drives SET status = $1 WHERE id = $2",
        status,
        test_drive_id,
    )


async def delete_test_drive(db: Database, test_drive_id: int) -> int:
    if not fits_int4(test_drive_id):
        return 0
    return await db.execute("DELETE FROM test_drives WHERE id = $1", test_drive_id)
