"""
Catalog persistence (raw SQL): cars, testimonials and gallery images.
"""

from __future__ import annotations

from typing import Any

from core.db import Database, fits_int4

CAR_COLUMNS = """
    id, name, tagline, description, price, horsepower, acceleration,
    top_speed, image_url, featured, active, created_at
"""

# Column names that may appear in an UPDATE built from request data.
UPDATABLE_CAR_COLUMNS = (
    "name",
    "tagline",
    "description",
    "price",
    "horsepower",
    "acceleration",
    "top_speed",
    "image_url",
    "featured",
    "active",
)


async def list_active_cars(db: Database) -> list[dict]:
    """
    Featured cars first, then alphabetical by name.
    """
    return await db.fetch_all(
        f"""
        SELECT {CAR_COLUMNS}
        FROM cars
        WHERE active = 1
        ORDER BY featured DESC, name ASC
        """
    )


async def get_active_car(db: Database, car_id: int) -> dict | None:
    if not fits_int4(car_id):
        return None
    return await db.fetch_one(
        f"""
        SELECT {CAR_COLUMNS}
        FROM cars
        WHERE id = $1
          AND active = 1
        """,
        car_id,
    )


async def get_featured_car(db: Database) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {CAR_COLUMNS}
        FROM cars
        WHERE featured = 1
          AND active = 1
        ORDER BY id ASC
        LIMIT 1
        """
    )


async def insert_car(
    db: Database,
    *,
    name: str,
    price: int,
    tagline: str | None = None,
    description: str | None = None,
    horsepower: int | None = None,
    acceleration: float | None = None,
    top_speed: int | None = None,
    image_url: str | None = None,
    featured: int = 0,
) -> int:
    car_id = await db.fetch_val(
        """
        INSERT INTO cars (name, tagline, description, price, horsepower,
                          acceleration, top_speed, image_url, featured)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        RETURNING id
        """,
        name,
        tagline,
        description,
        price,
        horsepower,
        acceleration,
        top_speed,
        image_url,
        featured,
    )
    if car_id is None:
        raise RuntimeError("Failed to insert car.")
    return int(car_id)


async def update_car(db: Database, car_id: int, fields: dict[str, Any]) -> int:
    """
    Update the given columns of one car. Keys outside UPDATABLE_CAR_COLUMNS
    raise ValueError; nothing from `fields` is interpolated except
    allow-listed column names.
    """
    unknown = sorted(set(fields) - set(UPDATABLE_CAR_COLUMNS))
    if unknown:
        raise ValueError(f"Unknown car fields: {', '.join(unknown)}")
    if not fields or not fits_int4(car_id):
        return 0

    columns = [col for col in UPDATABLE_CAR_COLUMNS if col in fields]
    assignments = ", ".join(f"{col} = ${i}" for i, col in enumerate(columns, start=1))
    values = [fields[col] for col in columns]
    return await db.execute(
        f"UPDATE cars SET {assignments} WHERE id = ${len(columns) + 1}",
        *values,
        car_id,
    )


async def soft_delete_car(db: Database, car_id: int) -> int:
    if not fits_int4(car_id):
        return 0
    return await db.execute("UPDATE cars SET active = 0 WHERE id = $1", car_id)


async def count_active_cars(db: Database) -> int:
    return int(await db.fetch_val("SELECT COUNT(*) FROM cars WHERE active = 1") or 0)


async def list_active_testimonials(db: Database) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name, role, car_model, quote, image_url, rating, active, created_at
        FROM testimonials
        WHERE active = 1
        ORDER BY created_at DESC, id DESC
        """
    )


async def list_active_gallery(db: Database) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, title, image_url, category, display_order, active, created_at
        FROM gallery
        WHERE active = 1
        ORDER BY display_order ASC, id ASC
        """
    )
