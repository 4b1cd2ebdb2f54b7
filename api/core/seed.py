"""
Schema creation and default seed data.

`bootstrap()` runs on every boot: it creates missing tables, then fills the
admins, cars and testimonials tables with defaults when each one is empty.
Each table's defaults go in as one transaction, so a failed step leaves the
table empty and the next boot tries again.
Store errors are logged and skipped so a single bad statement does not keep
the site down; only a failure to open the pool is fatal.

Run standalone with `python -m core.seed` (or the `apex-setup-db` script).
"""

from __future__ import annotations

import asyncio
import logging

import asyncpg

from auth import security

from . import config, schema
from .db import Database, database_url

logger = logging.getLogger(__name__)

DEFAULT_ADMIN = {
    "username": "admin",
    "email": "admin@apexmotors.com",
    "role": "superadmin",
}

DEFAULT_CARS = [
    {
        "name": "Phantom GT",
        "tagline": "The Grand Tourer",
        "description": "Experience unparalleled luxury and performance in our flagship grand tourer.",
        "price": 285000,
        "horsepower": 700,
        "acceleration": 3.2,
        "top_speed": 205,
        "image_url": "https://images.unsplash.com/photo-1544636331-e26879cd4d9b?w=800&q=80",
        "featured": 0,
    },
    {
        "name": "Crimson X",
        "tagline": "The Ultimate Expression",
        "description": "Our most powerful creation. Pure adrenaline meets refined elegance.",
        "price": 425000,
        "horsepower": 847,
        "acceleration": 2.8,
        "top_speed": 217,
        "image_url": "https://images.unsplash.com/photo-1617788138017-80ad40651399?w=800&q=80",
        "featured": 1,
    },
    {
        "name": "Shadow S",
        "tagline": "Stealth Performance",
        "description": "Silent power. Invisible presence. Absolute dominance.",
        "price": 245000,
        "horsepower": 650,
        "acceleration": 3.5,
        "top_speed": 198,
        "image_url": "https://images.unsplash.com/photo-1552519507-da3b142c6e3d?w=800&q=80",
        "featured": 0,
    },
]

DEFAULT_TESTIMONIALS = [
    {
        "name": "Alexander Chen",
        "role": "Tech Entrepreneur",
        "car_model": "Crimson X",
        "quote": "The Crimson X isn't just a car, it's a statement. Every drive feels like an event.",
        "image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=100&q=80",
        "rating": 5,
    },
    {
        "name": "Marcus Sterling",
        "role": "Investment Banker",
        "car_model": "Phantom GT",
        "quote": "Unmatched performance with uncompromising luxury. Apex has redefined what a supercar can be.",
        "image_url": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=100&q=80",
        "rating": 5,
    },
    {
        "name": "James Worthington",
        "role": "Professional Athlete",
        "car_model": "Shadow S",
        "quote": "The attention to detail is extraordinary. From the leather stitching to the exhaust note - perfection.",
        "image_url": "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?w=100&q=80",
        "rating": 5,
    },
]


def default_admin_password() -> str:
    return config.env_str("SEED_ADMIN_PASSWORD", "admin123")


async def create_tables(db: Database) -> None:
    for table, ddl in schema.TABLES.items():
        try:
            await db.execute(ddl)
        except asyncpg.PostgresError:
            logger.exception("create_table_failed table=%s", table)


async def _is_empty(db: Database, table: str) -> bool:
    # table names come from schema.TABLES, never from input
    count = await db.fetch_val(f"SELECT COUNT(*) FROM {table}")
    return int(count or 0) == 0


async def _seed_admin(db: Database) -> None:
    if not await _is_empty(db, "admins"):
        return None
    password_hash = security.hash_password(default_admin_password())
    await db.execute(
        """
        INSERT INTO admins (username, password, email, role)
        VALUES ($1, $2, $3, $4)
        """,
        DEFAULT_ADMIN["username"],
        password_hash,
        DEFAULT_ADMIN["email"],
        DEFAULT_ADMIN["role"],
    )
    logger.info("seed_admin_created username=%s", DEFAULT_ADMIN["username"])


async def _seed_cars(db: Database) -> None:
    if not await _is_empty(db, "cars"):
        return None
    await db.executemany(
        """
        INSERT INTO cars (name, tagline, description, price, horsepower,
                          acceleration, top_speed, image_url, featured)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        """,
        [
            (
                car["name"],
                car["tagline"],
                car["description"],
                car["price"],
                car["horsepower"],
                car["acceleration"],
                car["top_speed"],
                car["image_url"],
                car["featured"],
            )
            for car in DEFAULT_CARS
        ],
    )
    logger.info("seed_cars_inserted count=%s", len(DEFAULT_CARS))


async def _seed_testimonials(db: Database) -> None:
    if not await _is_empty(db, "testimonials"):
        return None
    await db.executemany(
        """
        INSERT INTO testimonials (name, role, car_model, quote, image_url, rating)
        VALUES ($1, $2, $3, $4, $5, $6)
        """,
        [
            (
                item["name"],
                item["role"],
                item["car_model"],
                item["quote"],
                item["image_url"],
                item["rating"],
            )
            for item in DEFAULT_TESTIMONIALS
        ],
    )
    logger.info("seed_testimonials_inserted count=%s", len(DEFAULT_TESTIMONIALS))


async def bootstrap(db: Database) -> None:
    await create_tables(db)
    for step in (_seed_admin, _seed_cars, _seed_testimonials):
        try:
            await step(db)
        except (asyncpg.PostgresError, ValueError):  # ValueError: bcrypt rejected the password
            logger.exception("seed_step_failed step=%s", step.__name__)


async def setup_database() -> None:
    db = Database(database_url())
    await db.open()
    try:
        await bootstrap(db)
    finally:
        await db.close()
    logger.info("setup_complete default_admin=%s", DEFAULT_ADMIN["username"])


def main() -> None:
    config.configure_logging()
    asyncio.run(setup_database())


if __name__ == "__main__":
    main()
