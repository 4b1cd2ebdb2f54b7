"""
Table definitions for the dealership store.

Flags (`featured`, `active`) are integers 0/1 so API payloads keep the
numeric shape the public site expects.
"""

from __future__ import annotations

TABLES: dict[str, str] = {
    "contacts": """
        CREATE TABLE IF NOT EXISTS contacts (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            phone TEXT,
            model_interest TEXT,
            message TEXT,
            status TEXT NOT NULL DEFAULT 'new',
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """,
    "test_drives": """
        CREATE TABLE IF NOT EXISTS test_drives (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            phone TEXT NOT NULL,
            model TEXT NOT NULL,
            preferred_date TEXT NOT NULL,
            preferred_time TEXT,
            status TEXT NOT NULL DEFAULT 'pending',
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """,
    "cars": """
        CREATE TABLE IF NOT EXISTS cars (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            tagline TEXT,
            description TEXT,
            price INTEGER,
            horsepower INTEGER,
            acceleration DOUBLE PRECISION,
            top_speed INTEGER,
            image_url TEXT,
            featured INTEGER NOT NULL DEFAULT 0,
            active INTEGER NOT NULL DEFAULT 1,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """,
    "admins": """
        CREATE TABLE IF NOT EXISTS admins (
            id SERIAL PRIMARY KEY,
            username TEXT UNIQUE NOT NULL,
            password TEXT NOT NULL,
            email TEXT,
            role TEXT NOT NULL DEFAULT 'admin',
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """,
    "gallery": """
        CREATE TABLE IF NOT EXISTS gallery (
            id SERIAL PRIMARY KEY,
            title TEXT,
            image_url TEXT NOT NULL,
            category TEXT,
            display_order INTEGER NOT NULL DEFAULT 0,
            active INTEGER NOT NULL DEFAULT 1,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """,
    "testimonials": """
        CREATE TABLE IF NOT EXISTS testimonials (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            role TEXT,
            car_model TEXT,
            quote TEXT NOT NULL,
            image_url TEXT,
            rating INTEGER NOT NULL DEFAULT 5,
            active INTEGER NOT NULL DEFAULT 1,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """,
}
