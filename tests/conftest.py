"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from auth import security
from core.db import Database, get_db
from main import create_app


@pytest.fixture
def db():
    """Store double: async query methods are AsyncMocks."""
    fake = MagicMock(spec=Database)
    fake.fetch_all.return_value = []
    fake.fetch_one.return_value = None
    fake.fetch_val.return_value = 0
    fake.execute.return_value = 0
    return fake


@pytest.fixture
def app(db):
    application = create_app()
    application.dependency_overrides[get_db] = lambda: db
    return application


@pytest.fixture
def client(app):
    # Not entered as a context manager, so the lifespan never opens a real pool.
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def admin_token() -> str:
    return security.build_access_token(admin_id=1, username="admin", role="superadmin")


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def car_row():
    return {
        "id": 2,
        "name": "Crimson X",
        "tagline": "The Ultimate Expression",
        "description": "Our most powerful creation.",
        "price": 425000,
        "horsepower": 847,
        "acceleration": 2.8,
        "top_speed": 217,
        "image_url": "https://images.unsplash.com/photo-1617788138017-80ad40651399?w=800&q=80",
        "featured": 1,
        "active": 1,
        "created_at": "2026-01-15T10:30:00+00:00",
    }
