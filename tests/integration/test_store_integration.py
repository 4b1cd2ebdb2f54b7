"""Store-backed tests. Require a disposable PostgreSQL database at TEST_DATABASE_URL."""

import os

import pytest
import pytest_asyncio

from admin import service as admin_service
from catalog import repository as catalog_repository
from core import schema, seed
from core.db import Database
from leads import repository as leads_repository
from leads import schemas as leads_schemas
from leads import service as leads_service

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not os.environ.get("TEST_DATABASE_URL"), reason="TEST_DATABASE_URL not set"),
]


@pytest_asyncio.fixture
async def store():
    database = Database(os.environ["TEST_DATABASE_URL"])
    await database.open()
    for table in schema.TABLES:
        await database.execute(f"DROP TABLE IF EXISTS {table}")
    await seed.bootstrap(database)
    try:
        yield database
    finally:
        await database.close()


@pytest.mark.asyncio
async def test_seed_twice_keeps_one_admin_and_three_cars(store):
    await seed.bootstrap(store)

    assert await store.fetch_val("SELECT COUNT(*) FROM admins") == 1
    assert await store.fetch_val("SELECT COUNT(*) FROM cars") == 3
    assert await store.fetch_val("SELECT COUNT(*) FROM testimonials") == 3


@pytest.mark.asyncio
async def test_cars_list_featured_first_then_alphabetical(store):
    await catalog_repository.insert_car(store, name="Aurora", price=150000)
    await catalog_repository.insert_car(store, name="Zenith", price=510000, featured=1)

    names = [car["name"] for car in await catalog_repository.list_active_cars(store)]

    assert names == ["Crimson X", "Zenith", "Aurora", "Phantom GT", "Shadow S"]


@pytest.mark.asyncio
async def test_soft_deleted_car_is_hidden_but_kept(store):
    car = (await catalog_repository.list_active_cars(store))[-1]

    changes = await catalog_repository.soft_delete_car(store, car["id"])

    assert changes == 1
    assert await catalog_repository.get_active_car(store, car["id"]) is None
    assert car["id"] not in [c["id"] for c in await catalog_repository.list_active_cars(store)]
    assert await store.fetch_val("SELECT COUNT(*) FROM cars") == 3


@pytest.mark.asyncio
async def test_contact_shows_up_in_admin_listing_as_new(store):
    result = await leads_service.submit_contact(
        store,
        leads_schemas.ContactRequest(name="Ana Ruiz", email="ana@example.com"),
    )

    contacts = await leads_repository.list_contacts(store)

    assert contacts[0]["id"] == result["id"]
    assert (contacts[0]["name"], contacts[0]["email"], contacts[0]["status"]) == ("Ana Ruiz", "ana@example.com", "new")


@pytest.mark.asyncio
async def test_booking_reference_uses_row_id(store):
    result = await leads_service.book_test_drive(
        store,
        leads_schemas.TestDriveRequest(
            name="Ana Ruiz",
            email="ana@example.com",
            phone="555-0100",
            model="Shadow S",
            preferred_date="2026-11-02",
        ),
    )

    assert result["booking_reference"] == f"APEX-TD-{result['id']:06d}"


@pytest.mark.asyncio
async def test_stats_reflect_lead_states(store):
    await leads_repository.insert_contact(store, name="A", email="a@example.com")
    contact_id = await leads_repository.insert_contact(store, name="B", email="b@example.com")
    await leads_repository.update_contact_status(store, contact_id, "responded")
    await leads_repository.insert_test_drive(
        store, name="C", email="c@example.com", phone="1", model="Phantom GT", preferred_date="2026-11-03"
    )

    stats = await admin_service.stats(store)

    assert stats == {
        "totalContacts": 2,
        "totalTestDrives": 1,
        "totalCars": 3,
        "newContacts": 1,
        "pendingTestDrives": 1,
    }


@pytest.mark.asyncio
async def test_status_update_on_unknown_id_changes_nothing(store):
    assert await leads_repository.update_test_drive_status(store, 123456, "confirmed") == 0
    assert await leads_repository.delete_test_drive(store, 123456) == 0
