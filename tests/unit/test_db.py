"""Unit tests for the store wrapper."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from core import db as db_module
from core.db import Database, affected_rows, fits_int4


@pytest.mark.parametrize(
    "status, expected",
    [
        ("UPDATE 3", 3),
        ("DELETE 0", 0),
        ("INSERT 0 1", 1),
        ("CREATE TABLE", 0),
        (None, 0),
    ],
)
def test_affected_rows(status, expected):
    assert affected_rows(status) == expected


def test_database_url_requires_env(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module.database_url()


def test_database_url_drops_sslmode(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/apex?sslmode=require&application_name=web")

    assert db_module.database_url() == "postgresql://u:p@db:5432/apex?application_name=web"


def test_pool_before_open_raises():
    with pytest.raises(RuntimeError):
        Database("postgresql://localhost/apex").pool()


@pytest.mark.asyncio
async def test_execute_returns_rows_affected():
    database = Database("postgresql://localhost/apex")
    pool = AsyncMock()
    pool.execute.return_value = "UPDATE 2"
    database._pool = pool

    changes = await database.execute("UPDATE cars SET active = 0 WHERE id = $1", 5)

    assert changes == 2
    pool.execute.assert_awaited_once_with("UPDATE cars SET active = 0 WHERE id = $1", 5)


@pytest.mark.asyncio
async def test_fetch_helpers_return_dicts():
    database = Database("postgresql://localhost/apex")
    pool = AsyncMock()
    pool.fetchrow.return_value = {"id": 1, "name": "Shadow S"}
    pool.fetch.return_value = [{"id": 1}, {"id": 2}]
    database._pool = pool

    assert await database.fetch_one("SELECT 1") == {"id": 1, "name": "Shadow S"}
    assert await database.fetch_all("SELECT 1") == [{"id": 1}, {"id": 2}]

    pool.fetchrow.return_value = None
    assert await database.fetch_one("SELECT 1") is None


@pytest.mark.asyncio
async def test_close_releases_pool():
    database = Database("postgresql://localhost/apex")
    pool = AsyncMock()
    database._pool = pool

    await database.close()

    pool.close.assert_awaited_once()
    with pytest.raises(RuntimeError):
        database.pool()


@pytest.mark.parametrize(
    "value, expected",
    [(1, True), (2**31 - 1, True), (2**31, False), (3000000000, False), (-(2**31), True), (-(2**31) - 1, False)],
)
def test_fits_int4(value, expected):
    assert fits_int4(value) is expected


@pytest.mark.asyncio
async def test_executemany_runs_inside_one_transaction():
    database = Database("postgresql://localhost/apex")
    conn = MagicMock()
    conn.executemany = AsyncMock()
    pool = MagicMock()
    pool.acquire.return_value.__aenter__ = AsyncMock(return_value=conn)
    pool.acquire.return_value.__aexit__ = AsyncMock(return_value=False)
    conn.transaction.return_value.__aenter__ = AsyncMock()
    conn.transaction.return_value.__aexit__ = AsyncMock(return_value=False)
    database._pool = pool

    rows = [("Phantom GT",), ("Shadow S",)]
    await database.executemany("INSERT INTO cars (name) VALUES ($1)", rows)

    conn.transaction.assert_called_once_with()
    conn.executemany.assert_awaited_once_with("INSERT INTO cars (name) VALUES ($1)", rows)
    conn.transaction.return_value.__aexit__.assert_awaited_once()
