"""Tests for app wiring: health, middleware, error rendering and page routes."""

import asyncpg
import pytest
from fastapi.testclient import TestClient

from core.db import get_db
from main import create_app


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    assert body["timestamp"].endswith("+00:00")


def test_security_headers(client):
    resp = client.get("/api/health")

    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert "img-src 'self' https://images.unsplash.com" in resp.headers["Content-Security-Policy"]


def test_rate_limit_applies_to_api_paths(monkeypatch, db):
    monkeypatch.setenv("RATE_LIMIT_MAX", "2")
    app = create_app()
    app.dependency_overrides[get_db] = lambda: db
    client = TestClient(app)

    assert client.get("/api/health").status_code == 200
    assert client.get("/api/cars").status_code == 200
    blocked = client.get("/api/health")

    assert blocked.status_code == 429
    assert blocked.json() == {"error": "Too many requests, please try again later."}
    assert "Retry-After" in blocked.headers


def test_store_error_message_is_passed_through(client, db):
    db.fetch_all.side_effect = asyncpg.PostgresError("relation \"cars\" does not exist")

    resp = client.get("/api/cars")

    assert resp.status_code == 500
    assert resp.json() == {"error": "relation \"cars\" does not exist"}


def test_unexpected_error_is_generic_500(client, db):
    db.fetch_all.side_effect = RuntimeError("boom")

    resp = client.get("/api/testimonials")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Something went wrong!"}


def test_unknown_api_path_is_json_404(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}


def test_non_integer_id_is_400(client):
    resp = client.get("/api/cars/abc")

    assert resp.status_code == 400
    assert "car_id" in resp.json()["error"]


@pytest.fixture
def public_dir(tmp_path, monkeypatch):
    (tmp_path / "index.html").write_text("<h1>home</h1>")
    (tmp_path / "admin.html").write_text("<h1>admin</h1>")
    (tmp_path / "styles.css").write_text("body{}")
    monkeypatch.setenv("PUBLIC_DIR", str(tmp_path))
    return tmp_path


def test_pages(client, public_dir):
    assert client.get("/").text == "<h1>home</h1>"
    assert client.get("/admin").text == "<h1>admin</h1>"
    assert client.get("/styles.css").text == "body{}"


def test_unknown_page_falls_back_to_index(client, public_dir):
    resp = client.get("/models/crimson-x")

    assert resp.status_code == 200
    assert resp.text == "<h1>home</h1>"


def test_page_routes_do_not_escape_public_dir(client, public_dir):
    (public_dir.parent / "secret.txt").write_text("nope")

    resp = client.get("/..%2Fsecret.txt")

    assert "nope" not in resp.text
