from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from productapi.app import create_app  # noqa: E402
from productapi.db.session import reset_engine  # noqa: E402

BASE = "/api/products"
PEN = {"name": "Pen", "quantity": 10, "price": 1.5}


@pytest.fixture()
def client(tmp_path, monkeypatch):
    """App wired to a fresh SQLite file; the lifespan hook creates the schema."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'api.db'}")
    monkeypatch.setenv("AUTO_CREATE_TABLES", "1")
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    reset_engine()

    with TestClient(create_app()) as test_client:
        yield test_client

    reset_engine()


class FailingRepository:
    """Gateway whose every call blows up, as if the store were unreachable."""

    def _fail(self, *args, **kwargs):
        raise RuntimeError("database unavailable")

    find_all = find_by_id = save = exists_by_id = delete_by_id = delete_all = _fail


def test_pen_scenario(client):
    created = client.post(BASE, json=PEN)
    assert created.status_code == 201
    assert created.json() == {"id": 1, "name": "Pen", "quantity": 10, "price": 1.5}

    fetched = client.get(f"{BASE}/1")
    assert fetched.status_code == 200
    assert fetched.json() == created.json()

    updated = client.put(f"{BASE}/1", json={"name": "Pen", "quantity": 5, "price": 1.5})
    assert updated.status_code == 200
    assert updated.json() == {"id": 1, "name": "Pen", "quantity": 5, "price": 1.5}

    deleted = client.delete(f"{BASE}/1")
    assert deleted.status_code == 204
    assert deleted.content == b""

    missing = client.get(f"{BASE}/1")
    assert missing.status_code == 404
    assert missing.content == b""


def test_list_empty_returns_204_without_body(client):
    response = client.get(BASE)
    assert response.status_code == 204
    assert response.content == b""


def test_list_returns_all_products(client):
    client.post(BASE, json=PEN)
    client.post(BASE, json={"name": "Notebook", "quantity": 2, "price": 3.25})

    response = client.get(BASE)

    assert response.status_code == 200
    names = sorted(p["name"] for p in response.json())
    assert names == ["Notebook", "Pen"]


def test_create_ignores_payload_id(client):
    response = client.post(BASE, json={**PEN, "id": 99})
    assert response.status_code == 201
    assert response.json()["id"] == 1
    assert client.get(f"{BASE}/99").status_code == 404


def test_update_keeps_stored_id(client):
    first = client.post(BASE, json=PEN).json()
    second = client.post(BASE, json={"name": "Pencil", "quantity": 3, "price": 0.75}).json()

    response = client.put(
        f"{BASE}/{first['id']}",
        json={"id": second["id"], "name": "Marker", "quantity": 7, "price": 2.0},
    )

    assert response.status_code == 200
    assert response.json() == {"id": first["id"], "name": "Marker", "quantity": 7, "price": 2.0}
    assert client.get(f"{BASE}/{second['id']}").json() == second


def test_update_missing_returns_404(client):
    response = client.put(f"{BASE}/5", json=PEN)
    assert response.status_code == 404
    assert response.content == b""


def test_delete_missing_returns_404(client):
    client.post(BASE, json=PEN)
    assert client.delete(f"{BASE}/1").status_code == 204
    # second delete on the same id is a plain not-found
    assert client.delete(f"{BASE}/1").status_code == 404


def test_delete_all_then_list_is_empty(client):
    client.post(BASE, json=PEN)
    client.post(BASE, json=PEN)

    response = client.delete(BASE)

    assert response.status_code == 204
    assert client.get(BASE).status_code == 204


def test_non_numeric_id_is_rejected_by_validation(client):
    assert client.get(f"{BASE}/abc").status_code == 422


def test_invalid_body_is_rejected_by_validation(client):
    response = client.post(BASE, json={"name": "Pen", "quantity": "lots", "price": 1.5})
    assert response.status_code == 422


def test_cors_allows_any_origin(client):
    response = client.get(BASE, headers={"Origin": "http://localhost:4200"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("GET", BASE, None),
        ("GET", f"{BASE}/1", None),
        ("POST", BASE, PEN),
        ("PUT", f"{BASE}/1", PEN),
        ("DELETE", f"{BASE}/1", None),
        ("DELETE", BASE, None),
    ],
)
def test_gateway_failure_becomes_bare_500(method, path, body, caplog):
    client = TestClient(create_app(repository=FailingRepository()))

    with caplog.at_level(logging.ERROR, logger="productapi.routers.products"):
        response = client.request(method, path, json=body)

    assert response.status_code == 500
    assert response.content == b""
    assert "database unavailable" in caplog.text


def test_price_with_more_than_two_decimals_is_rejected(client):
    response = client.post(BASE, json={"name": "Gem", "quantity": 1, "price": 1.234})

    assert response.status_code == 422
    assert client.get(BASE).status_code == 204


def test_price_round_trips_exactly(client):
    created = client.post(BASE, json={"name": "Gem", "quantity": 1, "price": 12345.67})
    assert created.status_code == 201

    fetched = client.get(f"{BASE}/{created.json()['id']}").json()
    assert fetched["price"] == 12345.67


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
def test_id_outside_64_bit_range_is_rejected_by_validation(client, method):
    body = PEN if method == "PUT" else None
    response = client.request(method, f"{BASE}/{10**20}", json=body)
    assert response.status_code == 422


def test_largest_64_bit_id_is_a_plain_not_found(client):
    assert client.get(f"{BASE}/{2**63 - 1}").status_code == 404


def test_collection_routes_answer_with_trailing_slash(client):
    created = client.post(f"{BASE}/", json=PEN, follow_redirects=False)
    assert created.status_code == 201

    listed = client.get(f"{BASE}/", follow_redirects=False)
    assert listed.status_code == 200
    assert [p["name"] for p in listed.json()] == ["Pen"]

    assert client.delete(f"{BASE}/", follow_redirects=False).status_code == 204
    assert client.get(f"{BASE}/", follow_redirects=False).status_code == 204
