"""Integration tests for src/main.py — routes wired through the ASGI transport."""

from unittest.mock import AsyncMock

import httpx
import pytest

from src.config.settings import get_settings
from src.errors import NotFoundError
from src.main import app, provide_catalog, provide_store
from src.records.store import MemoryRecordStore


@pytest.fixture
def catalog():
    mock = AsyncMock()
    mock.get_person.return_value = {"nombre": "Luke Skywalker", "genero": "masculino"}
    return mock


@pytest.fixture
def store():
    return MemoryRecordStore()


@pytest.fixture
async def app_client(settings, catalog, store):
    """httpx AsyncClient wired to the FastAPI app with in-memory collaborators."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[provide_catalog] = lambda: catalog
    app.dependency_overrides[provide_store] = lambda: store
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


class TestHealthEndpoint:

    async def test_health(self, app_client):
        resp = await app_client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert "version" in data

    async def test_request_id_header(self, app_client):
        resp = await app_client.get("/health")
        assert len(resp.headers["x-request-id"]) == 12


class TestExternalRoute:

    async def test_success(self, app_client, catalog):
        resp = await app_client.get("/records/external/1")

        assert resp.status_code == 200
        assert resp.json()["datos"]["nombre"] == "Luke Skywalker"
        assert resp.headers["access-control-allow-origin"] == "*"
        catalog.get_person.assert_awaited_once_with(1)

    async def test_invalid_id(self, app_client, catalog):
        resp = await app_client.get("/records/external/abc")

        assert resp.status_code == 400
        assert resp.json()["idRecibido"] == "abc"
        catalog.get_person.assert_not_called()

    async def test_not_found(self, app_client, catalog):
        catalog.get_person.side_effect = NotFoundError("Personaje con ID 999 no encontrado en SWAPI")
        resp = await app_client.get("/records/external/999")
        assert resp.status_code == 404


class TestRecordRoutes:

    async def test_create_then_get(self, app_client):
        created = await app_client.post(
            "/records", json={"nombre": "Ahsoka Tano", "genero": "femenino"}
        )
        assert created.status_code == 201
        record_id = created.json()["datos"]["id"]

        fetched = await app_client.get(f"/records/{record_id}")
        assert fetched.status_code == 200
        assert fetched.json()["datos"]["nombre"] == "Ahsoka Tano"

    async def test_create_invalid_json(self, app_client):
        resp = await app_client.post(
            "/records", content=b"{nope", headers={"content-type": "application/json"}
        )
        assert resp.status_code == 400
        assert resp.json()["mensaje"] == "El cuerpo de la petición no es un JSON válido"

    async def test_create_empty_body(self, app_client):
        resp = await app_client.post("/records")
        assert resp.status_code == 400
        assert resp.json()["mensaje"] == "El cuerpo de la petición está vacío"

    async def test_get_unknown(self, app_client):
        resp = await app_client.get("/records/does-not-exist")
        assert resp.status_code == 404
        assert resp.json()["idBuscado"] == "does-not-exist"

    async def test_list_empty(self, app_client):
        resp = await app_client.get("/records")
        assert resp.status_code == 200
        body = resp.json()
        assert body["total"] == 0
        assert body["datos"] == []

    async def test_list_with_limit(self, app_client, store, stored_record):
        await store.create(stored_record)
        await store.create({**stored_record, "id": "second", "creado": "2026-01-08T14:00:00.000Z"})

        resp = await app_client.get("/records", params={"limite": "500"})

        body = resp.json()
        assert body["limite"] == 100
        assert body["total"] == 2
        assert [r["id"] for r in body["datos"]] == ["second", stored_record["id"]]
