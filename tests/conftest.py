"""Shared fixtures for the Star Wars Records API test suite."""

import json

import pytest

from src.config.settings import Settings, get_settings
from src.records.store import MemoryRecordStore


@pytest.fixture
def settings() -> Settings:
    """Explicit settings object, independent of the process environment."""
    return Settings(
        _env_file=None,
        record_store_backend="memory",
        records_table="test-personajes",
        environment="test",
    )


@pytest.fixture
def production_settings() -> Settings:
    return Settings(_env_file=None, record_store_backend="memory", environment="production")


@pytest.fixture
def memory_store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture
def luke_swapi() -> dict:
    """Luke Skywalker exactly as SWAPI returns him."""
    return {
        "name": "Luke Skywalker",
        "height": "172",
        "mass": "77",
        "hair_color": "blond",
        "skin_color": "fair",
        "eye_color": "blue",
        "birth_year": "19BBY",
        "gender": "male",
        "homeworld": "https://swapi.py4e.com/api/planets/1/",
        "films": [
            "https://swapi.py4e.com/api/films/1/",
            "https://swapi.py4e.com/api/films/2/",
        ],
        "species": [],
        "vehicles": ["https://swapi.py4e.com/api/vehicles/14/"],
        "starships": ["https://swapi.py4e.com/api/starships/12/"],
        "created": "2014-12-09T13:50:51.644000Z",
        "edited": "2014-12-20T21:17:56.891000Z",
        "url": "https://swapi.py4e.com/api/people/1/",
    }


@pytest.fixture
def stored_record() -> dict:
    """A record as the create handler would persist it."""
    return {
        "id": "1f0c6a1e-5b7d-4c55-9a0e-0f6f4a2b9c11",
        "nombre": "Obi-Wan Kenobi",
        "altura": "182",
        "masa": "77",
        "genero": "masculino",
        "peliculas": [],
        "especies": [],
        "vehiculos": [],
        "naves_espaciales": [],
        "creado": "2026-01-08T10:00:00.000Z",
        "actualizado": "2026-01-08T10:00:00.000Z",
    }


@pytest.fixture
def override_settings(monkeypatch):
    """Factory fixture: set env vars and clear settings cache.

    Usage:
        override_settings(RECORDS_TABLE="t", ENVIRONMENT="production")
    """
    def _override(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key.upper(), str(value))
        # Clear lru_cache so Settings re-reads env
        get_settings.cache_clear()

    yield _override

    # Always clear cache on teardown so other tests get fresh settings
    get_settings.cache_clear()


def body_of(response) -> dict:
    """Decode the JSON body of a handler response."""
    return json.loads(response.body)
