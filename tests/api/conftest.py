"""
Fixtures for API tests: fake ports wired through dependency overrides.

The readiness gate runs as HTTP middleware, outside of Depends(), so the
fake connection is installed as the module-level singleton instead.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.v1 import dependencies
from app.main import app

from fakes import (
    FakeBookCatalogRepository,
    FakeDatabaseConnection,
    FakeStaticBookDataset,
    STATIC_BOOKS,
)


@pytest.fixture
def connection():
    return FakeDatabaseConnection()


@pytest.fixture
def catalog_repo():
    return FakeBookCatalogRepository()


@pytest.fixture
def static_dataset():
    return FakeStaticBookDataset(STATIC_BOOKS)


@pytest.fixture
def api_key():
    return "s3cret"


@pytest.fixture
def client(monkeypatch, connection, catalog_repo, static_dataset, api_key):
    monkeypatch.setattr(dependencies, "_database_connection", connection)
    app.dependency_overrides[dependencies.get_catalog_repository] = lambda: catalog_repo
    app.dependency_overrides[dependencies.get_static_dataset] = lambda: static_dataset
    app.dependency_overrides[dependencies.get_api_key] = lambda: api_key

    yield TestClient(app)

    app.dependency_overrides.clear()
