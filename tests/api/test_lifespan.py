"""
Tests for the application lifespan: connect, load dataset, seed.

The module-level singletons in app.api.v1.dependencies are replaced with
a MongoConnection over a mocked client and fake repositories, then the app
is started with ``with TestClient(app)`` so the lifespan handler runs.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from app.api.v1 import dependencies
from app.domain.services import SEED_BOOKS
from app.infrastructure.db.mongo_connection import MongoConnection
from app.main import app

from fakes import FakeBookCatalogRepository, FakeStaticBookDataset, STATIC_BOOKS, make_book


def _connection(client: MagicMock) -> MongoConnection:
    def factory(url, **kwargs):
        client.event_listeners = kwargs["event_listeners"]
        return client

    return MongoConnection("mongodb://db/books", client_factory=factory)


@pytest.fixture
def mongo_client():
    return MagicMock()


@pytest.fixture
def stale_repo():
    return FakeBookCatalogRepository([make_book(90, "Stale", 1.0, 10), make_book(91, "Staler", 1.0, 10)])


@pytest.fixture
def wire_singletons(monkeypatch, stale_repo):
    def wire(client: MagicMock) -> MongoConnection:
        connection = _connection(client)
        monkeypatch.setattr(dependencies, "_database_connection", connection)
        monkeypatch.setattr(dependencies, "_catalog_repository", stale_repo)
        monkeypatch.setattr(dependencies, "_static_dataset", FakeStaticBookDataset(STATIC_BOOKS))
        return connection

    return wire


class TestStartupWithDatabase:
    """Lifespan behavior when the initial ping succeeds."""

    def test_catalog_is_reseeded_on_startup(self, wire_singletons, mongo_client, stale_repo):
        wire_singletons(mongo_client)

        with TestClient(app) as client:
            response = client.get("/books/all")

        assert response.status_code == 200
        assert [b["bookID"] for b in response.json()] == [36]
        assert stale_repo.find_all() == list(SEED_BOOKS)

    def test_shutdown_closes_client_and_resets_singletons(self, wire_singletons, mongo_client):
        wire_singletons(mongo_client)

        with TestClient(app):
            pass

        mongo_client.close.assert_called_once()
        assert dependencies._database_connection is None


class TestStartupWithoutDatabase:
    """Lifespan behavior when MongoDB is unreachable at startup."""

    @pytest.fixture
    def mongo_client(self):
        client = MagicMock()
        client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")
        return client

    def test_server_starts_and_rejects_requests(self, wire_singletons, mongo_client, stale_repo):
        wire_singletons(mongo_client)

        with TestClient(app) as client:
            response = client.get("/lang/list")

        assert response.status_code == 503
        assert response.json() == {"error": "Service unavailable"}
        assert stale_repo.count() == 2

    def test_seeding_runs_once_database_becomes_reachable(
        self, wire_singletons, mongo_client, stale_repo
    ):
        wire_singletons(mongo_client)

        with TestClient(app) as client:
            mongo_client.event_listeners[0].succeeded(MagicMock())
            response = client.get("/books/all")

        assert response.status_code == 200
        assert stale_repo.find_all() == list(SEED_BOOKS)
