"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the database connection,
repositories and services for use with FastAPI's Depends() system, plus
the readiness check used by the HTTP gate in app.main.

Note: We use module-level singletons instead of @lru_cache with Depends()
parameters, which is an antipattern that can cause unexpected behavior.
Tests replace them through ``app.dependency_overrides``; the connection,
which the gate reads outside of Depends(), is replaced on the module.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends

from app.domain.ports import BookCatalogRepository, DatabaseConnection, StaticBookDataset
from app.domain.services import BookSearchService, CatalogSeedingService
from app.infrastructure.db.mongo_book_catalog_repository import MongoBookCatalogRepository
from app.infrastructure.db.mongo_connection import MongoConnection
from app.infrastructure.static.json_book_dataset import DEFAULT_DATA_PATH, JsonBookDataset

load_dotenv()

logger = logging.getLogger(__name__)

# Configuration from environment
PORT = int(os.getenv("PORT", "8080"))
HOST = os.getenv("HOST", "0.0.0.0")
MONGO_URL = os.getenv("MONGO_URL", "mongodb://localhost/books")
MONGO_COLLECTION = os.getenv("MONGO_COLLECTION", "books")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
API_KEY = os.getenv("API_KEY")
BOOKS_DATA_PATH = Path(os.getenv("BOOKS_DATA_PATH", str(DEFAULT_DATA_PATH)))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class DatabaseUnavailableError(Exception):
    """Raised by the readiness gate when the database is not READY."""


# Module-level singletons (initialized lazily)
_database_connection: Optional[MongoConnection] = None
_catalog_repository: Optional[BookCatalogRepository] = None
_static_dataset: Optional[StaticBookDataset] = None


def get_database_connection() -> MongoConnection:
    """Provide the process-wide MongoDB connection (not yet connected)."""
    global _database_connection
    if _database_connection is None:
        _database_connection = MongoConnection(MONGO_URL, timeout_ms=MONGO_TIMEOUT_MS)
    return _database_connection


def get_catalog_repository() -> BookCatalogRepository:
    """Provide a singleton instance of the database-backed repository."""
    global _catalog_repository
    if _catalog_repository is None:
        collection = get_database_connection().get_collection(MONGO_COLLECTION)
        _catalog_repository = MongoBookCatalogRepository(collection)
    return _catalog_repository


def get_static_dataset() -> StaticBookDataset:
    """Provide the static dataset, loading the file on first use."""
    global _static_dataset
    if _static_dataset is None:
        _static_dataset = JsonBookDataset(BOOKS_DATA_PATH)
    return _static_dataset


def get_search_service(
    dataset: StaticBookDataset = Depends(get_static_dataset),
) -> BookSearchService:
    """Provide the search service wired to the static dataset."""
    return BookSearchService(dataset)


def get_seeding_service() -> CatalogSeedingService:
    """Provide the seeding bootstrap wired to the catalog repository."""
    return CatalogSeedingService(get_catalog_repository())


def get_api_key() -> Optional[str]:
    """Secret value exposed by GET /key."""
    return API_KEY


def require_database_ready(connection: Optional[DatabaseConnection] = None) -> None:
    """
    Readiness check run by the HTTP gate before every non-documentation request.

    Args:
        connection: Connection to check (the process-wide one by default)

    Raises:
        DatabaseUnavailableError: If the connection is not READY
    """
    if connection is None:
        connection = get_database_connection()
    if not connection.is_ready():
        logger.debug("Rejecting request: database is %s", connection.state.value)
        raise DatabaseUnavailableError()


def reset_dependencies() -> None:
    """
    Reset all singletons. Useful for testing.

    Closes the database client if one was created.
    """
    global _database_connection, _catalog_repository, _static_dataset

    if _database_connection is not None:
        _database_connection.close()

    _database_connection = None
    _catalog_repository = None
    _static_dataset = None
