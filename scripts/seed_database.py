#!/usr/bin/env python3
"""
Catalog Seeding Script.

This script clears the catalog collection in MongoDB and inserts the fixed
seed record, the same bootstrap the API server runs at startup.

Usage:
    python -m scripts.seed_database --mongo-url mongodb://localhost/books
"""

import argparse
import logging
import sys

from app.api.v1.dependencies import MONGO_COLLECTION, MONGO_TIMEOUT_MS, MONGO_URL
from app.domain.services import CatalogSeedingService
from app.domain.value_objects import ReadinessState
from app.infrastructure.db.mongo_book_catalog_repository import MongoBookCatalogRepository
from app.infrastructure.db.mongo_connection import MongoConnection

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main(mongo_url: str, collection: str, timeout_ms: int = MONGO_TIMEOUT_MS) -> int:
    """
    Main entry point for the seeding script.

    Args:
        mongo_url: MongoDB connection string
        collection: Name of the catalog collection
        timeout_ms: Server selection timeout in milliseconds

    Returns:
        Number of books in the collection after seeding
    """
    logger.info(f"Seeding collection '{collection}' at {mongo_url}")

    connection = MongoConnection(mongo_url, timeout_ms=timeout_ms)
    try:
        if connection.connect() is not ReadinessState.READY:
            logger.error("MongoDB is not reachable; nothing was seeded")
            sys.exit(1)

        repo = MongoBookCatalogRepository(connection.get_collection(collection))
        return CatalogSeedingService(repo).seed()
    except RuntimeError as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)
    finally:
        connection.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Reset the book catalog collection to its seed data")
    parser.add_argument(
        "--mongo-url", "-u",
        type=str,
        default=MONGO_URL,
        help="MongoDB connection string (default: $MONGO_URL or mongodb://localhost/books)"
    )
    parser.add_argument(
        "--collection", "-c",
        type=str,
        default=MONGO_COLLECTION,
        help="Catalog collection name (default: $MONGO_COLLECTION or 'books')"
    )
    parser.add_argument(
        "--timeout-ms", "-t",
        type=int,
        default=MONGO_TIMEOUT_MS,
        help="Server selection timeout in milliseconds (default: 5000)"
    )

    args = parser.parse_args()
    total = main(args.mongo_url, args.collection, args.timeout_ms)
    logger.info(f"Catalog now holds {total} book(s)")
