"""
Domain service for the startup bootstrap of the database collection.

The catalog collection is not migrated: on every start it is cleared and
repopulated with a fixed seed. Running the bootstrap twice leaves the
collection in the same state, so it is safe to call from both the server
lifespan and the operations script.
"""

import logging
from typing import Sequence

from app.domain.entities import Book
from app.domain.ports import BookCatalogRepository


logger = logging.getLogger(__name__)


SEED_BOOKS: Sequence[Book] = (
    Book(
        book_id=36,
        title="The Lord of the Rings: Weapons and Warfare",
        authors="Chris   Smith-Christopher  Lee-Richard Taylor",
        average_rating=4.53,
        isbn=618391002,
        isbn13=9780618391004,
        language_code="eng",
        num_pages=218,
        ratings_count=18934,
        text_reviews_count=43,
    ),
)


class CatalogSeedingService:
    """
    Clears the database collection and inserts the seed records.

    Usage:
        service = CatalogSeedingService(catalog_repo=mongo_repo)
        service.seed()
    """

    def __init__(
        self,
        catalog_repo: BookCatalogRepository,
        seed_books: Sequence[Book] = SEED_BOOKS,
    ) -> None:
        """
        Args:
            catalog_repo: Repository for the database-backed collection
            seed_books: Records to insert after clearing
        """
        self._catalog_repo = catalog_repo
        self._seed_books = tuple(seed_books)

    def seed(self) -> int:
        """
        Reset the collection to the seed records.

        Errors are not handled here; a failing reseed must abort startup.

        Returns:
            Number of records in the collection afterwards

        Raises:
            RuntimeError: If the repository fails
        """
        self._catalog_repo.reset_and_seed(self._seed_books)
        total = self._catalog_repo.count()
        logger.info("Seeded catalog collection with %s book(s)", total)
        return total
