"""
MongoDB implementation of the BookCatalogRepository port.

Documents are stored with the catalog's wire field names (``bookID``,
``average_rating``, ...). Mongo's ``_id`` is projected out of every read so
it never reaches the domain.
"""

from typing import List, Optional, Sequence, Union

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.domain.entities import Book
from app.domain.ports import BookCatalogRepository


_NO_ID = {"_id": 0}


class MongoBookCatalogRepository(BookCatalogRepository):
    """
    No unique index is created on ``isbn``; duplicate ISBNs are allowed and
    ``find_by_isbn`` returns the first match in natural order.
    """

    def __init__(self, collection: Collection) -> None:
        """
        Initialize the repository with a pymongo collection
        """
        self._collection = collection

    def reset_and_seed(self, books: Sequence[Book]) -> None:
        """Delete every document, then insert the seed records."""
        try:
            self._collection.delete_many({})
            if books:
                self._collection.insert_many([book.to_record() for book in books])
        except PyMongoError as e:
            raise RuntimeError(f"Database error while seeding books: {e}") from e

    def find_all(self) -> List[Book]:
        """Retrieve every book in the collection."""
        try:
            documents = list(self._collection.find({}, _NO_ID))
        except PyMongoError as e:
            raise RuntimeError(f"Database error while listing books: {e}") from e

        return [Book.from_record(doc) for doc in documents]

    def find_by_isbn(self, isbn: Union[int, float]) -> Optional[Book]:
        """Retrieve the first book whose ISBN numerically equals ``isbn``."""
        try:
            document = self._collection.find_one({"isbn": isbn}, _NO_ID)
        except PyMongoError as e:
            raise RuntimeError(f"Database error while looking up isbn {isbn}: {e}") from e

        if document is None:
            return None

        return Book.from_record(document)

    def count(self) -> int:
        """Get the total number of books in the collection."""
        try:
            return self._collection.count_documents({})
        except PyMongoError as e:
            raise RuntimeError(f"Database error while counting books: {e}") from e
