"""
Domain entities for the book catalog.

Entities are the core building blocks of the domain. Both read models of the
service (the database collection and the static dataset) hand out the same
``Book`` entity so the API layer never needs to know where a record came from.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Book:
    """
    Represents a single book record in the catalog.

    Records are immutable once loaded. Identity is NOT enforced: two records
    may share an ISBN, and lookups simply return the first match.
    """

    book_id: int
    """Numeric catalog identifier (``bookID`` on the wire)"""

    title: str
    """Book title"""

    authors: str
    """Author names joined with '-' (the format is not validated)"""

    average_rating: float
    """Average user rating, typically between 0.0 and 5.0"""

    isbn: int
    """Short form ISBN, stored as an integer"""

    isbn13: int
    """13-digit ISBN, stored as an integer"""

    language_code: str
    """Short language code (e.g., 'eng', 'en-US', 'spa')"""

    num_pages: int
    """Number of pages"""

    ratings_count: int = 0
    """Number of ratings"""

    text_reviews_count: int = 0
    """Number of written reviews"""

    def __post_init__(self) -> None:
        """Validate book data."""
        if not self.title or not self.title.strip():
            raise ValueError("Book title cannot be empty")

        if self.num_pages < 0:
            raise ValueError(f"num_pages cannot be negative, got {self.num_pages}")

    def matches_title(self, fragment: str) -> bool:
        """Case-insensitive substring match on the title."""
        return fragment.lower() in self.title.lower()

    @staticmethod
    def from_record(record: Dict[str, Any]) -> "Book":
        """
        Build a Book from a raw record using the catalog's wire field names.

        Both the bundled JSON file and the database documents use these
        names (``bookID``, ``average_rating``, ...). Unknown keys such as
        Mongo's ``_id`` are ignored.

        Args:
            record: Mapping with wire field names

        Returns:
            A new Book instance

        Raises:
            ValueError: If a required field is missing or not convertible
        """
        try:
            return Book(
                book_id=int(record["bookID"]),
                title=str(record["title"]),
                authors=str(record.get("authors") or ""),
                average_rating=float(record.get("average_rating") or 0.0),
                isbn=int(record["isbn"]),
                isbn13=int(record["isbn13"]),
                language_code=str(record.get("language_code") or ""),
                num_pages=int(record.get("num_pages") or 0),
                ratings_count=int(record.get("ratings_count") or 0),
                text_reviews_count=int(record.get("text_reviews_count") or 0),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid book record: {e}") from e

    def to_record(self) -> Dict[str, Any]:
        """Inverse of ``from_record``: a dict using the wire field names."""
        return {
            "bookID": self.book_id,
            "title": self.title,
            "authors": self.authors,
            "average_rating": self.average_rating,
            "isbn": self.isbn,
            "isbn13": self.isbn13,
            "language_code": self.language_code,
            "num_pages": self.num_pages,
            "ratings_count": self.ratings_count,
            "text_reviews_count": self.text_reviews_count,
        }
