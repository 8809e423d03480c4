"""Fake ports and sample data shared by the API tests."""

from typing import List, Optional, Sequence, Union

from app.domain.entities import Book
from app.domain.services import SEED_BOOKS
from app.domain.value_objects import ReadinessState


class FakeDatabaseConnection:
    """Connection whose readiness the test controls."""

    def __init__(self, state: ReadinessState = ReadinessState.READY):
        self.state = state

    def is_ready(self) -> bool:
        return self.state is ReadinessState.READY


class FakeBookCatalogRepository:
    """In-memory catalog repository; optionally fails every lookup."""

    def __init__(self, books: Sequence[Book] = SEED_BOOKS, fail: bool = False):
        self._books: List[Book] = list(books)
        self._fail = fail
        self.isbn_lookups: List[Union[int, float]] = []

    def reset_and_seed(self, books: Sequence[Book]) -> None:
        self._books = list(books)

    def find_all(self) -> List[Book]:
        return list(self._books)

    def find_by_isbn(self, isbn: Union[int, float]) -> Optional[Book]:
        self.isbn_lookups.append(isbn)
        if self._fail:
            raise RuntimeError("Database error while looking up isbn")
        return next((b for b in self._books if b.isbn == isbn), None)

    def count(self) -> int:
        return len(self._books)


class FakeStaticBookDataset:
    def __init__(self, books: Sequence[Book]):
        self._books = tuple(books)

    def get_all(self) -> Sequence[Book]:
        return self._books


def make_book(book_id: int, title: str, rating: float, pages: int, lang: str = "eng") -> Book:
    return Book(
        book_id=book_id,
        title=title,
        authors="Author",
        average_rating=rating,
        isbn=1000 + book_id,
        isbn13=9780000000000 + book_id,
        language_code=lang,
        num_pages=pages,
    )


STATIC_BOOKS = (
    make_book(1, "The Fellowship of the Ring", 4.36, 398),
    make_book(2, "LORD of the Flies", 3.68, 182),
    make_book(3, "The Lord of the Rings: Weapons and Warfare", 4.53, 218),
    make_book(4, "Le Petit Prince", 4.30, 97, lang="fre"),
    make_book(5, "Der Herr der Ringe", 4.50, 1295, lang="ger"),
    make_book(6, "Dune", 4.22, 604, lang="en-US"),
    make_book(7, "The Hobbit", 4.27, 310),
)

