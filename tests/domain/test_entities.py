"""
Tests for domain entities.
"""

import dataclasses

import pytest

from app.domain.entities import Book


def _record(**overrides):
    record = {
        "bookID": 36,
        "title": "The Lord of the Rings: Weapons and Warfare",
        "authors": "Chris   Smith-Christopher  Lee-Richard Taylor",
        "average_rating": 4.53,
        "isbn": 618391002,
        "isbn13": 9780618391004,
        "language_code": "eng",
        "num_pages": 218,
        "ratings_count": 18934,
        "text_reviews_count": 43,
    }
    record.update(overrides)
    return record


class TestBook:
    """Tests for the Book entity."""

    def test_create_book_with_minimum_data(self):
        """Test creating a book with only required fields."""
        book = Book(
            book_id=1,
            title="Clean Code",
            authors="Robert C. Martin",
            average_rating=4.3,
            isbn=132350882,
            isbn13=9780132350884,
            language_code="eng",
            num_pages=464,
        )

        assert book.book_id == 1
        assert book.ratings_count == 0
        assert book.text_reviews_count == 0

    def test_book_validation_empty_title(self):
        """Test that empty title raises ValueError."""
        with pytest.raises(ValueError, match="title cannot be empty"):
            Book.from_record(_record(title="   "))

    def test_book_validation_negative_pages(self):
        """Test that a negative page count raises ValueError."""
        with pytest.raises(ValueError, match="num_pages cannot be negative"):
            Book.from_record(_record(num_pages=-1))

    def test_book_is_immutable(self):
        """Books are shared between requests and must not be mutated."""
        book = Book.from_record(_record())

        with pytest.raises(dataclasses.FrozenInstanceError):
            book.num_pages = 10

    def test_duplicate_isbn_books_are_both_valid(self):
        """No uniqueness is enforced at the entity level."""
        first = Book.from_record(_record(bookID=1))
        second = Book.from_record(_record(bookID=2))

        assert first.isbn == second.isbn
        assert first != second


class TestBookTitleMatching:
    """Tests for Book.matches_title()."""

    def test_matches_case_insensitive(self):
        book = Book.from_record(_record())

        assert book.matches_title("lord")
        assert book.matches_title("WEAPONS")

    def test_does_not_match_missing_fragment(self):
        book = Book.from_record(_record())

        assert not book.matches_title("hobbit")


class TestBookRecordConversion:
    """Tests for from_record()/to_record()."""

    def test_from_record_reads_wire_names(self):
        book = Book.from_record(_record())

        assert book.book_id == 36
        assert book.average_rating == 4.53
        assert book.isbn13 == 9780618391004
        assert book.language_code == "eng"

    def test_from_record_ignores_mongo_id(self):
        book = Book.from_record(_record(**{"_id": "65f0c0ffee", "__v": 0}))

        assert book.book_id == 36

    def test_from_record_missing_isbn_raises(self):
        record = _record()
        del record["isbn"]

        with pytest.raises(ValueError, match="Invalid book record"):
            Book.from_record(record)

    def test_from_record_coerces_numeric_strings(self):
        book = Book.from_record(_record(isbn="618391002", num_pages="218"))

        assert book.isbn == 618391002
        assert book.num_pages == 218

    def test_to_record_is_inverse_of_from_record(self):
        record = _record()

        assert Book.from_record(record).to_record() == record
