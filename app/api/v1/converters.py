"""
Converters between domain entities/value objects and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, maintaining clean separation of concerns.
"""

from dataclasses import asdict
from typing import Callable, Iterable, Optional, TypeVar

from app.domain import entities as domain
from app.domain import value_objects as domain_vo
from app.api.v1 import schemas as api

T = TypeVar("T")


def domain_book_to_api(book: domain.Book) -> api.Book:
    """
    Convert a domain Book entity to an API Book model.

    Args:
        book: Domain Book entity

    Returns:
        API Book model
    """
    book_dict = asdict(book)
    return api.Book(**book_dict)


def domain_books_to_api(books: Iterable[domain.Book]) -> list[api.Book]:
    """Convert a sequence of domain books, preserving order."""
    return [domain_book_to_api(b) for b in books]


def domain_search_results_to_api(books: Iterable[domain.Book]) -> api.SearchResponse:
    """
    Wrap search results in the search response envelope.

    Args:
        books: Filtered and sorted domain books

    Returns:
        API SearchResponse model with ``success`` set
    """
    return api.SearchResponse(filtered_data=domain_books_to_api(books), success=True)


def _is_present(flag: Optional[str]) -> bool:
    """A flag counts as set whenever a non-empty value was sent."""
    return bool(flag)


def _parse_number(raw: Optional[str], cast: Callable[[str], T], name: str) -> Optional[T]:
    """
    Parse an optional numeric query parameter; empty values count as absent.

    Raises:
        ValueError: If a non-empty value is not a number
    """
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def query_params_to_criteria(
    *,
    title: Optional[str],
    rating: Optional[str],
    sort_rating: Optional[str],
    page_count_low: Optional[str],
    page_count_high: Optional[str],
    sort_page_count: Optional[str],
) -> domain_vo.SearchCriteria:
    """
    Convert raw search query parameters to a domain SearchCriteria.

    Absent or empty numeric bounds fall back to the domain defaults (0 for
    lower bounds, unbounded for ``page_count_high``).

    Returns:
        Domain SearchCriteria value object

    Raises:
        ValueError: If a numeric parameter is not a number
    """
    min_rating = _parse_number(rating, float, "rating")
    low = _parse_number(page_count_low, int, "pageCountLow")
    high = _parse_number(page_count_high, int, "pageCountHigh")

    return domain_vo.SearchCriteria(
        title=title or None,
        min_rating=min_rating if min_rating is not None else 0.0,
        page_count_low=low if low is not None else 0,
        page_count_high=high,
        sort_by_rating=_is_present(sort_rating),
        sort_by_page_count=_is_present(sort_page_count),
    )
