"""
API endpoints for the book catalog.

This module defines the FastAPI routes for listing, searching and looking up
books. It handles HTTP concerns and delegates to the repository (database
collection) or the search service (static dataset).
"""

import logging
import math
from typing import Any, Optional, Union

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse, PlainTextResponse

from app.domain.ports import BookCatalogRepository
from app.domain.services import BookSearchService
from app.api.v1 import schemas as api
from app.api.v1.converters import (
    domain_book_to_api,
    domain_books_to_api,
    domain_search_results_to_api,
    query_params_to_criteria,
)
from app.api.v1.dependencies import get_api_key, get_catalog_repository, get_search_service

logger = logging.getLogger(__name__)

router = APIRouter()

LANGUAGE_LIST_KEYWORD = "list"


_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_RADIX_PREFIXES = ("0x", "0o", "0b")


def parse_isbn(raw: str) -> Union[int, float]:
    """
    Parse an ISBN path segment as a number.

    Surrounding whitespace is ignored; decimal, exponent and unsigned
    ``0x``/``0o``/``0b`` forms are accepted. Integral values that fit in a
    64-bit integer come back as ``int`` so they compare equal to stored
    integers; anything larger stays a ``float`` (BSON can only encode 8-byte
    ints) and simply matches nothing.

    Raises:
        ValueError: If the segment is not a finite number
    """
    text = raw.strip()
    if not text or "_" in text:
        raise ValueError(f"not a number: {raw!r}")

    if text[:2].lower() in _RADIX_PREFIXES:
        value: Union[int, float] = int(text, 0)
    else:
        value = float(text)
        if not math.isfinite(value):
            raise ValueError(f"not a finite number: {raw!r}")
        if not value.is_integer():
            return value

    if _INT64_MIN <= value <= _INT64_MAX:
        return int(value)

    try:
        return float(value)
    except OverflowError as e:
        raise ValueError(f"not a finite number: {raw!r}") from e


@router.get("/authors", response_model=list[api.Book], summary="Lists all Authors")
def list_authors(
    catalog_repo: BookCatalogRepository = Depends(get_catalog_repository),
) -> list[api.Book]:
    """
    Return every record of the database collection.

    Despite the path, these are full book records, not a distinct author list.
    """
    return domain_books_to_api(catalog_repo.find_all())


@router.get("/key", response_class=PlainTextResponse, summary="Lists api key")
def get_key(api_key: Optional[str] = Depends(get_api_key)) -> str:
    """Return the configured API key as plain text (empty when unset)."""
    return api_key or ""


@router.get(
    "/books/search",
    response_model=api.SearchResponse,
    summary="List books based on query",
)
def search_books(
    title: Optional[str] = Query(default=None, description="Title substring (case-insensitive)"),
    rating: Optional[str] = Query(default=None, description="Minimum average rating"),
    sort_rating: Optional[str] = Query(
        default=None, alias="sortRating", description="Sort by rating, descending"
    ),
    page_count_low: Optional[str] = Query(
        default=None, alias="pageCountLow", description="Minimum page count"
    ),
    page_count_high: Optional[str] = Query(
        default=None, alias="pageCountHigh", description="Maximum page count"
    ),
    sort_page_count: Optional[str] = Query(
        default=None, alias="sortPageCount", description="Sort by page count, descending"
    ),
    service: BookSearchService = Depends(get_search_service),
) -> api.SearchResponse:
    """
    Filter and sort the static dataset.

    When both sort flags are set, the page-count order wins. Empty numeric
    parameters count as absent; non-numeric ones are rejected with 422.
    """
    try:
        criteria = query_params_to_criteria(
            title=title,
            rating=rating,
            sort_rating=sort_rating,
            page_count_low=page_count_low,
            page_count_high=page_count_high,
            sort_page_count=sort_page_count,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    return domain_search_results_to_api(service.search(criteria))


@router.get(
    "/book/isbn/{isbn}",
    response_model=api.Book,
    summary="Returns a book by ISBN",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": api.ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"content": {"text/plain": {}}},
    },
)
def get_book_by_isbn(
    isbn: str,
    catalog_repo: BookCatalogRepository = Depends(get_catalog_repository),
) -> Any:
    """
    Look up a book of the database collection by ISBN.

    Returns:
        400 if the ISBN is not numeric or the lookup fails,
        404 (plain text) if nothing matches
    """
    try:
        book = catalog_repo.find_by_isbn(parse_isbn(isbn))
    except (ValueError, RuntimeError) as e:
        logger.info("Rejected isbn lookup for %r: %s", isbn, e)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid isbn"},
        )

    if book is None:
        return PlainTextResponse("No data found", status_code=status.HTTP_404_NOT_FOUND)

    return domain_book_to_api(book)


@router.get("/books/all", response_model=list[api.Book], summary="Returns all books")
def list_all_books(
    catalog_repo: BookCatalogRepository = Depends(get_catalog_repository),
) -> list[api.Book]:
    """Return every record of the database collection."""
    return domain_books_to_api(catalog_repo.find_all())


@router.get(
    "/lang/{lang}",
    response_model=Union[list[str], list[api.Book]],
    summary="Returns all books by language",
)
def books_by_language(
    lang: str,
    service: BookSearchService = Depends(get_search_service),
) -> Union[list[str], list[api.Book]]:
    """
    ``/lang/list`` returns the distinct language codes of the static dataset
    in order of first occurrence; any other value returns the static records
    with exactly that language code.

    Always 200; an unknown code yields an empty list.
    """
    if lang == LANGUAGE_LIST_KEYWORD:
        return service.list_languages()
    return domain_books_to_api(service.find_by_language(lang))


@router.post("/post", summary="Returns request body as json")
def echo_body(payload: Any = Body(default=None)) -> Any:
    """Echo the parsed JSON request body (``{}`` when none was sent)."""
    return {} if payload is None else payload
