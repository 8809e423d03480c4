"""
API schemas for the book catalog.

Field names follow the catalog's public JSON (``bookID``, ``average_rating``,
``filteredData``); Python attributes use snake_case with aliases.
"""

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """
    API representation of a Book entity.

    Maps from the domain Book entity for API responses.
    """

    model_config = ConfigDict(populate_by_name=True)

    book_id: int = Field(alias="bookID", description="Numeric catalog identifier")
    title: str = Field(description="Book title")
    authors: str = Field(description="Author names joined with '-'")
    average_rating: float = Field(description="Average user rating (0-5)")
    isbn: int = Field(description="Short form ISBN")
    isbn13: int = Field(description="13-digit ISBN")
    language_code: str = Field(description="Language code (e.g., 'eng', 'en-US')")
    num_pages: int = Field(description="Number of pages")
    ratings_count: int = Field(default=0, description="Number of ratings")
    text_reviews_count: int = Field(default=0, description="Number of written reviews")


class SearchResponse(BaseModel):
    """
    Response body for GET /books/search.
    """

    model_config = ConfigDict(populate_by_name=True)

    filtered_data: list[Book] = Field(
        alias="filteredData",
        description="Books matching the query, in result order",
    )
    success: bool = Field(default=True)


class ErrorResponse(BaseModel):
    """Body of 400 and 503 responses."""

    error: str
