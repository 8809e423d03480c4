"""
Domain service for querying the static book dataset.

Filtering and sorting run over a private copy of the dataset for every call,
so concurrent requests never observe each other's ordering.
"""

import logging
from typing import List

from app.domain.entities import Book
from app.domain.ports import StaticBookDataset
from app.domain.value_objects import SearchCriteria


logger = logging.getLogger(__name__)


class BookSearchService:
    """
    Filters, sorts and groups the static dataset.

    Usage:
        service = BookSearchService(dataset=json_dataset)
        books = service.search(SearchCriteria(title="lord", min_rating=4.0))
    """

    def __init__(self, dataset: StaticBookDataset) -> None:
        """
        Initialize the service with the dataset it reads from.

        Args:
            dataset: Read-only static dataset
        """
        self._dataset = dataset

    def search(self, criteria: SearchCriteria) -> List[Book]:
        """
        Apply sort flags and filters to the static dataset.

        The step order matters and is fixed:

        1. Copy the full dataset
        2. Sort descending by rating (if requested)
        3. Sort descending by page count (if requested); since Python's sort
           replaces the previous order, this one wins when both are set
        4. Keep titles containing ``criteria.title`` (case-insensitive)
        5. Keep ratings >= ``criteria.min_rating``
        6. Keep page counts <= ``criteria.page_count_high`` (if set)
        7. Keep page counts >= ``criteria.page_count_low``

        Args:
            criteria: Filters and sort flags

        Returns:
            Matching books; an empty list when nothing matches
        """
        books = list(self._dataset.get_all())

        if criteria.is_empty():
            return books

        if criteria.sort_by_rating:
            books.sort(key=lambda b: b.average_rating, reverse=True)

        if criteria.sort_by_page_count:
            books.sort(key=lambda b: b.num_pages, reverse=True)

        if criteria.title:
            books = [b for b in books if b.matches_title(criteria.title)]

        books = [b for b in books if b.average_rating >= criteria.min_rating]

        if criteria.page_count_high is not None:
            books = [b for b in books if b.num_pages <= criteria.page_count_high]

        books = [b for b in books if b.num_pages >= criteria.page_count_low]

        logger.debug("Search %s matched %s books", criteria, len(books))
        return books

    def list_languages(self) -> List[str]:
        """
        Distinct language codes in order of first occurrence.

        Returns:
            List of language codes without duplicates
        """
        return list(dict.fromkeys(b.language_code for b in self._dataset.get_all()))

    def find_by_language(self, language_code: str) -> List[Book]:
        """
        All books whose language code equals ``language_code`` exactly.

        Args:
            language_code: Code to match (case-sensitive)

        Returns:
            Matching books in dataset order; possibly empty
        """
        return [b for b in self._dataset.get_all() if b.language_code == language_code]
