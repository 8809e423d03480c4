"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ReadinessState(str, Enum):
    """
    Observable state of the database connection.

    Only READY lets API requests through the readiness gate.
    """

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class SearchCriteria:
    """
    Filters and sort flags for a search over the static dataset.

    All filters are optional. When a bound is None, it means "no restriction";
    the lower bounds default to 0 as in the public query interface.
    """

    title: Optional[str] = None
    """Case-insensitive title substring"""

    min_rating: float = 0.0
    """Minimum average rating (inclusive)"""

    page_count_low: int = 0
    """Minimum page count (inclusive)"""

    page_count_high: Optional[int] = None
    """Maximum page count (inclusive), unbounded when None"""

    sort_by_rating: bool = False
    """Sort descending by average rating"""

    sort_by_page_count: bool = False
    """Sort descending by page count (applied after the rating sort)"""

    def is_empty(self) -> bool:
        """Check if no filter or sort flag is set."""
        return (
            not self.title
            and self.min_rating == 0.0
            and self.page_count_low == 0
            and self.page_count_high is None
            and not self.sort_by_rating
            and not self.sort_by_page_count
        )
