"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
They are implemented by adapters in the infrastructure layer, allowing
the domain to remain independent of technical details.

The catalog has two independent read models that are never synchronized:
the database-backed ``BookCatalogRepository`` and the file-backed
``StaticBookDataset``.
"""

from typing import Protocol, List, Optional, Sequence, Union

from .entities import Book
from .value_objects import ReadinessState


class BookCatalogRepository(Protocol):
    """
    Port for the database-backed book collection.

    Implementations should handle:
    - Translating driver errors into RuntimeError
    - Hiding storage-specific fields (e.g. document ids) from the domain
    """

    def reset_and_seed(self, books: Sequence[Book]) -> None:
        """
        Delete every record, then insert the given seed records.

        Args:
            books: Records to insert after clearing the collection

        Raises:
            RuntimeError: If a database error occurs
        """
        ...

    def find_all(self) -> List[Book]:
        """
        Retrieve every record in the collection.

        Returns:
            List of all books, in storage order

        Raises:
            RuntimeError: If a database error occurs
        """
        ...

    def find_by_isbn(self, isbn: Union[int, float]) -> Optional[Book]:
        """
        Retrieve the first record whose ISBN numerically equals ``isbn``.

        Args:
            isbn: Already-parsed numeric ISBN

        Returns:
            The Book if found, None otherwise

        Raises:
            RuntimeError: If a database error occurs
        """
        ...

    def count(self) -> int:
        """
        Get the number of records in the collection.

        Returns:
            Total record count
        """
        ...


class StaticBookDataset(Protocol):
    """
    Port for the read-only, file-backed book collection.

    The dataset is loaded once and never mutated. Callers that need a
    different order must sort their own copy.
    """

    def get_all(self) -> Sequence[Book]:
        """
        Get every record in load order.

        Returns:
            An immutable sequence of books
        """
        ...


class DatabaseConnection(Protocol):
    """
    Port for the database connection's readiness state.
    """

    @property
    def state(self) -> ReadinessState:
        """Current readiness state."""
        ...

    def is_ready(self) -> bool:
        """True only when the state is READY."""
        ...
