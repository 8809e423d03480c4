"""
JSON file implementation of the StaticBookDataset port.

The bundled ``app/data/books.json`` holds a list of records with the catalog's
wire field names. It is read once, at construction, and kept as a tuple.
"""

import json
import logging
from pathlib import Path
from typing import Sequence, Tuple

from app.domain.entities import Book
from app.domain.ports import StaticBookDataset


logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parents[2] / "data" / "books.json"


class JsonBookDataset(StaticBookDataset):
    """Read-only dataset loaded from a JSON array of book records."""

    def __init__(self, path: Path = DEFAULT_DATA_PATH) -> None:
        """
        Load and validate every record in ``path``.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a JSON array or a record is invalid
        """
        self._path = Path(path)
        self._books: Tuple[Book, ...] = self._load()
        logger.info("Loaded %s books from %s", len(self._books), self._path)

    def _load(self) -> Tuple[Book, ...]:
        with self._path.open("r", encoding="utf-8") as f:
            raw = json.load(f)

        if not isinstance(raw, list):
            raise ValueError(
                f"Expected a JSON array of books in {self._path}, got {type(raw).__name__}"
            )

        books = []
        for position, record in enumerate(raw):
            try:
                books.append(Book.from_record(record))
            except ValueError as e:
                raise ValueError(f"Invalid record #{position} in {self._path}: {e}") from e
        return tuple(books)

    def get_all(self) -> Sequence[Book]:
        """Get every record in file order."""
        return self._books
