"""
Domain services package.

Services orchestrate domain logic that doesn't naturally belong to a single
entity. They coordinate between entities and ports to implement use cases.

Following Hexagonal Architecture principles, services depend only on domain
entities, value objects, and port protocols (never on concrete implementations).
"""

from .book_search_service import BookSearchService
from .catalog_seeding_service import CatalogSeedingService, SEED_BOOKS

__all__ = [
    "BookSearchService",
    "CatalogSeedingService",
    "SEED_BOOKS",
]
