"""
Domain layer - Core business logic and entities.

This layer contains the business entities, value objects, and defines
the ports (interfaces) that the infrastructure layer must implement.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .entities import Book
from .value_objects import SearchCriteria, ReadinessState

__all__ = [
    # Entities
    "Book",
    # Value Objects
    "SearchCriteria",
    "ReadinessState",
]
