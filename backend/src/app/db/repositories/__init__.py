"""Repository pattern implementations for table operations.

Repositories provide a clean abstraction over DynamoDB calls,
making the request handlers independent of the persistence layer.
"""

from app.db.repositories.person import PersonRepository
from app.db.repositories.person import clear_repository_cache
from app.db.repositories.person import get_person_repository

__all__ = [
    "PersonRepository",
    "clear_repository_cache",
    "get_person_repository",
]
