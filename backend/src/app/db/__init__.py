"""DynamoDB persistence for person records."""

from app.db.repositories import PersonRepository
from app.db.repositories import get_person_repository

__all__ = [
    "PersonRepository",
    "get_person_repository",
]
