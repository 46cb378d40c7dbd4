"""Repository for Person records stored in DynamoDB."""

from __future__ import annotations

from typing import Any
from typing import Optional

from app.config import Settings
from app.exceptions import DatabaseError
from app.services.aws_clients import get_dynamodb_table

_REPOSITORY_CACHE: dict[tuple[str, Optional[str]], "PersonRepository"] = {}


class PersonRepository:
    """Point reads and writes against the persons table.

    Each method performs exactly one DynamoDB call. Writes are
    unconditional, so a second put with the same ``id`` replaces the
    first.
    """

    def __init__(self, table: Any):
        """Initialize the repository.

        Args:
            table: A boto3 ``dynamodb.Table`` resource (or compatible fake).
        """
        self._table = table

    @property
    def table(self) -> Any:
        """Get the underlying table handle."""
        return self._table

    def put(self, item: dict[str, Any]) -> dict[str, Any]:
        """Write a record.

        Args:
            item: The full record, including its ``id`` key.

        Returns:
            The item that was written.

        Raises:
            DatabaseError: If the write fails for any reason.
        """
        try:
            self._table.put_item(Item=item)
        except Exception as exc:
            raise DatabaseError("Failed to write person", detail=str(exc)) from exc
        return item

    def get_by_id(self, person_id: str) -> Optional[dict[str, Any]]:
        """Get a record by its primary key.

        Args:
            person_id: The record id.

        Returns:
            The stored item if found, None otherwise.

        Raises:
            DatabaseError: If the read fails for any reason.
        """
        try:
            result = self._table.get_item(Key={"id": person_id})
        except Exception as exc:
            raise DatabaseError("Failed to read person", detail=str(exc)) from exc
        return result.get("Item")


def get_person_repository(settings: Settings) -> PersonRepository:
    """Return the process-wide repository bound to the configured table."""
    cache_key = (settings.persons_table, settings.region_name)
    repository = _REPOSITORY_CACHE.get(cache_key)
    if repository is None:
        table = get_dynamodb_table(
            settings.persons_table,
            region_name=settings.region_name,
        )
        repository = PersonRepository(table)
        _REPOSITORY_CACHE[cache_key] = repository
    return repository


def clear_repository_cache() -> None:
    """Clear cached repositories (useful in tests)."""
    _REPOSITORY_CACHE.clear()
