"""Environment-driven settings for the person API."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from app.exceptions import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Runtime configuration resolved once per invocation.

    Attributes:
        persons_table: Name of the DynamoDB table holding person records.
            Used by both the create and the get path.
        return_generated_id: Whether the create response exposes the
            server-generated record id.
        region_name: Optional AWS region override for the boto3 resource.
    """

    persons_table: str
    return_generated_id: bool = False
    region_name: Optional[str] = None


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable value."""
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


def load_settings() -> Settings:
    """Load settings from the process environment.

    Raises:
        ConfigurationError: If PERSONS_TABLE is not set.
    """
    table_name = os.getenv("PERSONS_TABLE", "").strip()
    if not table_name:
        raise ConfigurationError("PERSONS_TABLE")

    return Settings(
        persons_table=table_name,
        return_generated_id=parse_bool(os.getenv("RETURN_GENERATED_ID")),
        region_name=os.getenv("AWS_REGION") or None,
    )
