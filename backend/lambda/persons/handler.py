"""Lambda entrypoint for the person API."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from app.api.persons import lambda_handler as _handler


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the person API handler."""

    return _handler(event, context)
