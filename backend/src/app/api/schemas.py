"""Pydantic schemas for person API responses."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class CreatePersonResponseSchema(BaseModel):
    """Body of a successful create.

    ``id`` is only populated when the deployment opts in to exposing the
    generated record id.
    """

    message: str = "Person created successfully"
    id: Optional[str] = None
