"""Pydantic models for the entries API."""

from typing import Any

from pydantic import BaseModel


class CreateEntryRequest(BaseModel):
    """Body of a create entry request.

    Every field is optional here so missing values are reported by the entry
    service with the same error shape as the other endpoints. ``calories``
    keeps the raw JSON value; the entry service decides whether to use it or
    estimate.
    """

    name: str | None = None
    calories: Any = None
    category: str | None = None
    date: str | None = None
