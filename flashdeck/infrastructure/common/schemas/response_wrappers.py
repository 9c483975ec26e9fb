"""Common response envelopes returned by actions."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ActionResponse(BaseModel, Generic[T]):
    """
    Success/error envelope.

    ``data`` is set only on success and ``error`` only on failure.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic pagination wrapper."""

    items: list[T]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_next: bool
    has_previous: bool
