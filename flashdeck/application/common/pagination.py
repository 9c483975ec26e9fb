"""
Pagination types for list queries.

Example:
    pagination = Pagination(page=2, page_size=10)
    users = await repository.find_all(limit=pagination.limit, offset=pagination.offset)
    result = PaginatedResult(items=users, total=await repository.count(), pagination=pagination)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
    """

    page: int = 1
    page_size: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """Items of one page plus the total across all pages."""

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return -(-self.total // self.pagination.page_size)

    @property
    def has_next(self) -> bool:
        return self.pagination.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.pagination.page > 1
