"""Search query and page result shared by list operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class SearchQuery:
    """Input of a paginated search.  ``page`` is zero-based."""

    page: int = 0
    per_page: int = 10
    terms: str | None = None
    sort: str = "name"
    direction: str = "asc"


@dataclass(frozen=True)
class Pagination(Generic[T]):
    current_page: int
    per_page: int
    total: int
    items: list[T] = field(default_factory=list)

    def map(self, mapper: Callable[[T], R]) -> Pagination[R]:
        return Pagination(
            current_page=self.current_page,
            per_page=self.per_page,
            total=self.total,
            items=[mapper(item) for item in self.items],
        )
