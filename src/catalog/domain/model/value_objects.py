"""Value Objects shared across the domain.

Identifiers are opaque strings wrapped in immutable types so a genre id can
never be passed where a category id is expected.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class GenreID:
    value: str

    @staticmethod
    def unique() -> GenreID:
        return GenreID(uuid.uuid4().hex)

    @staticmethod
    def of(value: str | GenreID) -> GenreID:
        if isinstance(value, GenreID):
            return value
        return GenreID(str(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryID:
    """Reference to a category.  Only its existence is ever checked."""

    value: str

    @staticmethod
    def of(value: str | CategoryID) -> CategoryID:
        if isinstance(value, CategoryID):
            return value
        return CategoryID(str(value))

    def __str__(self) -> str:
        return self.value
