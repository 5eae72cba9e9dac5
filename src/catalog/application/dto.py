"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from catalog.domain.model.genre import Genre


@dataclass(frozen=True)
class CreateGenreCommand:
    """Input: a new genre and the category IDs it should belong to."""

    name: str | None
    is_active: bool = True
    categories: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateGenreCommand:
    id: str
    name: str | None
    is_active: bool = True
    categories: list[str] = field(default_factory=list)

    @staticmethod
    def with_(
        genre_id: str,
        name: str | None,
        is_active: bool | None,
        categories: list[str] | None,
    ) -> UpdateGenreCommand:
        """Build a command, treating a missing active flag as active."""
        return UpdateGenreCommand(
            id=genre_id,
            name=name,
            is_active=is_active is None or is_active,
            categories=list(categories or []),
        )


@dataclass(frozen=True)
class GenreOutput:
    """Output: read-only projection of a single genre."""

    id: str
    name: str | None
    is_active: bool
    categories: list[str]
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @staticmethod
    def from_genre(genre: Genre) -> GenreOutput:
        return GenreOutput(
            id=genre.id.value,
            name=genre.name,
            is_active=genre.is_active,
            categories=[c.value for c in genre.categories],
            created_at=genre.created_at,
            updated_at=genre.updated_at,
            deleted_at=genre.deleted_at,
        )


@dataclass(frozen=True)
class GenreListItem:
    """Output: one row of a genre listing."""

    id: str
    name: str | None
    is_active: bool
    categories: list[str]
    created_at: datetime
    deleted_at: datetime | None

    @staticmethod
    def from_genre(genre: Genre) -> GenreListItem:
        return GenreListItem(
            id=genre.id.value,
            name=genre.name,
            is_active=genre.is_active,
            categories=[c.value for c in genre.categories],
            created_at=genre.created_at,
            deleted_at=genre.deleted_at,
        )
