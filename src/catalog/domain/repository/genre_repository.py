"""Abstract repository for Genre aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.genre import Genre
from catalog.domain.model.pagination import Pagination, SearchQuery
from catalog.domain.model.value_objects import GenreID


class GenreRepository(ABC):

    @abstractmethod
    def create(self, genre: Genre) -> Genre:
        """Persist a new genre and return the stored version."""

    @abstractmethod
    def update(self, genre: Genre) -> Genre:
        """Persist changes to an existing genre and return the stored version."""

    @abstractmethod
    def get_by_id(self, genre_id: GenreID) -> Genre | None:
        """Return a genre by its ID, or None if not found."""

    @abstractmethod
    def delete_by_id(self, genre_id: GenreID) -> None:
        """Remove a genre.  Unknown IDs are ignored."""

    @abstractmethod
    def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        """Return one page of genres matching the query."""
