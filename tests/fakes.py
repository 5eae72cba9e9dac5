"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.  They also
record calls so tests can assert a repository was (or was not) used.
"""

from __future__ import annotations

from collections.abc import Iterable

from catalog.domain.model.genre import Genre
from catalog.domain.model.pagination import Pagination, SearchQuery
from catalog.domain.model.value_objects import CategoryID, GenreID
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.genre_repository import GenreRepository


class FakeGenreRepository(GenreRepository):

    def __init__(self, genres: list[Genre] | None = None) -> None:
        self._store: dict[GenreID, Genre] = {}
        for g in genres or []:
            self._store[g.id] = g
        self.created: list[Genre] = []
        self.updated: list[Genre] = []
        self.deleted: list[GenreID] = []

    def create(self, genre: Genre) -> Genre:
        self.created.append(genre)
        self._store[genre.id] = genre
        return genre

    def update(self, genre: Genre) -> Genre:
        self.updated.append(genre)
        self._store[genre.id] = genre
        return genre

    def get_by_id(self, genre_id: GenreID) -> Genre | None:
        return self._store.get(genre_id)

    def delete_by_id(self, genre_id: GenreID) -> None:
        self.deleted.append(genre_id)
        self._store.pop(genre_id, None)

    def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        genres = list(self._store.values())
        start = query.page * query.per_page
        return Pagination(
            current_page=query.page,
            per_page=query.per_page,
            total=len(genres),
            items=genres[start:start + query.per_page],
        )


class FailingGenreRepository(FakeGenreRepository):
    """Store whose writes always blow up."""

    def __init__(self, message: str = "Gateway error", genres: list[Genre] | None = None) -> None:
        super().__init__(genres)
        self._message = message

    def create(self, genre: Genre) -> Genre:
        raise RuntimeError(self._message)

    def update(self, genre: Genre) -> Genre:
        raise RuntimeError(self._message)


class FakeCategoryRepository(CategoryRepository):

    def __init__(self, existing: list[str] | None = None) -> None:
        self._existing = {CategoryID(raw) for raw in existing or []}
        self.calls: list[list[CategoryID]] = []

    def exists_by_ids(self, category_ids: Iterable[CategoryID]) -> list[CategoryID]:
        requested = list(category_ids)
        self.calls.append(requested)
        return [c for c in requested if c in self._existing]
