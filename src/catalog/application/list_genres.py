"""Application service: List Genres use case (query)."""

from __future__ import annotations

from catalog.application.dto import GenreListItem
from catalog.domain.model.pagination import Pagination, SearchQuery
from catalog.domain.repository.genre_repository import GenreRepository


class ListGenresHandler:

    def __init__(self, genre_repo: GenreRepository) -> None:
        self._genre_repo = genre_repo

    def handle(self, query: SearchQuery) -> Pagination[GenreListItem]:
        return self._genre_repo.find_all(query).map(GenreListItem.from_genre)
