"""Application service: Get Genre use case (query)."""

from __future__ import annotations

from catalog.application.dto import GenreOutput
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.value_objects import GenreID
from catalog.domain.repository.genre_repository import GenreRepository


class GetGenreHandler:

    def __init__(self, genre_repo: GenreRepository) -> None:
        self._genre_repo = genre_repo

    def handle(self, genre_id: str) -> GenreOutput:
        genre = self._genre_repo.get_by_id(GenreID.of(genre_id))
        if genre is None:
            raise EntityNotFoundError.for_entity("Genre", genre_id)
        return GenreOutput.from_genre(genre)
