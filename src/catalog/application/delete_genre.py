"""Application service: Delete Genre use case.

Deleting an unknown genre is not an error; the repository ignores it.
"""

from __future__ import annotations

import logging

from catalog.domain.model.value_objects import GenreID
from catalog.domain.repository.genre_repository import GenreRepository

logger = logging.getLogger(__name__)


class DeleteGenreHandler:

    def __init__(self, genre_repo: GenreRepository) -> None:
        self._genre_repo = genre_repo

    def handle(self, genre_id: str) -> None:
        self._genre_repo.delete_by_id(GenreID.of(genre_id))
        logger.info("Genre %s deleted", genre_id)
