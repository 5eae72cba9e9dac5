"""Application service: Create Genre use case.

Orchestrates the category catalog (referential check) and the Genre
aggregate (field rules).  Errors from both sources are collected into one
Notification before deciding; nothing is persisted unless both pass.
"""

from __future__ import annotations

import logging

from catalog.application.category_check import to_category_ids, validate_categories
from catalog.application.dto import CreateGenreCommand
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.genre import Genre
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.genre_repository import GenreRepository
from catalog.domain.validation.notification import Notification

logger = logging.getLogger(__name__)


class CreateGenreHandler:

    def __init__(
        self,
        genre_repo: GenreRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._genre_repo = genre_repo
        self._category_repo = category_repo

    def handle(self, command: CreateGenreCommand) -> str:
        """Create a new genre and return its ID.

        Steps:
        1. Check that every requested category exists.
        2. Let the Genre aggregate validate its own fields.
        3. Fail with every collected error, or associate categories and persist.
        """
        category_ids = to_category_ids(command.categories)

        notification = Notification.create()
        notification.append(validate_categories(self._category_repo, category_ids))
        genre = notification.validate(
            lambda: Genre.new_genre(command.name, command.is_active)
        )

        if genre is None or notification.has_error():
            logger.warning("Genre rejected: %s", notification)
            raise ValidationError("Could not create Genre", notification)

        genre.add_categories(category_ids)

        try:
            created = self._genre_repo.create(genre)
        except Exception as exc:
            logger.warning("Genre store failed on create", exc_info=True)
            raise ValidationError(str(exc), Notification.from_exception(exc)) from exc

        logger.info("Genre %s created", created.id)
        return created.id.value
