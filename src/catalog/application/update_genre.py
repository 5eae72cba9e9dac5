"""Application service: Update Genre use case.

Same flow as Create, starting from the persisted genre.  The genre is
loaded first so an unknown ID fails before any category lookup.
"""

from __future__ import annotations

import logging

from catalog.application.category_check import to_category_ids, validate_categories
from catalog.application.dto import UpdateGenreCommand
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.value_objects import GenreID
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.genre_repository import GenreRepository
from catalog.domain.validation.notification import Notification

logger = logging.getLogger(__name__)


class UpdateGenreHandler:

    def __init__(
        self,
        genre_repo: GenreRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._genre_repo = genre_repo
        self._category_repo = category_repo

    def handle(self, command: UpdateGenreCommand) -> str:
        genre_id = GenreID.of(command.id)
        genre = self._genre_repo.get_by_id(genre_id)
        if genre is None:
            raise EntityNotFoundError.for_entity("Genre", genre_id)

        # Changes are applied to a copy so a rejected update leaves the
        # loaded genre untouched.
        candidate = genre.copy()

        category_ids = to_category_ids(command.categories)

        notification = Notification.create()
        notification.append(validate_categories(self._category_repo, category_ids))
        updated = notification.validate(
            lambda: candidate.update(command.name, command.is_active, category_ids)
        )

        if updated is None or notification.has_error():
            logger.warning("Genre %s update rejected: %s", genre_id, notification)
            raise ValidationError(f"Could not update Genre ({genre_id})", notification)

        # update() already replaced the category list wholesale.
        try:
            saved = self._genre_repo.update(updated)
        except Exception as exc:
            logger.warning("Genre store failed on update of %s", genre_id, exc_info=True)
            raise ValidationError(str(exc), Notification.from_exception(exc)) from exc

        logger.info("Genre %s updated", saved.id)
        return saved.id.value
