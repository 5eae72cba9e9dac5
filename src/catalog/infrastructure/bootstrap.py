"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from catalog.infrastructure.config import get_settings
from catalog.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from catalog.infrastructure.persistence.json_genre_repository import (
    JsonGenreRepository,
)


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def genre_repository() -> JsonGenreRepository:
    return JsonGenreRepository(get_settings().data_dir / "genres.json")


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(get_settings().data_dir / "categories.json")
