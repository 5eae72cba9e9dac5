"""Referential validation of category IDs against the category catalog.

Shared by the create and update use cases.  Produces a report instead of
raising so its errors can be merged with the aggregate's own.
"""

from __future__ import annotations

from catalog.domain.model.value_objects import CategoryID
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.validation.error import Error
from catalog.domain.validation.notification import Notification


def to_category_ids(raw_ids: list[str] | None) -> list[CategoryID]:
    return [CategoryID.of(raw) for raw in raw_ids or []]


def validate_categories(
    category_repo: CategoryRepository,
    category_ids: list[CategoryID],
) -> Notification:
    """Report the requested category IDs that do not exist.

    The repository is not consulted at all when nothing was requested.
    Missing IDs are listed once each, in the order they were requested.
    """
    notification = Notification.create()
    if not category_ids:
        return notification

    requested = list(dict.fromkeys(category_ids))
    existing = set(category_repo.exists_by_ids(requested))
    missing = [c for c in requested if c not in existing]

    if missing:
        ids = ",".join(c.value for c in missing)
        notification.append(Error(f"Some categories could not be found: {ids}"))
    return notification
