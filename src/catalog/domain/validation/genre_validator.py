"""Field rules for the Genre aggregate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.domain.validation.error import Error
from catalog.domain.validation.notification import Notification

if TYPE_CHECKING:
    from catalog.domain.model.genre import Genre

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255


def validate_genre(genre: Genre) -> Notification:
    """Check every field rule of *genre* and return a fresh report."""
    notification = Notification.create()
    _check_name(genre.name, notification)
    return notification


def _check_name(name: str | None, notification: Notification) -> None:
    # At most one name error: the first matching rule wins.
    if name is None:
        notification.append(Error("'name' should not be null"))
        return

    trimmed = name.strip()
    if not trimmed:
        notification.append(Error("'name' should not be empty"))
        return

    if not NAME_MIN_LENGTH <= len(trimmed) <= NAME_MAX_LENGTH:
        notification.append(
            Error(
                f"'name' must be between {NAME_MIN_LENGTH} "
                f"and {NAME_MAX_LENGTH} characters"
            )
        )
