"""Genre aggregate — the core of the domain.

A Genre groups categories under a name and can be soft-deleted by
deactivating it.  It validates its own fields whenever it is created or
updated; category associations are checked against the catalog by the
application layer, not here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import CategoryID, GenreID
from catalog.domain.validation.genre_validator import validate_genre


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Genre:
    """Aggregate root for genres.

    Use ``Genre.new_genre()`` for new genres — it enforces all field rules.
    The ``__init__`` is intentionally simple so the repository can
    reconstitute persisted genres (via ``Genre.reconstitute()``) without
    re-validating.

    Invariants:
    - ``created_at`` never changes after construction
    - every observable mutation refreshes ``updated_at``
    - ``deleted_at`` is set by ``deactivate()`` and cleared by ``activate()``
    """

    id: GenreID
    name: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None
    _categories: list[CategoryID] = field(default_factory=list, repr=False)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def new_genre(name: str | None, is_active: bool) -> Genre:
        """Create a new genre, enforcing all field rules.

        Construction and validation are two separate steps: the instance is
        built first, then checked, and only returned if it is valid.
        """
        now = _now()
        genre = Genre(
            id=GenreID.unique(),
            name=name,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
        genre.self_validate()
        return genre

    @staticmethod
    def reconstitute(
        genre_id: GenreID,
        name: str | None,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: datetime | None,
        categories: Iterable[CategoryID] = (),
    ) -> Genre:
        """Rebuild a genre from persisted state.  No validation is performed."""
        return Genre(
            id=genre_id,
            name=name,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
            _categories=list(categories),
        )

    def copy(self) -> Genre:
        """Return an independent copy, including its own category list."""
        return replace(self, _categories=list(self._categories))

    # --- Validation -----------------------------------------------------------

    def self_validate(self) -> None:
        """Raise ValidationError carrying every field error, if any."""
        notification = validate_genre(self)
        if notification.has_error():
            raise ValidationError("Failed to validate aggregate Genre", notification)

    # --- State transitions ----------------------------------------------------

    def update(
        self,
        name: str | None,
        is_active: bool,
        categories: Iterable[CategoryID] | None,
    ) -> Genre:
        """Replace name, active flag and categories, then re-validate.

        On failure the previous state is restored before the
        ValidationError propagates, so the genre stays usable.
        """
        snapshot = (self.name, self.is_active, self._categories, self.updated_at)

        self.name = name
        self.is_active = is_active
        self._categories = list(categories) if categories is not None else []
        self.updated_at = _now()

        try:
            self.self_validate()
        except ValidationError:
            self.name, self.is_active, self._categories, self.updated_at = snapshot
            raise
        return self

    def activate(self) -> Genre:
        self.deleted_at = None
        self.is_active = True
        self.updated_at = _now()
        return self

    def deactivate(self) -> Genre:
        """Soft-delete.  Repeated calls keep the first deletion time."""
        now = _now()
        if self.deleted_at is None:
            self.deleted_at = now
        self.is_active = False
        self.updated_at = now
        return self

    # --- Categories -----------------------------------------------------------

    @property
    def categories(self) -> tuple[CategoryID, ...]:
        return tuple(self._categories)

    def add_category(self, category_id: CategoryID | None) -> Genre:
        if category_id is None:
            return self
        self._categories.append(category_id)
        self.updated_at = _now()
        return self

    def add_categories(self, category_ids: Iterable[CategoryID] | None) -> Genre:
        if category_ids is None:
            return self
        self._categories.extend(category_ids)
        self.updated_at = _now()
        return self

    def remove_category(self, category_id: CategoryID | None) -> Genre:
        """Remove the first occurrence of *category_id*, if present."""
        if category_id is None or category_id not in self._categories:
            return self
        self._categories.remove(category_id)
        self.updated_at = _now()
        return self
