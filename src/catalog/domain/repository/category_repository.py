"""Abstract repository for the category catalog.

The genre use cases only need to know which category IDs exist.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from catalog.domain.model.value_objects import CategoryID


class CategoryRepository(ABC):

    @abstractmethod
    def exists_by_ids(self, category_ids: Iterable[CategoryID]) -> list[CategoryID]:
        """Return the subset of *category_ids* that exist.  Order is not significant."""
