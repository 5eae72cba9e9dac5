"""JSON-file-backed implementation of CategoryRepository.

Stores the known category IDs as a flat JSON list.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from collections.abc import Iterable

from catalog.domain.model.value_objects import CategoryID
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CategoryRepository interface -----------------------------------------

    def exists_by_ids(self, category_ids: Iterable[CategoryID]) -> list[CategoryID]:
        known = set(self._load_raw())
        found = [c for c in category_ids if c.value in known]
        logger.debug("Category lookup matched %d id(s)", len(found))
        return found

    # --- Catalog management ---------------------------------------------------

    def add(self, category_id: CategoryID) -> None:
        """Register a category ID.  Adding a known ID changes nothing."""
        ids = self._load_raw()
        if category_id.value not in ids:
            ids.append(category_id.value)
            self._persist_raw(ids)

    def list_all(self) -> list[CategoryID]:
        return [CategoryID(raw) for raw in self._load_raw()]

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[str]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, ids: list[str]) -> None:
        self._file_path.write_text(json.dumps(ids, indent=2) + "\n", encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
