"""JSON-file-backed implementation of GenreRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.genre import Genre
from catalog.domain.model.pagination import Pagination, SearchQuery
from catalog.domain.model.value_objects import CategoryID, GenreID
from catalog.domain.repository.genre_repository import GenreRepository

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ("name", "created_at", "updated_at")


class JsonGenreRepository(GenreRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- GenreRepository interface --------------------------------------------

    def create(self, genre: Genre) -> Genre:
        return self._save(genre)

    def update(self, genre: Genre) -> Genre:
        return self._save(genre)

    def get_by_id(self, genre_id: GenreID) -> Genre | None:
        for raw in self._load_raw():
            if raw["id"] == genre_id.value:
                return self._to_domain(raw)
        return None

    def delete_by_id(self, genre_id: GenreID) -> None:
        records = self._load_raw()
        remaining = [raw for raw in records if raw["id"] != genre_id.value]
        if len(remaining) != len(records):
            self._persist_raw(remaining)
            logger.debug("Genre %s removed from %s", genre_id, self._file_path)

    def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        if query.sort not in SORTABLE_FIELDS:
            raise ValidationError(
                f"Cannot sort genres by '{query.sort}' "
                f"(expected one of: {', '.join(SORTABLE_FIELDS)})"
            )

        genres = [self._to_domain(raw) for raw in self._load_raw()]

        terms = (query.terms or "").strip().lower()
        if terms:
            genres = [g for g in genres if terms in (g.name or "").lower()]

        genres.sort(
            key=lambda g: _sort_key(g, query.sort),
            reverse=query.direction.lower() == "desc",
        )

        start = query.page * query.per_page
        return Pagination(
            current_page=query.page,
            per_page=query.per_page,
            total=len(genres),
            items=genres[start:start + query.per_page],
        )

    # --- Persistence ----------------------------------------------------------

    def _save(self, genre: Genre) -> Genre:
        records = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == genre.id.value:
                records[i] = self._to_raw(genre)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(genre))

        self._persist_raw(records)
        logger.debug("Genre %s written to %s", genre.id, self._file_path)
        return self._to_domain(self._to_raw(genre))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(genre: Genre) -> dict:
        return {
            "id": genre.id.value,
            "name": genre.name,
            "is_active": genre.is_active,
            "categories": [c.value for c in genre.categories],
            "created_at": genre.created_at.isoformat(),
            "updated_at": genre.updated_at.isoformat(),
            "deleted_at": genre.deleted_at.isoformat() if genre.deleted_at else None,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Genre:
        deleted_at = raw.get("deleted_at")
        return Genre.reconstitute(
            genre_id=GenreID(raw["id"]),
            name=raw["name"],
            is_active=raw["is_active"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
            deleted_at=datetime.fromisoformat(deleted_at) if deleted_at else None,
            categories=[CategoryID(c) for c in raw.get("categories", [])],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _sort_key(genre: Genre, sort: str) -> str | datetime:
    if sort == "name":
        return (genre.name or "").lower()
    return getattr(genre, sort)
