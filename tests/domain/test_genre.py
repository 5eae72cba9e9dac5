"""Unit tests for the Genre aggregate and its business rules."""

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.genre import Genre
from catalog.domain.model.value_objects import CategoryID


class TestGenreCreation:

    def test_happy_path(self):
        genre = Genre.new_genre("Ação", True)
        assert genre.id is not None
        assert genre.name == "Ação"
        assert genre.is_active is True
        assert genre.categories == ()
        assert genre.deleted_at is None
        assert genre.created_at == genre.updated_at

    def test_inactive_genre_is_not_soft_deleted(self):
        genre = Genre.new_genre("Ação", False)
        assert genre.is_active is False
        assert genre.deleted_at is None

    def test_ids_are_unique(self):
        assert Genre.new_genre("Ação", True).id != Genre.new_genre("Ação", True).id

    def test_null_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Genre.new_genre(None, True)
        assert [e.message for e in exc_info.value.errors] == ["'name' should not be null"]

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Genre.new_genre("  ", True)
        assert [e.message for e in exc_info.value.errors] == ["'name' should not be empty"]

    def test_short_name_rejected_after_trim(self):
        with pytest.raises(ValidationError) as exc_info:
            Genre.new_genre("Fi ", True)
        assert [e.message for e in exc_info.value.errors] == [
            "'name' must be between 3 and 255 characters"
        ]

    def test_long_name_rejected(self):
        with pytest.raises(ValidationError, match="Failed to validate aggregate Genre"):
            Genre.new_genre("x" * 256, True)


class TestGenreUpdate:

    def test_replaces_fields(self):
        genre = Genre.new_genre("Ação", True)
        genre.add_category(CategoryID("old"))
        before = genre.updated_at

        genre.update("Filmes", False, [CategoryID("123"), CategoryID("456")])

        assert genre.name == "Filmes"
        assert genre.is_active is False
        assert genre.categories == (CategoryID("123"), CategoryID("456"))
        assert genre.updated_at >= before

    def test_none_categories_means_empty(self):
        genre = Genre.new_genre("Ação", True).add_category(CategoryID("123"))
        genre.update("Ação", True, None)
        assert genre.categories == ()

    def test_created_at_never_changes(self):
        genre = Genre.new_genre("Ação", True)
        created = genre.created_at
        genre.update("Filmes", True, [])
        assert genre.created_at == created

    def test_invalid_name_rejected(self):
        genre = Genre.new_genre("Ação", True)
        with pytest.raises(ValidationError) as exc_info:
            genre.update("  ", True, [])
        assert [e.message for e in exc_info.value.errors] == ["'name' should not be empty"]

    def test_failed_update_restores_previous_state(self):
        genre = Genre.new_genre("Ação", True).add_category(CategoryID("123"))
        updated_at = genre.updated_at

        with pytest.raises(ValidationError):
            genre.update(None, False, [CategoryID("999")])

        assert genre.name == "Ação"
        assert genre.is_active is True
        assert genre.categories == (CategoryID("123"),)
        assert genre.updated_at == updated_at


class TestGenreActivation:

    def test_deactivate_sets_deleted_at(self):
        genre = Genre.new_genre("Ação", True)
        genre.deactivate()
        assert genre.is_active is False
        assert genre.deleted_at is not None
        assert genre.updated_at >= genre.created_at

    def test_deactivate_twice_keeps_first_deleted_at(self):
        genre = Genre.new_genre("Ação", True).deactivate()
        first = genre.deleted_at
        genre.deactivate()
        assert genre.deleted_at == first

    def test_activate_clears_deleted_at(self):
        genre = Genre.new_genre("Ação", False).deactivate()
        genre.activate()
        assert genre.is_active is True
        assert genre.deleted_at is None

    def test_activate_is_idempotent(self):
        genre = Genre.new_genre("Ação", True).activate().activate()
        assert genre.is_active is True
        assert genre.deleted_at is None


class TestGenreCategories:

    def test_add_categories_preserves_order_and_duplicates(self):
        ids = [CategoryID("b"), CategoryID("a"), CategoryID("b")]
        genre = Genre.new_genre("Ação", True).add_categories(ids)
        assert list(genre.categories) == ids

    def test_add_single_category(self):
        genre = Genre.new_genre("Ação", True)
        before = genre.updated_at
        genre.add_category(CategoryID("123"))
        assert genre.categories == (CategoryID("123"),)
        assert genre.updated_at >= before

    def test_add_none_is_noop(self):
        genre = Genre.new_genre("Ação", True)
        updated_at = genre.updated_at
        genre.add_category(None).add_categories(None)
        assert genre.categories == ()
        assert genre.updated_at == updated_at

    def test_remove_first_occurrence_only(self):
        genre = Genre.new_genre("Ação", True).add_categories(
            [CategoryID("a"), CategoryID("b"), CategoryID("a")]
        )
        genre.remove_category(CategoryID("a"))
        assert genre.categories == (CategoryID("b"), CategoryID("a"))

    def test_remove_missing_is_noop(self):
        genre = Genre.new_genre("Ação", True).add_category(CategoryID("a"))
        updated_at = genre.updated_at
        genre.remove_category(CategoryID("zzz")).remove_category(None)
        assert genre.categories == (CategoryID("a"),)
        assert genre.updated_at == updated_at

    def test_categories_view_is_read_only(self):
        genre = Genre.new_genre("Ação", True).add_category(CategoryID("a"))
        view = genre.categories
        assert isinstance(view, tuple)
        genre.add_category(CategoryID("b"))
        assert view == (CategoryID("a"),)

    def test_copy_owns_its_category_list(self):
        genre = Genre.new_genre("Ação", True).add_category(CategoryID("a"))
        clone = genre.copy()
        clone.update("Filmes", False, [CategoryID("b")])

        assert clone.id == genre.id
        assert genre.name == "Ação"
        assert genre.categories == (CategoryID("a"),)

    def test_reconstitute_copies_category_list(self):
        source = [CategoryID("a")]
        original = Genre.new_genre("Ação", True)
        genre = Genre.reconstitute(
            original.id, original.name, True,
            original.created_at, original.updated_at, None, source,
        )
        source.append(CategoryID("b"))
        assert genre.categories == (CategoryID("a"),)
