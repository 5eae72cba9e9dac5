"""CLI commands for the Genre aggregate."""

from __future__ import annotations

import click

from catalog.application.create_genre import CreateGenreHandler
from catalog.application.delete_genre import DeleteGenreHandler
from catalog.application.dto import CreateGenreCommand, GenreOutput, UpdateGenreCommand
from catalog.application.get_genre import GetGenreHandler
from catalog.application.list_genres import ListGenresHandler
from catalog.application.update_genre import UpdateGenreHandler
from catalog.domain.exceptions import DomainException, ValidationError
from catalog.domain.model.pagination import SearchQuery
from catalog.infrastructure.bootstrap import category_repository, genre_repository


def _to_click_error(exc: DomainException) -> click.ClickException:
    """Render every collected error, not just the first one."""
    if isinstance(exc, ValidationError) and len(exc.errors) > 1:
        lines = [str(exc)] + [f"  - {error.message}" for error in exc.errors]
        return click.ClickException("\n".join(lines))
    if isinstance(exc, ValidationError):
        return click.ClickException(exc.errors[0].message)
    return click.ClickException(str(exc))


@click.command("create")
@click.option("--name", required=True, help="Genre name.")
@click.option("--active/--inactive", "is_active", default=True, help="Initial state.")
@click.option("--category", "categories", multiple=True, help="Category ID (repeatable).")
def genre_create(name: str, is_active: bool, categories: tuple[str, ...]) -> None:
    """Create a new genre."""
    handler = CreateGenreHandler(
        genre_repo=genre_repository(),
        category_repo=category_repository(),
    )

    try:
        genre_id = handler.handle(
            CreateGenreCommand(name=name, is_active=is_active, categories=list(categories))
        )
    except DomainException as exc:
        raise _to_click_error(exc)

    click.echo(f"Genre {genre_id} created")


@click.command("update")
@click.option("--id", "genre_id", required=True, help="Genre ID to update.")
@click.option("--name", required=True, help="New genre name.")
@click.option("--active/--inactive", "is_active", default=None, help="New state (default: active).")
@click.option("--category", "categories", multiple=True, help="Category ID (repeatable).")
def genre_update(
    genre_id: str,
    name: str,
    is_active: bool | None,
    categories: tuple[str, ...],
) -> None:
    """Replace a genre's name, state and categories."""
    handler = UpdateGenreHandler(
        genre_repo=genre_repository(),
        category_repo=category_repository(),
    )

    try:
        handler.handle(UpdateGenreCommand.with_(genre_id, name, is_active, list(categories)))
    except DomainException as exc:
        raise _to_click_error(exc)

    click.echo(f"Genre {genre_id} updated")


def _display_genre(dto: GenreOutput) -> None:
    click.echo(f"Genre {dto.id}  ({'active' if dto.is_active else 'inactive'})")
    click.echo(f"Name:       {dto.name}")
    click.echo(f"Categories: {', '.join(dto.categories) or '-'}")
    click.echo(f"Created:    {dto.created_at:%Y-%m-%d %H:%M UTC}")
    click.echo(f"Updated:    {dto.updated_at:%Y-%m-%d %H:%M UTC}")
    if dto.deleted_at is not None:
        click.echo(f"Deleted:    {dto.deleted_at:%Y-%m-%d %H:%M UTC}")


@click.command("show")
@click.option("--id", "genre_id", required=True, help="Genre ID to display.")
def genre_show(genre_id: str) -> None:
    """Show details of an existing genre."""
    handler = GetGenreHandler(genre_repo=genre_repository())

    try:
        dto = handler.handle(genre_id)
    except DomainException as exc:
        raise _to_click_error(exc)

    _display_genre(dto)


@click.command("delete")
@click.option("--id", "genre_id", required=True, help="Genre ID to delete.")
def genre_delete(genre_id: str) -> None:
    """Delete a genre (unknown IDs are ignored)."""
    DeleteGenreHandler(genre_repo=genre_repository()).handle(genre_id)
    click.echo(f"Genre {genre_id} deleted.")


@click.command("list")
@click.option("--search", "terms", default=None, help="Filter by name.")
@click.option("--page", default=0, type=int, show_default=True, help="Zero-based page.")
@click.option("--per-page", default=10, type=int, show_default=True, help="Page size.")
@click.option("--sort", default="name", show_default=True, help="Sort field.")
@click.option(
    "--direction",
    default="asc",
    type=click.Choice(["asc", "desc"], case_sensitive=False),
    show_default=True,
)
def genre_list(
    terms: str | None,
    page: int,
    per_page: int,
    sort: str,
    direction: str,
) -> None:
    """List genres, one page at a time."""
    handler = ListGenresHandler(genre_repo=genre_repository())
    query = SearchQuery(page=page, per_page=per_page, terms=terms, sort=sort, direction=direction)

    try:
        result = handler.handle(query)
    except DomainException as exc:
        raise _to_click_error(exc)

    if not result.items:
        click.echo("No genres found.")
        return

    click.echo(f"{'ID':<34} {'Name':<30} {'Active':>6}")
    click.echo("-" * 72)
    for item in result.items:
        click.echo(f"{item.id:<34} {item.name or '':<30} {'yes' if item.is_active else 'no':>6}")
    click.echo(f"Page {result.current_page} - {len(result.items)} of {result.total} genre(s)")
