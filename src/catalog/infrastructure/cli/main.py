import click

from catalog.infrastructure.bootstrap import configure_logging
from catalog.infrastructure.cli.category_commands import category_add, category_list
from catalog.infrastructure.cli.genre_commands import (
    genre_create,
    genre_delete,
    genre_list,
    genre_show,
    genre_update,
)


@click.group()
def cli() -> None:
    """Catalog — genre administration"""
    configure_logging()


@cli.group()
def genre() -> None:
    """Manage genres."""


@cli.group()
def category() -> None:
    """Manage the category catalog."""


# Register subcommands
genre.add_command(genre_create)
genre.add_command(genre_delete)
genre.add_command(genre_list)
genre.add_command(genre_show)
genre.add_command(genre_update)
category.add_command(category_add)
category.add_command(category_list)
