"""CLI commands for the category catalog."""

from __future__ import annotations

import click

from catalog.domain.model.value_objects import CategoryID
from catalog.infrastructure.bootstrap import category_repository


@click.command("add")
@click.option("--id", "category_id", required=True, help="Category ID to register.")
def category_add(category_id: str) -> None:
    """Register a category ID so genres can reference it."""
    category_repository().add(CategoryID.of(category_id))
    click.echo(f"Category '{category_id}' registered")


@click.command("list")
def category_list() -> None:
    """List every registered category ID."""
    ids = category_repository().list_all()

    if not ids:
        click.echo("No categories found.")
        return

    for category_id in ids:
        click.echo(category_id.value)
