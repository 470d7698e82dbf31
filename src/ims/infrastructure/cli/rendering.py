"""Text rendering of item DTOs."""

from __future__ import annotations

import click

from ims.application.dto import ItemDTO

NAME_DISPLAY_LIMIT = 15

_RULE = "-" * 74


def truncate_name(name: str, limit: int = NAME_DISPLAY_LIMIT) -> str:
    """Cut names longer than *limit* characters and mark the cut."""
    if len(name) <= limit:
        return name
    return name[:limit] + "..."


def display_items(items: list[ItemDTO]) -> None:
    """Fixed-width table: ID, Name, Quantity, Price, Category."""
    click.echo(
        f"\t{'ID':<15} {'Name':<18} {'Quantity':>10} {'Price':>12}  {'Category':<15}"
    )
    click.echo(f"\t{_RULE}")
    for item in items:
        click.echo(
            f"\t{item.id:<15} {truncate_name(item.name):<18} "
            f"{item.quantity:>10} {item.price:>12}  {item.category:<15}"
        )
    click.echo()


def display_details(item: ItemDTO) -> None:
    click.echo(f"\t\tID: {item.id}")
    click.echo(f"\t\tName: {item.name}")
    click.echo(f"\t\tQuantity: {item.quantity}")
    click.echo(f"\t\tPrice: {item.price}")
    click.echo(f"\t\tCategory: {item.category}")
    click.echo()


def display_banner(number: int, title: str) -> None:
    click.echo(f" [{number}] {title} ".center(87, "-"))
    click.echo()
