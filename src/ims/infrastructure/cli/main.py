import logging

import click

from ims.domain.repository.item_repository import ItemRepository
from ims.domain.service.catalog import LOW_STOCK_THRESHOLD
from ims.infrastructure.bootstrap import configure_logging, item_repository
from ims.infrastructure.cli.item_commands import (
    add_items,
    display_all,
    display_by_category,
    display_low_stock,
    remove_items,
    search_items,
    sort_items,
    update_items,
)
from ims.infrastructure.cli.rendering import display_banner

logger = logging.getLogger(__name__)

EXIT_CHOICE = 9

MENU = (
    "Add Item",
    "Update Item",
    "Remove Item",
    "Display Items By Category",
    "Display All Items",
    "Search Item",
    "Sort Items",
    "Display Low Stock Items",
    "Exit",
)


def _display_menu() -> None:
    click.echo(" Inventory Management System ".center(87, "="))
    click.echo()
    click.echo("Menu")
    for number, title in enumerate(MENU, start=1):
        click.echo(f"\t{number} - {title}")


def _display_farewell() -> None:
    click.echo("\t\tThank you for using the Inventory Management System!")
    click.echo()
    click.echo("=" * 87)


def run_session(item_repo: ItemRepository, low_stock_threshold: int = LOW_STOCK_THRESHOLD) -> None:
    """Menu loop. Returns on Exit or when input runs out."""
    actions = {
        1: lambda: add_items(item_repo),
        2: lambda: update_items(item_repo),
        3: lambda: remove_items(item_repo),
        4: lambda: display_by_category(item_repo),
        5: lambda: display_all(item_repo),
        6: lambda: search_items(item_repo),
        7: lambda: sort_items(item_repo),
        8: lambda: display_low_stock(item_repo, low_stock_threshold),
    }
    try:
        while True:
            _display_menu()
            choice = click.prompt(
                "Select Action", type=click.IntRange(1, EXIT_CHOICE)
            )
            click.echo()
            if choice == EXIT_CHOICE:
                break
            display_banner(choice, MENU[choice - 1])
            actions[choice]()
    except click.Abort:
        # End of input (or Ctrl-C) at any prompt ends the session cleanly.
        logger.debug("Input closed; ending session")
        click.echo()
    _display_farewell()


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log catalog activity to stderr.")
def cli(verbose: bool) -> None:
    """IMS: Inventory Management System"""
    configure_logging(verbose)


@cli.command("run")
@click.option(
    "--low-stock-threshold",
    type=click.IntRange(min=0),
    default=LOW_STOCK_THRESHOLD,
    show_default=True,
    help="Quantity at or below which an item counts as low stock.",
)
def run(low_stock_threshold: int) -> None:
    """Start an interactive inventory session (nothing is saved)."""
    run_session(item_repository(), low_stock_threshold)
