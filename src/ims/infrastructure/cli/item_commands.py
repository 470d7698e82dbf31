"""Interactive actions behind each menu entry.

Every action screens input through the prompt types, calls one handler,
and prints the result. Domain errors are shown to the user and the
action either re-asks or offers to go again; none of them ends the
session.
"""

from __future__ import annotations

import logging

import click

from ims.application.add_item import AddItemHandler
from ims.application.remove_item import RemoveItemHandler
from ims.application.search_item import SearchItemHandler
from ims.application.show_items import ShowItemsHandler
from ims.application.show_low_stock import ShowLowStockHandler
from ims.application.sort_items import SortItemsHandler
from ims.application.update_item import UpdateField, UpdateItemHandler
from ims.domain.exceptions import DomainException, EmptyCatalogError, NoChangeError
from ims.domain.model.category import Category
from ims.domain.repository.item_repository import ItemRepository
from ims.domain.service.catalog import LOW_STOCK_THRESHOLD, Catalog, SortKey, SortOrder
from ims.infrastructure.cli.prompts import (
    CATEGORY,
    ITEM_ID,
    ITEM_NAME,
    NEW_QUANTITY,
    PRICE,
    STOCK_QUANTITY,
    letter_choice,
)
from ims.infrastructure.cli.rendering import display_details, display_items

logger = logging.getLogger(__name__)


def _report(exc: DomainException) -> None:
    logger.debug("%s: %s", type(exc).__name__, exc)
    click.echo(f"\t{exc}")
    click.echo()


def _has_items(item_repo: ItemRepository, action: str) -> bool:
    try:
        Catalog(item_repo).ensure_not_empty(action)
    except EmptyCatalogError as exc:
        _report(exc)
        return False
    return True


def _list_categories() -> None:
    for category in Category:
        click.echo(f"\t{category.code} - {category.label}")


def _again(prompt: str) -> bool:
    answer = click.confirm(prompt, default=False)
    click.echo()
    return answer


# --- [1] Add ------------------------------------------------------------------


def _prompt_free_suffix(item_repo: ItemRepository, category: Category) -> str:
    catalog = Catalog(item_repo)
    while True:
        suffix = click.prompt("\tID", type=ITEM_ID)
        if not catalog.is_id_taken(category.code + suffix):
            return suffix
        click.echo("\tThis ID is already taken. Please choose another.")


def add_items(item_repo: ItemRepository) -> None:
    handler = AddItemHandler(item_repo)
    while True:
        click.echo("Enter the new item information.")
        click.echo()
        _list_categories()
        category = click.prompt("\tCategory", type=CATEGORY)
        suffix = _prompt_free_suffix(item_repo, category)
        click.echo(f"\tOfficial ID: {(category.code + suffix).lower()}")
        name = click.prompt("\tName", type=ITEM_NAME)
        quantity = click.prompt("\tQuantity", type=NEW_QUANTITY)
        price = click.prompt("\tPrice", type=PRICE)

        try:
            dto = handler.handle(category.code, suffix, name, quantity, price)
        except DomainException as exc:
            _report(exc)
        else:
            click.echo(f"\tItem {dto.id} ({dto.name}) added successfully!")
            click.echo()

        if not _again("Add Another Item"):
            return


# --- [2] Update ---------------------------------------------------------------


def _apply_update(handler: UpdateItemHandler, item_id: str, field: UpdateField) -> None:
    value_type = STOCK_QUANTITY if field is UpdateField.QUANTITY else PRICE
    while True:
        value = click.prompt(f"\tNew {field.label}", type=value_type)
        try:
            result = handler.handle(item_id, field, value)
        except NoChangeError:
            click.echo("\tYou entered the same amount. Please enter a different value.")
            click.echo()
            continue
        except DomainException as exc:
            _report(exc)
            continue
        click.echo(
            f"\t{result.field} of Item {result.item.name} is updated "
            f"from {result.old_value} to {result.new_value}"
        )
        click.echo()
        return


def update_items(item_repo: ItemRepository) -> None:
    if not _has_items(item_repo, "update"):
        return
    search = SearchItemHandler(item_repo)
    update = UpdateItemHandler(item_repo)
    while True:
        click.echo("Enter the ID, what to update and its new value.")
        click.echo()
        item_id = click.prompt("\tID", type=ITEM_ID)
        try:
            current = search.handle(item_id)
        except DomainException as exc:
            _report(exc)
        else:
            click.echo("\tCurrent Details of the Item")
            display_details(current)
            click.echo("\tQ - Quantity\n\tP - Price")
            letter = click.prompt("\tWhat to update", type=letter_choice("Q", "P"))
            _apply_update(update, item_id, UpdateField.from_letter(letter))

        if not _again("Update Another Item"):
            return


# --- [3] Remove ---------------------------------------------------------------


def remove_items(item_repo: ItemRepository) -> None:
    if not _has_items(item_repo, "remove"):
        return
    handler = RemoveItemHandler(item_repo)
    while True:
        click.echo("Enter the ID of the item to remove.")
        click.echo()
        item_id = click.prompt("\tID", type=ITEM_ID)
        try:
            removed = handler.handle(item_id)
        except EmptyCatalogError as exc:
            _report(exc)
            return
        except DomainException as exc:
            _report(exc)
        else:
            click.echo(f"\tItem {removed.id} has been removed from the inventory.")
            click.echo()

        if not _again("Remove Another Item"):
            return


# --- [4] Display by category --------------------------------------------------


def display_by_category(item_repo: ItemRepository) -> None:
    if not _has_items(item_repo, "display"):
        return
    handler = ShowItemsHandler(item_repo)
    while True:
        click.echo("Enter the category code to display.")
        click.echo()
        _list_categories()
        category = click.prompt("\tCategory", type=CATEGORY)
        click.echo()
        items = handler.handle(category.code)
        if items:
            display_items(items)
        else:
            click.echo(f"\tNo items found in the {category.label} Category.")
            click.echo()

        if not _again("Display Another Category"):
            return


# --- [5] Display all ----------------------------------------------------------


def display_all(item_repo: ItemRepository) -> None:
    try:
        items = ShowItemsHandler(item_repo).handle()
    except EmptyCatalogError as exc:
        _report(exc)
        return
    display_items(items)


# --- [6] Search ---------------------------------------------------------------


def search_items(item_repo: ItemRepository) -> None:
    if not _has_items(item_repo, "search"):
        return
    handler = SearchItemHandler(item_repo)
    while True:
        click.echo("Enter the ID to search.")
        click.echo()
        item_id = click.prompt("\tID", type=ITEM_ID)
        try:
            item = handler.handle(item_id)
        except DomainException as exc:
            _report(exc)
        else:
            click.echo("\tCurrent Details of the Item")
            display_details(item)

        if not _again("Search Another Item"):
            return


# --- [7] Sort -----------------------------------------------------------------


def sort_items(item_repo: ItemRepository) -> None:
    if not _has_items(item_repo, "sort"):
        return
    handler = SortItemsHandler(item_repo)
    while True:
        click.echo("Enter the letter to sort the list accordingly.")
        click.echo()
        click.echo("\tQ - Quantity\n\tP - Price")
        key = click.prompt("\tSort By", type=letter_choice("Q", "P"))
        click.echo("\tA - Ascending\n\tD - Descending")
        order = click.prompt("\tArranged By", type=letter_choice("A", "D"))
        click.echo()
        items = handler.handle(SortKey.from_letter(key), SortOrder.from_letter(order))
        display_items(items)

        if not _again("Sort Again"):
            return


# --- [8] Low stock ------------------------------------------------------------


def display_low_stock(item_repo: ItemRepository, threshold: int = LOW_STOCK_THRESHOLD) -> None:
    try:
        items = ShowLowStockHandler(item_repo).handle(threshold)
    except EmptyCatalogError as exc:
        _report(exc)
        return
    click.echo(f"Items with low stock ({threshold} or fewer).")
    click.echo()
    if not items:
        click.echo("\tNo items with low stock.")
        click.echo()
        return
    display_items(items)
