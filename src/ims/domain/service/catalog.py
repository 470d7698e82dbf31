"""Domain service: Catalog.

The catalog owns the ordered collection of items (through its repository)
and guarantees the collection's invariants:

- item ids are unique, compared case-insensitively
- quantity is never negative and price is always positive
- an item's category never changes
- storage order is insertion order until ``sort`` reorders it

Every mutation validates first and only then touches the repository, so a
failed call leaves the catalog exactly as it was.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from ims.domain.exceptions import (
    DuplicateIdError,
    EmptyCatalogError,
    InvalidNameError,
    InvalidQuantityError,
    NoChangeError,
    NotFoundError,
    ValidationError,
)
from ims.domain.model.category import Category
from ims.domain.model.item import Item
from ims.domain.model.value_objects import ItemId, Price, validate_suffix
from ims.domain.repository.item_repository import ItemRepository

logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD = 5


class SortKey(Enum):
    QUANTITY = "Q"
    PRICE = "P"

    @staticmethod
    def from_letter(letter: str) -> SortKey:
        try:
            return SortKey((letter or "").upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown sort key {letter!r} (expected Q or P)") from exc


class SortOrder(Enum):
    ASCENDING = "A"
    DESCENDING = "D"

    @staticmethod
    def from_letter(letter: str) -> SortOrder:
        try:
            return SortOrder((letter or "").upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown sort order {letter!r} (expected A or D)") from exc


_SORT_KEYS: dict[SortKey, Callable[[Item], object]] = {
    SortKey.QUANTITY: lambda item: item.quantity,
    SortKey.PRICE: lambda item: item.price.amount,
}


class Catalog:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def __len__(self) -> int:
        return len(self._item_repo.list_all())

    # --- Mutations ------------------------------------------------------------

    def add(
        self,
        category: Category | str,
        id_suffix: str,
        name: str,
        quantity: int,
        price: Price | str | int,
    ) -> Item:
        """Create a new item and append it to the end of the catalog."""
        category = Category.coerce(category)
        validate_suffix(id_suffix)
        full_id = ItemId.compose(category, id_suffix).value
        if self.is_id_taken(full_id):
            logger.debug("Rejected add: id %s already taken", full_id)
            raise DuplicateIdError(f"Item ID '{full_id}' is already taken")
        if not isinstance(name, str) or not name.strip():
            raise InvalidNameError("Item name is required")
        _check_quantity(quantity, minimum=1)
        price = Price.of(price)

        item = Item.create(category, id_suffix, name, quantity, price)
        self._item_repo.save(item)
        logger.info("Added item %s (%s)", item.id, item.describe_category())
        return item

    def update_quantity(self, item_id: str, new_quantity: int) -> Item:
        """Set a new stock level. Re-entering the current value is an error."""
        item = self.find_by_id(item_id)
        _check_quantity(new_quantity, minimum=0)
        if new_quantity == item.quantity:
            raise NoChangeError(
                f"Quantity of {item.name} is already {item.quantity}"
            )
        old = item.quantity
        item.set_quantity(new_quantity)
        self._item_repo.save(item)
        logger.info("Updated quantity of %s from %s to %s", item.id, old, new_quantity)
        return item

    def update_price(self, item_id: str, new_price: Price | str | int) -> Item:
        """Set a new price. Re-entering the current value is an error."""
        item = self.find_by_id(item_id)
        price = Price.of(new_price)
        if price == item.price:
            raise NoChangeError(f"Price of {item.name} is already {item.price}")
        old = item.price
        item.set_price(price)
        self._item_repo.save(item)
        logger.info("Updated price of %s from %s to %s", item.id, old, price)
        return item

    def remove(self, item_id: str) -> Item:
        item = self.find_by_id(item_id)
        self._item_repo.delete(item.id)
        logger.info("Removed item %s", item.id)
        return item

    def sort(self, key: SortKey, order: SortOrder) -> None:
        """Reorder storage in place.

        ``sorted`` is stable in both directions, so items with equal keys
        keep their pre-sort relative order.
        """
        items = sorted(
            self._item_repo.list_all(),
            key=_SORT_KEYS[key],
            reverse=order is SortOrder.DESCENDING,
        )
        self._item_repo.replace_all(items)
        logger.info("Sorted %d items by %s (%s)", len(items), key.name, order.name)

    # --- Queries --------------------------------------------------------------

    def is_id_taken(self, full_id: str) -> bool:
        return self._item_repo.get_by_id(ItemId.normalize(full_id)) is not None

    def find_by_id(self, item_id: str) -> Item:
        item = self._item_repo.get_by_id(ItemId.normalize(item_id))
        if item is None:
            logger.debug("Lookup failed for id %r", item_id)
            raise NotFoundError(f"Item '{item_id}' not found")
        return item

    def list_all(self) -> list[Item]:
        """All items grouped by category, insertion order within a group."""
        items = self._item_repo.list_all()
        return [item for category in Category for item in items if item.category is category]

    def filter_by_category(self, category: Category | str) -> list[Item]:
        category = Category.coerce(category)
        return [item for item in self._item_repo.list_all() if item.category is category]

    def low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[Item]:
        return [item for item in self._item_repo.list_all() if item.quantity <= threshold]

    def ensure_not_empty(self, action: str) -> None:
        if not self._item_repo.list_all():
            raise EmptyCatalogError(
                f"No items in the inventory. Nothing to {action}."
            )


def _check_quantity(quantity: int, minimum: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantityError(
            f"Quantity must be a whole number, got {type(quantity).__name__}"
        )
    if quantity < minimum:
        qualifier = "positive" if minimum > 0 else "zero or more"
        raise InvalidQuantityError(f"Quantity must be {qualifier}, got {quantity}")
