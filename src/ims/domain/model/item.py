"""Item record: one inventory entry.

The id, name and category are fixed for the life of the item. Quantity and
price change only through the catalog, which validates before it calls
the mutators here.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.category import Category
from ims.domain.model.value_objects import ItemId, Price

_FROZEN_FIELDS = ("id", "name", "category")


def title_case(name: str) -> str:
    """Capitalize the first letter of each word, lowercase the rest.

    Whitespace runs are kept exactly as typed.
    """
    result = []
    capitalize_next = True
    for ch in name:
        if ch.isspace():
            capitalize_next = True
            result.append(ch)
        elif capitalize_next:
            result.append(ch.upper())
            capitalize_next = False
        else:
            result.append(ch.lower())
    return "".join(result)


@dataclass(eq=False)
class Item:
    """Inventory entry tagged with its category.

    Use the ``Item.create()`` factory for new items. The ``__init__`` is
    intentionally simple so tests and the repository can build items
    directly.
    """

    id: str
    name: str
    quantity: int
    price: Price
    category: Category

    def __setattr__(self, attr: str, value: object) -> None:
        if attr in _FROZEN_FIELDS and attr in self.__dict__:
            raise AttributeError(f"Item {attr} cannot be changed after creation")
        super().__setattr__(attr, value)

    @staticmethod
    def create(
        category: Category,
        suffix: str,
        name: str,
        quantity: int,
        price: Price,
    ) -> Item:
        return Item(
            id=ItemId.compose(category, suffix).value,
            name=title_case(name.strip()),
            quantity=quantity,
            price=price,
            category=category,
        )

    def describe_category(self) -> str:
        return self.category.describe_category()

    # --- Mutators (validated by the catalog) ----------------------------------

    def set_quantity(self, quantity: int) -> None:
        self.quantity = quantity

    def set_price(self, price: Price) -> None:
        self.price = price
