"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.item import Item


@dataclass(frozen=True)
class ItemDTO:
    """Output: a single item as displayed to the user."""

    id: str
    name: str
    quantity: int
    price: str  # formatted, e.g. "19.99"
    category: str  # label, e.g. "Clothing"


@dataclass(frozen=True)
class ItemUpdateDTO:
    """Output: the outcome of a quantity or price change."""

    item: ItemDTO
    field: str  # "Quantity" or "Price"
    old_value: str
    new_value: str


def to_dto(item: Item) -> ItemDTO:
    return ItemDTO(
        id=item.id,
        name=item.name,
        quantity=item.quantity,
        price=str(item.price),
        category=item.describe_category(),
    )
