"""Application service: Update Item use case.

Only quantity and price can change; id, name and category are fixed once
an item exists. Submitting the current value is rejected with
NoChangeError so the caller can ask again.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from ims.application.dto import ItemUpdateDTO, to_dto
from ims.domain.exceptions import ValidationError
from ims.domain.repository.item_repository import ItemRepository
from ims.domain.service.catalog import Catalog


class UpdateField(Enum):
    QUANTITY = "Q"
    PRICE = "P"

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @staticmethod
    def from_letter(letter: str) -> UpdateField:
        try:
            return UpdateField((letter or "").upper())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown field {letter!r} (expected Q for Quantity or P for Price)"
            ) from exc


class UpdateItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(
        self,
        item_id: str,
        field: UpdateField,
        value: int | str | Decimal,
    ) -> ItemUpdateDTO:
        catalog = Catalog(self._item_repo)
        catalog.ensure_not_empty("update")

        if field is UpdateField.QUANTITY:
            old_value = str(catalog.find_by_id(item_id).quantity)
            item = catalog.update_quantity(item_id, value)  # type: ignore[arg-type]
            new_value = str(item.quantity)
        else:
            old_value = str(catalog.find_by_id(item_id).price)
            item = catalog.update_price(item_id, value)
            new_value = str(item.price)

        return ItemUpdateDTO(
            item=to_dto(item),
            field=field.label,
            old_value=old_value,
            new_value=new_value,
        )
