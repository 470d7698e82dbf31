"""Application service: Add Item use case."""

from __future__ import annotations

from decimal import Decimal

from ims.application.dto import ItemDTO, to_dto
from ims.domain.repository.item_repository import ItemRepository
from ims.domain.service.catalog import Catalog


class AddItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(
        self,
        category_code: str,
        id_suffix: str,
        name: str,
        quantity: int,
        price: str | Decimal,
    ) -> ItemDTO:
        """Add a new item to the catalog.

        The catalog re-checks every field, including id uniqueness, even
        though the prompt layer has already screened the input.
        """
        catalog = Catalog(self._item_repo)
        item = catalog.add(category_code, id_suffix, name, quantity, price)
        return to_dto(item)
