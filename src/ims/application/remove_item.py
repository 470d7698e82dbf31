"""Application service: Remove Item use case."""

from __future__ import annotations

from ims.application.dto import ItemDTO, to_dto
from ims.domain.repository.item_repository import ItemRepository
from ims.domain.service.catalog import Catalog


class RemoveItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, item_id: str) -> ItemDTO:
        """Remove an item and return what was removed."""
        catalog = Catalog(self._item_repo)
        catalog.ensure_not_empty("remove")
        return to_dto(catalog.remove(item_id))
