"""Application service: Search Item use case (query)."""

from __future__ import annotations

from ims.application.dto import ItemDTO, to_dto
from ims.domain.repository.item_repository import ItemRepository
from ims.domain.service.catalog import Catalog


class SearchItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, item_id: str) -> ItemDTO:
        catalog = Catalog(self._item_repo)
        catalog.ensure_not_empty("search")
        return to_dto(catalog.find_by_id(item_id))
