"""Application service: Show Low Stock use case (query)."""

from __future__ import annotations

from ims.application.dto import ItemDTO, to_dto
from ims.domain.repository.item_repository import ItemRepository
from ims.domain.service.catalog import LOW_STOCK_THRESHOLD, Catalog


class ShowLowStockHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[ItemDTO]:
        catalog = Catalog(self._item_repo)
        catalog.ensure_not_empty("display")
        return [to_dto(item) for item in catalog.low_stock(threshold)]
