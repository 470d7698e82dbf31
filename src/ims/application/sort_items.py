"""Application service: Sort Items use case.

Sorting is a mutation: it reorders storage, so later listings that use
storage order (category filter, low stock) reflect the new order.
"""

from __future__ import annotations

from ims.application.dto import ItemDTO, to_dto
from ims.domain.repository.item_repository import ItemRepository
from ims.domain.service.catalog import Catalog, SortKey, SortOrder


class SortItemsHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, key: SortKey, order: SortOrder) -> list[ItemDTO]:
        """Sort the catalog and return items in their new storage order."""
        catalog = Catalog(self._item_repo)
        catalog.ensure_not_empty("sort")
        catalog.sort(key, order)
        return [to_dto(item) for item in self._item_repo.list_all()]
