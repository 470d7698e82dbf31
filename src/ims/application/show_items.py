"""Application service: Show Items use case (query).

Without a category the whole catalog is returned grouped by category;
with one, only that category's items in storage order.
"""

from __future__ import annotations

from ims.application.dto import ItemDTO, to_dto
from ims.domain.repository.item_repository import ItemRepository
from ims.domain.service.catalog import Catalog


class ShowItemsHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, category_code: str | None = None) -> list[ItemDTO]:
        catalog = Catalog(self._item_repo)
        catalog.ensure_not_empty("display")
        if category_code is None:
            items = catalog.list_all()
        else:
            items = catalog.filter_by_category(category_code)
        return [to_dto(item) for item in items]
