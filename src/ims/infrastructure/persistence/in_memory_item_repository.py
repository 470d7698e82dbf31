"""Process-memory implementation of ItemRepository.

Items live in an insertion-ordered dict keyed by normalized id, so
lookups are direct and deletion keeps the order of the remaining items.
Nothing outlives the process.
"""

from __future__ import annotations

from ims.domain.model.item import Item
from ims.domain.repository.item_repository import ItemRepository


class InMemoryItemRepository(ItemRepository):

    def __init__(self, items: list[Item] | None = None) -> None:
        self._store: dict[str, Item] = {}
        for item in items or []:
            self._store[item.id] = item

    # --- ItemRepository interface ---------------------------------------------

    def get_by_id(self, item_id: str) -> Item | None:
        return self._store.get(item_id)

    def list_all(self) -> list[Item]:
        return list(self._store.values())

    def save(self, item: Item) -> None:
        # Reassigning an existing key keeps its position.
        self._store[item.id] = item

    def delete(self, item_id: str) -> None:
        self._store.pop(item_id, None)

    def replace_all(self, items: list[Item]) -> None:
        self._store = {item.id: item for item in items}
