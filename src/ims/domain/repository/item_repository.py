"""Abstract repository for Item records.

Defined in the domain layer so the domain never depends on
infrastructure. The store is ordered: ``list_all`` returns items in
storage order, which is insertion order until ``replace_all`` reorders it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.item import Item


class ItemRepository(ABC):

    @abstractmethod
    def get_by_id(self, item_id: str) -> Item | None:
        """Return an item by its normalized id, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every item in storage order."""

    @abstractmethod
    def save(self, item: Item) -> None:
        """Append a new item or replace an existing one in place."""

    @abstractmethod
    def delete(self, item_id: str) -> None:
        """Remove an item, keeping the order of the rest."""

    @abstractmethod
    def replace_all(self, items: list[Item]) -> None:
        """Replace the stored sequence with *items*, in the given order."""
