"""Tests for the process-memory ItemRepository."""

from ims.infrastructure.persistence.in_memory_item_repository import (
    InMemoryItemRepository,
)
from tests.fakes import make_item


class TestInMemoryItemRepository:

    def test_starts_empty(self):
        assert InMemoryItemRepository().list_all() == []

    def test_save_appends_in_insertion_order(self):
        repo = InMemoryItemRepository()
        for item_id in ("EN1", "CL1", "EL1"):
            repo.save(make_item(item_id))
        assert [i.id for i in repo.list_all()] == ["en1", "cl1", "el1"]

    def test_save_existing_keeps_position(self):
        first, second = make_item("CL1", quantity=1), make_item("CL2")
        repo = InMemoryItemRepository([first, second])
        first.set_quantity(9)
        repo.save(first)
        assert [i.id for i in repo.list_all()] == ["cl1", "cl2"]
        assert repo.get_by_id("cl1").quantity == 9

    def test_get_by_id_missing(self):
        assert InMemoryItemRepository().get_by_id("cl1") is None

    def test_delete_keeps_order_of_rest(self):
        repo = InMemoryItemRepository([make_item("CL1"), make_item("CL2"), make_item("CL3")])
        repo.delete("cl2")
        assert [i.id for i in repo.list_all()] == ["cl1", "cl3"]

    def test_replace_all_reorders(self):
        a, b, c = make_item("CL1"), make_item("CL2"), make_item("CL3")
        repo = InMemoryItemRepository([a, b, c])
        repo.replace_all([c, a, b])
        assert [i.id for i in repo.list_all()] == ["cl3", "cl1", "cl2"]

    def test_list_all_returns_a_copy(self):
        repo = InMemoryItemRepository([make_item("CL1")])
        repo.list_all().clear()
        assert len(repo.list_all()) == 1
