"""Unit tests for Catalog storage and CRUD operations."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import (
    DuplicateIdError,
    EmptyCatalogError,
    InvalidIdError,
    InvalidNameError,
    InvalidPriceError,
    InvalidQuantityError,
    NoChangeError,
    NotFoundError,
    UnknownCategoryError,
)
from ims.domain.model.category import Category
from ims.domain.service.catalog import Catalog
from tests.fakes import FakeItemRepository, make_item


def _setup(items=None) -> tuple[Catalog, FakeItemRepository]:
    repo = FakeItemRepository(items)
    return Catalog(repo), repo


class TestCatalogAdd:

    def test_add_appends_item(self):
        catalog, repo = _setup([make_item("EL1")])
        item = catalog.add("CL", "001", "t shirt", 10, "19.99")
        assert item.id == "cl001"
        assert item.name == "T Shirt"
        assert item.category is Category.CLOTHING
        assert [i.id for i in repo.list_all()] == ["el1", "cl001"]

    def test_add_accepts_category_member(self):
        catalog, _ = _setup()
        item = catalog.add(Category.ENTERTAINMENT, "9", "chess", 2, Decimal("30"))
        assert item.id == "en9"

    def test_duplicate_id_rejected_case_insensitively(self):
        catalog, repo = _setup([make_item("CL001")])
        with pytest.raises(DuplicateIdError, match="already taken"):
            catalog.add("cl", "001", "Sock", 1, "1.00")
        with pytest.raises(DuplicateIdError):
            catalog.add("CL", "001", "Sock", 1, "1.00")
        assert len(catalog) == 1
        assert repo.writes == []

    def test_same_suffix_in_other_category_allowed(self):
        catalog, _ = _setup([make_item("CL001")])
        assert catalog.add("EL", "001", "Lamp", 1, "8").id == "el001"

    def test_unknown_category_rejected(self):
        catalog, _ = _setup()
        with pytest.raises(UnknownCategoryError):
            catalog.add("XX", "1", "Thing", 1, "1")

    @pytest.mark.parametrize("category", [1, None])
    def test_non_string_category_rejected(self, category):
        catalog, repo = _setup()
        with pytest.raises(UnknownCategoryError):
            catalog.add(category, "1", "Thing", 1, "1")  # type: ignore[arg-type]
        assert repo.writes == []

    def test_sub_cent_price_kept_as_entered(self):
        catalog, _ = _setup()
        thread = catalog.add("CL", "1", "Thread", 1, "0.004")
        assert thread.price.amount == Decimal("0.004")
        assert catalog.add("CL", "2", "Cap", 1, "19.995").price.amount == Decimal("19.995")

    @pytest.mark.parametrize("suffix", ["", "a b", "1-2"])
    def test_invalid_suffix_rejected(self, suffix):
        catalog, _ = _setup()
        with pytest.raises(InvalidIdError):
            catalog.add("CL", suffix, "Thing", 1, "1")

    def test_blank_name_rejected(self):
        catalog, _ = _setup()
        with pytest.raises(InvalidNameError, match="required"):
            catalog.add("CL", "1", "   ", 1, "1")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, quantity):
        catalog, _ = _setup()
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            catalog.add("CL", "1", "Thing", quantity, "1")

    def test_non_integer_quantity_rejected(self):
        catalog, _ = _setup()
        with pytest.raises(InvalidQuantityError, match="whole number"):
            catalog.add("CL", "1", "Thing", 2.5, "1")  # type: ignore[arg-type]

    @pytest.mark.parametrize("price", ["0", "-3", "free"])
    def test_bad_price_rejected(self, price):
        catalog, repo = _setup()
        with pytest.raises(InvalidPriceError):
            catalog.add("CL", "1", "Thing", 1, price)
        assert repo.list_all() == []


class TestCatalogFind:

    def test_find_is_case_insensitive(self):
        catalog, _ = _setup([make_item("CL001")])
        assert catalog.find_by_id("CL001").id == "cl001"
        assert catalog.find_by_id("cl001").id == "cl001"

    def test_missing_id_raises_not_found(self):
        catalog, _ = _setup([make_item("CL001")])
        with pytest.raises(NotFoundError, match="not found"):
            catalog.find_by_id("cl002")

    def test_non_string_id_not_found(self):
        catalog, _ = _setup([make_item("CL001")])
        with pytest.raises(NotFoundError):
            catalog.find_by_id(1)  # type: ignore[arg-type]

    def test_is_id_taken(self):
        catalog, _ = _setup([make_item("EN5")])
        assert catalog.is_id_taken("EN5")
        assert not catalog.is_id_taken("en6")


class TestCatalogUpdateQuantity:

    def test_update_quantity(self):
        catalog, _ = _setup([make_item("CL001", quantity=10)])
        item = catalog.update_quantity("CL001", 3)
        assert item.quantity == 3

    def test_update_to_zero_allowed(self):
        catalog, _ = _setup([make_item("CL001", quantity=10)])
        assert catalog.update_quantity("cl001", 0).quantity == 0

    def test_same_quantity_is_no_change(self):
        catalog, repo = _setup([make_item("CL001", quantity=10)])
        with pytest.raises(NoChangeError, match="already 10"):
            catalog.update_quantity("cl001", 10)
        assert catalog.find_by_id("cl001").quantity == 10
        assert repo.writes == []

    def test_negative_quantity_rejected(self):
        catalog, _ = _setup([make_item("CL001", quantity=10)])
        with pytest.raises(InvalidQuantityError, match="zero or more"):
            catalog.update_quantity("cl001", -1)
        assert catalog.find_by_id("cl001").quantity == 10

    def test_missing_item_rejected(self):
        catalog, _ = _setup()
        with pytest.raises(NotFoundError):
            catalog.update_quantity("cl001", 1)


class TestCatalogUpdatePrice:

    def test_update_price_keeps_fraction(self):
        catalog, _ = _setup([make_item("EL1", price="10.00")])
        item = catalog.update_price("el1", "12.75")
        assert item.price.amount == Decimal("12.75")

    def test_same_price_is_no_change(self):
        catalog, repo = _setup([make_item("EL1", price="10.00")])
        with pytest.raises(NoChangeError, match="already 10.00"):
            catalog.update_price("el1", "10")
        assert repo.writes == []

    def test_sub_cent_change_is_applied(self):
        catalog, _ = _setup([make_item("EL1", price="19.99")])
        item = catalog.update_price("el1", "19.994")
        assert item.price.amount == Decimal("19.994")
        assert str(item.price) == "19.99"

    @pytest.mark.parametrize("price", ["0", "-1", "-0.001"])
    def test_non_positive_price_rejected(self, price):
        catalog, _ = _setup([make_item("EL1", price="10.00")])
        with pytest.raises(InvalidPriceError):
            catalog.update_price("el1", price)
        assert str(catalog.find_by_id("el1").price) == "10.00"

    def test_missing_item_rejected(self):
        catalog, _ = _setup()
        with pytest.raises(NotFoundError):
            catalog.update_price("el1", "1")


class TestCatalogRemove:

    def test_remove_keeps_order_of_others(self):
        catalog, repo = _setup([make_item("CL1"), make_item("EL2"), make_item("EN3")])
        removed = catalog.remove("EL2")
        assert removed.id == "el2"
        assert [i.id for i in repo.list_all()] == ["cl1", "en3"]
        assert len(catalog) == 2
        with pytest.raises(NotFoundError):
            catalog.find_by_id("el2")

    def test_remove_missing_rejected(self):
        catalog, repo = _setup([make_item("CL1")])
        with pytest.raises(NotFoundError):
            catalog.remove("cl2")
        assert len(catalog) == 1
        assert repo.writes == []


class TestCatalogEnsureNotEmpty:

    def test_empty_catalog_raises(self):
        catalog, _ = _setup()
        with pytest.raises(EmptyCatalogError, match="Nothing to update"):
            catalog.ensure_not_empty("update")

    def test_non_empty_catalog_passes(self):
        catalog, _ = _setup([make_item("CL1")])
        catalog.ensure_not_empty("update")


class TestCatalogInvariants:

    def test_ids_stay_unique_across_mixed_case_adds(self):
        catalog, repo = _setup()
        for suffix in ["a1", "A1", "b2", "B2", "a1"]:
            try:
                catalog.add("cl", suffix, "Thing", 1, "1")
            except DuplicateIdError:
                pass
        ids = [i.id for i in repo.list_all()]
        assert ids == ["cla1", "clb2"]
        assert len(set(ids)) == len(ids)

    def test_quantity_and_price_hold_after_rejected_updates(self):
        catalog, repo = _setup([make_item("CL1", quantity=2, price="4.00")])
        for bad in (-5, -1):
            with pytest.raises(InvalidQuantityError):
                catalog.update_quantity("cl1", bad)
        for bad in ("0", "-2"):
            with pytest.raises(InvalidPriceError):
                catalog.update_price("cl1", bad)
        for item in repo.list_all():
            assert item.quantity >= 0
            assert item.price.amount > 0


class TestCatalogScenario:

    def test_add_update_low_stock_remove(self):
        catalog, _ = _setup()
        catalog.add("CL", "001", "t shirt", 10, "19.99")

        listed = catalog.list_all()
        assert len(listed) == 1
        assert listed[0].category is Category.CLOTHING
        assert listed[0].name == "T Shirt"
        assert listed[0].quantity == 10
        assert str(listed[0].price) == "19.99"

        with pytest.raises(DuplicateIdError):
            catalog.add("CL", "001", "t shirt", 10, "19.99")

        assert catalog.update_quantity("cl001", 3).quantity == 3
        assert [i.id for i in catalog.low_stock(5)] == ["cl001"]

        catalog.remove("cl001")
        with pytest.raises(NotFoundError):
            catalog.find_by_id("cl001")
