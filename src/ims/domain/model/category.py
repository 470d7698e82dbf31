"""Item categories.

The category set is closed. Every item carries exactly one of these tags,
fixed at creation, and filtering or grouping inspects the tag by value.
"""

from __future__ import annotations

from enum import Enum

from ims.domain.exceptions import UnknownCategoryError


class Category(Enum):
    """Closed set of item categories.

    Member order is the grouping order used when listing the catalog.
    """

    CLOTHING = ("CL", "Clothing")
    ELECTRONICS = ("EL", "Electronics")
    ENTERTAINMENT = ("EN", "Entertainment")

    def __init__(self, code: str, label: str) -> None:
        self.code = code
        self.label = label

    def describe_category(self) -> str:
        return self.label

    @staticmethod
    def from_code(code: str) -> Category:
        """Resolve a two-letter code (case-insensitive) to a Category."""
        if not isinstance(code, str):
            raise UnknownCategoryError(
                f"Category {code!r} does not exist (expected CL, EL or EN)"
            )
        normalized = code.upper()
        for category in Category:
            if category.code == normalized:
                return category
        raise UnknownCategoryError(
            f"Category {code!r} does not exist (expected CL, EL or EN)"
        )

    @staticmethod
    def coerce(value: Category | str) -> Category:
        if isinstance(value, Category):
            return value
        return Category.from_code(value)

    def __str__(self) -> str:
        return self.label
