"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ims.domain.exceptions import InvalidIdError, InvalidPriceError, NotFoundError
from ims.domain.model.category import Category


@dataclass(frozen=True, order=True)
class Price:
    """Positive monetary amount.

    Uses Decimal to avoid floating-point rounding errors. The amount is kept
    exactly as entered; two decimal places apply only when it is displayed.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidPriceError(
                f"Price amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidPriceError(f"Price must be a finite number, got {self.amount}")
        if self.amount <= Decimal("0"):
            raise InvalidPriceError(f"Price must be greater than zero, got {self.amount}")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal | Price) -> Price:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, Price):
            return amount
        if isinstance(amount, bool):
            raise InvalidPriceError(f"Invalid price: {amount!r}")
        try:
            return Price(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidPriceError(f"Invalid price: {amount!r}") from exc


@dataclass(frozen=True)
class ItemId:
    """Composite item identifier: category code + alphanumeric suffix.

    Ids compare case-insensitively, so the value is always kept lowercase.
    """

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value.lower())

    @staticmethod
    def compose(category: Category, suffix: str) -> ItemId:
        validate_suffix(suffix)
        return ItemId(category.code + suffix)

    @staticmethod
    def normalize(raw: str) -> str:
        if not isinstance(raw, str):
            raise NotFoundError(f"Item {raw!r} not found")
        return raw.strip().lower()

    def __str__(self) -> str:
        return self.value


def validate_suffix(suffix: str) -> None:
    """Reject empty, whitespace-bearing or non-alphanumeric suffixes."""
    if not isinstance(suffix, str) or not suffix:
        raise InvalidIdError("Item ID is required")
    if not (suffix.isascii() and suffix.isalnum()):
        raise InvalidIdError(
            f"Invalid item ID {suffix!r}: use letters and digits only, no spaces"
        )
