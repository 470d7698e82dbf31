"""Input types for the interactive session.

Each type screens raw text before it reaches a handler. ``click.prompt``
re-asks whenever ``convert`` fails, so a bad entry never leaves the prompt.
The catalog still re-validates everything it receives.
"""

from __future__ import annotations

from decimal import Decimal

import click

from ims.domain.exceptions import (
    InvalidIdError,
    InvalidPriceError,
    UnknownCategoryError,
)
from ims.domain.model.category import Category
from ims.domain.model.value_objects import Price, validate_suffix


class CategoryCodeType(click.ParamType):
    name = "category"

    def convert(self, value, param, ctx) -> Category:
        if isinstance(value, Category):
            return value
        if len(value.strip()) != 2:
            self.fail("Please enter exactly two letters (CL, EL, or EN).", param, ctx)
        try:
            return Category.from_code(value.strip())
        except UnknownCategoryError:
            self.fail(
                f"Category {value.strip().lower()} does not exist! "
                "Please enter CL, EL, or EN.",
                param,
                ctx,
            )


class ItemIdType(click.ParamType):
    """Alphanumeric id text, either a new suffix or a full id to look up."""

    name = "id"

    def convert(self, value, param, ctx) -> str:
        try:
            validate_suffix(value)
        except InvalidIdError:
            self.fail(
                "Please enter alphanumeric characters and avoid space.", param, ctx
            )
        return value


class ItemNameType(click.ParamType):
    name = "name"

    def convert(self, value, param, ctx) -> str:
        if not value.strip():
            self.fail("Enter a valid name.", param, ctx)
        return value.strip()


class WholeNumberType(click.ParamType):
    """Digits only: no sign, no spaces, no decimal point."""

    name = "quantity"

    def __init__(self, minimum: int = 0) -> None:
        self.minimum = minimum

    def convert(self, value, param, ctx) -> int:
        if isinstance(value, int):
            number = value
        elif value.isascii() and value.isdigit():
            number = int(value)
        else:
            self.fail(
                "Please enter a whole number and avoid space.", param, ctx
            )
        if number < self.minimum:
            self.fail(
                "Please enter a positive quantity."
                if self.minimum > 0
                else f"Please enter {self.minimum} or more.",
                param,
                ctx,
            )
        return number


class PriceType(click.ParamType):
    """Positive decimal with at most one point and no sign or spaces."""

    name = "price"

    def convert(self, value, param, ctx) -> Decimal:
        if isinstance(value, Decimal):
            return value
        text = value
        if not text or text.count(".") > 1 or not text.replace(".", "").isdigit():
            self.fail("Please enter a numeric value and avoid space.", param, ctx)
        try:
            return Price.of(text).amount
        except InvalidPriceError:
            self.fail("Please enter a positive price.", param, ctx)


CATEGORY = CategoryCodeType()
ITEM_ID = ItemIdType()
ITEM_NAME = ItemNameType()
PRICE = PriceType()
NEW_QUANTITY = WholeNumberType(minimum=1)
STOCK_QUANTITY = WholeNumberType(minimum=0)


def letter_choice(*letters: str) -> click.Choice:
    return click.Choice(list(letters), case_sensitive=False)
