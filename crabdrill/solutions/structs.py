"""Reference solutions for the struct exercises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

MIN_PACKAGE_WEIGHT = 10


@dataclass(frozen=True)
class ColorClassicStruct:
    """A colour with named channels."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """A colour addressed by position."""

    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A value with no fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLikeStruct)

    def __hash__(self) -> int:
        return hash(UnitLikeStruct)


@dataclass(frozen=True)
class Order:
    """A customer's order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The template order other orders are derived from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package to ship; it must weigh at least 10 grams."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < MIN_PACKAGE_WEIGHT:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        """Whether sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Shipping fee in cents."""
        return self.weight_in_grams * cents_per_gram


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive width and height."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")