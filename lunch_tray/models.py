"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Category(str, Enum):
    """The three slots an order selection can fill."""

    ENTREE = "entree"
    SIDE = "side"
    ACCOMPANIMENT = "accompaniment"

    @property
    def label(self) -> str:
        return self.value.title()


@dataclass(frozen=True)
class MenuItem:
    """A priced menu item offered in exactly one category."""

    name: str
    price: Decimal
    category: Category
    description: str = ""

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price for {self.name!r} must not be negative")
