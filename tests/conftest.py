"""Shared fixtures for lunch-tray tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from lunch_tray.data import MenuCatalog
from lunch_tray.models import Category, MenuItem
from lunch_tray.order_state import OrderState


@pytest.fixture
def catalog() -> MenuCatalog:
    """Small catalog with two entrees, two sides and one accompaniment."""
    return MenuCatalog.from_items(
        [
            MenuItem("Burrito", Decimal("5.00"), Category.ENTREE, "Beans, rice and salsa"),
            MenuItem("Taco", Decimal("6.25"), Category.ENTREE),
            MenuItem("Chips", Decimal("2.00"), Category.SIDE),
            MenuItem("Elote", Decimal("3.50"), Category.SIDE),
            MenuItem("Salsa", Decimal("0.75"), Category.ACCOMPANIMENT),
        ]
    )


@pytest.fixture
def state(catalog: MenuCatalog) -> OrderState:
    return OrderState(catalog)
