"""Observable state for the order being built."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Callable

from lunch_tray.config import TAX_RATE
from lunch_tray.data import DEFAULT_CATALOG, MenuCatalog
from lunch_tray.models import Category, MenuItem

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

Listener = Callable[[Any], None]

OBSERVABLE_FIELDS: tuple[str, ...] = ("entree", "side", "accompaniment", "subtotal", "tax", "total")


class OrderState:
    """Holds one selection per category and keeps subtotal, tax and total in step.

    Every reassignment of an observable field is published to the listeners
    subscribed to it, even when the new value equals the old one. Listeners
    are only notified once all fields touched by an operation are updated.
    """

    def __init__(self, catalog: MenuCatalog | None = None, tax_rate: Decimal = TAX_RATE) -> None:
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self._tax_rate = tax_rate
        self._listeners: dict[str, list[Listener]] = {name: [] for name in OBSERVABLE_FIELDS}
        self._values: dict[str, Any] = {}
        self._previous_prices: dict[Category, Decimal] = {}
        self.reset_order()

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    @property
    def entree(self) -> MenuItem | None:
        return self._values["entree"]

    @property
    def side(self) -> MenuItem | None:
        return self._values["side"]

    @property
    def accompaniment(self) -> MenuItem | None:
        return self._values["accompaniment"]

    @property
    def subtotal(self) -> Decimal:
        return self._values["subtotal"]

    @property
    def tax(self) -> Decimal:
        return self._values["tax"]

    @property
    def total(self) -> Decimal:
        return self._values["total"]

    def selections(self) -> dict[Category, MenuItem | None]:
        """Return the current item for each category."""
        return {category: self._values[category.value] for category in Category}

    def subscribe(self, field: str, listener: Listener) -> Callable[[], None]:
        """Register listener for field and return a callable that removes it."""
        if field not in self._listeners:
            raise ValueError(f"unknown order field {field!r}; expected one of {', '.join(OBSERVABLE_FIELDS)}")
        listeners = self._listeners[field]
        listeners.append(listener)

        def unsubscribe() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def set_entree(self, name: str) -> MenuItem | None:
        """Set the entree for the order."""
        return self.select(Category.ENTREE, name)

    def set_side(self, name: str) -> MenuItem | None:
        """Set the side for the order."""
        return self.select(Category.SIDE, name)

    def set_accompaniment(self, name: str) -> MenuItem | None:
        """Set the accompaniment for the order."""
        return self.select(Category.ACCOMPANIMENT, name)

    def select(self, category: Category, name: str) -> MenuItem | None:
        """
        Replace the selection for category with the catalog item called name.

        The price previously recorded for the category is netted out of the
        subtotal before the new price is added, so re-selecting the same item
        leaves the subtotal unchanged.

        Returns:
            The selected item, or None when name is not in the catalog. A miss
            leaves the whole state untouched: the current selection is kept and
            the recorded price is not netted out, so the subtotal can never
            drift away from the prices of the selected items.
        """
        item = self.catalog.lookup(name)
        if item is None:
            logger.warning("No menu item %r; %s selection unchanged", name, category.value)
            return None

        subtotal = self._values["subtotal"] - self._previous_prices[category]
        self._values[category.value] = item
        self._previous_prices[category] = item.price
        self._values["subtotal"] = subtotal + item.price
        self._recalculate()
        logger.debug(
            "Selected %s=%r price=%s subtotal=%s total=%s",
            category.value,
            item.name,
            item.price,
            self.subtotal,
            self.total,
        )
        self._notify(category.value, "subtotal", "tax", "total")
        return item

    def calculate_tax_and_total(self) -> None:
        """Recompute tax and total from the current subtotal."""
        self._recalculate()
        self._notify("tax", "total")

    def reset_order(self) -> None:
        """Reset all values pertaining to the order."""
        for category in Category:
            self._values[category.value] = None
            self._previous_prices[category] = ZERO
        self._values["subtotal"] = ZERO
        self._values["tax"] = ZERO
        self._values["total"] = ZERO
        logger.debug("Order reset")
        self._notify(*OBSERVABLE_FIELDS)

    def _recalculate(self) -> None:
        subtotal = self._values["subtotal"]
        tax = subtotal * self._tax_rate
        self._values["tax"] = tax
        self._values["total"] = subtotal + tax

    def _notify(self, *fields: str) -> None:
        for name in fields:
            value = self._values[name]
            # Copy so a listener may unsubscribe itself while being called.
            for listener in list(self._listeners[name]):
                listener(value)
