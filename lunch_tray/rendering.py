"""Currency formatting and rendering helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal
from functools import partial
from typing import Callable

from rich.text import Text

from lunch_tray.config import CURRENCY_SYMBOL
from lunch_tray.models import Category, MenuItem
from lunch_tray.order_state import OrderState

_CENTS = Decimal("0.01")

AMOUNT_FIELDS: tuple[str, ...] = ("subtotal", "tax", "total")


def format_currency(amount: Decimal | int | str) -> str:
    """Render an amount as dollars and cents, e.g. ``$1,234.50`` or ``-$1.00``."""
    rounded = Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_EVEN)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(rounded):,.2f}"


def badge_style(category: Category) -> str:
    """Return a consistent badge style for category tags."""
    if category is Category.ENTREE:
        return "bold #ffffff on #b23a48"
    if category is Category.SIDE:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_item_label(item: MenuItem) -> Text:
    """Render a menu item with a colored category tag and its price."""
    text = Text()
    text.append(item.category.label[0], style=badge_style(item.category))
    text.append(f" {item.name} ")
    text.append(format_currency(item.price), style="dim")
    return text


class FormattedOrder:
    """Publishes the amounts of an OrderState as formatted currency strings."""

    def __init__(self, state: OrderState) -> None:
        self.state = state
        self._listeners: dict[str, list[Callable[[str], None]]] = {name: [] for name in AMOUNT_FIELDS}
        self._unsubscribers = [state.subscribe(name, partial(self._publish, name)) for name in AMOUNT_FIELDS]

    @property
    def subtotal(self) -> str:
        return format_currency(self.state.subtotal)

    @property
    def tax(self) -> str:
        return format_currency(self.state.tax)

    @property
    def total(self) -> str:
        return format_currency(self.state.total)

    def subscribe(self, field: str, listener: Callable[[str], None]) -> Callable[[], None]:
        """Register listener for the formatted field and return its remover."""
        if field not in self._listeners:
            raise ValueError(f"unknown amount field {field!r}; expected one of {', '.join(AMOUNT_FIELDS)}")
        listeners = self._listeners[field]
        listeners.append(listener)

        def unsubscribe() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Stop following the underlying state."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _publish(self, field: str, amount: Decimal) -> None:
        text = format_currency(amount)
        for listener in list(self._listeners[field]):
            listener(text)
