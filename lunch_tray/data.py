"""Static menu data and catalog lookup."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Iterator, Mapping

from lunch_tray.constant import MENU_ITEMS_BY_ID
from lunch_tray.models import Category, MenuItem


class MenuCatalog:
    """Read-only mapping of lookup keys to menu items."""

    def __init__(self, items: Mapping[str, MenuItem]) -> None:
        self._items: dict[str, MenuItem] = dict(items)

    @classmethod
    def from_items(cls, items: Iterable[MenuItem]) -> MenuCatalog:
        """Build a catalog keyed by each item's display name."""
        keyed: dict[str, MenuItem] = {}
        for item in items:
            if item.name in keyed:
                raise ValueError(f"duplicate menu item name {item.name!r}")
            keyed[item.name] = item
        return cls(keyed)

    def lookup(self, name: str) -> MenuItem | None:
        """Return the item registered under name, or None when absent."""
        return self._items.get(name)

    def items_in(self, category: Category) -> list[tuple[str, MenuItem]]:
        """List (key, item) pairs for one category in catalog order."""
        return [(key, item) for key, item in self._items.items() if item.category is category]

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


MENU_ITEMS: dict[str, MenuItem] = {
    item_id: MenuItem(
        name=meta["name"],
        price=Decimal(meta["price"]),
        category=Category(meta["category"]),
        description=meta["description"],
    )
    for item_id, meta in MENU_ITEMS_BY_ID.items()
}

DEFAULT_CATALOG = MenuCatalog(MENU_ITEMS)
