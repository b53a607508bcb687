"""Main Textual app class."""

from __future__ import annotations

import logging
from functools import partial

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from lunch_tray.data import MenuCatalog
from lunch_tray.models import Category, MenuItem
from lunch_tray.order_state import OrderState
from lunch_tray.rendering import AMOUNT_FIELDS, FormattedOrder, badge_style, format_currency, format_item_label

logger = logging.getLogger(__name__)


class LunchTrayApp(App):
    """A Textual app for picking one entree, side and accompaniment."""

    TITLE = "Lunch Tray"
    SUB_TITLE = "Entree / Side / Accompaniment"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #order-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #menu-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: auto;
        min-height: 4;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #item-detail {
        height: 3;
        color: $text-muted;
    }

    #order-summary {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    category = reactive(Category.ENTREE)
    cursor_index = reactive(0)

    BINDINGS = [
        ("e", "show_category('entree')", "Entrees"),
        ("s", "show_category('side')", "Sides"),
        ("a", "show_category('accompaniment')", "Accompaniments"),
        ("j", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous item"),
        ("down", "move_cursor(1)", "Next item"),
        ("up", "move_cursor(-1)", "Previous item"),
        ("enter", "select_current", "Add to order"),
        ("x", "cancel_order", "Cancel order"),
        Binding("ctrl+s", "submit_order", "Submit", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, state: OrderState | None = None, catalog: MenuCatalog | None = None) -> None:
        super().__init__()
        self.state = state if state is not None else OrderState(catalog)
        self.formatted = FormattedOrder(self.state)
        self.amount_texts: dict[str, str] = {name: getattr(self.formatted, name) for name in AMOUNT_FIELDS}
        self.system_status = ""
        self._unsubscribers = [
            self.state.subscribe(category.value, self._on_selection_change) for category in Category
        ]
        self._unsubscribers.extend(
            self.formatted.subscribe(name, partial(self._on_amount_change, name)) for name in AMOUNT_FIELDS
        )
        logger.debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="order-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static(id="order-summary")
            with Vertical(id="menu-pane"):
                yield Static(id="status-bar")
                yield Static(id="menu-list")
                yield Static(id="item-detail")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self.formatted.close()

    def action_show_category(self, category: str) -> None:
        self.category = Category(category)
        self.cursor_index = 0
        self._refresh_menu()

    def action_move_cursor(self, delta: int) -> None:
        rows = self._menu_rows()
        if not rows:
            return
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_menu()

    def action_select_current(self) -> None:
        rows = self._menu_rows()
        if not rows:
            return

        key, item = rows[self.cursor_index]
        if self.state.select(self.category, key) is None:
            self.system_status = f"{item.name} is not available"
        else:
            self.system_status = f"Added {item.name}"
        self._refresh_status()

    def action_cancel_order(self) -> None:
        self.state.reset_order()
        self.system_status = "Order cancelled"
        logger.info("Order cancelled")
        self._refresh_status()

    def action_submit_order(self) -> None:
        if self.state.entree is None:
            self.system_status = "Choose an entree before submitting"
            self._refresh_status()
            logger.debug("submit_blocked reason=no_entree")
            return

        chosen = ", ".join(item.name for item in self.state.selections().values() if item is not None)
        total = format_currency(self.state.total)
        logger.info("Order submitted items=%s total=%s", chosen, total)
        self.state.reset_order()
        self.system_status = f"Submitted: {chosen} ({total})"
        self._refresh_status()

    def _menu_rows(self) -> list[tuple[str, MenuItem]]:
        return self.state.catalog.items_in(self.category)

    def _on_selection_change(self, _item: MenuItem | None) -> None:
        self._refresh_all()

    def _on_amount_change(self, field: str, text: str) -> None:
        self.amount_texts[field] = text
        self._refresh_order()

    def _refresh_all(self) -> None:
        self._refresh_order()
        self._refresh_menu()

    def _refresh_order(self) -> None:
        try:
            summary = self.query_one("#order-summary", Static)
        except NoMatches:
            return

        lines = Text()
        for category, item in self.state.selections().items():
            lines.append(f"{category.label + ':':<15}")
            if item is None:
                lines.append("(none)", style="dim")
            else:
                lines.append(f"{item.name} ")
                lines.append(format_currency(item.price), style="dim")
            lines.append("\n")

        lines.append("\n")
        for name in AMOUNT_FIELDS:
            style = "bold" if name == "total" else ""
            lines.append(f"{name.title() + ':':<10}{self.amount_texts[name]}\n", style=style)

        summary.update(lines)

    def _refresh_menu(self) -> None:
        self._refresh_status()
        try:
            menu_widget = self.query_one("#menu-list", Static)
            detail_widget = self.query_one("#item-detail", Static)
        except NoMatches:
            return

        rows = self._menu_rows()
        if not rows:
            menu_widget.update("No items")
            detail_widget.update("")
            return

        if self.cursor_index >= len(rows):
            self.cursor_index = 0

        chosen = self.state.selections()[self.category]
        lines = Text()
        for idx, (_key, item) in enumerate(rows):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            lines.append(pointer)
            lines.append_text(format_item_label(item))
            if item == chosen:
                lines.append("  ✓", style="bold")

        menu_widget.update(lines)
        detail_widget.update(rows[self.cursor_index][1].description)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        text = Text()
        text.append(self.category.label, style=badge_style(self.category))
        text.append("  E/S/A switch, Enter add, X cancel, Ctrl+S submit\n")
        text.append(self.system_status or "Ready")
        bar.update(text)
