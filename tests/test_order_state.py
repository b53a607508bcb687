"""Tests for the observable order state."""

from decimal import Decimal

import pytest

from lunch_tray.models import Category
from lunch_tray.order_state import OBSERVABLE_FIELDS, OrderState

RATE = Decimal("0.08")


def assert_consistent(state: OrderState) -> None:
    selected = [item.price for item in state.selections().values() if item is not None]
    assert state.subtotal == sum(selected, Decimal("0"))
    assert state.tax == state.subtotal * RATE
    assert state.total == state.subtotal + state.tax


class TestInitialState:
    """Test cases for a freshly created order."""

    def test_starts_empty(self, state):
        """All selections absent and all amounts zero."""
        assert state.entree is None
        assert state.side is None
        assert state.accompaniment is None
        assert state.subtotal == 0
        assert state.tax == 0
        assert state.total == 0

    def test_tax_rate_is_fixed(self, state):
        assert state.tax_rate == RATE

    def test_default_catalog_is_used(self):
        state = OrderState()
        assert state.set_entree("cauliflower").name == "Cauliflower"
        assert state.subtotal == Decimal("7.00")


class TestSelections:
    """Test cases for setting entree, side and accompaniment."""

    def test_burrito_and_chips_scenario(self, state):
        """Walk through selecting, re-selecting and resetting an order."""
        state.set_entree("Burrito")
        assert state.subtotal == Decimal("5.00")
        assert state.tax == Decimal("0.40")
        assert state.total == Decimal("5.40")

        state.set_side("Chips")
        assert state.subtotal == Decimal("7.00")
        assert state.tax == Decimal("0.56")
        assert state.total == Decimal("7.56")

        state.set_entree("Burrito")
        assert state.subtotal == Decimal("7.00")
        assert state.total == Decimal("7.56")

        state.reset_order()
        assert state.subtotal == 0
        assert state.tax == 0
        assert state.total == 0
        assert state.selections() == {category: None for category in Category}

    def test_replacing_selection_nets_out_previous_price(self, state):
        state.set_entree("Burrito")
        state.set_entree("Taco")
        assert state.entree.name == "Taco"
        assert state.subtotal == Decimal("6.25")

    def test_categories_are_tracked_independently(self, state):
        state.set_entree("Taco")
        state.set_side("Elote")
        state.set_accompaniment("Salsa")
        state.set_side("Chips")
        assert state.subtotal == Decimal("6.25") + Decimal("2.00") + Decimal("0.75")
        assert_consistent(state)

    @pytest.mark.parametrize(
        "calls",
        [
            [("entree", "Burrito"), ("entree", "Taco"), ("entree", "Burrito")],
            [("side", "Chips"), ("accompaniment", "Salsa"), ("side", "Elote"), ("side", "Elote")],
            [("accompaniment", "Salsa"), ("entree", "Taco"), ("side", "Chips"), ("entree", "Burrito")],
        ],
    )
    def test_subtotal_matches_selected_prices_after_every_call(self, state, calls):
        for category, name in calls:
            state.select(Category(category), name)
            assert_consistent(state)

    def test_setters_return_selected_item(self, state, catalog):
        assert state.set_entree("Burrito") is catalog.lookup("Burrito")
        assert state.set_side("Chips") is catalog.lookup("Chips")
        assert state.set_accompaniment("Salsa") is catalog.lookup("Salsa")

    def test_unknown_name_leaves_state_untouched(self, state, caplog):
        """A lookup miss is reported through the return value and a warning."""
        state.set_entree("Burrito")
        with caplog.at_level("WARNING", logger="lunch_tray"):
            assert state.set_entree("Pizza") is None

        assert state.entree.name == "Burrito"
        assert state.subtotal == Decimal("5.00")
        assert "Pizza" in caplog.text

        state.set_entree("Taco")
        assert state.subtotal == Decimal("6.25")

    def test_item_from_other_category_is_accepted(self, state):
        """Lookups are by name only, as the catalog is shared by all categories."""
        state.set_side("Burrito")
        assert state.side.name == "Burrito"
        assert_consistent(state)


class TestTaxAndTotal:
    """Test cases for tax and total recomputation."""

    def test_calculate_is_idempotent(self, state):
        state.set_entree("Taco")
        state.calculate_tax_and_total()
        first = (state.tax, state.total)
        state.calculate_tax_and_total()
        assert (state.tax, state.total) == first

    def test_tax_uses_configured_rate(self, catalog):
        state = OrderState(catalog, tax_rate=Decimal("0.10"))
        state.set_entree("Burrito")
        assert state.tax == Decimal("0.50")
        assert state.total == Decimal("5.50")


class TestReset:
    """Test cases for resetting the order."""

    def test_reset_clears_previous_prices(self, state):
        state.set_entree("Taco")
        state.set_side("Chips")
        state.reset_order()
        state.set_entree("Burrito")
        assert state.subtotal == Decimal("5.00")

    def test_reset_from_empty_state(self, state):
        state.reset_order()
        assert state.total == 0
        assert state.entree is None


class TestNotifications:
    """Test cases for change subscriptions."""

    def test_listener_receives_new_values(self, state):
        subtotals = []
        state.subscribe("subtotal", subtotals.append)
        state.set_entree("Burrito")
        state.set_side("Chips")
        assert subtotals == [Decimal("5.00"), Decimal("7.00")]

    def test_reassigning_equal_value_notifies(self, state):
        entrees = []
        state.set_entree("Burrito")
        state.subscribe("entree", entrees.append)
        state.set_entree("Burrito")
        state.set_entree("Burrito")
        assert [item.name for item in entrees] == ["Burrito", "Burrito"]

    def test_calculate_notifies_tax_and_total_only(self, state):
        seen = {name: [] for name in OBSERVABLE_FIELDS}
        for name, values in seen.items():
            state.subscribe(name, values.append)
        state.calculate_tax_and_total()
        assert seen["tax"] == [Decimal("0")]
        assert seen["total"] == [Decimal("0")]
        assert seen["subtotal"] == []
        assert seen["entree"] == []

    def test_reset_notifies_every_field(self, state):
        seen = {name: [] for name in OBSERVABLE_FIELDS}
        for name, values in seen.items():
            state.subscribe(name, values.append)
        state.reset_order()
        assert all(len(values) == 1 for values in seen.values())
        assert seen["entree"] == [None]

    def test_listeners_see_consistent_state(self, state):
        """Amounts are already updated when the selection listener runs."""
        snapshots = []
        state.subscribe("side", lambda _item: snapshots.append((state.subtotal, state.total)))
        state.set_side("Chips")
        assert snapshots == [(Decimal("2.00"), Decimal("2.16"))]

    def test_miss_does_not_notify(self, state):
        calls = []
        state.subscribe("entree", calls.append)
        state.set_entree("Pizza")
        assert calls == []

    def test_listeners_run_in_registration_order(self, state):
        order = []
        state.subscribe("total", lambda _total: order.append("first"))
        state.subscribe("total", lambda _total: order.append("second"))
        state.set_entree("Burrito")
        assert order == ["first", "second"]

    def test_unsubscribe_stops_notifications(self, state):
        totals = []
        unsubscribe = state.subscribe("total", totals.append)
        state.set_entree("Burrito")
        unsubscribe()
        unsubscribe()
        state.set_side("Chips")
        assert totals == [Decimal("5.40")]

    def test_unknown_field_is_rejected(self, state):
        with pytest.raises(ValueError, match="unknown order field"):
            state.subscribe("dessert", print)
