"""Tests for order accumulation, numbering and history."""

from decimal import Decimal

import pytest
from loguru import logger

from restaurant_pos.models import MenuItem, OrderLine


def _summary(accumulator):
    return [(line.item.name, line.quantity) for line in accumulator.current_order()]


class TestAddItem:
    """add_item appends new items and merges repeated ones."""

    def test_distinct_items_keep_insertion_order(self, accumulator, steak, latte, brownie):
        accumulator.add_item(latte, 1)
        accumulator.add_item(steak, 2)
        accumulator.add_item(brownie, 3)
        assert _summary(accumulator) == [("Latte", 1), ("Steak", 2), ("Brownie", 3)]

    def test_readding_merges_and_moves_to_end(self, accumulator, steak, latte):
        accumulator.add_item(steak, 2)
        accumulator.add_item(latte, 1)
        accumulator.add_item(steak, 3)
        assert _summary(accumulator) == [("Latte", 1), ("Steak", 5)]

    def test_merge_uses_value_equality(self, accumulator, steak):
        accumulator.add_item(steak, 1)
        accumulator.add_item(MenuItem("Steak", Decimal("25.00")), 1)
        assert _summary(accumulator) == [("Steak", 2)]

    def test_same_name_different_price_is_a_different_item(self, accumulator, steak):
        accumulator.add_item(steak, 1)
        accumulator.add_item(MenuItem("Steak", Decimal("30.0")), 1)
        assert len(accumulator.current_order()) == 2

    @pytest.mark.parametrize("quantity", [0, -1, -5])
    def test_non_positive_quantity_is_ignored(self, accumulator, steak, latte, quantity):
        accumulator.add_item(latte, 2)
        before = accumulator.calculate_total()
        accumulator.add_item(steak, quantity)
        accumulator.add_item(latte, quantity)
        assert accumulator.calculate_total() == before
        assert _summary(accumulator) == [("Latte", 2)]


class TestTotals:
    """calculate_total is an exact decimal sum."""

    def test_empty_total_is_zero(self, accumulator):
        assert accumulator.calculate_total() == Decimal("0")
        assert accumulator.is_empty()

    def test_steak_and_latte(self, accumulator, steak, latte):
        accumulator.add_item(steak, 2)
        accumulator.add_item(latte, 1)
        assert accumulator.calculate_total() == Decimal("54.50")

    def test_no_float_drift(self, accumulator):
        dime = MenuItem("Mint", Decimal("0.10"))
        accumulator.add_item(dime, 3)
        assert accumulator.calculate_total() == Decimal("0.30")
        assert isinstance(accumulator.calculate_total(), Decimal)

    def test_line_total_price(self, latte):
        assert OrderLine(latte, 3).total_price == Decimal("13.50")

    def test_reads_are_idempotent(self, accumulator, steak, latte):
        accumulator.add_item(steak, 1)
        accumulator.add_item(latte, 2)
        assert accumulator.calculate_total() == accumulator.calculate_total()
        assert list(accumulator.current_order()) == list(accumulator.current_order())


class TestCurrentOrderView:
    """current_order is a live, read-only view."""

    def test_view_tracks_changes(self, accumulator, steak):
        view = accumulator.current_order()
        assert len(view) == 0
        accumulator.add_item(steak, 1)
        assert len(view) == 1
        assert view[0] == OrderLine(steak, 1)

    def test_view_cannot_be_mutated(self, accumulator, steak):
        accumulator.add_item(steak, 1)
        view = accumulator.current_order()
        assert not hasattr(view, "append")
        with pytest.raises(TypeError):
            view[0] = OrderLine(steak, 9)

    def test_clear_keeps_history(self, accumulator, steak):
        accumulator.add_item(steak, 1)
        accumulator.complete_order("A001", None, "No Discount", Decimal("0.00"), Decimal("25.00"))
        accumulator.add_item(steak, 1)
        accumulator.clear()
        assert accumulator.is_empty()
        assert len(accumulator.history()) == 1


class TestOrderNumbers:
    """Dine-in and take-out counters are independent and start at 1."""

    def test_dine_in_sequence(self, accumulator):
        assert [accumulator.generate_order_number(True) for _ in range(3)] == ["A001", "A002", "A003"]

    def test_take_out_sequence_is_independent(self, accumulator):
        assert accumulator.generate_order_number(True) == "A001"
        assert accumulator.generate_order_number(False) == "B001"
        assert accumulator.generate_order_number(False) == "B002"
        assert accumulator.generate_order_number(True) == "A002"

    def test_numbers_widen_past_999(self, accumulator):
        for _ in range(999):
            accumulator.generate_order_number(False)
        assert accumulator.generate_order_number(False) == "B1000"

    def test_accumulators_do_not_share_counters(self):
        from restaurant_pos.orders import OrderAccumulator

        first, second = OrderAccumulator(), OrderAccumulator()
        first.generate_order_number(True)
        assert second.generate_order_number(True) == "A001"


class TestCompleteOrder:
    """complete_order snapshots the order into history and clears it."""

    def test_appends_one_record_and_clears(self, accumulator, steak, latte):
        accumulator.add_item(steak, 2)
        accumulator.add_item(latte, 1)
        record = accumulator.complete_order("A001", "Table 1", "20% Off", Decimal("10.90"), Decimal("43.60"))

        assert accumulator.is_empty()
        assert list(accumulator.history()) == [record]
        assert record.subtotal == Decimal("54.50")
        assert record.lines == (OrderLine(steak, 2), OrderLine(latte, 1))
        assert record.table == "Table 1"

    def test_record_text(self, accumulator, steak, latte):
        accumulator.add_item(steak, 2)
        accumulator.add_item(latte, 1)
        record = accumulator.complete_order("A001", "Table 1", "20% Off", Decimal("10.90"), Decimal("43.60"))
        assert str(record) == (
            "Order Number: A001\n"
            "Table: Table 1\n"
            "Items:\n"
            "  Steak x2 - $50.00\n"
            "  Latte x1 - $4.50\n"
            "\n"
            "Original Total: $54.50\n"
            "20% Off: -$10.90\n"
            "Final Total: $43.60"
        )

    def test_history_is_oldest_first(self, accumulator, steak, latte):
        accumulator.add_item(steak, 1)
        accumulator.complete_order("A001", "Table 2", "No Discount", Decimal("0"), Decimal("25.00"))
        accumulator.add_item(latte, 1)
        accumulator.complete_order("B001", None, "No Discount", Decimal("0"), Decimal("4.50"))
        assert [r.order_number for r in accumulator.history()] == ["A001", "B001"]

    def test_record_is_not_affected_by_later_orders(self, accumulator, steak):
        accumulator.add_item(steak, 1)
        record = accumulator.complete_order("A001", None, "No Discount", Decimal("0"), Decimal("25.00"))
        accumulator.add_item(steak, 4)
        assert record.lines == (OrderLine(steak, 1),)


class TestReadOnlyView:
    """ReadOnlyView indexes like the list it wraps."""

    def test_slice_returns_list_copy(self, accumulator, steak, latte):
        accumulator.add_item(steak, 1)
        accumulator.add_item(latte, 1)
        head = accumulator.current_order()[:1]
        assert head == [OrderLine(steak, 1)]
        head.append(OrderLine(latte, 5))
        assert len(accumulator.current_order()) == 2

    def test_negative_index(self, accumulator, steak, latte):
        accumulator.add_item(steak, 1)
        accumulator.add_item(latte, 1)
        assert accumulator.current_order()[-1] == OrderLine(latte, 1)


class TestAccumulatorLogging:
    """Mutations are logged at DEBUG with their arguments."""

    def test_debug_records(self, accumulator, steak):
        messages = []
        sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            accumulator.add_item(steak, 2)
            accumulator.add_item(steak, 1)
            accumulator.add_item(steak, 0)
            accumulator.generate_order_number(False)
        finally:
            logger.remove(sink_id)
        assert [m.strip() for m in messages] == [
            "add_item appended item='Steak' quantity=2",
            "add_item merged item='Steak' quantity=3",
            "add_item ignored item='Steak' quantity=0",
            "order number allocated B001",
        ]
