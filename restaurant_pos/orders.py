"""In-memory order accumulation, numbering and history."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Generic, TypeVar

from loguru import logger

from restaurant_pos.config import ORDER_NUMBER_WIDTH
from restaurant_pos.data import ORDER_NUMBER_PREFIX_BY_TYPE
from restaurant_pos.models import CompletedOrderRecord, MenuItem, OrderLine, OrderType
from restaurant_pos.rendering import render_history_record

T = TypeVar("T")


class ReadOnlyView(Sequence, Generic[T]):
    """Live, non-mutable view over a list owned by someone else.

    Slicing returns a plain list copy of the selected elements.
    """

    def __init__(self, source: list[T]) -> None:
        self._source = source

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._source[index]

    def __len__(self) -> int:
        return len(self._source)

    def __repr__(self) -> str:
        return f"ReadOnlyView({self._source!r})"


class OrderAccumulator:
    """Owns the current order, the per-type order counters and the history log."""

    def __init__(self) -> None:
        self._lines: list[OrderLine] = []
        self._history: list[CompletedOrderRecord] = []
        self._counters: dict[OrderType, int] = {order_type: 1 for order_type in OrderType}
        self._lines_view: ReadOnlyView[OrderLine] = ReadOnlyView(self._lines)
        self._history_view: ReadOnlyView[CompletedOrderRecord] = ReadOnlyView(self._history)

    def add_item(self, item: MenuItem, quantity: int) -> None:
        """Add `quantity` of `item`, merging into an existing line for the same item.

        A merged line moves to the end of the order. Non-positive quantities
        are ignored.
        """
        if quantity <= 0:
            logger.debug("add_item ignored item={!r} quantity={}", item.name, quantity)
            return

        for idx, existing in enumerate(self._lines):
            if existing.item.key == item.key:
                del self._lines[idx]
                self._lines.append(OrderLine(item, existing.quantity + quantity))
                logger.debug("add_item merged item={!r} quantity={}", item.name, existing.quantity + quantity)
                return

        self._lines.append(OrderLine(item, quantity))
        logger.debug("add_item appended item={!r} quantity={}", item.name, quantity)

    def clear(self) -> None:
        self._lines.clear()
        logger.debug("order cleared")

    def is_empty(self) -> bool:
        return not self._lines

    def calculate_total(self) -> Decimal:
        """Exact sum of line totals; zero for an empty order."""
        return sum((line.total_price for line in self._lines), Decimal("0"))

    def current_order(self) -> ReadOnlyView[OrderLine]:
        return self._lines_view

    def history(self) -> ReadOnlyView[CompletedOrderRecord]:
        return self._history_view

    def generate_order_number(self, dine_in: bool) -> str:
        """Allocate the next order number for dine-in (A) or take-out (B).

        The counter is consumed immediately and never rolled back.
        """
        order_type = OrderType.DINE_IN if dine_in else OrderType.TAKE_OUT
        num = self._counters[order_type]
        self._counters[order_type] = num + 1
        order_number = f"{ORDER_NUMBER_PREFIX_BY_TYPE[order_type]}{num:0{ORDER_NUMBER_WIDTH}d}"
        logger.debug("order number allocated {}", order_number)
        return order_number

    def complete_order(
        self,
        order_number: str,
        table: str | None,
        discount_label: str,
        discount_amount: Decimal,
        final_total: Decimal,
    ) -> CompletedOrderRecord:
        """Snapshot the current order into history, then clear it."""
        lines = tuple(self._lines)
        subtotal = self.calculate_total()
        record = CompletedOrderRecord(
            order_number=order_number,
            table=table,
            lines=lines,
            subtotal=subtotal,
            discount_label=discount_label,
            discount_amount=discount_amount,
            final_total=final_total,
            text=render_history_record(
                order_number, table, lines, subtotal, discount_label, discount_amount, final_total
            ),
        )
        self._history.append(record)
        self.clear()
        logger.debug("order completed {} lines={} history={}", order_number, len(lines), len(self._history))
        return record
