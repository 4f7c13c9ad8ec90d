"""Add-to-order validation and the checkout workflow."""

from __future__ import annotations

from decimal import Decimal

from loguru import logger

from restaurant_pos.config import MAX_QUANTITY, MIN_QUANTITY
from restaurant_pos.data import NO_DISCOUNT, TABLES
from restaurant_pos.errors import EmptyOrderError, InvalidQuantityError, NoSelectionError, NotFoundError
from restaurant_pos.models import CheckoutResult, DiscountTier, MenuItem, OrderType
from restaurant_pos.orders import OrderAccumulator
from restaurant_pos.rendering import render_receipt, round_money


def add_selection(accumulator: OrderAccumulator, item: MenuItem | None, quantity: int) -> None:
    """Add the picker's current selection to the order."""
    if item is None:
        raise NoSelectionError()
    if not (MIN_QUANTITY <= quantity <= MAX_QUANTITY):
        raise InvalidQuantityError(f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}")
    accumulator.add_item(item, quantity)


def ensure_checkout_ready(accumulator: OrderAccumulator) -> None:
    if accumulator.is_empty():
        raise EmptyOrderError()


def apply_discount(subtotal: Decimal, tier: DiscountTier) -> tuple[Decimal, Decimal]:
    """Return `(final_total, discount_amount)` for `subtotal` under `tier`."""
    final_total = round_money(subtotal * tier.rate)
    return final_total, subtotal - final_total


def checkout(
    accumulator: OrderAccumulator,
    order_type: OrderType | None,
    table: str | None,
    discount: DiscountTier | None,
) -> CheckoutResult | None:
    """Finalize the current order into a numbered receipt.

    Returns None when the caller abandoned the order type or table choice;
    nothing is mutated in that case. A closed discount choice means no discount.
    `order_type` may be given as its string value; an unknown value raises
    ValueError.
    """
    ensure_checkout_ready(accumulator)

    if order_type is None:
        logger.debug("checkout abandoned reason=no_order_type")
        return None
    order_type = OrderType(order_type)
    if order_type is OrderType.DINE_IN:
        if table is None:
            logger.debug("checkout abandoned reason=no_table")
            return None
        if table not in TABLES:
            raise NotFoundError(f"Unknown table: {table!r}")
    else:
        table = None

    tier = discount or NO_DISCOUNT
    subtotal = accumulator.calculate_total()
    final_total, discount_amount = apply_discount(subtotal, tier)

    order_number = accumulator.generate_order_number(order_type is OrderType.DINE_IN)

    # Receipt must be rendered before complete_order clears the lines.
    receipt = render_receipt(
        order_number,
        table,
        accumulator.current_order(),
        subtotal,
        tier.label,
        discount_amount,
        final_total,
    )
    record = accumulator.complete_order(order_number, table, tier.label, discount_amount, final_total)

    logger.info(
        "checkout completed order_number={} table={!r} subtotal={} discount={!r} final_total={}",
        order_number,
        table,
        subtotal,
        tier.label,
        final_total,
    )
    return CheckoutResult(order_number=order_number, receipt=receipt, record=record)
