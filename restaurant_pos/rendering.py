"""Receipt, history and order label rendering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from restaurant_pos.config import HISTORY_RULE_WIDTH, RECEIPT_RULE_WIDTH
from restaurant_pos.models import CompletedOrderRecord, MenuItem, OrderLine

CENT = Decimal("0.01")
NO_HISTORY_MESSAGE = "No order history yet."


def round_money(value: Decimal) -> Decimal:
    """Round a monetary value to cents, half away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    """Format a monetary value with exactly two fraction digits."""
    return f"{round_money(value):.2f}"


def format_order_line(line: OrderLine) -> str:
    """Format an order line as `<name> x<qty> - $<total>`."""
    return f"{line.item.name} x{line.quantity} - ${format_money(line.total_price)}"


def render_receipt(
    order_number: str,
    table: str | None,
    lines: Iterable[OrderLine],
    subtotal: Decimal,
    discount_label: str,
    discount_amount: Decimal,
    final_total: Decimal,
) -> str:
    """Render the customer receipt shown when an order is finished."""
    header = f"Order: {order_number}"
    if table is not None:
        header += f" | {table}"

    out = ["=== ORDER RECEIPT ===", header, ""]
    out.extend(format_order_line(line) for line in lines)
    out.append("")
    out.append("─" * RECEIPT_RULE_WIDTH)
    out.append(f"Subtotal:     ${format_money(subtotal)}")
    out.append(f"{discount_label}   -${format_money(discount_amount)}")
    out.append(f"TOTAL:        ${format_money(final_total)}")
    out.append("Thank you!")
    return "\n".join(out)


def render_history_record(
    order_number: str,
    table: str | None,
    lines: Iterable[OrderLine],
    subtotal: Decimal,
    discount_label: str,
    discount_amount: Decimal,
    final_total: Decimal,
) -> str:
    """Render the text kept in order history for a completed order."""
    out = [f"Order Number: {order_number}"]
    if table is not None:
        out.append(f"Table: {table}")
    out.append("Items:")
    out.extend(f"  {format_order_line(line)}" for line in lines)
    out.append("")
    out.append(f"Original Total: ${format_money(subtotal)}")
    out.append(f"{discount_label}: -${format_money(discount_amount)}")
    out.append(f"Final Total: ${format_money(final_total)}")
    return "\n".join(out)


def render_history(records: Sequence[CompletedOrderRecord]) -> str:
    """Join history records, oldest first, separated by a horizontal rule."""
    if not records:
        return NO_HISTORY_MESSAGE
    separator = "\n\n" + "─" * HISTORY_RULE_WIDTH + "\n\n"
    return separator.join(record.text for record in records)


def format_menu_label(item: MenuItem) -> Text:
    """Render a menu item name with a dimmed price."""
    text = Text()
    text.append(item.name, style="bold")
    text.append(f"  ${format_money(item.price)}", style="dim")
    return text


def format_order_label(line: OrderLine) -> Text:
    """Render an order line with the quantity highlighted."""
    text = Text()
    text.append(line.item.name)
    text.append(f" x{line.quantity}", style="bold #5fbf72")
    text.append(f" - ${format_money(line.total_price)}")
    return text
