"""Domain models for restaurant-pos."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum


@dataclass(frozen=True)
class MenuItem:
    """A priced menu item."""

    name: str
    price: Decimal

    @property
    def key(self) -> tuple[str, Decimal]:
        """Identity used to merge repeated additions of the same item."""
        return (self.name, self.price)


@dataclass(frozen=True)
class Category:
    """A menu category with its items in display order."""

    display_name: str
    items: tuple[MenuItem, ...]


@dataclass(frozen=True)
class OrderLine:
    """One menu item plus a quantity within the current order."""

    item: MenuItem
    quantity: int

    @property
    def total_price(self) -> Decimal:
        return self.item.price * self.quantity


class OrderType(StrEnum):
    DINE_IN = "dine_in"
    TAKE_OUT = "take_out"


@dataclass(frozen=True)
class DiscountTier:
    """A flat discount applied as a multiplier on the subtotal."""

    label: str
    rate: Decimal


@dataclass(frozen=True)
class CompletedOrderRecord:
    """Immutable snapshot of a finalized order kept in history."""

    order_number: str
    table: str | None
    lines: tuple[OrderLine, ...]
    subtotal: Decimal
    discount_label: str
    discount_amount: Decimal
    final_total: Decimal
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of a completed checkout."""

    order_number: str
    receipt: str
    record: CompletedOrderRecord
