"""Static menu, table and discount data."""

from __future__ import annotations

from decimal import Decimal

from restaurant_pos.constant import (
    DISCOUNT_TIERS as _DISCOUNT_TIERS_RAW,
    MENU_ITEMS_BY_CATEGORY,
    ORDER_NUMBER_PREFIX_BY_TYPE as _PREFIX_BY_TYPE_RAW,
    ORDER_TYPE_LABELS as _ORDER_TYPE_LABELS_RAW,
    TABLES as _TABLES_RAW,
)
from restaurant_pos.errors import NotFoundError
from restaurant_pos.models import Category, DiscountTier, MenuItem, OrderType

CATEGORIES: tuple[Category, ...] = tuple(
    Category(
        display_name=display_name,
        items=tuple(MenuItem(name, Decimal(price)) for name, price in items),
    )
    for display_name, items in MENU_ITEMS_BY_CATEGORY.items()
)

CATEGORY_BY_NAME: dict[str, Category] = {category.display_name: category for category in CATEGORIES}

TABLES: tuple[str, ...] = tuple(_TABLES_RAW)

DISCOUNT_TIERS: tuple[DiscountTier, ...] = tuple(DiscountTier(label, Decimal(rate)) for label, rate in _DISCOUNT_TIERS_RAW)

NO_DISCOUNT: DiscountTier = DISCOUNT_TIERS[0]

ORDER_NUMBER_PREFIX_BY_TYPE: dict[OrderType, str] = {
    OrderType(order_type): prefix for order_type, prefix in _PREFIX_BY_TYPE_RAW.items()
}

ORDER_TYPE_BY_LABEL: dict[str, OrderType] = {
    label: OrderType(order_type) for order_type, label in _ORDER_TYPE_LABELS_RAW.items()
}


def categories() -> tuple[Category, ...]:
    """Return all menu categories in display order."""
    return CATEGORIES


def lookup_category(display_name: str) -> Category:
    """Get a category by its exact display name."""
    category = CATEGORY_BY_NAME.get(display_name)
    if category is None:
        raise NotFoundError(f"Unknown category: {display_name!r}")
    return category


def lookup_item(category_name: str, item_name: str) -> MenuItem:
    """Get a menu item by category display name and item name."""
    for item in lookup_category(category_name).items:
        if item.name == item_name:
            return item
    raise NotFoundError(f"Unknown item {item_name!r} in {category_name!r}")


def lookup_discount(label: str) -> DiscountTier:
    """Get a discount tier by label."""
    for tier in DISCOUNT_TIERS:
        if tier.label == label:
            return tier
    raise NotFoundError(f"Unknown discount: {label!r}")
