"""Editable static menu, table and discount configuration."""

from __future__ import annotations

# Category display order is the order of this mapping.
MENU_ITEMS_BY_CATEGORY: dict[str, list[tuple[str, str]]] = {
    "Main Course": [
        ("Steak", "25.0"),
        ("Pasta", "20.0"),
        ("Pizza", "20.0"),
        ("Burger", "18.0"),
        ("Grilled Chicken", "22.0"),
        ("Salmon", "28.0"),
    ],
    "Dessert": [
        ("Ice Cream", "5.0"),
        ("Cheesecake", "7.5"),
        ("Brownie", "6.5"),
        ("Waffle", "8.0"),
    ],
    "Drink": [
        ("Latte", "4.5"),
        ("Milk Tea", "4.0"),
        ("Smoothie", "5.0"),
        ("Lemonade", "3.5"),
    ],
}

TABLES: list[str] = ["Table 1", "Table 2", "Table 3", "Table 4", "Table 5"]

# (label, rate) pairs; the first entry is the fallback when no tier is chosen.
DISCOUNT_TIERS: list[tuple[str, str]] = [
    ("No Discount", "1.00"),
    ("10% Off", "0.90"),
    ("20% Off", "0.80"),
]

ORDER_NUMBER_PREFIX_BY_TYPE: dict[str, str] = {
    "dine_in": "A",
    "take_out": "B",
}

ORDER_TYPE_LABELS: dict[str, str] = {
    "dine_in": "Dine-In",
    "take_out": "Take-Out",
}
