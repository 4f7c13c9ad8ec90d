"""Shared pytest fixtures for restaurant-pos tests."""

from decimal import Decimal

import pytest

from restaurant_pos.data import lookup_item
from restaurant_pos.models import MenuItem
from restaurant_pos.orders import OrderAccumulator


@pytest.fixture
def accumulator() -> OrderAccumulator:
    """Create a fresh accumulator with empty order, history and counters."""
    return OrderAccumulator()


@pytest.fixture
def steak() -> MenuItem:
    return lookup_item("Main Course", "Steak")


@pytest.fixture
def latte() -> MenuItem:
    return lookup_item("Drink", "Latte")


@pytest.fixture
def brownie() -> MenuItem:
    return lookup_item("Dessert", "Brownie")


@pytest.fixture
def fifty_dollar_item() -> MenuItem:
    """An off-menu item priced so one unit is a $50.00 subtotal."""
    return MenuItem("Tasting Menu", Decimal("50.00"))
