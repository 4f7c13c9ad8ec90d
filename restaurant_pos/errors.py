"""Error kinds surfaced to the presentation layer."""

from __future__ import annotations


class PosError(Exception):
    """Base class for user-facing point-of-sale errors."""


class NotFoundError(PosError):
    """A category, item or table name is not part of the fixed catalog."""


class InvalidQuantityError(PosError):
    """A requested quantity is outside the quantity picker bounds."""


class EmptyOrderError(PosError):
    """Checkout was attempted with no order lines."""

    def __init__(self, message: str = "Your order is empty!") -> None:
        super().__init__(message)


class NoSelectionError(PosError):
    """Add to order was attempted with no menu item selected."""

    def __init__(self, message: str = "Please select an item!") -> None:
        super().__init__(message)
