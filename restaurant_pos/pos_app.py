"""Main Textual app class."""

from __future__ import annotations

from functools import partial

from loguru import logger
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from restaurant_pos.checkout import add_selection, checkout, ensure_checkout_ready
from restaurant_pos.choice_modal import ChoiceModal
from restaurant_pos.config import MAX_QUANTITY, MIN_QUANTITY
from restaurant_pos.data import DISCOUNT_TIERS, ORDER_TYPE_BY_LABEL, TABLES, categories, lookup_discount
from restaurant_pos.errors import PosError
from restaurant_pos.models import Category, MenuItem, OrderType
from restaurant_pos.orders import OrderAccumulator
from restaurant_pos.receipt_modal import ReceiptModal
from restaurant_pos.rendering import format_menu_label, format_money, format_order_label, render_history

_CATEGORIES_PANE = "categories"
_ITEMS_PANE = "items"


class PosApp(App):
    """A Textual app for browsing the menu and building restaurant orders."""

    TITLE = "Restaurant Ordering System"
    SUB_TITLE = "Dine-In / Take-Out"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #categories-pane {
        width: 1fr;
        border: round $secondary;
        padding: 1;
    }

    #items-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #order-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #order-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #order-total {
        text-style: bold;
        text-align: right;
        height: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    active_pane = reactive(_CATEGORIES_PANE)
    category_index = reactive(0)
    item_index = reactive(None)
    quantity = reactive(MIN_QUANTITY)

    BINDINGS = [
        Binding("tab", "switch_pane", "Switch pane", priority=True),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("j", "move_cursor(1)", "Next"),
        ("plus", "change_quantity(1)", "Qty +"),
        ("equals_sign", "change_quantity(1)", "Qty +"),
        ("minus", "change_quantity(-1)", "Qty -"),
        ("enter", "select", "Open / Add"),
        ("c", "clear_order", "Clear order"),
        ("f", "finish_order", "Finish order"),
        ("h", "show_history", "History"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, accumulator: OrderAccumulator | None = None) -> None:
        super().__init__()
        self.accumulator = accumulator if accumulator is not None else OrderAccumulator()
        self.system_status = ""
        self.last_receipt: str | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="categories-pane"):
                yield Static("Menu Categories", classes="pane-title")
                yield Static(id="categories-list")
            with Vertical(id="items-pane"):
                yield Static(id="items-title", classes="pane-title")
                yield Static(id="items-list")
            with Vertical(id="order-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static("(no items yet)", id="order-list")
                yield Static(id="order-total")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        logger.debug("app mounted")
        self._refresh_all()

    def selected_category(self) -> Category:
        return categories()[self.category_index]

    def selected_item(self) -> MenuItem | None:
        if self.active_pane != _ITEMS_PANE or self.item_index is None:
            return None
        items = self.selected_category().items
        if not (0 <= self.item_index < len(items)):
            return None
        return items[self.item_index]

    def action_switch_pane(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.active_pane == _CATEGORIES_PANE:
            self.active_pane = _ITEMS_PANE
        else:
            self.active_pane = _CATEGORIES_PANE
        self._refresh_menu()

    def action_move_cursor(self, delta: int) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.active_pane == _CATEGORIES_PANE:
            self.category_index = (self.category_index + delta) % len(categories())
            self.item_index = None
        else:
            items = self.selected_category().items
            if self.item_index is None:
                self.item_index = 0 if delta > 0 else len(items) - 1
            else:
                self.item_index = (self.item_index + delta) % len(items)
        self._refresh_menu()

    def action_change_quantity(self, delta: int) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.quantity = max(MIN_QUANTITY, min(MAX_QUANTITY, self.quantity + delta))
        self._refresh_status()

    def action_select(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.active_pane == _CATEGORIES_PANE:
            self.active_pane = _ITEMS_PANE
            self.item_index = None
            self._refresh_menu()
            return

        item = self.selected_item()
        try:
            add_selection(self.accumulator, item, self.quantity)
        except PosError as exc:
            self._set_status(str(exc))
            return

        self._set_status(f"Added: {item.name} x{self.quantity}")
        self.quantity = MIN_QUANTITY
        self._refresh_order()

    def action_clear_order(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.accumulator.clear()
        self._set_status("Order cleared")
        self._refresh_order()

    def action_show_history(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.push_screen(ReceiptModal("Order History", render_history(self.accumulator.history())))

    def action_finish_order(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        try:
            ensure_checkout_ready(self.accumulator)
        except PosError as exc:
            self._set_status(str(exc))
            return
        self.push_screen(ChoiceModal("Choose dining option:", list(ORDER_TYPE_BY_LABEL)), self._on_order_type)

    def _on_order_type(self, label: str | None) -> None:
        if label is None:
            self._set_status("Checkout cancelled")
            return
        order_type = ORDER_TYPE_BY_LABEL[label]
        if order_type is OrderType.DINE_IN:
            self.push_screen(ChoiceModal("Select table:", list(TABLES)), partial(self._on_table, order_type))
            return
        self._ask_discount(order_type, None)

    def _on_table(self, order_type: OrderType, table: str | None) -> None:
        if table is None:
            self._set_status("Checkout cancelled")
            return
        self._ask_discount(order_type, table)

    def _ask_discount(self, order_type: OrderType, table: str | None) -> None:
        labels = [tier.label for tier in DISCOUNT_TIERS]
        self.push_screen(ChoiceModal("Apply discount?", labels), partial(self._on_discount, order_type, table))

    def _on_discount(self, order_type: OrderType, table: str | None, label: str | None) -> None:
        discount = lookup_discount(label) if label is not None else None
        try:
            result = checkout(self.accumulator, order_type, table, discount)
        except PosError as exc:
            self._set_status(str(exc))
            return
        if result is None:
            self._set_status("Checkout cancelled")
            return

        self.last_receipt = result.receipt
        self._set_status(f"Order completed: {result.order_number}")
        self._refresh_order()
        self.push_screen(ReceiptModal(f"Order Completed - {result.order_number}", result.receipt))

    def _set_status(self, message: str) -> None:
        self.system_status = message
        self._refresh_status()

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_order()
        self._refresh_status()

    def _refresh_menu(self) -> None:
        try:
            categories_widget = self.query_one("#categories-list", Static)
            items_title = self.query_one("#items-title", Static)
            items_widget = self.query_one("#items-list", Static)
        except NoMatches:
            return

        lines = Text()
        for idx, category in enumerate(categories()):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.category_index else "  "
            style = "bold" if self.active_pane == _CATEGORIES_PANE and idx == self.category_index else ""
            lines.append(f"{pointer}{category.display_name}", style=style)
        categories_widget.update(lines)

        category = self.selected_category()
        items_title.update(f"{category.display_name} Menu")
        lines = Text()
        for idx, item in enumerate(category.items):
            if idx > 0:
                lines.append("\n")
            selected = self.active_pane == _ITEMS_PANE and idx == self.item_index
            lines.append("➤ " if selected else "  ")
            lines.append_text(format_menu_label(item))
        items_widget.update(lines)

    def _refresh_order(self) -> None:
        try:
            order_widget = self.query_one("#order-list", Static)
            total_widget = self.query_one("#order-total", Static)
        except NoMatches:
            return

        total_widget.update(f"Total: ${format_money(self.accumulator.calculate_total())}")
        if self.accumulator.is_empty():
            order_widget.update("(no items yet)")
            return

        lines = Text()
        for idx, line in enumerate(self.accumulator.current_order()):
            if idx > 0:
                lines.append("\n")
            lines.append(f"{idx + 1}. ")
            lines.append_text(format_order_label(line))
        order_widget.update(lines)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        text = Text()
        text.append(f"Quantity: {self.quantity}", style="bold")
        text.append("   Tab pane, Enter open/add, +/- qty, F finish, C clear, H history\n")
        text.append(self.system_status or "Ready")
        bar.update(text)
