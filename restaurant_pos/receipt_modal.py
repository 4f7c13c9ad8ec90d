"""Read-only text modal for receipts and order history."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static


class ReceiptModal(ModalScreen[None]):
    """Centered modal showing a block of monospaced text."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("enter", "close", "Close"),
        ("ctrl+c", "close", "Close"),
    ]

    CSS = """
    ReceiptModal {
        align: center middle;
        background: $background 60%;
    }

    #receipt-dialog {
        width: 60;
        height: auto;
        max-height: 80%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #receipt-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #receipt-body {
        color: white;
    }

    #receipt-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, title: str, body: str) -> None:
        super().__init__()
        self.title_text = title
        self.body = body

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="receipt-dialog"):
            yield Static(self.title_text, id="receipt-title")
            yield Static(self.body, id="receipt-body", markup=False)
            yield Static("Enter/Esc/q to close", id="receipt-help")

    def action_close(self) -> None:
        self.dismiss()
