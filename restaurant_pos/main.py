"""Entry point for the restaurant-pos Textual app."""

from __future__ import annotations

from restaurant_pos.logging import setup_logging
from restaurant_pos.pos_app import PosApp


def main() -> None:
    """Run the Textual application."""
    setup_logging()
    PosApp().run()


if __name__ == "__main__":
    main()
