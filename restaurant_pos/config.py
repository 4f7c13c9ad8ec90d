"""Runtime configuration defaults for logging, order entry and rendering."""

from __future__ import annotations

LOG_PATH = "/tmp/restaurant-pos.log"
LOG_LEVEL = "DEBUG"

# Bounds of the quantity picker.
MIN_QUANTITY = 1
MAX_QUANTITY = 20

ORDER_NUMBER_WIDTH = 3
HISTORY_RULE_WIDTH = 50
RECEIPT_RULE_WIDTH = 21
