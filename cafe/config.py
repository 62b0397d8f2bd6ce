"""Runtime defaults for the till and its printed output."""

from __future__ import annotations

CAFE_NAME = "James' Café"
CURRENCY_SYMBOL = "₱"

RECEIPT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
RECEIPT_ITEM_WIDTH = 30
RECEIPT_QTY_WIDTH = 6
RECEIPT_RULE_WIDTH = 47

# Receipt numbers take the epoch-millisecond clock modulo this value.
RECEIPT_NUMBER_MODULUS = 1_000_000_000
