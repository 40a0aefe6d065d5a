"""
Receipts Module
===============
Append-only payment receipt log.

Usage:
    from modules.receipts import ReceiptLogger

    receipts = ReceiptLogger("payment_receipts.txt")
    receipts.log_payment_receipt("Website", 2500.0, "Escrow")
"""

from .service import (
    Receipt,
    ReceiptLogger,
    DEFAULT_RECEIPTS_FILE,
    format_timestamp,
    parse_timestamp,
)

__all__ = [
    "Receipt",
    "ReceiptLogger",
    "DEFAULT_RECEIPTS_FILE",
    "format_timestamp",
    "parse_timestamp",
]
