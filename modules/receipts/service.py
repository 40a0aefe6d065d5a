#!/usr/bin/env python3
"""
RECEIPT SERVICE
===============
Append-only payment receipt log.

Every call opens the log in append mode, writes one receipt block and
closes the file again:

    === PAYMENT RECEIPT ===
    Milestone: Website
    Amount: $2500
    Payment Type: Escrow
    Timestamp: Oct 18 2026 14:03:12
    ========================

Usage:
  from modules.receipts import ReceiptLogger

  receipts = ReceiptLogger("payment_receipts.txt")
  receipts.log_payment_receipt("Website", 2500.0, "Escrow")
  receipts.read_receipts()
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from common.models import format_amount

logger = logging.getLogger(__name__)

DEFAULT_RECEIPTS_FILE = Path("payment_receipts.txt")

HEADER = "=== PAYMENT RECEIPT ==="
FOOTER = "========================"
TIMESTAMP_FORMAT = "%b %d %Y %H:%M:%S"


def format_timestamp(ts: datetime) -> str:
    """Compiler-style date and time: 'Oct  8 2026 09:15:00'."""
    return f"{ts:%b} {ts.day:2d} {ts:%Y %H:%M:%S}"


def parse_timestamp(text: str) -> datetime:
    return datetime.strptime(" ".join(text.split()), TIMESTAMP_FORMAT)


@dataclass
class Receipt:
    milestone_title: str
    amount: float
    payment_type: str
    timestamp: datetime

    def to_lines(self) -> List[str]:
        return [
            HEADER,
            f"Milestone: {self.milestone_title}",
            f"Amount: ${format_amount(self.amount)}",
            f"Payment Type: {self.payment_type}",
            f"Timestamp: {format_timestamp(self.timestamp)}",
            FOOTER,
            "",
        ]

    def render(self) -> str:
        return "\n".join(self.to_lines()) + "\n"


class ReceiptLogger:
    """Writes payment receipts to a text file, never truncating it."""

    def __init__(
        self,
        path: Union[str, Path] = None,
        clock: Callable[[], datetime] = None,
    ):
        self.path = Path(path) if path else DEFAULT_RECEIPTS_FILE
        self.clock = clock or datetime.now

    def log_payment_receipt(
        self,
        milestone_title: str,
        amount: float,
        payment_type: str,
    ) -> Receipt:
        """
        Append a receipt block to the log.

        Args:
            milestone_title: Title of the paid milestone (written unescaped)
            amount: Amount paid
            payment_type: "Escrow" or "Direct"

        Returns:
            The receipt that was written

        Raises:
            OSError: log file cannot be opened for writing, or the receipt
                cannot be encoded (nothing is written then)
        """
        receipt = Receipt(
            milestone_title=milestone_title,
            amount=amount,
            payment_type=str(payment_type),
            timestamp=self.clock(),
        )

        try:
            data = receipt.render().encode("utf-8")
            with open(self.path, "ab") as f:
                f.write(data)
        except ValueError as e:
            # unencodable title or a path the OS rejects (embedded null byte)
            raise OSError(f"Cannot write receipt to {self.path}: {e}") from e

        logger.info(f"Receipt logged: {milestone_title} / {amount} / {payment_type} → {self.path}")
        print(f"Payment receipt logged to file: {self.path}")
        return receipt

    def read_receipts(self) -> List[Receipt]:
        """Parse all complete receipt blocks from the log."""
        if not self.path.exists():
            return []

        receipts = []
        current: Optional[dict] = None

        with open(self.path, "r", encoding="utf-8") as f:
            for raw in f:
                line = raw.rstrip("\n")
                if line == HEADER:
                    current = {}
                elif line == FOOTER and current is not None:
                    receipt = _build_receipt(current)
                    if receipt:
                        receipts.append(receipt)
                    current = None
                elif current is not None and ": " in line:
                    key, value = line.split(": ", 1)
                    current[key] = value

        return receipts


def _build_receipt(fields: dict) -> Optional[Receipt]:
    try:
        return Receipt(
            milestone_title=fields["Milestone"],
            amount=float(fields["Amount"].lstrip("$")),
            payment_type=fields["Payment Type"],
            timestamp=parse_timestamp(fields["Timestamp"]),
        )
    except (KeyError, ValueError) as e:
        logger.warning(f"Skipping malformed receipt block: {e}")
        return None
