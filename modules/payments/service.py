"""
PAYMENT SERVICE
===============
Payment strategies a milestone settles through.

Usage:
  from modules.payments import create_payment

  payment = create_payment("escrow", 2500.0)
  payment.process_payment()
  payment.get_payment_type()   # "Escrow"
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

from common.models import format_amount

logger = logging.getLogger(__name__)


class PaymentType(str, Enum):
    ESCROW = 'Escrow'
    DIRECT = 'Direct'


class Payment(ABC):
    """A payment method with an amount fixed at construction."""

    payment_type: PaymentType

    def __init__(self, amount: float):
        self._amount = float(amount)

    @property
    def amount(self) -> float:
        return self._amount

    def get_amount(self) -> float:
        return self._amount

    def get_payment_type(self) -> str:
        """Stable label used for display and receipts."""
        return self.payment_type.value

    @abstractmethod
    def process_payment(self) -> None:
        """Announce the transfer mechanism. Never fails."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(amount={self._amount!r})"


class Escrow(Payment):
    payment_type = PaymentType.ESCROW

    def process_payment(self) -> None:
        logger.info(f"Escrow hold for {self._amount}")
        print(f"Processing escrow payment of ${format_amount(self._amount)}")
        print("Funds held in escrow until milestone completion...")


class Direct(Payment):
    payment_type = PaymentType.DIRECT

    def process_payment(self) -> None:
        logger.info(f"Direct transfer of {self._amount}")
        print(f"Processing direct payment of ${format_amount(self._amount)}")
        print("Payment transferred immediately...")


PAYMENT_CLASSES = {
    PaymentType.ESCROW: Escrow,
    PaymentType.DIRECT: Direct,
}

# Menu choices of the interactive prompt
MENU_CHOICES = {
    '1': PaymentType.ESCROW,
    '2': PaymentType.DIRECT,
}


def resolve_payment_type(kind: Union[PaymentType, str, int]) -> PaymentType:
    """Map an enum, a label ("escrow", "Direct") or a menu choice (1, 2) to a PaymentType."""
    if isinstance(kind, PaymentType):
        return kind

    key = str(kind).strip()
    if key in MENU_CHOICES:
        return MENU_CHOICES[key]

    for payment_type in PaymentType:
        if payment_type.value.lower() == key.lower():
            return payment_type

    available = [t.value for t in PaymentType]
    raise ValueError(f"Unknown payment type '{kind}'. Available: {available}")


def create_payment(kind: Union[PaymentType, str, int], amount: float = 0.0) -> Payment:
    """Build a payment of the given kind."""
    return PAYMENT_CLASSES[resolve_payment_type(kind)](amount)
