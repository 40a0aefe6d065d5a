"""
Payments Module
===============
Escrow and direct payment strategies.
"""

from .service import (
    Payment,
    PaymentType,
    Escrow,
    Direct,
    create_payment,
    resolve_payment_type,
)

__all__ = [
    "Payment",
    "PaymentType",
    "Escrow",
    "Direct",
    "create_payment",
    "resolve_payment_type",
]
