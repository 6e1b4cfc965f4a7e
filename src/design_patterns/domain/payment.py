"""
Payment strategies (Strategy pattern).

The Strategy pattern allows swapping payment logic without changing the
shopping cart. The cart holds a reference to `PaymentStrategy` (a Protocol)
and calls `make_payment()`. To add a new payment method (e.g. card), implement
the protocol and hand an instance to `ShoppingCart.set_payment_strategy()`.
"""

import logging
from decimal import Decimal
from typing import Protocol

from design_patterns.domain.models import PaymentReceipt

logger = logging.getLogger(__name__)


class PaymentStrategy(Protocol):
    """Interface for settling an amount.

    Any class with a `make_payment(amount) -> PaymentReceipt` method satisfies
    this protocol (structural subtyping — no explicit inheritance needed).
    """

    def make_payment(self, amount: Decimal) -> PaymentReceipt: ...


class CashPaymentStrategy:
    """Pays in cash."""

    METHOD = "cash"

    def make_payment(self, amount: Decimal) -> PaymentReceipt:
        receipt = PaymentReceipt(method=self.METHOD, amount=amount)
        logger.info("Cash payment of %s accepted", receipt.amount)
        print(f"Payed with cash, amount: {receipt.amount}")
        return receipt


class UPIPaymentStrategy:
    """Pays through UPI (Unified Payments Interface)."""

    METHOD = "UPI"

    def make_payment(self, amount: Decimal) -> PaymentReceipt:
        receipt = PaymentReceipt(method=self.METHOD, amount=amount)
        logger.info("UPI payment of %s accepted", receipt.amount)
        print(f"Payed with UPI, amount: {receipt.amount}")
        return receipt
