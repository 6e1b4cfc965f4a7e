"""
Shopping cart checkout (Strategy pattern).

`ShoppingCart` is the **context**: it holds one replaceable `PaymentStrategy`
and delegates `checkout()` to whichever strategy is held at call time.
Switching strategies is a plain reassignment; each checkout uses exactly one
strategy, never a mix.

Run with:
    python -m design_patterns.strategy
"""

import logging
from decimal import Decimal, InvalidOperation

from design_patterns.config import configure_logging
from design_patterns.domain.errors import InvalidAmountError, PaymentStrategyNotSetError
from design_patterns.domain.models import PaymentReceipt
from design_patterns.domain.payment import CashPaymentStrategy, PaymentStrategy, UPIPaymentStrategy

logger = logging.getLogger(__name__)


class ShoppingCart:
    def __init__(self, payment_strategy: PaymentStrategy | None = None) -> None:
        self._payment_strategy = payment_strategy

    @property
    def payment_strategy(self) -> PaymentStrategy | None:
        return self._payment_strategy

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        logger.debug("Payment strategy set to %s", type(strategy).__name__)
        self._payment_strategy = strategy

    def checkout(self, amount: str | int | Decimal) -> PaymentReceipt:
        """Pay `amount` with the current strategy.

        Raises:
            PaymentStrategyNotSetError: no strategy has been selected yet.
            InvalidAmountError: `amount` is not a finite, non-negative number.
        """
        strategy = self._payment_strategy
        if strategy is None:
            raise PaymentStrategyNotSetError()
        return strategy.make_payment(_parse_amount(amount))


def _parse_amount(amount: str | int | Decimal) -> Decimal:
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidAmountError(amount) from exc
    # NaN cannot be ordered; check finiteness first.
    if not value.is_finite() or value < 0:
        raise InvalidAmountError(amount)
    return value


def run_demo() -> None:
    cart = ShoppingCart()

    cart.set_payment_strategy(UPIPaymentStrategy())
    cart.checkout("100.00")

    cart.set_payment_strategy(CashPaymentStrategy())
    cart.checkout("50.00")


def main() -> None:
    configure_logging()
    run_demo()


if __name__ == "__main__":
    main()
