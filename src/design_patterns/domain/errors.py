"""
Exception taxonomy for the pattern demos.

Each demo raises its own error where the problem is detected and lets it
propagate; only the CLI catches `DesignPatternError` at the top level.
The concrete errors also inherit from the closest builtin so callers that
only know about ``ValueError`` / ``RuntimeError`` still catch them.
"""

from typing import Any


class DesignPatternError(Exception):
    """Base class for every error raised by this package."""


class RequestValidationError(DesignPatternError, ValueError):
    """HttpRequestBuilder.build() was called with missing or invalid fields."""


class UnknownNotificationTypeError(DesignPatternError, ValueError):
    """NotificationFactory has no implementation for the requested key."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Unknown notification type: {kind!r}")


class PaymentStrategyNotSetError(DesignPatternError, RuntimeError):
    """ShoppingCart.checkout() was called before a payment strategy was chosen."""

    def __init__(self) -> None:
        super().__init__("No payment strategy selected; call set_payment_strategy() first")


class ObserverNotAttachedError(DesignPatternError, ValueError):
    """detach_observer() was called with an observer that is not registered."""

    def __init__(self, observer: Any) -> None:
        self.observer = observer
        super().__init__(f"Observer {observer!r} is not attached")


class BroadcastError(DesignPatternError):
    """One or more observers raised while a message was being broadcast.

    Delivery still reached every other observer. `failures` holds the
    ``(observer, exception)`` pairs in delivery order.
    """

    def __init__(self, message: str, failures: list[tuple[Any, BaseException]]) -> None:
        self.message = message
        self.failures = failures
        super().__init__(f"{len(failures)} observer(s) failed while broadcasting {message!r}")


class InvalidAmountError(DesignPatternError, ValueError):
    """ShoppingCart.checkout() got an amount that is not a finite, non-negative number."""

    def __init__(self, amount: Any) -> None:
        self.amount = amount
        super().__init__(f"Invalid payment amount: {amount!r}")
