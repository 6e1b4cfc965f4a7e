"""
Stock price notifications (Observer pattern).

A **subject** (`Stock`) keeps an ordered list of **observers** and pushes
every update to all of them. Observers only need an `update(message)` method;
the subject never knows their concrete type.

Delivery rules:
  - Synchronous and in registration order. Attaching the same observer twice
    delivers to it twice.
  - A broadcast works on a snapshot of the list taken when it starts, so an
    observer attached or detached from inside `update()` only sees the change
    from the next broadcast onward.
  - An observer that raises does not stop delivery to the rest. The failure is
    logged, and once every observer has been called the broadcast raises
    `BroadcastError` listing all failures.

Run with:
    python -m design_patterns.observer
"""

import logging
from typing import Protocol

from design_patterns.config import configure_logging
from design_patterns.domain.errors import BroadcastError, ObserverNotAttachedError

logger = logging.getLogger(__name__)


class StockObserver(Protocol):
    def update(self, message: str) -> None: ...


class Subject(Protocol):
    def attach_observer(self, observer: StockObserver) -> None: ...

    def detach_observer(self, observer: StockObserver) -> None: ...


class PriceDisplay:
    """Shows the latest market message."""

    def update(self, message: str) -> None:
        print(f"Display updated: {message}")


class PriceAlert:
    """Raises an alert for every market message."""

    def update(self, message: str) -> None:
        print(f"Alert triggered: {message}")


class Stock:
    """Publisher that broadcasts market messages to its observers."""

    def __init__(self) -> None:
        self._observers: list[StockObserver] = []

    @property
    def observers(self) -> tuple[StockObserver, ...]:
        return tuple(self._observers)

    def attach_observer(self, observer: StockObserver) -> None:
        self._observers.append(observer)
        logger.debug("Attached %s (%d observers)", type(observer).__name__, len(self._observers))

    def detach_observer(self, observer: StockObserver) -> None:
        """Remove the earliest registration of `observer`.

        Raises:
            ObserverNotAttachedError: `observer` is not registered.
        """
        try:
            self._observers.remove(observer)
        except ValueError:
            raise ObserverNotAttachedError(observer) from None
        logger.debug("Detached %s (%d observers)", type(observer).__name__, len(self._observers))

    def notify_observers(self, message: str) -> None:
        failures: list[tuple[StockObserver, BaseException]] = []
        for observer in tuple(self._observers):
            try:
                observer.update(message)
            except Exception as exc:
                logger.exception("Observer %s failed on %r", type(observer).__name__, message)
                failures.append((observer, exc))
        if failures:
            raise BroadcastError(message, failures)


def run_demo() -> None:
    stock = Stock()
    stock.attach_observer(PriceAlert())
    stock.attach_observer(PriceDisplay())

    stock.notify_observers("Market Open")


def main() -> None:
    configure_logging()
    run_demo()


if __name__ == "__main__":
    main()
