"""Tests for the Stock publisher and its observers."""

import pytest

from design_patterns.domain.errors import BroadcastError, ObserverNotAttachedError
from design_patterns.observer import PriceAlert, PriceDisplay, Stock, run_demo


class Recorder:
    """Observer that appends (name, message) to a shared log."""

    def __init__(self, name: str, log: list[tuple[str, str]]) -> None:
        self.name = name
        self.log = log

    def update(self, message: str) -> None:
        self.log.append((self.name, message))


class Exploding:
    def update(self, message: str) -> None:
        raise RuntimeError(f"cannot handle {message}")


def test_broadcast_in_registration_order() -> None:
    log: list[tuple[str, str]] = []
    stock = Stock()
    stock.attach_observer(Recorder("A", log))
    stock.attach_observer(Recorder("B", log))

    stock.notify_observers("msg")

    assert log == [("A", "msg"), ("B", "msg")]


def test_detached_observer_is_not_notified() -> None:
    log: list[tuple[str, str]] = []
    a, b = Recorder("A", log), Recorder("B", log)
    stock = Stock()
    stock.attach_observer(a)
    stock.attach_observer(b)

    stock.detach_observer(b)
    stock.notify_observers("msg")

    assert log == [("A", "msg")]
    assert stock.observers == (a,)


def test_same_observer_attached_twice_is_notified_twice() -> None:
    log: list[tuple[str, str]] = []
    a = Recorder("A", log)
    stock = Stock()
    stock.attach_observer(a)
    stock.attach_observer(a)

    stock.notify_observers("msg")
    assert log == [("A", "msg"), ("A", "msg")]

    stock.detach_observer(a)
    assert stock.observers == (a,)


def test_detach_unknown_observer_fails() -> None:
    stock = Stock()
    observer = PriceDisplay()
    with pytest.raises(ObserverNotAttachedError) as excinfo:
        stock.detach_observer(observer)
    assert excinfo.value.observer is observer


def test_broadcast_without_observers_is_noop() -> None:
    Stock().notify_observers("msg")


def test_failing_observer_does_not_stop_delivery() -> None:
    log: list[tuple[str, str]] = []
    bad = Exploding()
    stock = Stock()
    stock.attach_observer(Recorder("A", log))
    stock.attach_observer(bad)
    stock.attach_observer(Recorder("C", log))

    with pytest.raises(BroadcastError) as excinfo:
        stock.notify_observers("msg")

    assert log == [("A", "msg"), ("C", "msg")]
    assert excinfo.value.message == "msg"
    [(observer, error)] = excinfo.value.failures
    assert observer is bad
    assert isinstance(error, RuntimeError)


def test_detach_during_broadcast_applies_to_next_broadcast() -> None:
    log: list[tuple[str, str]] = []
    stock = Stock()
    b = Recorder("B", log)

    class Unsubscriber:
        def update(self, message: str) -> None:
            log.append(("U", message))
            stock.detach_observer(b)

    stock.attach_observer(Unsubscriber())
    stock.attach_observer(b)

    stock.notify_observers("first")
    stock.notify_observers("second")

    assert log == [("U", "first"), ("B", "first"), ("U", "second")]


def test_attach_during_broadcast_applies_to_next_broadcast() -> None:
    log: list[tuple[str, str]] = []
    stock = Stock()
    late = Recorder("L", log)

    class Subscriber:
        def update(self, message: str) -> None:
            log.append(("S", message))
            if late not in stock.observers:
                stock.attach_observer(late)

    stock.attach_observer(Subscriber())
    stock.notify_observers("first")
    stock.notify_observers("second")

    assert log == [("S", "first"), ("S", "second"), ("L", "second")]


def test_concrete_observers_print(capsys: pytest.CaptureFixture[str]) -> None:
    PriceDisplay().update("up")
    PriceAlert().update("down")
    assert capsys.readouterr().out == "Display updated: up\nAlert triggered: down\n"


def test_demo_output(capsys: pytest.CaptureFixture[str]) -> None:
    run_demo()
    assert capsys.readouterr().out == "Alert triggered: Market Open\nDisplay updated: Market Open\n"
