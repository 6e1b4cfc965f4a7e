"""
Notification channels by name (Factory pattern).

The demo never names a concrete channel class: it asks `NotificationFactory`
for "email" and "sms" and talks to both through the `Notification` protocol.
See `design_patterns.services.factory` for the mapping.

Run with:
    python -m design_patterns.factory
"""

from design_patterns.config import configure_logging
from design_patterns.services.factory import NotificationFactory


def run_demo() -> None:
    notification1 = NotificationFactory.create("email")
    notification2 = NotificationFactory.create("sms")
    notification1.send_notification("hello")
    notification2.send_notification("hello")


def main() -> None:
    configure_logging()
    run_demo()


if __name__ == "__main__":
    main()
