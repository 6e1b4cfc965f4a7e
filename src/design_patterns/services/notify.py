"""
Notification channels.

Each channel satisfies the `Notification` protocol and "sends" a message by
printing it. In production these would integrate with an SMTP relay or an SMS
gateway; here the console stands in for both.
"""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Notification(Protocol):
    """Capability shared by every notification channel."""

    def send_notification(self, message: str) -> None: ...


class EmailNotification:
    """Sends a message by email."""

    def send_notification(self, message: str) -> None:
        logger.info("Sending email notification")
        print(f"sent email: {message}")


class SMSNotification:
    """Sends a message by SMS."""

    def send_notification(self, message: str) -> None:
        logger.info("Sending SMS notification")
        print(f"sent sms: {message}")
