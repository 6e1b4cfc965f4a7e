"""
Simple factory for notification channels.

The **Factory pattern** centralises construction. Callers ask
`NotificationFactory.create("email")` for a channel instead of importing and
instantiating the concrete class themselves.

Benefits:
  - Callers depend only on the `Notification` protocol.
  - Single point of change when a channel needs constructor args.
  - An unknown key fails loudly with the key attached, never with a default.
"""

import logging

from design_patterns.domain.errors import UnknownNotificationTypeError
from design_patterns.domain.models import NotificationType
from design_patterns.services.notify import EmailNotification, Notification, SMSNotification

logger = logging.getLogger(__name__)


class NotificationFactory:
    """Maps a discriminant key to a new notification channel."""

    _CHANNELS: dict[NotificationType, type[Notification]] = {
        NotificationType.EMAIL: EmailNotification,
        NotificationType.SMS: SMSNotification,
    }

    @classmethod
    def create(cls, kind: str | NotificationType) -> Notification:
        """Return a fresh channel for `kind`.

        Raises:
            UnknownNotificationTypeError: `kind` is not one of
                `supported_kinds()`. The error's ``kind`` attribute holds the
                rejected key.
        """
        try:
            notification_type = NotificationType(kind)
        except ValueError:
            logger.warning("Rejected notification type %r", kind)
            raise UnknownNotificationTypeError(str(kind)) from None
        logger.debug("Creating %s notification", notification_type.value)
        return cls._CHANNELS[notification_type]()

    @classmethod
    def supported_kinds(cls) -> list[str]:
        return [kind.value for kind in cls._CHANNELS]
