"""Transient user-visible notifications (toasts) for admin screens."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from storefront.core.config import settings

logger = logging.getLogger(__name__)


class NotificationType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Notification:
    id: str
    message: str
    type: NotificationType
    duration: int  # milliseconds


_LOG_LEVELS = {
    NotificationType.SUCCESS: logging.INFO,
    NotificationType.INFO: logging.INFO,
    NotificationType.WARNING: logging.WARNING,
    NotificationType.ERROR: logging.ERROR,
}


class NotificationCenter:
    """Queue of notifications waiting to be shown; the UI dismisses them by id."""

    def __init__(self, default_duration: Optional[int] = None):
        self.default_duration = default_duration or settings.notification_duration_ms
        self.notifications: list[Notification] = []

    def notify(
        self,
        message: str,
        type: NotificationType = NotificationType.INFO,
        duration: Optional[int] = None,
    ) -> Notification:
        notification = Notification(
            id=uuid.uuid4().hex[:12],
            message=message,
            type=type,
            duration=duration or self.default_duration,
        )
        self.notifications.append(notification)
        logger.log(_LOG_LEVELS[type], "[%s] %s", type.value, message)
        return notification

    def show_success(self, message: str, duration: Optional[int] = None) -> Notification:
        return self.notify(message, NotificationType.SUCCESS, duration)

    def show_error(self, message: str, duration: Optional[int] = None) -> Notification:
        return self.notify(message, NotificationType.ERROR, duration)

    def show_info(self, message: str, duration: Optional[int] = None) -> Notification:
        return self.notify(message, NotificationType.INFO, duration)

    def show_warning(self, message: str, duration: Optional[int] = None) -> Notification:
        return self.notify(message, NotificationType.WARNING, duration)

    def dismiss(self, notification_id: str) -> None:
        self.notifications = [n for n in self.notifications if n.id != notification_id]

    def of_type(self, type: NotificationType) -> list[Notification]:
        return [n for n in self.notifications if n.type == type]
