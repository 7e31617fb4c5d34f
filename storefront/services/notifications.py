"""Transient user notifications"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_LOG_LEVELS = {
    NotificationLevel.SUCCESS: logging.INFO,
    NotificationLevel.INFO: logging.INFO,
    NotificationLevel.WARNING: logging.WARNING,
    NotificationLevel.ERROR: logging.WARNING,
}


@dataclass
class Notification:
    """A message shown to the user once"""
    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=datetime.utcnow)


class Notifier:
    """
    Collects notifications raised by store operations.

    Callers drain the queue after an operation and show the messages
    however they like. Every notification is also logged.
    """

    def __init__(self):
        self.pending: list[Notification] = []

    def notify(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        self.pending.append(notification)
        logger.log(_LOG_LEVELS[level], f"[{level.value}] {message}")
        return notification

    def success(self, message: str) -> Notification:
        return self.notify(NotificationLevel.SUCCESS, message)

    def info(self, message: str) -> Notification:
        return self.notify(NotificationLevel.INFO, message)

    def warning(self, message: str) -> Notification:
        return self.notify(NotificationLevel.WARNING, message)

    def error(self, message: str) -> Notification:
        return self.notify(NotificationLevel.ERROR, message)

    def drain(self) -> list[Notification]:
        """Return pending notifications and forget them"""
        drained, self.pending = self.pending, []
        return drained
