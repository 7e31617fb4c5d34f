"""Shared response models"""

from pydantic import BaseModel

from ..services.notifications import Notification


class Message(BaseModel):
    """Notification surfaced to the caller"""
    level: str
    message: str


def to_messages(notifications: list[Notification]) -> list[Message]:
    return [Message(level=n.level.value, message=n.message) for n in notifications]
