"""Notification surface: success/error toasts collected for the response."""

from typing import Literal, Protocol

from pydantic import BaseModel

from inbox_assist.utils.logger import get_logger

logger = get_logger("inbox_assist.reply_tracker.notifications")


class Notification(BaseModel):
    kind: Literal["success", "error"]
    title: str
    description: str


class Notifier(Protocol):
    def toast_success(self, title: str, description: str) -> None: ...

    def toast_error(self, title: str, description: str) -> None: ...


class NotificationBuffer:
    """Collects toasts raised while handling one request."""

    def __init__(self) -> None:
        self.items: list[Notification] = []

    def toast_success(self, title: str, description: str) -> None:
        self.items.append(Notification(kind="success", title=title, description=description))
        logger.debug("notification.success", title=title, description=description)

    def toast_error(self, title: str, description: str) -> None:
        self.items.append(Notification(kind="error", title=title, description=description))
        logger.debug("notification.error", title=title, description=description)

    @property
    def last(self) -> Notification | None:
        return self.items[-1] if self.items else None
