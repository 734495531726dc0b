"""User-facing notifications.

The :class:`Notifier` collaborator listens for ``Notify`` actions, keeps
the notifications it received so a front-end can display them, and logs
each one at the matching level.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from monod.store.actions import Action, ActionType, NotificationLevel, Notify
from monod.store.state import DocumentsState

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = (
    "We could not find the document you were looking for. "
    "A new document has been opened instead."
)
DECRYPTION_FAILED_MESSAGE = (
    "We could not decrypt this document, the secret is probably wrong. "
    "A new document has been opened instead."
)
SERVER_UNREACHABLE_MESSAGE = (
    "The server could not be reached, please check your connection. "
    "A new document has been opened instead."
)


_LOG_LEVELS: dict[NotificationLevel, int] = {
    NotificationLevel.INFO: logging.INFO,
    NotificationLevel.SUCCESS: logging.INFO,
    NotificationLevel.WARNING: logging.WARNING,
    NotificationLevel.ERROR: logging.ERROR,
}


class Notification(BaseModel):
    level: NotificationLevel
    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier:
    """Collects notifications dispatched through the store."""

    def __init__(self) -> None:
        self.messages: list[Notification] = []

    def __call__(self, action: Action, state: DocumentsState) -> None:
        if action.type != ActionType.NOTIFY:
            return None
        assert isinstance(action, Notify)  # noqa: S101
        notification = Notification(level=action.level, message=action.message)
        self.messages.append(notification)
        logger.log(_LOG_LEVELS[notification.level], "%s", notification.message)
        return None

    def clear(self) -> None:
        self.messages.clear()
