# This project was developed with assistance from AI tools.
"""Notification sender contract and the default in-app implementation.

The tracking subsystem treats notification delivery as fire-and-forget:
callers log and swallow any exception raised by ``send``. The database
sender writes inside its own SAVEPOINT so a failed insert never aborts the
caller's transaction. Email delivery is handled by another subsystem that
picks up rows with ``email_sent = false``.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from db import Notification
from db.enums import NotificationLanguage, NotificationPriority, NotificationType
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.notification import NotificationRequest

logger = logging.getLogger(__name__)


class NotificationSender(Protocol):
    async def send(self, request: NotificationRequest) -> None: ...


@dataclass(frozen=True)
class NotificationTemplate:
    title_es: str
    title_en: str
    body: Callable[[dict[str, Any], NotificationLanguage], str]
    priority: NotificationPriority

    def title(self, language: NotificationLanguage) -> str:
        return self.title_en if language == NotificationLanguage.EN else self.title_es


def _message_body(data: dict[str, Any], language: NotificationLanguage) -> str:
    if language == NotificationLanguage.EN:
        return data.get("message_en") or data.get("message", "")
    return data.get("message", "")


NOTIFICATION_TEMPLATES: dict[NotificationType, NotificationTemplate] = {
    NotificationType.MILESTONE: NotificationTemplate(
        title_es="¡Hito alcanzado!",
        title_en="Milestone Reached!",
        body=_message_body,
        priority=NotificationPriority.MEDIUM,
    ),
    NotificationType.ACTION_REQUIRED: NotificationTemplate(
        title_es="Acción requerida",
        title_en="Action Required",
        body=_message_body,
        priority=NotificationPriority.URGENT,
    ),
    NotificationType.REMINDER: NotificationTemplate(
        title_es="Recordatorio",
        title_en="Reminder",
        body=_message_body,
        priority=NotificationPriority.LOW,
    ),
}


class DatabaseNotificationSender:
    """Persist notifications to the ``notifications`` table."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def send(self, request: NotificationRequest) -> None:
        template = NOTIFICATION_TEMPLATES.get(request.type)
        if template is None:
            raise ValueError(f"Unknown notification type: {request.type}")

        async with self._session.begin_nested():
            self._session.add(
                Notification(
                    user_id=request.user_id,
                    type=request.type,
                    title=template.title(request.language),
                    body=template.body(request.data, request.language),
                    priority=template.priority,
                    data=request.data,
                )
            )
            await self._session.flush()
        logger.info("Notification %s queued for user %s", request.type.value, request.user_id)
