# This project was developed with assistance from AI tools.
"""Notification request schema."""

from typing import Any
from uuid import UUID

from db.enums import NotificationLanguage, NotificationType
from pydantic import BaseModel, Field


class NotificationRequest(BaseModel):
    """What the tracking subsystem asks the notification sender to deliver."""

    user_id: UUID
    type: NotificationType
    data: dict[str, Any] = Field(default_factory=dict)
    language: NotificationLanguage = NotificationLanguage.ES
