# This project was developed with assistance from AI tools.
"""Tests for the in-app notification sender."""

from uuid import uuid4

import pytest
from db import Notification
from db.enums import NotificationLanguage, NotificationPriority, NotificationType

from process_tracking.schemas.notification import NotificationRequest
from process_tracking.services.notification import NOTIFICATION_TEMPLATES, DatabaseNotificationSender

from tests.factories import make_session


def test_every_notification_type_has_a_template():
    for notification_type in NotificationType:
        assert notification_type in NOTIFICATION_TEMPLATES


async def test_spanish_notification():
    session = make_session()
    user_id = uuid4()

    await DatabaseNotificationSender(session).send(
        NotificationRequest(
            user_id=user_id,
            type=NotificationType.MILESTONE,
            data={"message": "🎉 Eliminaste tu primer item", "message_en": "🎉 First item deleted"},
        )
    )

    notification = session.added[0]
    assert isinstance(notification, Notification)
    assert notification.user_id == user_id
    assert notification.title == "¡Hito alcanzado!"
    assert notification.body == "🎉 Eliminaste tu primer item"
    assert notification.priority == NotificationPriority.MEDIUM
    session.begin_nested.assert_called_once()
    session.flush.assert_awaited_once()


async def test_english_notification_prefers_english_message():
    session = make_session()

    await DatabaseNotificationSender(session).send(
        NotificationRequest(
            user_id=uuid4(),
            type=NotificationType.MILESTONE,
            data={"message": "hola", "message_en": "hello"},
            language=NotificationLanguage.EN,
        )
    )

    assert session.added[0].title == "Milestone Reached!"
    assert session.added[0].body == "hello"


async def test_english_falls_back_to_default_message():
    session = make_session()

    await DatabaseNotificationSender(session).send(
        NotificationRequest(
            user_id=uuid4(),
            type=NotificationType.REMINDER,
            data={"message": "Sube tu comprobante"},
            language=NotificationLanguage.EN,
        )
    )

    assert session.added[0].body == "Sube tu comprobante"
    assert session.added[0].priority == NotificationPriority.LOW


async def test_action_required_is_urgent():
    session = make_session()

    await DatabaseNotificationSender(session).send(
        NotificationRequest(user_id=uuid4(), type=NotificationType.ACTION_REQUIRED, data={"message": "x"})
    )

    assert session.added[0].priority == NotificationPriority.URGENT


async def test_unknown_type_raises():
    session = make_session()
    request = NotificationRequest.model_construct(
        user_id=uuid4(), type="carrier_pigeon", data={}, language=NotificationLanguage.ES
    )

    with pytest.raises(ValueError):
        await DatabaseNotificationSender(session).send(request)

    assert session.added == []
