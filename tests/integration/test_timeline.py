# This project was developed with assistance from AI tools.
"""Client timeline with real PostgreSQL."""

import pytest

pytestmark = pytest.mark.integration


async def _record(session, client_id, event_type, title, performed_by=None):
    from process_tracking.schemas.timeline import TimelineEventCreate
    from process_tracking.services.timeline import record_timeline_event

    return await record_timeline_event(
        session,
        TimelineEventCreate(client_id=client_id, event_type=event_type, title=title, performed_by=performed_by),
    )


async def test_recorded_event_is_listed_once(db_session, seed_client):
    from db.enums import TimelineEventType

    from process_tracking.services.timeline import get_client_timeline

    user = await seed_client(db_session)
    event = await _record(db_session, user.id, TimelineEventType.ACCOUNT_CREATED, "Account created")

    page = await get_client_timeline(db_session, user.id)

    assert event.id is not None
    assert event.created_at is not None
    assert [e.id for e in page.events] == [event.id]
    assert page.total == 1


async def test_filters_paging_and_performer(db_session, seed_client):
    from db.enums import TimelineEventType

    from process_tracking.schemas.timeline import TimelineQuery
    from process_tracking.services.timeline import get_client_timeline

    user = await seed_client(db_session)
    staff = await seed_client(db_session, email="staff@example.com")
    for i in range(3):
        await _record(db_session, user.id, TimelineEventType.NOTE_ADDED, f"Note {i}", performed_by=staff.id)
    await _record(db_session, user.id, TimelineEventType.DOCUMENT_UPLOADED, "ID uploaded")

    notes = await get_client_timeline(
        db_session, user.id, TimelineQuery(event_types=[TimelineEventType.NOTE_ADDED], limit=2)
    )

    assert notes.total == 3
    assert len(notes.events) == 2
    assert all(e.event_type == TimelineEventType.NOTE_ADDED for e in notes.events)
    assert notes.events[0].performer_first_name == "Ana"

    everything = await get_client_timeline(db_session, user.id)
    assert everything.total == 4

    other = await get_client_timeline(db_session, staff.id)
    assert other.total == 0


async def test_events_from_one_transaction_list_newest_first(db_session, seed_client):
    from db.enums import TimelineEventType

    from process_tracking.services.timeline import get_client_timeline

    user = await seed_client(db_session)
    recorded = [
        await _record(db_session, user.id, TimelineEventType.MILESTONE_REACHED, f"Milestone {i}")
        for i in range(3)
    ]

    page = await get_client_timeline(db_session, user.id)

    assert [e.id for e in page.events] == [e.id for e in reversed(recorded)]
    assert recorded[0].created_at < recorded[1].created_at < recorded[2].created_at
