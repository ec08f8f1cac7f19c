# This project was developed with assistance from AI tools.
"""Client timeline service.

Append-only: events are inserted and listed, never updated or deleted.
Corrections are recorded as new events.
"""

import logging
from uuid import UUID

from db import ClientTimelineEvent, User
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.timeline import TimelineEvent, TimelineEventCreate, TimelinePage, TimelineQuery

logger = logging.getLogger(__name__)


def _to_event(row: ClientTimelineEvent, first_name: str | None = None, last_name: str | None = None) -> TimelineEvent:
    return TimelineEvent(
        id=row.id,
        client_id=row.client_id,
        event_type=row.event_type,
        title=row.title,
        description=row.description,
        metadata=row.event_metadata or {},
        related_entity_type=row.related_entity_type,
        related_entity_id=row.related_entity_id,
        performed_by=row.performed_by,
        performer_first_name=first_name,
        performer_last_name=last_name,
        created_at=row.created_at,
    )


async def record_timeline_event(
    session: AsyncSession,
    params: TimelineEventCreate,
) -> TimelineEvent:
    """Append one event to a client's timeline.

    The id and created_at are assigned on insert; the row is flushed but
    the transaction is left to the caller.

    Args:
        session: Database session.
        params: Validated event input.

    Returns:
        The persisted event.
    """
    row = ClientTimelineEvent(
        client_id=params.client_id,
        event_type=params.event_type,
        title=params.title,
        description=params.description,
        event_metadata=params.metadata,
        related_entity_type=params.related_entity_type,
        related_entity_id=params.related_entity_id,
        performed_by=params.performed_by,
    )
    session.add(row)
    await session.flush()
    logger.debug("Timeline event %s recorded for client %s", params.event_type.value, params.client_id)
    return _to_event(row)


def _apply_filters(stmt, client_id: UUID, query: TimelineQuery):
    stmt = stmt.where(ClientTimelineEvent.client_id == client_id)
    if query.event_types:
        stmt = stmt.where(ClientTimelineEvent.event_type.in_(query.event_types))
    if query.start_date is not None:
        stmt = stmt.where(ClientTimelineEvent.created_at >= query.start_date)
    if query.end_date is not None:
        stmt = stmt.where(ClientTimelineEvent.created_at <= query.end_date)
    return stmt


async def get_client_timeline(
    session: AsyncSession,
    client_id: UUID,
    query: TimelineQuery | None = None,
) -> TimelinePage:
    """Return one page of a client's timeline, newest first.

    ``total`` counts every event matching the filters, not just the page.
    """
    query = query or TimelineQuery()

    count_stmt = _apply_filters(select(func.count(ClientTimelineEvent.id)), client_id, query)
    total = (await session.execute(count_stmt)).scalar() or 0

    stmt = (
        select(ClientTimelineEvent, User.first_name, User.last_name)
        .outerjoin(User, User.id == ClientTimelineEvent.performed_by)
        .order_by(ClientTimelineEvent.created_at.desc(), ClientTimelineEvent.id.desc())
        .offset(query.offset)
        .limit(query.limit)
    )
    stmt = _apply_filters(stmt, client_id, query)
    result = await session.execute(stmt)

    events = [_to_event(row, first, last) for row, first, last in result.all()]
    return TimelinePage(events=events, total=total)
