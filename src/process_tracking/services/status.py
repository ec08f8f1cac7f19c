# This project was developed with assistance from AI tools.
"""Client process status aggregation service.

Combines the client record, collaborator counts, stage classification,
progress score, and milestone ledger into the status views shown to the
client and to staff.
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from db.enums import CreditItemStatus, MilestoneId
from sqlalchemy.ext.asyncio import AsyncSession

from ..catalog import MILESTONES, PROCESS_STAGES
from ..core.config import settings
from ..schemas.counts import AggregateCounts
from ..schemas.status import (
    ClientProcessStatus,
    MilestoneProgress,
    ProcessStatistics,
    ProcessSummary,
)
from ..schemas.timeline import TimelineEvent, TimelineQuery
from .aggregator import gather_counts, get_achieved_milestones
from .client import get_client
from .next_steps import recommend
from .progress import score_progress
from .stages import classify_stage
from .stores import CollaboratorStores, sql_stores
from .timeline import get_client_timeline, record_timeline_event

logger = logging.getLogger(__name__)

__all__ = [
    "get_client_process_status",
    "get_process_summary",
    "record_timeline_event",
]

_MILESTONE_IDS = [m.id for m in MILESTONES]


def _ensure_tz(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def _statistics(counts: AggregateCounts) -> ProcessStatistics:
    return ProcessStatistics(
        documents=counts.documents_by_category,
        items=counts.items_by_status,
        disputes=counts.disputes_by_status,
        scores=counts.latest_score_by_bureau,
        total_items_identified=counts.total_items,
        total_items_deleted=counts.items_by_status[CreditItemStatus.DELETED],
        total_disputes_sent=counts.disputes_sent,
        active_disputes=counts.active_disputes,
    )


def _achieved_in_catalog_order(achieved: frozenset[MilestoneId]) -> list[MilestoneId]:
    return [m for m in _MILESTONE_IDS if m in achieved]


async def get_client_process_status(
    session: AsyncSession,
    client_id: UUID,
    *,
    stores: CollaboratorStores | None = None,
) -> ClientProcessStatus:
    """Build the full process status for a client.

    Any collaborator failure propagates; use ``get_process_summary`` for a
    view that degrades instead.

    Raises:
        ClientNotFoundError: No user exists with this id.
    """
    stores = stores or sql_stores(session)

    client = await get_client(session, client_id)
    achieved = await get_achieved_milestones(session, client_id)
    gathered = await gather_counts(session, client_id, stores=stores, achieved=achieved)
    counts = gathered.counts

    return ClientProcessStatus(
        client=client,
        current_stage=classify_stage(counts),
        progress=score_progress(counts),
        statistics=_statistics(counts),
        milestones=MilestoneProgress(
            achieved=_achieved_in_catalog_order(counts.achieved_milestone_ids),
            available=list(_MILESTONE_IDS),
        ),
        stages=list(PROCESS_STAGES),
    )


async def _recent_activity(session: AsyncSession, client_id: UUID, degraded: list[str]) -> list[TimelineEvent]:
    try:
        async with session.begin_nested():
            page = await get_client_timeline(
                session, client_id, TimelineQuery(limit=settings.RECENT_ACTIVITY_LIMIT)
            )
    except Exception:
        logger.warning("Failed to load recent activity for client %s", client_id, exc_info=True)
        degraded.append("timeline")
        return []
    return page.events


async def _achieved_or_empty(session: AsyncSession, client_id: UUID, degraded: list[str]) -> set[MilestoneId]:
    try:
        async with session.begin_nested():
            return await get_achieved_milestones(session, client_id)
    except Exception:
        logger.warning("Failed to load milestones for client %s", client_id, exc_info=True)
        degraded.append("milestones")
        return set()


async def get_process_summary(
    session: AsyncSession,
    client_id: UUID,
    *,
    stores: CollaboratorStores | None = None,
    now: datetime | None = None,
) -> ProcessSummary:
    """Build the dashboard summary for a client.

    Unlike ``get_client_process_status`` this view tolerates partial
    failure: a collaborator, milestone, or timeline query that fails is
    logged, rendered empty or zeroed, and named in ``degraded_sections``.

    Args:
        session: Database session.
        client_id: Client to summarise.
        stores: Collaborator stores; defaults to the SQL-backed set.
        now: Reference time for ``days_in_program`` (defaults to UTC now).

    Raises:
        ClientNotFoundError: No user exists with this id.
    """
    stores = stores or sql_stores(session)
    now = _ensure_tz(now or datetime.now(timezone.utc))
    degraded: list[str] = []

    client = await get_client(session, client_id)
    achieved = await _achieved_or_empty(session, client_id, degraded)
    gathered = await gather_counts(session, client_id, stores=stores, achieved=achieved, tolerant=True)
    degraded.extend(sorted(s.value for s in gathered.failed_sections))
    counts = gathered.counts

    recent = await _recent_activity(session, client_id, degraded)
    stage = classify_stage(counts)

    if degraded:
        logger.warning("Process summary for client %s degraded: %s", client_id, ", ".join(degraded))

    return ProcessSummary(
        current_stage=stage,
        progress=score_progress(counts),
        statistics=_statistics(counts),
        recent_activity=recent,
        days_in_program=(now - _ensure_tz(client.member_since)).days,
        next_steps=recommend(stage, counts),
        milestones_achieved=len(counts.achieved_milestone_ids),
        total_milestones=len(_MILESTONE_IDS),
        degraded_sections=degraded,
    )
