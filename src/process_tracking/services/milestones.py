# This project was developed with assistance from AI tools.
"""Milestone engine.

Each (client, milestone) pair moves from unachieved to achieved exactly
once; there is no way back. A check pass:

1. reads the client's achieved set (idempotency guard),
2. loads the collaborator counts once, isolating each collaborator,
3. evaluates each awardable milestone's predicate against those counts,
4. awards newly satisfied milestones one at a time inside a SAVEPOINT:
   ``INSERT ... ON CONFLICT DO NOTHING RETURNING id`` on the
   ``uq_client_milestone`` constraint, then a ``milestone_reached``
   timeline event,
5. requests a notification for each award. Delivery failures are logged
   and swallowed; the ledger row is the source of truth.

An empty RETURNING means a concurrent pass already awarded the milestone;
that is a no-op, not an error, and produces no event or notification. A
failure on one milestone is recorded in the result and never stops the
remaining milestones from being checked.
"""

import logging
from collections.abc import Callable
from typing import NamedTuple
from uuid import UUID

from db import ClientMilestone
from db.enums import (
    CreditItemStatus,
    MilestoneId,
    NotificationLanguage,
    NotificationType,
    TimelineEventType,
)
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from ..catalog import get_milestone
from ..core.config import settings
from ..schemas.catalog import MilestoneDefinition
from ..schemas.counts import AggregateCounts
from ..schemas.milestone import MilestoneCheckResult, MilestoneFailure
from ..schemas.notification import NotificationRequest
from ..schemas.timeline import TimelineEventCreate
from .aggregator import Section, gather_counts, get_achieved_milestones
from .notification import DatabaseNotificationSender, NotificationSender
from .stages import all_items_resolved
from .stores import CollaboratorStores, sql_stores
from .timeline import record_timeline_event

logger = logging.getLogger(__name__)

FIVE_ITEMS = 5


class MilestoneRule(NamedTuple):
    milestone_id: MilestoneId
    requires: frozenset[Section]
    predicate: Callable[[AggregateCounts], bool]


def _deleted(counts: AggregateCounts) -> int:
    return counts.items_by_status[CreditItemStatus.DELETED]


MILESTONE_RULES: tuple[MilestoneRule, ...] = (
    MilestoneRule(
        MilestoneId.FIRST_DOCUMENT,
        frozenset({Section.DOCUMENTS}),
        lambda c: c.total_documents > 0,
    ),
    MilestoneRule(
        MilestoneId.FIRST_ITEM_IDENTIFIED,
        frozenset({Section.CREDIT_ITEMS}),
        lambda c: c.total_items > 0,
    ),
    MilestoneRule(
        MilestoneId.FIRST_DISPUTE_SENT,
        frozenset({Section.DISPUTES}),
        lambda c: c.disputes_sent > 0,
    ),
    MilestoneRule(
        MilestoneId.FIRST_ITEM_DELETED,
        frozenset({Section.CREDIT_ITEMS}),
        lambda c: _deleted(c) > 0,
    ),
    MilestoneRule(
        MilestoneId.FIVE_ITEMS_DELETED,
        frozenset({Section.CREDIT_ITEMS}),
        lambda c: _deleted(c) >= FIVE_ITEMS,
    ),
    MilestoneRule(
        MilestoneId.ALL_ITEMS_RESOLVED,
        frozenset({Section.CREDIT_ITEMS}),
        all_items_resolved,
    ),
)


async def _insert_milestone(session: AsyncSession, client_id: UUID, milestone_id: MilestoneId) -> bool:
    """Insert the ledger row; return False when it already existed."""
    stmt = (
        insert(ClientMilestone)
        .values(client_id=client_id, milestone_id=milestone_id)
        .on_conflict_do_nothing(constraint="uq_client_milestone")
        .returning(ClientMilestone.id)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none() is not None


async def _award(session: AsyncSession, client_id: UUID, milestone: MilestoneDefinition) -> bool:
    """Persist one award and its timeline event as a single unit of work."""
    async with session.begin_nested():
        if not await _insert_milestone(session, client_id, milestone.id):
            return False
        await record_timeline_event(
            session,
            TimelineEventCreate(
                client_id=client_id,
                event_type=TimelineEventType.MILESTONE_REACHED,
                title=f"Milestone reached: {milestone.name}!",
                description=milestone.description,
                metadata={"milestone_id": milestone.id.value},
            ),
        )
    return True


async def _notify(
    notifier: NotificationSender,
    client_id: UUID,
    milestone: MilestoneDefinition,
    language: NotificationLanguage,
) -> None:
    message = f"{milestone.icon} {milestone.description}"
    try:
        await notifier.send(
            NotificationRequest(
                user_id=client_id,
                type=NotificationType.MILESTONE,
                data={
                    "message": message,
                    "message_en": message,
                    "milestone_id": milestone.id.value,
                    "cta_url": settings.FRONTEND_URL,
                },
                language=language,
            )
        )
    except Exception:
        logger.warning(
            "Milestone notification failed for client %s (%s); award stands",
            client_id,
            milestone.id.value,
            exc_info=True,
        )


async def run_milestone_check(
    session: AsyncSession,
    client_id: UUID,
    *,
    stores: CollaboratorStores | None = None,
    notifier: NotificationSender | None = None,
    language: NotificationLanguage | None = None,
) -> MilestoneCheckResult:
    """Check every awardable milestone for a client and award new ones.

    Args:
        session: Database session. Flushed, never committed.
        client_id: Client to check.
        stores: Collaborator stores; defaults to the SQL-backed set.
        notifier: Notification sender; defaults to in-app notifications.
        language: Notification language; defaults to
            ``settings.DEFAULT_NOTIFICATION_LANGUAGE``.

    Returns:
        The milestones awarded by this pass and any per-milestone failures.
    """
    stores = stores or sql_stores(session)
    notifier = notifier or DatabaseNotificationSender(session)
    language = language or settings.DEFAULT_NOTIFICATION_LANGUAGE

    achieved = await get_achieved_milestones(session, client_id)
    pending = [rule for rule in MILESTONE_RULES if rule.milestone_id not in achieved]
    result = MilestoneCheckResult()
    if not pending:
        return result

    gathered = await gather_counts(session, client_id, stores=stores, achieved=achieved, tolerant=True)

    for rule in pending:
        unavailable = rule.requires & gathered.failed_sections
        if unavailable:
            result.failures.append(
                MilestoneFailure(
                    milestone_id=rule.milestone_id,
                    reason="unavailable: " + ", ".join(sorted(s.value for s in unavailable)),
                )
            )
            continue

        milestone = get_milestone(rule.milestone_id)
        try:
            if not rule.predicate(gathered.counts):
                continue
            awarded = await _award(session, client_id, milestone)
        except Exception as exc:
            logger.warning(
                "Milestone %s check failed for client %s",
                rule.milestone_id.value,
                client_id,
                exc_info=True,
            )
            result.failures.append(MilestoneFailure(milestone_id=rule.milestone_id, reason=repr(exc)))
            continue

        if not awarded:
            logger.debug("Milestone %s already awarded to client %s", rule.milestone_id.value, client_id)
            continue

        logger.info("Milestone %s awarded to client %s", rule.milestone_id.value, client_id)
        result.awarded.append(milestone)
        await _notify(notifier, client_id, milestone, language)

    return result


async def check_and_award_milestones(
    session: AsyncSession,
    client_id: UUID,
    *,
    stores: CollaboratorStores | None = None,
    notifier: NotificationSender | None = None,
    language: NotificationLanguage | None = None,
) -> list[MilestoneDefinition]:
    """Award every newly satisfied milestone and return the new ones.

    Call after any write that could satisfy a milestone (document upload,
    item or dispute status change). Safe to repeat: a second call with no
    intervening data change returns an empty list.
    """
    result = await run_milestone_check(
        session, client_id, stores=stores, notifier=notifier, language=language,
    )
    if result.is_partial:
        logger.warning(
            "Milestone check for client %s incomplete: %s",
            client_id,
            ", ".join(f.milestone_id.value for f in result.failures),
        )
    return result.awarded
