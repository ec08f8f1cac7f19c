# This project was developed with assistance from AI tools.
"""Process status aggregation.

Collects per-client counts from the four collaborator stores and the
milestone ledger into a fresh ``AggregateCounts``. Nothing is cached.

Queries run one after another on the caller's session (an AsyncSession
must not be shared by concurrent tasks). In tolerant mode each collaborator
query runs inside its own SAVEPOINT; a failing section is logged, left
zeroed, and reported in ``failed_sections`` instead of aborting the whole
aggregate.
"""

import enum
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from db import ClientMilestone
from db.enums import MilestoneId
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.counts import AggregateCounts
from .stores import CollaboratorStores

logger = logging.getLogger(__name__)


class Section(str, enum.Enum):
    """Collaborator data a consumer depends on."""

    DOCUMENTS = "documents"
    CREDIT_ITEMS = "credit_items"
    DISPUTES = "disputes"
    SCORES = "scores"


@dataclass
class GatheredCounts:
    counts: AggregateCounts
    failed_sections: set[Section] = field(default_factory=set)


async def get_achieved_milestones(session: AsyncSession, client_id: UUID) -> set[MilestoneId]:
    """Return the ids of every milestone the client has been awarded."""
    result = await session.execute(
        select(ClientMilestone.milestone_id).where(ClientMilestone.client_id == client_id)
    )
    return {MilestoneId(m) for m in result.scalars().all()}


_SECTION_FIELDS: dict[Section, str] = {
    Section.DOCUMENTS: "documents_by_category",
    Section.CREDIT_ITEMS: "items_by_status",
    Section.DISPUTES: "disputes_by_status",
    Section.SCORES: "latest_score_by_bureau",
}


async def _fetch_validated(section: Section, loader: Callable[[], Awaitable[dict[str, Any]]]) -> dict:
    # Validating per section turns malformed collaborator data into a
    # failure of that section only.
    field_name = _SECTION_FIELDS[section]
    partial = AggregateCounts(**{field_name: await loader()})
    return getattr(partial, field_name)


async def _load_section(
    session: AsyncSession,
    section: Section,
    loader: Callable[[], Awaitable[dict[str, Any]]],
    *,
    tolerant: bool,
    failed: set[Section],
) -> dict:
    if not tolerant:
        return await _fetch_validated(section, loader)
    try:
        async with session.begin_nested():
            return await _fetch_validated(section, loader)
    except Exception:
        logger.warning("Failed to load %s counts, section left empty", section.value, exc_info=True)
        failed.add(section)
        return {}


async def gather_counts(
    session: AsyncSession,
    client_id: UUID,
    *,
    stores: CollaboratorStores,
    achieved: set[MilestoneId] | frozenset[MilestoneId] = frozenset(),
    tolerant: bool = False,
) -> GatheredCounts:
    """Build the aggregate counts for one client.

    Args:
        session: Database session (used for SAVEPOINTs in tolerant mode).
        client_id: Client whose data is aggregated.
        stores: Collaborator stores to query.
        achieved: Milestones already awarded, copied into the counts.
        tolerant: Isolate each collaborator query instead of propagating
            its exception.

    Returns:
        The counts plus the set of sections that could not be loaded.
    """
    failed: set[Section] = set()

    documents = await _load_section(
        session, Section.DOCUMENTS, lambda: stores.documents.count_by_category(client_id),
        tolerant=tolerant, failed=failed,
    )
    items = await _load_section(
        session, Section.CREDIT_ITEMS, lambda: stores.credit_items.count_by_status(client_id),
        tolerant=tolerant, failed=failed,
    )
    disputes = await _load_section(
        session, Section.DISPUTES, lambda: stores.disputes.count_by_status(client_id),
        tolerant=tolerant, failed=failed,
    )
    scores = await _load_section(
        session, Section.SCORES, lambda: stores.scores.latest_per_bureau(client_id),
        tolerant=tolerant, failed=failed,
    )

    counts = AggregateCounts(
        documents_by_category=documents,
        items_by_status=items,
        disputes_by_status=disputes,
        latest_score_by_bureau=scores,
        achieved_milestone_ids=frozenset(achieved),
    )
    return GatheredCounts(counts=counts, failed_sections=failed)
