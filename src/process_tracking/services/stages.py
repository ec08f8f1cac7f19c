# This project was developed with assistance from AI tools.
"""Stage classification.

The current stage is derived, never stored. ``STAGE_RULES`` is evaluated
top to bottom and the first matching rule wins, so the most advanced
applicable stage is always reported; a client with resolved disputes and
freshly identified items shows as reviewing results, not back in analysis.
"""

from collections.abc import Callable
from typing import NamedTuple

from db.enums import CreditItemStatus, DisputeStatus, ProcessStageId

from ..catalog import get_stage
from ..schemas.catalog import ProcessStage
from ..schemas.counts import AggregateCounts


class StageRule(NamedTuple):
    name: str
    applies: Callable[[AggregateCounts], bool]
    stage_id: ProcessStageId


def all_items_resolved(counts: AggregateCounts) -> bool:
    """At least one item ever identified and none still pending."""
    return counts.total_items > 0 and counts.pending_items == 0


def _results_under_review(counts: AggregateCounts) -> bool:
    return counts.closed_disputes > 0 and counts.total_items > 0


def _disputes_in_flight(counts: AggregateCounts) -> bool:
    return counts.active_disputes > 0


def _disputes_in_preparation(counts: AggregateCounts) -> bool:
    # Items already marked as disputing with nothing sent yet are being prepared.
    if counts.disputes_by_status[DisputeStatus.DRAFT] > 0:
        return True
    return counts.items_by_status[CreditItemStatus.DISPUTING] > 0 and counts.disputes_sent == 0


def _items_identified(counts: AggregateCounts) -> bool:
    return counts.total_items > 0


def _ready_for_analysis(counts: AggregateCounts) -> bool:
    # Same target as _items_identified: required documents in hand means the
    # report can be analysed even before any item exists.
    return counts.has_required_documents


def _documents_started(counts: AggregateCounts) -> bool:
    return counts.total_documents > 0


STAGE_RULES: tuple[StageRule, ...] = (
    StageRule("all_items_resolved", all_items_resolved, ProcessStageId.COMPLETED),
    StageRule("results_under_review", _results_under_review, ProcessStageId.REVIEW_RESULTS),
    StageRule("disputes_in_flight", _disputes_in_flight, ProcessStageId.AWAITING_RESPONSE),
    StageRule("disputes_in_preparation", _disputes_in_preparation, ProcessStageId.DISPUTE_PREPARATION),
    StageRule("items_identified", _items_identified, ProcessStageId.CREDIT_ANALYSIS),
    StageRule("ready_for_analysis", _ready_for_analysis, ProcessStageId.CREDIT_ANALYSIS),
    StageRule("documents_started", _documents_started, ProcessStageId.DOCUMENT_COLLECTION),
)

DEFAULT_STAGE_ID = ProcessStageId.ONBOARDING


def matching_rule(counts: AggregateCounts) -> StageRule | None:
    """Return the first rule that applies, or None for a brand-new client."""
    for rule in STAGE_RULES:
        if rule.applies(counts):
            return rule
    return None


def classify_stage(counts: AggregateCounts) -> ProcessStage:
    """Map aggregate counts to the client's current process stage."""
    rule = matching_rule(counts)
    return get_stage(rule.stage_id if rule else DEFAULT_STAGE_ID)
