# This project was developed with assistance from AI tools.
"""Overall progress scoring.

Five independently capped terms summed into a 0-100 score:

    required documents   10 per type present, max 20
    items identified     10 once any item exists
    disputes sent        20 once any dispute has left draft
    resolution ratio     round(resolved / total * 30), max 30
    milestones           2 per milestone achieved, max 20
"""

import math

from db.enums import DocumentCategory

from ..schemas.counts import AggregateCounts
from ..schemas.status import ProgressScore

MAX_POINTS = 100

DOCUMENT_POINTS = 10
DOCUMENT_CAP = 20
ITEMS_IDENTIFIED_POINTS = 10
DISPUTES_SENT_POINTS = 20
RESOLUTION_POINTS = 30
MILESTONE_POINTS = 2
MILESTONE_CAP = 20


def _round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (round() is banker's)."""
    return math.floor(value + 0.5)


def score_progress(counts: AggregateCounts) -> ProgressScore:
    """Compute the weighted progress score for a client."""
    points = 0

    present = sum(1 for c in DocumentCategory.required() if counts.documents_by_category[c] > 0)
    points += min(present * DOCUMENT_POINTS, DOCUMENT_CAP)

    total_items = counts.total_items
    if total_items > 0:
        points += ITEMS_IDENTIFIED_POINTS

    if counts.disputes_sent > 0:
        points += DISPUTES_SENT_POINTS

    if total_items > 0:
        ratio = counts.resolved_items / total_items
        points += min(_round_half_up(ratio * RESOLUTION_POINTS), RESOLUTION_POINTS)

    points += min(len(counts.achieved_milestone_ids) * MILESTONE_POINTS, MILESTONE_CAP)

    percentage = min(_round_half_up(points / MAX_POINTS * 100), 100)
    return ProgressScore(percentage=percentage, points=points, max_points=MAX_POINTS)
