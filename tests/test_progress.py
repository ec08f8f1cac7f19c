# This project was developed with assistance from AI tools.
"""Tests for the weighted progress score."""

import pytest
from db.enums import MilestoneId

from process_tracking.services.progress import MAX_POINTS, _round_half_up, score_progress

from tests.factories import make_counts

REQUIRED_DOCS = {"id": 1, "proof_of_address": 1}
ALL_MILESTONES = list(MilestoneId)

# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_new_client_scores_zero():
    progress = score_progress(make_counts())
    assert progress.points == 0
    assert progress.percentage == 0
    assert progress.max_points == MAX_POINTS == 100


def test_required_documents_only():
    assert score_progress(make_counts(documents=REQUIRED_DOCS)).points == 20


def test_documents_and_identified_items():
    counts = make_counts(documents=REQUIRED_DOCS, items={"identified": 10})
    assert score_progress(counts).points == 30


def test_extra_copies_of_a_document_count_once():
    assert score_progress(make_counts(documents={"id": 5})).points == 10


def test_optional_documents_score_nothing():
    assert score_progress(make_counts(documents={"credit_report": 1, "other": 3})).points == 0


def test_draft_disputes_do_not_count_as_sent():
    counts = make_counts(items={"identified": 1}, disputes={"draft": 2})
    assert score_progress(counts).points == 10


def test_closed_disputes_count_as_sent():
    counts = make_counts(items={"identified": 1}, disputes={"rejected": 1})
    assert score_progress(counts).points == 30


def test_everything_done_scores_one_hundred():
    counts = make_counts(
        documents=REQUIRED_DOCS,
        items={"deleted": 8, "updated": 2},
        disputes={"resolved": 10},
        milestones=ALL_MILESTONES,
    )
    progress = score_progress(counts)
    assert progress.points == 20 + 10 + 20 + 30 + 18
    assert progress.percentage == 98


def test_milestones_score_two_points_each():
    assert score_progress(make_counts(milestones=ALL_MILESTONES[:3])).points == 6
    assert score_progress(make_counts(milestones=ALL_MILESTONES)).points == 18


def test_resolution_ratio_rounds_half_up():
    # 1/4 resolved -> 7.5 points -> 8
    counts = make_counts(items={"deleted": 1, "identified": 3})
    assert score_progress(counts).points == 10 + 8


def test_resolution_ratio_rounds_down_below_half():
    # 1/3 resolved -> 10 points exactly; 1/7 -> 4.28 -> 4
    assert score_progress(make_counts(items={"updated": 1, "identified": 2})).points == 20
    assert score_progress(make_counts(items={"deleted": 1, "identified": 6})).points == 14


def test_verified_items_are_not_resolved():
    counts = make_counts(items={"verified": 4})
    assert score_progress(counts).points == 10


@pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (0.0, 0)])
def test_round_half_up(value, expected):
    assert _round_half_up(value) == expected


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


def test_scoring_is_deterministic():
    counts = make_counts(documents={"id": 1}, items={"identified": 3, "deleted": 1}, disputes={"sent": 1})
    first = score_progress(counts)
    assert all(score_progress(counts) == first for _ in range(10))


def test_percentage_stays_in_range():
    counts = make_counts(
        documents={"id": 9, "proof_of_address": 9, "credit_report": 9},
        items={"deleted": 100},
        disputes={"resolved": 100, "sent": 5},
        milestones=ALL_MILESTONES,
    )
    assert 0 <= score_progress(counts).percentage <= 100


def _grow(base: dict, key: str, amount: int = 1) -> dict:
    grown = dict(base)
    grown[key] = grown.get(key, 0) + amount
    return grown


BASE = {
    "documents": {"id": 1},
    "items": {"identified": 3, "deleted": 1},
    "disputes": {"draft": 1},
}


@pytest.mark.parametrize(
    "field,key",
    [
        ("documents", "id"),
        ("documents", "proof_of_address"),
        ("documents", "credit_report"),
        ("items", "deleted"),
        ("items", "updated"),
        ("disputes", "draft"),
        ("disputes", "sent"),
        ("disputes", "resolved"),
    ],
)
def test_score_never_drops_when_progress_is_added(field, key):
    before = score_progress(make_counts(**BASE))
    grown = dict(BASE)
    grown[field] = _grow(BASE[field], key)
    after = score_progress(make_counts(**grown))
    assert after.percentage >= before.percentage


def test_score_never_drops_when_milestones_are_added():
    previous = -1
    for n in range(len(ALL_MILESTONES) + 1):
        current = score_progress(make_counts(**BASE, milestones=ALL_MILESTONES[:n])).percentage
        assert current >= previous
        previous = current


def test_identifying_first_item_never_lowers_score():
    before = score_progress(make_counts(documents=REQUIRED_DOCS))
    after = score_progress(make_counts(documents=REQUIRED_DOCS, items={"identified": 1}))
    assert after.percentage > before.percentage
