# This project was developed with assistance from AI tools.
"""Tests for collaborator count aggregation."""

import datetime as dt
import logging
from uuid import uuid4

import pytest
from db.enums import Bureau, CreditItemStatus, DisputeStatus, DocumentCategory, MilestoneId
from pydantic import ValidationError

from process_tracking.schemas.counts import AggregateCounts
from process_tracking.services.aggregator import Section, gather_counts, get_achieved_milestones

from tests.factories import make_counts, make_scalars_result, make_session, make_stores

# ---------------------------------------------------------------------------
# AggregateCounts
# ---------------------------------------------------------------------------


def test_counts_are_zero_filled():
    counts = AggregateCounts()
    assert counts.documents_by_category == {c: 0 for c in DocumentCategory}
    assert counts.items_by_status == {s: 0 for s in CreditItemStatus}
    assert counts.disputes_by_status == {s: 0 for s in DisputeStatus}


def test_counts_reject_negative_values():
    with pytest.raises(ValidationError):
        make_counts(items={"identified": -1})


def test_counts_reject_unknown_status():
    with pytest.raises(ValidationError):
        make_counts(disputes={"lost_in_mail": 1})


def test_derived_totals():
    counts = make_counts(
        documents={"id": 2, "other": 1},
        items={"identified": 1, "disputing": 2, "deleted": 3, "updated": 1, "verified": 4},
        disputes={"draft": 1, "sent": 1, "received": 1, "investigating": 1, "resolved": 2, "rejected": 1},
    )
    assert counts.total_documents == 3
    assert counts.has_required_documents is False
    assert counts.total_items == 11
    assert counts.pending_items == 3
    assert counts.resolved_items == 4
    assert counts.active_disputes == 3
    assert counts.closed_disputes == 3
    assert counts.disputes_sent == 6


# ---------------------------------------------------------------------------
# get_achieved_milestones
# ---------------------------------------------------------------------------


async def test_achieved_milestones_as_set():
    session = make_session()
    session.execute.return_value = make_scalars_result(
        [MilestoneId.FIRST_DOCUMENT, MilestoneId.FIRST_ITEM_IDENTIFIED]
    )

    achieved = await get_achieved_milestones(session, uuid4())

    assert achieved == {MilestoneId.FIRST_DOCUMENT, MilestoneId.FIRST_ITEM_IDENTIFIED}


# ---------------------------------------------------------------------------
# gather_counts
# ---------------------------------------------------------------------------


async def test_gather_combines_all_sections():
    session = make_session()
    client_id = uuid4()
    stores = make_stores(
        documents={"id": 1},
        items={"identified": 2},
        disputes={"draft": 1},
        scores={"experian": {"score": 640, "date": dt.date(2026, 2, 1)}},
    )

    gathered = await gather_counts(
        session, client_id, stores=stores, achieved={MilestoneId.FIRST_DOCUMENT}
    )

    counts = gathered.counts
    assert gathered.failed_sections == set()
    assert counts.documents_by_category[DocumentCategory.ID] == 1
    assert counts.items_by_status[CreditItemStatus.IDENTIFIED] == 2
    assert counts.disputes_by_status[DisputeStatus.DRAFT] == 1
    assert counts.latest_score_by_bureau[Bureau.EXPERIAN].score == 640
    assert counts.achieved_milestone_ids == frozenset({MilestoneId.FIRST_DOCUMENT})
    stores.documents.count_by_category.assert_awaited_once_with(client_id)


async def test_strict_mode_propagates_store_errors():
    session = make_session()
    stores = make_stores(disputes=ConnectionError("db gone"))

    with pytest.raises(ConnectionError):
        await gather_counts(session, uuid4(), stores=stores)

    session.begin_nested.assert_not_called()


async def test_tolerant_mode_zeroes_failed_section(caplog):
    session = make_session()
    stores = make_stores(documents={"id": 1}, scores=ConnectionError("timeout"))

    with caplog.at_level(logging.WARNING):
        gathered = await gather_counts(session, uuid4(), stores=stores, tolerant=True)

    assert gathered.failed_sections == {Section.SCORES}
    assert gathered.counts.latest_score_by_bureau == {}
    assert gathered.counts.documents_by_category[DocumentCategory.ID] == 1
    assert session.begin_nested.call_count == 4
    assert "scores" in caplog.text


async def test_tolerant_mode_treats_malformed_data_as_section_failure():
    session = make_session()
    stores = make_stores(items={"identified": -3}, disputes={"sent": 1})

    gathered = await gather_counts(session, uuid4(), stores=stores, tolerant=True)

    assert gathered.failed_sections == {Section.CREDIT_ITEMS}
    assert gathered.counts.total_items == 0
    assert gathered.counts.disputes_sent == 1
