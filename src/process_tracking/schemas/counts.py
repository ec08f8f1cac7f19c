# This project was developed with assistance from AI tools.
"""Aggregate counts derived from the collaborator stores.

Every map is keyed by its domain enum and zero-filled for every member, so
predicates can index any key without a default. Rebuilt on every query;
never persisted.
"""

import datetime as dt

from db.enums import Bureau, CreditItemStatus, DisputeStatus, DocumentCategory, MilestoneId
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator


class BureauScore(BaseModel):
    """Most recent score reported by one bureau."""

    model_config = ConfigDict(frozen=True)

    score: int
    date: dt.date


def _zero_fill(enum_cls, counts: dict) -> dict:
    return {member: counts.get(member, 0) for member in enum_cls}


class AggregateCounts(BaseModel):
    """Per-client counts feeding the classifier, scorer, engine, and advisor."""

    model_config = ConfigDict(frozen=True)

    documents_by_category: dict[DocumentCategory, NonNegativeInt] = Field(
        default_factory=dict, validate_default=True,
    )
    items_by_status: dict[CreditItemStatus, NonNegativeInt] = Field(
        default_factory=dict, validate_default=True,
    )
    disputes_by_status: dict[DisputeStatus, NonNegativeInt] = Field(
        default_factory=dict, validate_default=True,
    )
    latest_score_by_bureau: dict[Bureau, BureauScore] = Field(default_factory=dict)
    achieved_milestone_ids: frozenset[MilestoneId] = frozenset()

    @field_validator("documents_by_category")
    @classmethod
    def _fill_documents(cls, v: dict) -> dict:
        return _zero_fill(DocumentCategory, v)

    @field_validator("items_by_status")
    @classmethod
    def _fill_items(cls, v: dict) -> dict:
        return _zero_fill(CreditItemStatus, v)

    @field_validator("disputes_by_status")
    @classmethod
    def _fill_disputes(cls, v: dict) -> dict:
        return _zero_fill(DisputeStatus, v)

    # -- documents --

    @property
    def total_documents(self) -> int:
        return sum(self.documents_by_category.values())

    @property
    def has_required_documents(self) -> bool:
        return all(self.documents_by_category[c] > 0 for c in DocumentCategory.required())

    # -- credit items --

    @property
    def total_items(self) -> int:
        return sum(self.items_by_status.values())

    @property
    def pending_items(self) -> int:
        return sum(self.items_by_status[s] for s in CreditItemStatus.pending_statuses())

    @property
    def resolved_items(self) -> int:
        return sum(self.items_by_status[s] for s in CreditItemStatus.resolved_statuses())

    # -- disputes --

    @property
    def active_disputes(self) -> int:
        return sum(self.disputes_by_status[s] for s in DisputeStatus.active_statuses())

    @property
    def closed_disputes(self) -> int:
        return sum(self.disputes_by_status[s] for s in DisputeStatus.closed_statuses())

    @property
    def disputes_sent(self) -> int:
        """Every dispute that has left draft, whatever happened afterwards."""
        return self.active_disputes + self.closed_disputes
