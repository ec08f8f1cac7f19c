# This project was developed with assistance from AI tools.
"""Collaborator store contracts and their SQL implementations.

The tracking subsystem only ever reads documents, credit items, disputes,
and scores. Each store answers one aggregate question per client; the SQL
versions below answer it with a single GROUP BY (or DISTINCT ON) query.
"""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from db import CreditItem, CreditScore, Dispute, Document
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import distinct_on
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.counts import BureauScore


class DocumentStore(Protocol):
    async def count_by_category(self, client_id: UUID) -> dict[str, int]: ...


class CreditItemStore(Protocol):
    async def count_by_status(self, client_id: UUID) -> dict[str, int]: ...


class DisputeStore(Protocol):
    async def count_by_status(self, client_id: UUID) -> dict[str, int]: ...


class ScoreStore(Protocol):
    async def latest_per_bureau(self, client_id: UUID) -> dict[str, BureauScore]: ...


@dataclass(frozen=True)
class CollaboratorStores:
    """The four read-only collaborators the aggregator queries."""

    documents: DocumentStore
    credit_items: CreditItemStore
    disputes: DisputeStore
    scores: ScoreStore


class SqlDocumentStore:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def count_by_category(self, client_id: UUID) -> dict[str, int]:
        stmt = (
            select(Document.document_category, func.count())
            .where(
                Document.client_id == client_id,
                Document.document_category.is_not(None),
            )
            .group_by(Document.document_category)
        )
        result = await self._session.execute(stmt)
        return {category.value: count for category, count in result.all()}


class SqlCreditItemStore:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def count_by_status(self, client_id: UUID) -> dict[str, int]:
        stmt = (
            select(CreditItem.status, func.count())
            .where(CreditItem.client_id == client_id)
            .group_by(CreditItem.status)
        )
        result = await self._session.execute(stmt)
        return {status.value: count for status, count in result.all()}


class SqlDisputeStore:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def count_by_status(self, client_id: UUID) -> dict[str, int]:
        stmt = (
            select(Dispute.status, func.count())
            .where(Dispute.client_id == client_id)
            .group_by(Dispute.status)
        )
        result = await self._session.execute(stmt)
        return {status.value: count for status, count in result.all()}


class SqlScoreStore:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def latest_per_bureau(self, client_id: UUID) -> dict[str, BureauScore]:
        # DISTINCT ON keeps the first row per bureau in ORDER BY order.
        stmt = (
            select(CreditScore.bureau, CreditScore.score, CreditScore.score_date)
            .where(CreditScore.client_id == client_id)
            .ext(distinct_on(CreditScore.bureau))
            .order_by(CreditScore.bureau, CreditScore.score_date.desc(), CreditScore.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return {
            bureau.value: BureauScore(score=score, date=score_date)
            for bureau, score, score_date in result.all()
        }


def sql_stores(session: AsyncSession) -> CollaboratorStores:
    """Build the default, database-backed collaborator bundle."""
    return CollaboratorStores(
        documents=SqlDocumentStore(session),
        credit_items=SqlCreditItemStore(session),
        disputes=SqlDisputeStore(session),
        scores=SqlScoreStore(session),
    )
