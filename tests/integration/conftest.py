# This project was developed with assistance from AI tools.
"""Integration test fixtures -- real PostgreSQL, no mocks.

A session-scoped container is migrated once with Alembic. Function-scoped
fixtures give each test an isolated session with savepoint rollback; tests
that need independent committed transactions use ``session_factory`` and
``truncate_all`` instead.
"""

import os
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

PROJECT_ROOT = Path(__file__).resolve().parents[2]

# ---------------------------------------------------------------------------
# Mark all tests in this directory as integration
# ---------------------------------------------------------------------------
pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# Session-scoped: container + engine + migrations
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def pg_container():
    """Start postgres:16 via testcontainers."""
    with PostgresContainer(
        image="postgres:16-alpine",
        username="test",
        password="test",
        dbname="test",
    ) as pg:
        yield pg


@pytest.fixture(scope="session")
def db_url(pg_container):
    """asyncpg URL for the container; Alembic derives the sync URL from it."""
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    return f"postgresql+asyncpg://test:test@{host}:{port}/test"


@pytest.fixture(scope="session")
def _run_migrations(db_url):
    """Run alembic upgrade head against the container."""
    from alembic import command
    from alembic.config import Config

    os.environ["DATABASE_URL"] = db_url
    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    command.upgrade(alembic_cfg, "head")


@pytest.fixture(scope="session")
def async_engine(db_url, _run_migrations):
    """NullPool engine so no connection outlives a test event loop."""
    engine = create_async_engine(db_url, echo=False, poolclass=NullPool)
    yield engine


@pytest.fixture(scope="session")
def session_factory(async_engine):
    return async_sessionmaker(bind=async_engine, class_=AsyncSession, expire_on_commit=False)


# ---------------------------------------------------------------------------
# Function-scoped: per-test session with savepoint rollback
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_session(async_engine):
    """Session bound to an outer transaction that is rolled back after the test."""
    conn = await async_engine.connect()
    txn = await conn.begin()
    session = AsyncSession(bind=conn, join_transaction_mode="create_savepoint")
    yield session
    await session.close()
    await txn.rollback()
    await conn.close()


@pytest_asyncio.fixture
async def truncate_all(async_engine):
    """Empty every table once the test is done (for tests that commit)."""
    yield
    async with async_engine.begin() as conn:
        await conn.execute(
            text(
                "TRUNCATE TABLE notifications, client_timeline, client_milestones, credit_scores, "
                "disputes, credit_items, documents, client_profiles, users CASCADE"
            )
        )


# ---------------------------------------------------------------------------
# Seed data helper
# ---------------------------------------------------------------------------


async def _seed_client(session, *, documents=(), items=(), disputes=(), scores=(), email="ana@example.com"):
    """Insert a client with the given collaborator rows and flush.

    Args:
        session: Session to write with.
        documents: Document categories, one row each.
        items: Credit item statuses, one row each.
        disputes: Dispute statuses, one row each.
        scores: ``(bureau, score, score_date)`` tuples.
        email: Unique email for the user row.

    Returns:
        The new User.
    """
    from db import ClientProfile, CreditItem, CreditScore, Dispute, Document, User
    from db.enums import Bureau, SubscriptionStatus

    user = User(email=email, first_name="Ana", last_name="García")
    session.add(user)
    await session.flush()

    session.add(ClientProfile(user_id=user.id, subscription_status=SubscriptionStatus.ACTIVE))
    for i, category in enumerate(documents):
        session.add(Document(client_id=user.id, file_name=f"doc-{i}.pdf", document_category=category))
    for i, status in enumerate(items):
        session.add(
            CreditItem(
                client_id=user.id,
                item_type="collection",
                creditor_name=f"Creditor {i}",
                bureau=Bureau.EXPERIAN.value,
                status=status,
            )
        )
    for status in disputes:
        session.add(Dispute(client_id=user.id, bureau=Bureau.EXPERIAN, status=status))
    for bureau, score, score_date in scores:
        session.add(CreditScore(client_id=user.id, bureau=bureau, score=score, score_date=score_date))
    await session.flush()
    return user


@pytest.fixture
def seed_client():
    """The client seeding helper, usable with any session."""
    return _seed_client
