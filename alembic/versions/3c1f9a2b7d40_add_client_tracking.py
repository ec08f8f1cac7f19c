# This project was developed with assistance from AI tools.
"""add client tracking

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-16 09:12:41.508113

"""

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision = "3c1f9a2b7d40"
down_revision = None
branch_labels = None
depends_on = None


def _uuid(name: str, **kwargs) -> sa.Column:
    return sa.Column(name, postgresql.UUID(as_uuid=True), **kwargs)


def _created_at(default: str = "now()") -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), server_default=sa.text(default), nullable=False
    )


def upgrade() -> None:
    op.create_table(
        "users",
        _uuid("id", nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        _created_at(),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text(default), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "client_profiles",
        _uuid("id", nullable=False),
        _uuid("user_id", nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(2), nullable=True),
        sa.Column("subscription_status", sa.String(20), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )

    # -- collaborator tables (read-only for tracking) --

    op.create_table(
        "documents",
        _uuid("id", nullable=False),
        _uuid("client_id", nullable=False),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("document_category", sa.String(20), nullable=True),
        sa.Column(
            "uploaded_at", sa.DateTime(timezone=True), server_default=sa.text(default), nullable=False
        ),
        sa.ForeignKeyConstraint(["client_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_documents_client_id", "documents", ["client_id"])

    op.create_table(
        "credit_items",
        _uuid("id", nullable=False),
        _uuid("client_id", nullable=False),
        sa.Column("item_type", sa.String(50), nullable=False),
        sa.Column("creditor_name", sa.String(255), nullable=True),
        sa.Column("bureau", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["client_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_credit_items_client_id", "credit_items", ["client_id"])
    op.create_index("ix_credit_items_status", "credit_items", ["status"])

    op.create_table(
        "disputes",
        _uuid("id", nullable=False),
        _uuid("client_id", nullable=False),
        _uuid("credit_item_id", nullable=True),
        sa.Column("bureau", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["client_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["credit_item_id"], ["credit_items.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_disputes_client_id", "disputes", ["client_id"])
    op.create_index("ix_disputes_status", "disputes", ["status"])

    op.create_table(
        "credit_scores",
        _uuid("id", nullable=False),
        _uuid("client_id", nullable=False),
        sa.Column("bureau", sa.String(20), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("score_date", sa.Date(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["client_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_credit_scores_client_id", "credit_scores", ["client_id"])

    # -- tracking tables --

    op.create_table(
        "client_milestones",
        _uuid("id", nullable=False),
        _uuid("client_id", nullable=False),
        sa.Column("milestone_id", sa.String(50), nullable=False),
        sa.Column(
            "achieved_at", sa.DateTime(timezone=True), server_default=sa.text(default), nullable=False
        ),
        sa.ForeignKeyConstraint(["client_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("client_id", "milestone_id", name="uq_client_milestone"),
    )
    op.create_index("ix_client_milestones_client_id", "client_milestones", ["client_id"])

    op.create_table(
        "client_timeline",
        _uuid("id", nullable=False),
        _uuid("client_id", nullable=False),
        sa.Column("event_type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("metadata", sa.JSON(), nullable=False),
        sa.Column("related_entity_type", sa.String(50), nullable=True),
        _uuid("related_entity_id", nullable=True),
        _uuid("performed_by", nullable=True),
        _created_at("clock_timestamp()"),
        sa.ForeignKeyConstraint(["client_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["performed_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_client_timeline_client_id", "client_timeline", ["client_id"])
    op.create_index("ix_client_timeline_event_type", "client_timeline", ["event_type"])
    op.create_index("ix_client_timeline_created_at", "client_timeline", ["created_at"])

    op.create_table(
        "notifications",
        _uuid("id", nullable=False),
        _uuid("user_id", nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False),
        sa.Column("data", sa.JSON(), nullable=False),
        sa.Column("read_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("email_sent", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_notifications_user_id", "notifications", ["user_id"])


def downgrade() -> None:
    op.drop_table("notifications")
    op.drop_table("client_timeline")
    op.drop_table("client_milestones")
    op.drop_table("credit_scores")
    op.drop_table("disputes")
    op.drop_table("credit_items")
    op.drop_table("documents")
    op.drop_table("client_profiles")
    op.drop_table("users")
