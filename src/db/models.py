# This project was developed with assistance from AI tools.
"""
Credit repair -- domain models

Users and client profiles, the collaborator records the tracking subsystem
reads (documents, credit items, disputes, scores), and the append-only
tables it writes (milestones, timeline, notifications).
"""

import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from .database import Base
from .enums import (
    Bureau,
    CreditItemStatus,
    DisputeStatus,
    DocumentCategory,
    MilestoneId,
    NotificationPriority,
    NotificationType,
    SubscriptionStatus,
    TimelineEventType,
    UserRole,
)


class User(Base):
    """Account record shared by clients and staff."""

    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    role = Column(
        Enum(UserRole, name="user_role", native_enum=False),
        nullable=False,
        default=UserRole.CLIENT,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    profile = relationship("ClientProfile", back_populates="user", uselist=False)

    def __repr__(self):
        return f"<User(id={self.id}, role='{self.role}')>"


class ClientProfile(Base):
    """Client-only profile data (subscription, address)."""

    __tablename__ = "client_profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False,
    )
    date_of_birth = Column(Date, nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(2), nullable=True)
    subscription_status = Column(
        Enum(SubscriptionStatus, name="subscription_status", native_enum=False),
        nullable=True,
        default=SubscriptionStatus.TRIAL,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="profile")

    def __repr__(self):
        return f"<ClientProfile(user_id={self.user_id}, subscription='{self.subscription_status}')>"


class Document(Base):
    """Uploaded client document. Read-only for the tracking subsystem."""

    __tablename__ = "documents"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    file_name = Column(String(255), nullable=False)
    document_category = Column(
        Enum(DocumentCategory, name="document_category", native_enum=False),
        nullable=True,
    )
    uploaded_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Document(id={self.id}, category='{self.document_category}')>"


class CreditItem(Base):
    """Negative item found on a credit report. Read-only for tracking."""

    __tablename__ = "credit_items"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    item_type = Column(String(50), nullable=False)
    creditor_name = Column(String(255), nullable=True)
    bureau = Column(String(20), nullable=False)
    status = Column(
        Enum(CreditItemStatus, name="credit_item_status", native_enum=False),
        nullable=False,
        default=CreditItemStatus.IDENTIFIED,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<CreditItem(id={self.id}, status='{self.status}')>"


class Dispute(Base):
    """Dispute letter sent (or to be sent) to a bureau. Read-only for tracking."""

    __tablename__ = "disputes"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    credit_item_id = Column(
        UUID(as_uuid=True), ForeignKey("credit_items.id", ondelete="SET NULL"), nullable=True,
    )
    bureau = Column(
        Enum(Bureau, name="bureau", native_enum=False),
        nullable=False,
    )
    status = Column(
        Enum(DisputeStatus, name="dispute_status", native_enum=False),
        nullable=False,
        default=DisputeStatus.DRAFT,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Dispute(id={self.id}, status='{self.status}')>"


class CreditScore(Base):
    """Bureau score snapshot. Read-only for tracking."""

    __tablename__ = "credit_scores"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    bureau = Column(
        Enum(Bureau, name="bureau", native_enum=False),
        nullable=False,
    )
    score = Column(Integer, nullable=False)
    score_date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<CreditScore(bureau='{self.bureau}', score={self.score})>"


class ClientMilestone(Base):
    """Milestone award ledger. INSERT only, one row per (client, milestone)."""

    __tablename__ = "client_milestones"
    __table_args__ = (
        UniqueConstraint("client_id", "milestone_id", name="uq_client_milestone"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    milestone_id = Column(
        Enum(MilestoneId, name="milestone_id", native_enum=False, length=50),
        nullable=False,
    )
    achieved_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<ClientMilestone(client_id={self.client_id}, milestone='{self.milestone_id}')>"


class ClientTimelineEvent(Base):
    """Append-only client timeline. INSERT + SELECT only -- no UPDATE or DELETE."""

    __tablename__ = "client_timeline"
    __mapper_args__ = {"eager_defaults": True}

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    event_type = Column(
        Enum(TimelineEventType, name="timeline_event_type", native_enum=False, length=50),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    event_metadata = Column("metadata", JSON, nullable=False, default=dict)
    related_entity_type = Column(String(50), nullable=True)
    related_entity_id = Column(UUID(as_uuid=True), nullable=True)
    performed_by = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True,
    )
    # clock_timestamp(), not now(): events from one transaction must keep insert order.
    created_at = Column(
        DateTime(timezone=True), server_default=text("clock_timestamp()"), nullable=False, index=True,
    )

    def __repr__(self):
        return f"<ClientTimelineEvent(id={self.id}, type='{self.event_type}')>"


class Notification(Base):
    """In-app notification, optionally mirrored to email by another subsystem."""

    __tablename__ = "notifications"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    type = Column(
        Enum(NotificationType, name="notification_type", native_enum=False, length=50),
        nullable=False,
    )
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    priority = Column(
        Enum(NotificationPriority, name="notification_priority", native_enum=False),
        nullable=False,
        default=NotificationPriority.MEDIUM,
    )
    data = Column(JSON, nullable=False, default=dict)
    read_at = Column(DateTime(timezone=True), nullable=True)
    email_sent = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Notification(id={self.id}, type='{self.type}')>"
