# This project was developed with assistance from AI tools.
"""
Domain enums for the credit repair process.

Shared domain types used by both SQLAlchemy models (db package)
and Pydantic schemas (process_tracking package).
"""

import enum


class UserRole(str, enum.Enum):
    CLIENT = "client"
    ADMIN = "admin"
    STAFF = "staff"


class SubscriptionStatus(str, enum.Enum):
    TRIAL = "trial"
    ACTIVE = "active"
    PAUSED = "paused"
    CANCELLED = "cancelled"


class DocumentCategory(str, enum.Enum):
    ID = "id"
    PROOF_OF_ADDRESS = "proof_of_address"
    CREDIT_REPORT = "credit_report"
    DISPUTE_LETTER = "dispute_letter"
    RESPONSE = "response"
    OTHER = "other"

    @classmethod
    def required(cls) -> tuple["DocumentCategory", ...]:
        """Categories every client must provide before analysis can start."""
        return (cls.ID, cls.PROOF_OF_ADDRESS)


class CreditItemStatus(str, enum.Enum):
    IDENTIFIED = "identified"
    DISPUTING = "disputing"
    DELETED = "deleted"
    VERIFIED = "verified"
    UPDATED = "updated"

    @classmethod
    def pending_statuses(cls) -> frozenset["CreditItemStatus"]:
        """Statuses of items still being worked on."""
        return frozenset({cls.IDENTIFIED, cls.DISPUTING})

    @classmethod
    def resolved_statuses(cls) -> frozenset["CreditItemStatus"]:
        """Statuses that count as a favourable resolution."""
        return frozenset({cls.DELETED, cls.UPDATED})


class DisputeStatus(str, enum.Enum):
    DRAFT = "draft"
    SENT = "sent"
    RECEIVED = "received"
    INVESTIGATING = "investigating"
    RESOLVED = "resolved"
    REJECTED = "rejected"

    @classmethod
    def active_statuses(cls) -> frozenset["DisputeStatus"]:
        """Disputes delivered to a bureau and still waiting on an answer."""
        return frozenset({cls.SENT, cls.RECEIVED, cls.INVESTIGATING})

    @classmethod
    def closed_statuses(cls) -> frozenset["DisputeStatus"]:
        """Disputes the bureau has answered."""
        return frozenset({cls.RESOLVED, cls.REJECTED})


class Bureau(str, enum.Enum):
    EXPERIAN = "experian"
    EQUIFAX = "equifax"
    TRANSUNION = "transunion"


class ProcessStageId(str, enum.Enum):
    ONBOARDING = "onboarding"
    DOCUMENT_COLLECTION = "document_collection"
    CREDIT_ANALYSIS = "credit_analysis"
    DISPUTE_PREPARATION = "dispute_preparation"
    DISPUTES_SENT = "disputes_sent"
    AWAITING_RESPONSE = "awaiting_response"
    REVIEW_RESULTS = "review_results"
    COMPLETED = "completed"


class MilestoneId(str, enum.Enum):
    FIRST_DOCUMENT = "first_document"
    PROFILE_COMPLETE = "profile_complete"
    FIRST_ITEM_IDENTIFIED = "first_item_identified"
    FIRST_DISPUTE_SENT = "first_dispute_sent"
    FIRST_ITEM_DELETED = "first_item_deleted"
    SCORE_IMPROVED_50 = "score_improved_50"
    SCORE_IMPROVED_100 = "score_improved_100"
    FIVE_ITEMS_DELETED = "five_items_deleted"
    ALL_ITEMS_RESOLVED = "all_items_resolved"


class TimelineEventType(str, enum.Enum):
    # System
    ACCOUNT_CREATED = "account_created"
    STAGE_CHANGED = "stage_changed"
    MILESTONE_REACHED = "milestone_reached"

    # Documents
    DOCUMENT_UPLOADED = "document_uploaded"
    DOCUMENT_VERIFIED = "document_verified"
    DOCUMENT_REJECTED = "document_rejected"

    # Credit items
    ITEM_IDENTIFIED = "item_identified"
    ITEM_STATUS_CHANGED = "item_status_changed"
    ITEM_DELETED = "item_deleted"

    # Disputes
    DISPUTE_CREATED = "dispute_created"
    DISPUTE_LETTER_GENERATED = "dispute_letter_generated"
    DISPUTE_SENT = "dispute_sent"
    DISPUTE_RESPONSE_RECEIVED = "dispute_response_received"
    DISPUTE_RESOLVED = "dispute_resolved"
    DISPUTE_REJECTED = "dispute_rejected"

    # Scores
    SCORE_RECORDED = "score_recorded"
    SCORE_IMPROVED = "score_improved"
    SCORE_DECLINED = "score_declined"

    # Payments
    PAYMENT_MADE = "payment_made"
    SUBSCRIPTION_STARTED = "subscription_started"
    SUBSCRIPTION_RENEWED = "subscription_renewed"

    # Notes
    NOTE_ADDED = "note_added"
    STAFF_ACTION = "staff_action"


class NotificationType(str, enum.Enum):
    MILESTONE = "milestone"
    ACTION_REQUIRED = "action_required"
    REMINDER = "reminder"


class NotificationPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class NotificationLanguage(str, enum.Enum):
    ES = "es"
    EN = "en"
