# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, DatabaseService, get_db, get_db_service
from .enums import (
    Bureau,
    CreditItemStatus,
    DisputeStatus,
    DocumentCategory,
    MilestoneId,
    NotificationLanguage,
    NotificationPriority,
    NotificationType,
    ProcessStageId,
    SubscriptionStatus,
    TimelineEventType,
    UserRole,
)
from .models import (
    ClientMilestone,
    ClientProfile,
    ClientTimelineEvent,
    CreditItem,
    CreditScore,
    Dispute,
    Document,
    Notification,
    User,
)

__all__ = [
    "Base",
    "DatabaseService",
    "get_db",
    "get_db_service",
    "__version__",
    # Enums
    "Bureau",
    "CreditItemStatus",
    "DisputeStatus",
    "DocumentCategory",
    "MilestoneId",
    "NotificationLanguage",
    "NotificationPriority",
    "NotificationType",
    "ProcessStageId",
    "SubscriptionStatus",
    "TimelineEventType",
    "UserRole",
    # Models
    "ClientMilestone",
    "ClientProfile",
    "ClientTimelineEvent",
    "CreditItem",
    "CreditScore",
    "Dispute",
    "Document",
    "Notification",
    "User",
]
