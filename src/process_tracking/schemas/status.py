# This project was developed with assistance from AI tools.
"""Process status, progress, and summary response schemas."""

import enum
from datetime import datetime
from uuid import UUID

from db.enums import (
    Bureau,
    CreditItemStatus,
    DisputeStatus,
    DocumentCategory,
    MilestoneId,
    SubscriptionStatus,
)
from pydantic import BaseModel

from .catalog import ProcessStage
from .counts import BureauScore
from .timeline import TimelineEvent


class ProgressScore(BaseModel):
    """Weighted 0-100 summary of a client's advancement."""

    percentage: int
    points: int
    max_points: int = 100


class RecommendationPriority(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Recommendation(BaseModel):
    """A single next step suggested to the client."""

    priority: RecommendationPriority
    action: str
    description: str


class ClientInfo(BaseModel):
    """Identity and membership details shown alongside the status."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    subscription_status: SubscriptionStatus | None = None
    member_since: datetime


class ProcessStatistics(BaseModel):
    """Raw counts plus the derived totals the dashboard displays."""

    documents: dict[DocumentCategory, int]
    items: dict[CreditItemStatus, int]
    disputes: dict[DisputeStatus, int]
    scores: dict[Bureau, BureauScore]
    total_items_identified: int
    total_items_deleted: int
    total_disputes_sent: int
    active_disputes: int


class MilestoneProgress(BaseModel):
    achieved: list[MilestoneId]
    available: list[MilestoneId]


class ClientProcessStatus(BaseModel):
    """Full process status for one client."""

    client: ClientInfo
    current_stage: ProcessStage
    progress: ProgressScore
    statistics: ProcessStatistics
    milestones: MilestoneProgress
    stages: list[ProcessStage]


class ProcessSummary(BaseModel):
    """Dashboard summary. Sections that could not be loaded are listed in
    ``degraded_sections`` and rendered empty/zeroed."""

    current_stage: ProcessStage
    progress: ProgressScore
    statistics: ProcessStatistics
    recent_activity: list[TimelineEvent]
    days_in_program: int
    next_steps: list[Recommendation]
    milestones_achieved: int
    total_milestones: int
    degraded_sections: list[str] = []
