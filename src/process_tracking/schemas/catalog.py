# This project was developed with assistance from AI tools.
"""Catalog entry schemas for process stages and milestones."""

from db.enums import MilestoneId, ProcessStageId
from pydantic import BaseModel, ConfigDict


class ProcessStage(BaseModel):
    """One phase of the credit repair workflow. Lookup value, never persisted."""

    model_config = ConfigDict(frozen=True)

    id: ProcessStageId
    display_name: str
    display_name_alt: str
    description: str
    order: int
    next_step: str


class MilestoneDefinition(BaseModel):
    """Display metadata for a milestone. Award logic lives in the engine."""

    model_config = ConfigDict(frozen=True)

    id: MilestoneId
    name: str
    description: str
    icon: str
