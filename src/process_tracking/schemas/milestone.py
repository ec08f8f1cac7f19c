# This project was developed with assistance from AI tools.
"""Milestone check result schemas."""

from db.enums import MilestoneId
from pydantic import BaseModel, Field

from .catalog import MilestoneDefinition


class MilestoneFailure(BaseModel):
    """A milestone whose check could not complete during this run."""

    milestone_id: MilestoneId
    reason: str


class MilestoneCheckResult(BaseModel):
    """Outcome of one check-and-award pass for a client."""

    awarded: list[MilestoneDefinition] = Field(default_factory=list)
    failures: list[MilestoneFailure] = Field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return bool(self.failures)
