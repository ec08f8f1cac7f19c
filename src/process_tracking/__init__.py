# This project was developed with assistance from AI tools.
"""Client process tracking and milestone engine."""

__version__ = "0.1.0"

from .services.client import ClientNotFoundError
from .services.milestones import check_and_award_milestones, run_milestone_check
from .services.next_steps import recommend
from .services.progress import score_progress
from .services.stages import classify_stage
from .services.status import get_client_process_status, get_process_summary
from .services.timeline import get_client_timeline, record_timeline_event

__all__ = [
    "ClientNotFoundError",
    "check_and_award_milestones",
    "classify_stage",
    "get_client_process_status",
    "get_client_timeline",
    "get_process_summary",
    "recommend",
    "record_timeline_event",
    "run_milestone_check",
    "score_progress",
]
