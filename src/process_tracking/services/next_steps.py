# This project was developed with assistance from AI tools.
"""Next-steps advisor.

Pure function over the current stage and the aggregate counts. Gaps early
in the process (profile, documents) are listed before dispute actions, so
list order is also priority order.
"""

from db.enums import CreditItemStatus, DisputeStatus, DocumentCategory, ProcessStageId

from ..core.config import settings
from ..schemas.catalog import ProcessStage
from ..schemas.counts import AggregateCounts
from ..schemas.status import Recommendation, RecommendationPriority

HIGH = RecommendationPriority.HIGH
MEDIUM = RecommendationPriority.MEDIUM
LOW = RecommendationPriority.LOW


def recommend(stage: ProcessStage, counts: AggregateCounts) -> list[Recommendation]:
    """Return up to ``NEXT_STEPS_LIMIT`` recommendations, most urgent first.

    A client below the Completed stage always gets at least one step; when
    no specific gap applies, the stage's own next step is returned.
    """
    steps: list[Recommendation] = []
    documents = counts.documents_by_category

    onboarding = stage.id == ProcessStageId.ONBOARDING
    if onboarding:
        steps.append(
            Recommendation(
                priority=HIGH,
                action="Complete your profile",
                description="Add your personal information to continue",
            )
        )
        steps.append(
            Recommendation(
                priority=HIGH,
                action="Upload your identification",
                description="We need to verify your identity",
            )
        )

    # Onboarding already asks for identification.
    if not documents[DocumentCategory.ID] and not onboarding:
        steps.append(
            Recommendation(
                priority=HIGH,
                action="Upload an identity document",
                description="ID card, driver's license or passport",
            )
        )

    if not documents[DocumentCategory.PROOF_OF_ADDRESS]:
        steps.append(
            Recommendation(
                priority=HIGH,
                action="Upload proof of address",
                description="Utility bill or bank statement",
            )
        )

    if not documents[DocumentCategory.CREDIT_REPORT] and counts.total_items == 0:
        steps.append(
            Recommendation(
                priority=MEDIUM,
                action="Get your credit report",
                description="Visit annualcreditreport.com to get it for free",
            )
        )

    identified = counts.items_by_status[CreditItemStatus.IDENTIFIED]
    if identified > 0:
        steps.append(
            Recommendation(
                priority=HIGH,
                action=f"Create disputes for {identified} pending items",
                description="Start the dispute process for the identified items",
            )
        )

    drafts = counts.disputes_by_status[DisputeStatus.DRAFT]
    if drafts > 0:
        steps.append(
            Recommendation(
                priority=HIGH,
                action=f"Send {drafts} draft disputes",
                description="Review and send the pending dispute letters",
            )
        )

    active = counts.active_disputes
    if active > 0:
        steps.append(
            Recommendation(
                priority=LOW,
                action="Wait for the bureaus to respond",
                description=f"You have {active} active disputes. Responses are expected within 30 days.",
            )
        )

    if not steps and stage.id != ProcessStageId.COMPLETED:
        steps.append(Recommendation(priority=MEDIUM, action=stage.display_name, description=stage.next_step))

    return steps[: settings.NEXT_STEPS_LIMIT]
