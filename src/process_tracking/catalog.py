# This project was developed with assistance from AI tools.
"""Static stage and milestone catalogs.

Both catalogs are built once at import time and exposed as tuples plus
read-only mappings. Entries are frozen models; nothing here changes at
runtime.
"""

from types import MappingProxyType

from db.enums import MilestoneId, ProcessStageId

from .schemas.catalog import MilestoneDefinition, ProcessStage

PROCESS_STAGES: tuple[ProcessStage, ...] = (
    ProcessStage(
        id=ProcessStageId.ONBOARDING,
        display_name="Onboarding",
        display_name_alt="Registro",
        description="Account creation and initial setup.",
        order=1,
        next_step="Finish your profile and upload your identification to get started.",
    ),
    ProcessStage(
        id=ProcessStageId.DOCUMENT_COLLECTION,
        display_name="Document Collection",
        display_name_alt="Recolección de Documentos",
        description="Uploading identity documents and proof of address.",
        order=2,
        next_step="Upload the remaining required documents so analysis can begin.",
    ),
    ProcessStage(
        id=ProcessStageId.CREDIT_ANALYSIS,
        display_name="Credit Analysis",
        display_name_alt="Análisis de Crédito",
        description="Reviewing the credit report and identifying negative items.",
        order=3,
        next_step="Your specialist is reviewing your credit report for negative items.",
    ),
    ProcessStage(
        id=ProcessStageId.DISPUTE_PREPARATION,
        display_name="Dispute Preparation",
        display_name_alt="Preparación de Disputas",
        description="Drafting dispute letters for the identified items.",
        order=4,
        next_step="Review your dispute letters and send them to the bureaus.",
    ),
    ProcessStage(
        id=ProcessStageId.DISPUTES_SENT,
        display_name="Disputes Sent",
        display_name_alt="Disputas Enviadas",
        description="Dispute letters delivered to the credit bureaus.",
        order=5,
        next_step="Keep an eye on your mail for bureau correspondence.",
    ),
    ProcessStage(
        id=ProcessStageId.AWAITING_RESPONSE,
        display_name="Awaiting Response",
        display_name_alt="Esperando Respuesta",
        description="Waiting for the bureaus to respond (30 days).",
        order=6,
        next_step="Bureaus have 30 days to respond. Upload any letters you receive.",
    ),
    ProcessStage(
        id=ProcessStageId.REVIEW_RESULTS,
        display_name="Review Results",
        display_name_alt="Revisión de Resultados",
        description="Analysing bureau responses and planning the next round.",
        order=7,
        next_step="Review the bureau responses and plan the next dispute round.",
    ),
    ProcessStage(
        id=ProcessStageId.COMPLETED,
        display_name="Process Completed",
        display_name_alt="Proceso Completado",
        description="Credit repair goals reached.",
        order=8,
        next_step="No further action required. Keep monitoring your credit.",
    ),
)

STAGES_BY_ID: MappingProxyType[ProcessStageId, ProcessStage] = MappingProxyType(
    {stage.id: stage for stage in PROCESS_STAGES}
)

MILESTONES: tuple[MilestoneDefinition, ...] = (
    MilestoneDefinition(
        id=MilestoneId.FIRST_DOCUMENT,
        name="First Document",
        description="You uploaded your first document",
        icon="📄",
    ),
    MilestoneDefinition(
        id=MilestoneId.PROFILE_COMPLETE,
        name="Profile Complete",
        description="You completed your profile information",
        icon="👤",
    ),
    MilestoneDefinition(
        id=MilestoneId.FIRST_ITEM_IDENTIFIED,
        name="First Item Identified",
        description="The first negative item was identified",
        icon="🔍",
    ),
    MilestoneDefinition(
        id=MilestoneId.FIRST_DISPUTE_SENT,
        name="First Dispute Sent",
        description="You sent your first dispute letter",
        icon="✉️",
    ),
    MilestoneDefinition(
        id=MilestoneId.FIRST_ITEM_DELETED,
        name="First Item Deleted",
        description="You got your first negative item deleted!",
        icon="🎉",
    ),
    MilestoneDefinition(
        id=MilestoneId.SCORE_IMPROVED_50,
        name="Score +50 Points",
        description="Your score improved by 50 points or more",
        icon="📈",
    ),
    MilestoneDefinition(
        id=MilestoneId.SCORE_IMPROVED_100,
        name="Score +100 Points",
        description="Your score improved by 100 points or more!",
        icon="🚀",
    ),
    MilestoneDefinition(
        id=MilestoneId.FIVE_ITEMS_DELETED,
        name="5 Items Deleted",
        description="You have deleted 5 negative items",
        icon="⭐",
    ),
    MilestoneDefinition(
        id=MilestoneId.ALL_ITEMS_RESOLVED,
        name="All Items Resolved",
        description="All negative items have been resolved!",
        icon="🏆",
    ),
)

MILESTONES_BY_ID: MappingProxyType[MilestoneId, MilestoneDefinition] = MappingProxyType(
    {m.id: m for m in MILESTONES}
)


def get_stage(stage_id: ProcessStageId | str) -> ProcessStage:
    """Look up a stage by id. Raises ValueError for an unknown id."""
    return STAGES_BY_ID[ProcessStageId(stage_id)]


def get_milestone(milestone_id: MilestoneId | str) -> MilestoneDefinition:
    """Look up a milestone by id. Raises ValueError for an unknown id."""
    return MILESTONES_BY_ID[MilestoneId(milestone_id)]
