from fastapi import APIRouter

from helpdesk.schemas.meta import EnumLabel, LabelTable
from helpdesk.services import label_service

router = APIRouter()


@router.get("/labels", response_model=LabelTable)
async def get_labels():
    """Get display labels, style tokens and ranks for every status and priority."""
    return LabelTable(
        statuses=[
            EnumLabel(
                value=s.value,
                label=label_service.label_of(s),
                style=label_service.style_class_of(s),
                rank=label_service.workflow_rank(s),
            )
            for s in label_service.statuses_by_workflow()
        ],
        priorities=[
            EnumLabel(
                value=p.value,
                label=label_service.label_of(p),
                style=label_service.style_class_of(p),
                rank=label_service.severity_rank(p),
            )
            for p in label_service.priorities_by_severity()
        ],
    )
