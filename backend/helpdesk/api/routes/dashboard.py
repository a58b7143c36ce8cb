from fastapi import APIRouter, Depends, Query

from helpdesk.api.dependencies import get_tickets
from helpdesk.config import settings
from helpdesk.models.ticket import Ticket
from helpdesk.schemas.dashboard import AssigneeCount, DailyActivity, StatusSummary
from helpdesk.services import analytics_service

router = APIRouter()


@router.get("/summary", response_model=StatusSummary)
async def get_summary(tickets: tuple[Ticket, ...] = Depends(get_tickets)):
    """Get ticket counts by status plus the total."""
    return analytics_service.summarize(tickets)


@router.get("/activity", response_model=list[DailyActivity])
async def get_activity(tickets: tuple[Ticket, ...] = Depends(get_tickets)):
    """Get tickets created per day over the last week of activity."""
    return analytics_service.daily_activity(tickets, days=settings.activity_days)


@router.get("/top-assignees", response_model=list[AssigneeCount])
async def get_top_assignees(
    limit: int = Query(settings.top_assignees_limit, ge=1, le=50),
    tickets: tuple[Ticket, ...] = Depends(get_tickets),
):
    """Get assignees ranked by resolved and closed tickets."""
    return analytics_service.top_assignees(tickets, limit=limit)
