from fastapi import APIRouter, Depends

from helpdesk.api.dependencies import get_tickets
from helpdesk.config import settings
from helpdesk.models.ticket import Ticket
from helpdesk.schemas.analytics import PriorityDistribution, ResolutionStats, TrendSummary
from helpdesk.services import analytics_service

router = APIRouter()


@router.get("/priority-distribution", response_model=PriorityDistribution)
async def get_priority_distribution(tickets: tuple[Ticket, ...] = Depends(get_tickets)):
    """Get the percentage share of each priority across all tickets."""
    return analytics_service.distribute_by_priority(tickets)


@router.get("/resolution-time", response_model=ResolutionStats)
async def get_resolution_time(tickets: tuple[Ticket, ...] = Depends(get_tickets)):
    """Get average, fastest and slowest resolution time in hours."""
    return analytics_service.resolution_stats(tickets)


@router.get("/trends", response_model=TrendSummary)
async def get_trends(tickets: tuple[Ticket, ...] = Depends(get_tickets)):
    return analytics_service.trends(tickets, window_days=settings.trend_window_days)
