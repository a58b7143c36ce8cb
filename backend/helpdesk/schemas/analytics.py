from pydantic import BaseModel

from helpdesk.models.base import TicketPriority


class PriorityDistribution(BaseModel):
    counts: dict[TicketPriority, int]
    percentages: dict[TicketPriority, int]
    total: int

    model_config = {"frozen": True}


class ResolutionStats(BaseModel):
    finished: int
    average_hours: float | None
    fastest_hours: float | None
    slowest_hours: float | None


class TrendSummary(BaseModel):
    window_days: int
    finished_change: int | None
    resolution_time_change: int | None
    created_change: int | None
