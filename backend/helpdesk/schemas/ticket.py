from datetime import datetime

from pydantic import BaseModel

from helpdesk.models.base import TicketPriority, TicketStatus


class TicketResponse(BaseModel):
    id: str
    title: str
    status: TicketStatus
    status_label: str
    status_style: str
    priority: TicketPriority
    priority_label: str
    priority_style: str
    category: str
    assignee: str
    assignee_label: str
    created_at: datetime
    updated_at: datetime


class AppliedFilter(BaseModel):
    search_text: str
    status: TicketStatus | None
    priority: TicketPriority | None


class TicketListResponse(BaseModel):
    items: list[TicketResponse]
    total: int
    filter: AppliedFilter
