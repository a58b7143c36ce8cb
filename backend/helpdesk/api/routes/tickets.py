from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError

from helpdesk.api.dependencies import get_tickets
from helpdesk.models.ticket import Ticket
from helpdesk.models.view_filter import ViewFilter
from helpdesk.schemas.ticket import AppliedFilter, TicketListResponse, TicketResponse
from helpdesk.services import ticket_service

router = APIRouter()


def get_view_filter(
    q: str = Query("", description="Substring of the ticket title or id"),
    status_filter: str | None = Query(None, alias="status", description="Status, or 'all'"),
    priority_filter: str | None = Query(None, alias="priority", description="Priority, or 'all'"),
) -> ViewFilter:
    try:
        return ViewFilter(
            search_text=q,
            status_filter=status_filter,
            priority_filter=priority_filter,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[err["msg"] for err in e.errors()],
        )


@router.get("/", response_model=TicketListResponse)
async def list_tickets(
    view_filter: ViewFilter = Depends(get_view_filter),
    tickets: tuple[Ticket, ...] = Depends(get_tickets),
):
    """List tickets matching the search text, status and priority filters, in store order."""
    items = ticket_service.filter_tickets(tickets, view_filter)
    return TicketListResponse(
        items=[ticket_service.describe_ticket(t) for t in items],
        total=len(items),
        filter=AppliedFilter(
            search_text=view_filter.search_text,
            status=view_filter.status_filter,
            priority=view_filter.priority_filter,
        ),
    )


@router.get("/{ticket_id}", response_model=TicketResponse)
async def get_ticket(
    ticket_id: str,
    tickets: tuple[Ticket, ...] = Depends(get_tickets),
):
    """Get a single ticket by its id (e.g. TKT-1234)."""
    ticket = ticket_service.get_ticket(tickets, ticket_id)
    return ticket_service.describe_ticket(ticket)
