from typing import Annotated

from mcp.types import ToolAnnotations
from pydantic import BaseModel, Field

from helpdesk.mcp.resolvers import resolve_ticket
from helpdesk.mcp.server import mcp
from helpdesk.models.ticket import Ticket
from helpdesk.models.view_filter import ViewFilter
from helpdesk.services import ticket_service
from helpdesk.store import get_store


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class TicketData(BaseModel):
    id: str = Field(description="Ticket id (e.g. TKT-1234)")
    title: str = Field(description="Ticket title")
    status: str = Field(description="Current status")
    status_label: str = Field(description="Display label of the status")
    priority: str = Field(description="Priority level")
    priority_label: str = Field(description="Display label of the priority")
    category: str = Field(description="Ticket category")
    assignee: str = Field(description="Assignee name, or the unassigned label")
    created_at: str = Field(description="ISO 8601 timestamp")
    updated_at: str = Field(description="ISO 8601 timestamp")


class TicketListData(BaseModel):
    total: int = Field(description="Number of matching tickets")
    tickets: list[TicketData] = Field(description="Matching tickets in store order")


class ListTicketsResult(BaseModel):
    summary: str = Field(description="Human-readable result message")
    data: TicketListData | None = Field(description="Matching tickets, or null on error")


class GetTicketResult(BaseModel):
    summary: str = Field(description="Human-readable result message")
    data: TicketData | None = Field(description="Ticket details, or null on error")


def _ticket_data(ticket: Ticket) -> TicketData:
    described = ticket_service.describe_ticket(ticket)
    return TicketData(
        id=described.id,
        title=described.title,
        status=described.status.value,
        status_label=described.status_label,
        priority=described.priority.value,
        priority_label=described.priority_label,
        category=described.category,
        assignee=described.assignee_label,
        created_at=described.created_at.isoformat(),
        updated_at=described.updated_at.isoformat(),
    )


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool(
    description="List tickets matching a search text, status and priority",
    annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False),
)
async def list_tickets(
    search: Annotated[str | None, Field(description="Case-insensitive substring of the title or ticket id")] = None,
    status: Annotated[str | None, Field(description="Status: new, in_progress, resolved, closed, or all")] = None,
    priority: Annotated[str | None, Field(description="Priority: critical, high, medium, low, or all")] = None,
) -> ListTicketsResult:
    """List tickets matching all given filters, in their original order."""
    try:
        view_filter = ViewFilter(search_text=search, status_filter=status, priority_filter=priority)
        tickets = ticket_service.filter_tickets(get_store().snapshot(), view_filter)
        return ListTicketsResult(
            summary=f"Found {len(tickets)} tickets" if tickets else "No tickets match the filters",
            data=TicketListData(
                total=len(tickets),
                tickets=[_ticket_data(t) for t in tickets],
            ),
        )
    except ValueError as e:
        return ListTicketsResult(summary=f"Error: {e}", data=None)
    except Exception as e:
        return ListTicketsResult(summary=f"Unexpected error: {e}", data=None)


@mcp.tool(
    description="Get a ticket by id",
    annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False),
)
async def get_ticket(
    ticket_id: Annotated[str, Field(description="Ticket id (e.g. TKT-1234)")],
) -> GetTicketResult:
    """Get a single ticket with its status and priority labels."""
    try:
        ticket = resolve_ticket(get_store().snapshot(), ticket_id)
        return GetTicketResult(
            summary=f"Ticket {ticket.id}: {ticket.title} [{ticket.status.value}]",
            data=_ticket_data(ticket),
        )
    except ValueError as e:
        return GetTicketResult(summary=f"Error: {e}", data=None)
    except Exception as e:
        return GetTicketResult(summary=f"Unexpected error: {e}", data=None)
