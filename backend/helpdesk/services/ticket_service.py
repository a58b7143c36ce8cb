from collections.abc import Iterable, Sequence

from fastapi import HTTPException, status

from helpdesk.config import settings
from helpdesk.models.ticket import Ticket
from helpdesk.models.view_filter import ViewFilter
from helpdesk.schemas.ticket import TicketResponse
from helpdesk.services import label_service


# ---------------------------------------------------------------------------
# Match predicates
# ---------------------------------------------------------------------------

def matches_text(ticket: Ticket, search_text: str) -> bool:
    """Case-insensitive substring match against the title or the ticket id."""
    if not search_text:
        return True
    needle = search_text.casefold()
    return needle in ticket.title.casefold() or needle in ticket.id.casefold()


def matches_status(ticket: Ticket, view_filter: ViewFilter) -> bool:
    return view_filter.status_filter is None or ticket.status == view_filter.status_filter


def matches_priority(ticket: Ticket, view_filter: ViewFilter) -> bool:
    return view_filter.priority_filter is None or ticket.priority == view_filter.priority_filter


def matches(ticket: Ticket, view_filter: ViewFilter) -> bool:
    return (
        matches_text(ticket, view_filter.search_text)
        and matches_status(ticket, view_filter)
        and matches_priority(ticket, view_filter)
    )


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def filter_tickets(tickets: Iterable[Ticket], view_filter: ViewFilter) -> list[Ticket]:
    """Return the tickets matching ``view_filter``, keeping their input order."""
    return [ticket for ticket in tickets if matches(ticket, view_filter)]


def find_ticket(tickets: Sequence[Ticket], ticket_id: str) -> Ticket | None:
    """Look up a ticket by id (e.g. 'TKT-1234'), ignoring case."""
    wanted = ticket_id.strip().upper()
    return next((t for t in tickets if t.id == wanted), None)


def get_ticket(tickets: Sequence[Ticket], ticket_id: str) -> Ticket:
    ticket = find_ticket(tickets, ticket_id)
    if ticket is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Ticket not found",
        )
    return ticket


def describe_ticket(ticket: Ticket) -> TicketResponse:
    """Attach display labels and style tokens to a ticket."""
    return TicketResponse(
        id=ticket.id,
        title=ticket.title,
        status=ticket.status,
        status_label=label_service.label_of(ticket.status),
        status_style=label_service.style_class_of(ticket.status),
        priority=ticket.priority,
        priority_label=label_service.label_of(ticket.priority),
        priority_style=label_service.style_class_of(ticket.priority),
        category=ticket.category,
        assignee=ticket.assignee,
        assignee_label=ticket.assignee if ticket.is_assigned else settings.unassigned_label,
        created_at=ticket.created_at,
        updated_at=ticket.updated_at,
    )
