"""Argument resolvers for MCP tool parameters."""

from collections.abc import Sequence

from helpdesk.models.ticket import Ticket
from helpdesk.services import ticket_service


def resolve_ticket(tickets: Sequence[Ticket], identifier: str) -> Ticket:
    """Resolve a ticket id such as ``TKT-1234`` (or just ``1234``) to a ticket.

    Raises:
        ValueError: If no ticket has that id.
    """
    identifier = identifier.strip()
    if identifier.isdigit():
        identifier = f"TKT-{identifier}"
    ticket = ticket_service.find_ticket(tickets, identifier)
    if ticket is None:
        raise ValueError(f"Ticket not found: {identifier}")
    return ticket
