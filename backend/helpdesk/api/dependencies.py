from fastapi import Depends

from helpdesk.models.ticket import Ticket
from helpdesk.store import TicketStore, get_store


def get_tickets(store: TicketStore = Depends(get_store)) -> tuple[Ticket, ...]:
    """Consistent snapshot of the store for the duration of one request."""
    return store.snapshot()
