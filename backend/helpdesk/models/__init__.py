from helpdesk.models.base import FILTER_WILDCARDS, UNASSIGNED, TicketPriority, TicketStatus
from helpdesk.models.ticket import Ticket
from helpdesk.models.view_filter import ViewFilter

__all__ = [
    "FILTER_WILDCARDS",
    "UNASSIGNED",
    "TicketPriority",
    "TicketStatus",
    "Ticket",
    "ViewFilter",
]
