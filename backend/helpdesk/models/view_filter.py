from pydantic import BaseModel, field_validator

from helpdesk.models.base import FILTER_WILDCARDS, TicketPriority, TicketStatus


class ViewFilter(BaseModel):
    """Query parameters for the ticket list.

    ``None`` in ``status_filter`` / ``priority_filter`` is the wildcard. The
    strings ``any`` and ``all`` are accepted on input and mapped to it.
    """

    search_text: str = ""
    status_filter: TicketStatus | None = None
    priority_filter: TicketPriority | None = None

    model_config = {"frozen": True}

    @field_validator("status_filter", "priority_filter", mode="before")
    @classmethod
    def wildcard_to_none(cls, value):
        if isinstance(value, str) and value.strip().lower() in FILTER_WILDCARDS:
            return None
        return value

    @field_validator("search_text", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value
