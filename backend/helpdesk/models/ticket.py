from pydantic import BaseModel, Field, NaiveDatetime, model_validator

from helpdesk.models.base import UNASSIGNED, TicketPriority, TicketStatus


class Ticket(BaseModel):
    id: str = Field(pattern=r"^TKT-\d+$")
    title: str
    status: TicketStatus
    priority: TicketPriority
    category: str
    assignee: str = UNASSIGNED
    created_at: NaiveDatetime
    updated_at: NaiveDatetime

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_timestamps(self):
        if self.updated_at < self.created_at:
            raise ValueError(f"{self.id}: updated_at is earlier than created_at")
        return self

    @property
    def is_assigned(self) -> bool:
        return self.assignee != UNASSIGNED
