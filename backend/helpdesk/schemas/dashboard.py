from datetime import date

from pydantic import BaseModel, model_validator

from helpdesk.models.base import TicketStatus


class StatusSummary(BaseModel):
    counts: dict[TicketStatus, int]
    total: int

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_total(self):
        if self.total != sum(self.counts.values()):
            raise ValueError("total does not match the per-status counts")
        return self


class DailyActivity(BaseModel):
    day: date
    weekday: str
    count: int


class AssigneeCount(BaseModel):
    assignee: str
    count: int
