import enum


class TicketStatus(str, enum.Enum):
    new = "new"
    in_progress = "in_progress"
    resolved = "resolved"
    closed = "closed"


class TicketPriority(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


# Filter values that mean "match every status/priority"
FILTER_WILDCARDS = frozenset({"any", "all", ""})

UNASSIGNED = "unassigned"
