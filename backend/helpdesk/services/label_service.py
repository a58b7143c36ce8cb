"""Display labels, style tokens and ranks for ticket statuses and priorities."""

from datetime import date

from helpdesk.models.base import TicketPriority, TicketStatus


class UnknownEnumValue(ValueError):
    """Raised for a status or priority outside the defined enumerations."""

    def __init__(self, value):
        super().__init__(f"Unknown status or priority: {value!r}")
        self.value = value


_STATUS_LABELS = {
    TicketStatus.new: "Новая",
    TicketStatus.in_progress: "В работе",
    TicketStatus.resolved: "Решена",
    TicketStatus.closed: "Закрыта",
}

_PRIORITY_LABELS = {
    TicketPriority.critical: "Критический",
    TicketPriority.high: "Высокий",
    TicketPriority.medium: "Средний",
    TicketPriority.low: "Низкий",
}

_STATUS_STYLES = {
    TicketStatus.new: "status-new",
    TicketStatus.in_progress: "status-in-progress",
    TicketStatus.resolved: "status-resolved",
    TicketStatus.closed: "status-closed",
}

_PRIORITY_STYLES = {
    TicketPriority.critical: "priority-critical",
    TicketPriority.high: "priority-high",
    TicketPriority.medium: "priority-medium",
    TicketPriority.low: "priority-low",
}

_WORKFLOW_RANKS = {
    TicketStatus.new: 0,
    TicketStatus.in_progress: 1,
    TicketStatus.resolved: 2,
    TicketStatus.closed: 3,
}

_SEVERITY_RANKS = {
    TicketPriority.low: 1,
    TicketPriority.medium: 2,
    TicketPriority.high: 3,
    TicketPriority.critical: 4,
}

_FINISHED = frozenset({TicketStatus.resolved, TicketStatus.closed})

WEEKDAY_LABELS = ("Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс")


def _resolve(value) -> TicketStatus | TicketPriority:
    """Coerce a raw code to its enum member.

    Status and priority codes are disjoint, so a bare string is unambiguous.
    """
    if isinstance(value, (TicketStatus, TicketPriority)):
        return value
    if isinstance(value, str):
        for enum_cls in (TicketStatus, TicketPriority):
            try:
                return enum_cls(value)
            except ValueError:
                continue
    raise UnknownEnumValue(value)


def _lookup(value, status_table: dict, priority_table: dict):
    member = _resolve(value)
    table = status_table if isinstance(member, TicketStatus) else priority_table
    return table[member]


def label_of(value: TicketStatus | TicketPriority | str) -> str:
    return _lookup(value, _STATUS_LABELS, _PRIORITY_LABELS)


def style_class_of(value: TicketStatus | TicketPriority | str) -> str:
    return _lookup(value, _STATUS_STYLES, _PRIORITY_STYLES)


def severity_rank(priority: TicketPriority | str) -> int:
    """Rank priorities from low (1) to critical (4)."""
    member = _resolve(priority)
    if not isinstance(member, TicketPriority):
        raise UnknownEnumValue(priority)
    return _SEVERITY_RANKS[member]


def workflow_rank(status: TicketStatus | str) -> int:
    """Position of a status in the ticket lifecycle, new (0) to closed (3)."""
    member = _resolve(status)
    if not isinstance(member, TicketStatus):
        raise UnknownEnumValue(status)
    return _WORKFLOW_RANKS[member]


def is_finished(status: TicketStatus | str) -> bool:
    member = _resolve(status)
    if not isinstance(member, TicketStatus):
        raise UnknownEnumValue(status)
    return member in _FINISHED


def weekday_label(day: date) -> str:
    return WEEKDAY_LABELS[day.weekday()]


def statuses_by_workflow() -> list[TicketStatus]:
    return sorted(TicketStatus, key=_WORKFLOW_RANKS.__getitem__)


def priorities_by_severity() -> list[TicketPriority]:
    """Priorities from most to least severe, the order analytics lists them in."""
    return sorted(TicketPriority, key=_SEVERITY_RANKS.__getitem__, reverse=True)
