"""Aggregates over a ticket subset: status counts, priority shares, resolution
time, assignee leaderboard, daily activity and period-over-period trends.

Every function here is pure. Time-based aggregates are anchored at ``as_of``,
which defaults to the latest ``updated_at`` in the subset rather than the wall
clock, so the same subset always yields the same numbers.
"""

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from helpdesk.models.ticket import Ticket
from helpdesk.schemas.analytics import PriorityDistribution, ResolutionStats, TrendSummary
from helpdesk.schemas.dashboard import AssigneeCount, DailyActivity, StatusSummary
from helpdesk.services import label_service
from helpdesk.services.label_service import UnknownEnumValue


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _round_half_up(value: Decimal | float) -> int:
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _round_hours(value: float | None) -> float | None:
    """Round to one decimal place, half-up like the percentage shares."""
    if value is None:
        return None
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _increment(counts: dict, key) -> None:
    if key not in counts:
        raise UnknownEnumValue(key)
    counts[key] += 1


def _percentages(counts: dict, total: int) -> dict:
    """Integer shares of ``total``; the rounding residual goes to the largest bucket.

    ``counts`` must be ordered by precedence: on a tie for the largest bucket
    the first key wins.
    """
    if total == 0:
        return {key: 0 for key in counts}
    shares = {
        key: _round_half_up(Decimal(count) * 100 / Decimal(total))
        for key, count in counts.items()
    }
    residual = 100 - sum(shares.values())
    if residual:
        largest = max(counts, key=counts.__getitem__)
        shares[largest] += residual
    return shares


def _resolution_hours(ticket: Ticket) -> float:
    return (ticket.updated_at - ticket.created_at).total_seconds() / 3600


def _finished(tickets: Iterable[Ticket]) -> list[Ticket]:
    return [t for t in tickets if label_service.is_finished(t.status)]


def _average(values: Sequence[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


def _percent_change(current: float | None, previous: float | None) -> int | None:
    if current is None or not previous:
        return None
    return _round_half_up((current - previous) / previous * 100)


def reference_time(tickets: Iterable[Ticket]) -> datetime | None:
    """Latest ``updated_at`` in the subset, or None when it is empty."""
    return max((t.updated_at for t in tickets), default=None)


# ---------------------------------------------------------------------------
# Summary and distribution
# ---------------------------------------------------------------------------

def summarize(tickets: Iterable[Ticket]) -> StatusSummary:
    """Count tickets per status in a single pass."""
    counts = {s: 0 for s in label_service.statuses_by_workflow()}
    total = 0
    for ticket in tickets:
        _increment(counts, ticket.status)
        total += 1
    return StatusSummary(counts=counts, total=total)


def distribute_by_priority(tickets: Iterable[Ticket]) -> PriorityDistribution:
    """Per-priority counts and integer percentage shares.

    Shares are rounded half-up; the residual needed to reach exactly 100 is
    added to the priority with the most tickets (the more severe one on a
    tie). An empty subset yields all zeros.
    """
    counts = {p: 0 for p in label_service.priorities_by_severity()}
    for ticket in tickets:
        _increment(counts, ticket.priority)
    total = sum(counts.values())
    return PriorityDistribution(
        counts=counts,
        percentages=_percentages(counts, total),
        total=total,
    )


# ---------------------------------------------------------------------------
# Resolution time and assignees
# ---------------------------------------------------------------------------

def resolution_stats(tickets: Iterable[Ticket]) -> ResolutionStats:
    hours = [_resolution_hours(t) for t in _finished(tickets)]
    return ResolutionStats(
        finished=len(hours),
        average_hours=_round_hours(_average(hours)),
        fastest_hours=_round_hours(min(hours, default=None)),
        slowest_hours=_round_hours(max(hours, default=None)),
    )


def top_assignees(tickets: Iterable[Ticket], limit: int | None = None) -> list[AssigneeCount]:
    """Assignees ranked by finished tickets; unassigned tickets are skipped."""
    counter = Counter(t.assignee for t in _finished(tickets) if t.is_assigned)
    ranked = sorted(counter.items(), key=lambda item: (-item[1], item[0]))
    if limit is not None:
        ranked = ranked[:limit]
    return [AssigneeCount(assignee=name, count=count) for name, count in ranked]


# ---------------------------------------------------------------------------
# Time series
# ---------------------------------------------------------------------------

def daily_activity(
    tickets: Sequence[Ticket],
    days: int = 7,
    as_of: datetime | None = None,
) -> list[DailyActivity]:
    """Tickets created per calendar day for the ``days`` days ending at ``as_of``."""
    as_of = as_of or reference_time(tickets)
    if as_of is None or days <= 0:
        return []
    last_day = as_of.date()
    first_day = last_day - timedelta(days=days - 1)
    created = Counter(
        t.created_at.date() for t in tickets if first_day <= t.created_at.date() <= last_day
    )
    result = []
    for offset in range(days):
        day = first_day + timedelta(days=offset)
        result.append(
            DailyActivity(day=day, weekday=label_service.weekday_label(day), count=created[day])
        )
    return result


def trends(
    tickets: Sequence[Ticket],
    window_days: int = 30,
    as_of: datetime | None = None,
) -> TrendSummary:
    """Percent change of the last ``window_days`` against the window before it.

    Windows are half-open on the left: ``(end - window_days, end]``. Finished
    tickets are placed by ``updated_at``, created tickets by ``created_at``.
    """
    as_of = as_of or reference_time(tickets)
    if as_of is None:
        return TrendSummary(
            window_days=window_days,
            finished_change=None,
            resolution_time_change=None,
            created_change=None,
        )

    window = timedelta(days=window_days)
    current_start = as_of - window
    previous_start = current_start - window

    def in_current(ts: datetime) -> bool:
        return current_start < ts <= as_of

    def in_previous(ts: datetime) -> bool:
        return previous_start < ts <= current_start

    finished = _finished(tickets)
    finished_now = [t for t in finished if in_current(t.updated_at)]
    finished_before = [t for t in finished if in_previous(t.updated_at)]

    return TrendSummary(
        window_days=window_days,
        finished_change=_percent_change(len(finished_now), len(finished_before)),
        resolution_time_change=_percent_change(
            _average([_resolution_hours(t) for t in finished_now]),
            _average([_resolution_hours(t) for t in finished_before]),
        ),
        created_change=_percent_change(
            sum(1 for t in tickets if in_current(t.created_at)),
            sum(1 for t in tickets if in_previous(t.created_at)),
        ),
    )
