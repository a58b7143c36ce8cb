from mcp.types import ToolAnnotations
from pydantic import BaseModel, Field

from helpdesk.mcp.server import mcp
from helpdesk.services import analytics_service, label_service
from helpdesk.store import get_store


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

# -- Inner models --


class EnumLabelData(BaseModel):
    value: str = Field(description="Code used in filters")
    label: str = Field(description="Display label")


class SystemInfoData(BaseModel):
    statuses: list[EnumLabelData] = Field(description="Valid ticket statuses, in workflow order")
    priorities: list[EnumLabelData] = Field(description="Valid priorities, most severe first")
    ticket_id_format: str = Field(description="Ticket id format pattern")
    ticket_count: int = Field(description="Number of tickets in the store")


class StatusCountData(BaseModel):
    status: str = Field(description="Ticket status")
    label: str = Field(description="Display label of the status")
    count: int = Field(description="Number of tickets with this status")


class DashboardData(BaseModel):
    total_tickets: int = Field(description="Total number of tickets")
    by_status: list[StatusCountData] = Field(description="Ticket counts by status")


class PriorityShareData(BaseModel):
    priority: str = Field(description="Priority level")
    label: str = Field(description="Display label of the priority")
    count: int = Field(description="Number of tickets with this priority")
    percentage: int = Field(description="Share of all tickets, in percent")


class PriorityDistributionData(BaseModel):
    total_tickets: int = Field(description="Total number of tickets")
    by_priority: list[PriorityShareData] = Field(description="Shares by priority, most severe first")


class ResolutionStatsData(BaseModel):
    finished: int = Field(description="Number of resolved or closed tickets")
    average_hours: float | None = Field(description="Average resolution time in hours")
    fastest_hours: float | None = Field(description="Fastest resolution time in hours")
    slowest_hours: float | None = Field(description="Slowest resolution time in hours")


# -- Wrapper (result) models --


class SystemInfoResult(BaseModel):
    summary: str = Field(description="Human-readable result message")
    data: SystemInfoData = Field(description="System configuration")


class DashboardResult(BaseModel):
    summary: str = Field(description="Human-readable result message")
    data: DashboardData | None = Field(description="Dashboard counts, or null on error")


class PriorityDistributionResult(BaseModel):
    summary: str = Field(description="Human-readable result message")
    data: PriorityDistributionData | None = Field(description="Priority shares, or null on error")


class ResolutionStatsResult(BaseModel):
    summary: str = Field(description="Human-readable result message")
    data: ResolutionStatsData | None = Field(description="Resolution time, or null on error")


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool(
    description="Get available statuses, priorities and their display labels",
    annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False),
)
async def get_system_info() -> SystemInfoResult:
    """Get available statuses, priorities and their display labels.

    Use it to discover valid filter values before listing tickets.
    """
    return SystemInfoResult(
        summary="System configuration",
        data=SystemInfoData(
            statuses=[
                EnumLabelData(value=s.value, label=label_service.label_of(s))
                for s in label_service.statuses_by_workflow()
            ],
            priorities=[
                EnumLabelData(value=p.value, label=label_service.label_of(p))
                for p in label_service.priorities_by_severity()
            ],
            ticket_id_format="TKT-<n>",
            ticket_count=len(get_store()),
        ),
    )


@mcp.tool(
    description="Get ticket counts by status",
    annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False),
)
async def get_dashboard_summary() -> DashboardResult:
    """Get ticket counts by status and the total."""
    try:
        summary = analytics_service.summarize(get_store().snapshot())
        return DashboardResult(
            summary=f"{summary.total} total tickets",
            data=DashboardData(
                total_tickets=summary.total,
                by_status=[
                    StatusCountData(status=s.value, label=label_service.label_of(s), count=c)
                    for s, c in summary.counts.items()
                ],
            ),
        )
    except ValueError as e:
        return DashboardResult(summary=f"Error: {e}", data=None)
    except Exception as e:
        return DashboardResult(summary=f"Unexpected error: {e}", data=None)


@mcp.tool(
    description="Get the percentage share of tickets per priority",
    annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False),
)
async def get_priority_distribution() -> PriorityDistributionResult:
    """Get ticket counts and percentage shares per priority."""
    try:
        distribution = analytics_service.distribute_by_priority(get_store().snapshot())
        return PriorityDistributionResult(
            summary=f"Priority distribution over {distribution.total} tickets",
            data=PriorityDistributionData(
                total_tickets=distribution.total,
                by_priority=[
                    PriorityShareData(
                        priority=p.value,
                        label=label_service.label_of(p),
                        count=c,
                        percentage=distribution.percentages[p],
                    )
                    for p, c in distribution.counts.items()
                ],
            ),
        )
    except ValueError as e:
        return PriorityDistributionResult(summary=f"Error: {e}", data=None)
    except Exception as e:
        return PriorityDistributionResult(summary=f"Unexpected error: {e}", data=None)


@mcp.tool(
    description="Get average, fastest and slowest resolution time in hours",
    annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False),
)
async def get_resolution_stats() -> ResolutionStatsResult:
    try:
        stats = analytics_service.resolution_stats(get_store().snapshot())
        if stats.average_hours is None:
            summary = "No resolved tickets yet"
        else:
            summary = f"Average resolution time {stats.average_hours} h over {stats.finished} tickets"
        return ResolutionStatsResult(
            summary=summary,
            data=ResolutionStatsData(**stats.model_dump()),
        )
    except ValueError as e:
        return ResolutionStatsResult(summary=f"Error: {e}", data=None)
    except Exception as e:
        return ResolutionStatsResult(summary=f"Unexpected error: {e}", data=None)
