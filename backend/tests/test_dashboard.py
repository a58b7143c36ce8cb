import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------


async def test_summary(client: AsyncClient):
    response = await client.get("/api/v1/dashboard/summary")
    assert response.status_code == 200
    assert response.json() == {
        "counts": {"new": 2, "in_progress": 2, "resolved": 1, "closed": 0},
        "total": 5,
    }


async def test_summary_empty_store(empty_client: AsyncClient):
    response = await empty_client.get("/api/v1/dashboard/summary")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 0
    assert sum(data["counts"].values()) == 0


async def test_activity(client: AsyncClient):
    response = await client.get("/api/v1/dashboard/activity")
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 7
    assert data[-1] == {"day": "2024-11-28", "weekday": "Чт", "count": 2}
    assert sum(day["count"] for day in data) == 5


async def test_activity_empty_store(empty_client: AsyncClient):
    response = await empty_client.get("/api/v1/dashboard/activity")
    assert response.status_code == 200
    assert response.json() == []


async def test_top_assignees(client: AsyncClient):
    response = await client.get("/api/v1/dashboard/top-assignees")
    assert response.status_code == 200
    assert response.json() == [{"assignee": "Мария Сидорова", "count": 1}]


async def test_top_assignees_rejects_bad_limit(client: AsyncClient):
    response = await client.get("/api/v1/dashboard/top-assignees", params={"limit": 0})
    assert response.status_code == 422


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------


async def test_priority_distribution(client: AsyncClient):
    response = await client.get("/api/v1/analytics/priority-distribution")
    assert response.status_code == 200

    data = response.json()
    assert data["total"] == 5
    assert data["percentages"] == {"critical": 20, "high": 40, "medium": 20, "low": 20}
    assert list(data["counts"]) == ["critical", "high", "medium", "low"]


async def test_priority_distribution_empty_store(empty_client: AsyncClient):
    response = await empty_client.get("/api/v1/analytics/priority-distribution")
    assert response.status_code == 200
    assert response.json()["percentages"] == {"critical": 0, "high": 0, "medium": 0, "low": 0}


async def test_resolution_time(client: AsyncClient):
    response = await client.get("/api/v1/analytics/resolution-time")
    assert response.status_code == 200
    assert response.json() == {
        "finished": 1,
        "average_hours": 18.5,
        "fastest_hours": 18.5,
        "slowest_hours": 18.5,
    }


async def test_trends(client: AsyncClient):
    response = await client.get("/api/v1/analytics/trends")
    assert response.status_code == 200
    assert response.json() == {
        "window_days": 30,
        "finished_change": None,
        "resolution_time_change": None,
        "created_change": None,
    }


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------


async def test_labels(client: AsyncClient):
    response = await client.get("/api/v1/meta/labels")
    assert response.status_code == 200

    data = response.json()
    assert [s["value"] for s in data["statuses"]] == ["new", "in_progress", "resolved", "closed"]
    assert [p["value"] for p in data["priorities"]] == ["critical", "high", "medium", "low"]
    assert data["statuses"][0] == {
        "value": "new",
        "label": "Новая",
        "style": "status-new",
        "rank": 0,
    }
    assert data["priorities"][0]["rank"] == 4
