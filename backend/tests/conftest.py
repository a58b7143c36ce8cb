from collections.abc import AsyncGenerator
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

import helpdesk.mcp.tools.info as mcp_info
import helpdesk.mcp.tools.tickets as mcp_tickets
from helpdesk.main import create_app
from helpdesk.models import UNASSIGNED, Ticket, TicketPriority, TicketStatus
from helpdesk.store import TicketStore, get_store, load_seed_tickets


@pytest.fixture
def seed_tickets() -> list[Ticket]:
    """The five packaged seed tickets, TKT-1234..TKT-1238."""
    return load_seed_tickets()


@pytest.fixture
def store(seed_tickets: list[Ticket]) -> TicketStore:
    return TicketStore(seed_tickets)


@pytest.fixture
def empty_store() -> TicketStore:
    return TicketStore()


def _client_for(store: TicketStore) -> AsyncClient:
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(store: TicketStore) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client wired to the app with the seed store."""
    async with _client_for(store) as ac:
        yield ac


@pytest.fixture
async def empty_client(empty_store: TicketStore) -> AsyncGenerator[AsyncClient, None]:
    async with _client_for(empty_store) as ac:
        yield ac


@pytest.fixture
def mcp_store(store: TicketStore, monkeypatch: pytest.MonkeyPatch) -> TicketStore:
    """Point the MCP tools at the seed store instead of the process-wide one."""
    monkeypatch.setattr(mcp_tickets, "get_store", lambda: store)
    monkeypatch.setattr(mcp_info, "get_store", lambda: store)
    return store


def make_ticket(number: int = 1, **overrides) -> Ticket:
    """Build a valid ticket; override any field by keyword."""
    base = {
        "id": f"TKT-{number}",
        "title": f"Ticket {number}",
        "status": TicketStatus.new,
        "priority": TicketPriority.medium,
        "category": "Технические",
        "assignee": UNASSIGNED,
        "created_at": datetime(2024, 11, 1, 9, 0),
        "updated_at": datetime(2024, 11, 1, 9, 0),
    }
    base.update(overrides)
    return Ticket(**base)
