import json

import pytest
from pydantic import ValidationError

from helpdesk.store import TicketStore, load_seed_tickets
from tests.conftest import make_ticket


def test_seed_file_loads_five_tickets(seed_tickets):
    assert [t.id for t in seed_tickets] == [
        "TKT-1234",
        "TKT-1235",
        "TKT-1236",
        "TKT-1237",
        "TKT-1238",
    ]


def test_store_keeps_insertion_order():
    tickets = [make_ticket(3), make_ticket(1), make_ticket(2)]
    store = TicketStore(tickets)
    assert [t.id for t in store.snapshot()] == ["TKT-3", "TKT-1", "TKT-2"]
    assert len(store) == 3


def test_store_rejects_duplicate_ids():
    with pytest.raises(ValueError, match="Duplicate ticket id: TKT-1"):
        TicketStore([make_ticket(1), make_ticket(1, title="Again")])


def test_replace_swaps_snapshot_and_bumps_version():
    store = TicketStore([make_ticket(1)])
    before = store.snapshot()
    version = store.version

    new_version = store.replace([make_ticket(2), make_ticket(3)])

    assert new_version == version + 1 == store.version
    assert [t.id for t in before] == ["TKT-1"]
    assert [t.id for t in store.snapshot()] == ["TKT-2", "TKT-3"]


def test_failed_replace_leaves_store_untouched():
    store = TicketStore([make_ticket(1)])
    version = store.version
    with pytest.raises(ValueError):
        store.replace([make_ticket(2), make_ticket(2)])
    assert store.version == version
    assert [t.id for t in store.snapshot()] == ["TKT-1"]


def test_load_seed_from_custom_file(tmp_path):
    seed_file = tmp_path / "tickets.json"
    seed_file.write_text(
        json.dumps(
            [
                {
                    "id": "TKT-7",
                    "title": "VPN drops every hour",
                    "status": "closed",
                    "priority": "high",
                    "category": "Network",
                    "created_at": "2024-10-01T08:00:00",
                    "updated_at": "2024-10-02T08:00:00",
                }
            ]
        ),
        encoding="utf-8",
    )
    tickets = load_seed_tickets(seed_file)
    assert len(tickets) == 1
    assert tickets[0].assignee == "unassigned"


def test_load_seed_rejects_invalid_ticket(tmp_path):
    seed_file = tmp_path / "tickets.json"
    seed_file.write_text(
        json.dumps(
            [
                {
                    "id": "TKT-8",
                    "title": "Clock skew",
                    "status": "new",
                    "priority": "low",
                    "category": "Infra",
                    "created_at": "2024-10-02T08:00:00",
                    "updated_at": "2024-10-01T08:00:00",
                }
            ]
        ),
        encoding="utf-8",
    )
    with pytest.raises(ValidationError):
        load_seed_tickets(seed_file)


def test_load_empty_seed(tmp_path):
    seed_file = tmp_path / "empty.json"
    seed_file.write_text("[]", encoding="utf-8")
    assert load_seed_tickets(seed_file) == []


def test_load_seed_rejects_mixed_timezones(tmp_path):
    seed_file = tmp_path / "tickets.json"
    seed_file.write_text(
        json.dumps(
            [
                {
                    "id": "TKT-9",
                    "title": "Local time ticket",
                    "status": "new",
                    "priority": "low",
                    "category": "Infra",
                    "created_at": "2024-10-01T08:00:00",
                    "updated_at": "2024-10-01T08:00:00",
                },
                {
                    "id": "TKT-10",
                    "title": "UTC ticket",
                    "status": "resolved",
                    "priority": "high",
                    "category": "Infra",
                    "created_at": "2024-10-01T08:00:00Z",
                    "updated_at": "2024-10-02T08:00:00Z",
                },
            ]
        ),
        encoding="utf-8",
    )
    with pytest.raises(ValidationError):
        load_seed_tickets(seed_file)
