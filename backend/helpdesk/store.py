import json
import logging
import threading
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from pydantic import TypeAdapter

from helpdesk.config import settings
from helpdesk.models.ticket import Ticket

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "seed.json"

_ticket_list = TypeAdapter(list[Ticket])


class TicketStore:
    """Session-wide, read-only ordered collection of tickets.

    Readers take a ``snapshot()`` (an immutable tuple) and never see a
    partially applied ``replace()``; each replace bumps ``version``.
    """

    def __init__(self, tickets: Iterable[Ticket] = ()):
        self._lock = threading.Lock()
        self._version = 0
        self._tickets: tuple[Ticket, ...] = ()
        self.replace(tickets)

    @staticmethod
    def _validate(tickets: tuple[Ticket, ...]) -> None:
        seen: set[str] = set()
        for ticket in tickets:
            if ticket.id in seen:
                raise ValueError(f"Duplicate ticket id: {ticket.id}")
            seen.add(ticket.id)

    def replace(self, tickets: Iterable[Ticket]) -> int:
        """Swap in a new collection and return the new version."""
        new_tickets = tuple(tickets)
        self._validate(new_tickets)
        with self._lock:
            self._tickets = new_tickets
            self._version += 1
            return self._version

    def snapshot(self) -> tuple[Ticket, ...]:
        return self._tickets

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._tickets)


def load_seed_tickets(path: Path | str | None = None) -> list[Ticket]:
    """Read tickets from a JSON seed file (a list of ticket objects)."""
    seed_file = Path(path) if path else DEFAULT_SEED_PATH
    with open(seed_file, encoding="utf-8") as f:
        data = json.load(f)
    tickets = _ticket_list.validate_python(data)
    logger.info("Loaded %d tickets from %s", len(tickets), seed_file)
    if not tickets:
        logger.warning("Seed file %s contains no tickets", seed_file)
    return tickets


@lru_cache
def get_store() -> TicketStore:
    """Process-wide store, built from ``settings.seed_file`` on first use."""
    return TicketStore(load_seed_tickets(settings.seed_file))
