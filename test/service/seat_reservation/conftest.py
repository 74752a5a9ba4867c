"""
Pytest configuration for seat reservation tests.

FakeClock lets tests move time forward instead of sleeping past hold timeouts.
"""

from collections.abc import Callable

import pytest

from src.service.seat_reservation.domain.value_object import Venue
from src.service.seat_reservation.driven_adapter.in_memory_ticket_service import (
    InMemoryTicketService,
)


class FakeClock:
    def __init__(self, start_ms: float = 1_000.0) -> None:
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_ticket_service(fake_clock: FakeClock) -> Callable[..., InMemoryTicketService]:
    """Build an engine on the fake clock: make_ticket_service(rows, cols, max_hold_duration_ms)"""

    def _make(
        rows: int = 20, cols: int = 25, max_hold_duration_ms: int = 300
    ) -> InMemoryTicketService:
        return InMemoryTicketService(
            venue=Venue(rows=rows, cols=cols),
            max_hold_duration_ms=max_hold_duration_ms,
            clock=fake_clock,
        )

    return _make
