# tests/conftest.py

"""Pytest configuration and fixtures."""

import asyncio
from collections.abc import Sequence
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from xpboard.api.leaderboard import get_leaderboard_source
from xpboard.main import app
from xpboard.schemas.leaderboard import LeaderboardEntry


def make_entry(rank: int, xp: int, **overrides) -> LeaderboardEntry:
    """Build a leaderboard entry with sensible defaults."""
    fields = {
        "id": f"user-{rank}",
        "name": f"Player {rank}",
        "email": f"player{rank}@example.com",
        "level": 1,
        "xp": xp,
        "total_tasks_completed": 0,
        "rank": rank,
    }
    fields.update(overrides)
    return LeaderboardEntry(**fields)


class StaticSource:
    """Leaderboard source returning fixed entries, counting its calls."""

    def __init__(self, entries: Sequence[LeaderboardEntry]) -> None:
        self.entries = list(entries)
        self.calls = 0

    async def fetch_leaderboard(self) -> list[LeaderboardEntry]:
        self.calls += 1
        return list(self.entries)


class FailingSource:
    """Leaderboard source that always raises the given exception."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc
        self.calls = 0

    async def fetch_leaderboard(self) -> list[LeaderboardEntry]:
        self.calls += 1
        raise self.exc


class GatedSource:
    """
    Leaderboard source whose fetches block until released by the test.

    Each call takes the next queued result; a queued exception is raised.
    With ``honor_cancel=False`` a fetch ignores cancellation and keeps
    waiting for its gate, like a request that cannot be aborted.
    """

    def __init__(self, *results, honor_cancel: bool = True) -> None:
        self.results = list(results)
        self.honor_cancel = honor_cancel
        self.gates: list[asyncio.Event] = []
        self.cancelled: list[int] = []

    async def wait_started(self, count: int) -> None:
        """Yield to the event loop until ``count`` fetches are waiting."""
        while len(self.gates) < count:
            await asyncio.sleep(0)

    def release(self, index: int) -> None:
        self.gates[index].set()

    async def fetch_leaderboard(self) -> list[LeaderboardEntry]:
        index = len(self.gates)
        gate = asyncio.Event()
        self.gates.append(gate)
        while True:
            try:
                await gate.wait()
                break
            except asyncio.CancelledError:
                self.cancelled.append(index)
                if self.honor_cancel:
                    raise
        result = self.results[index]
        if isinstance(result, Exception):
            raise result
        return list(result)


@pytest.fixture
def four_entries() -> list[LeaderboardEntry]:
    """Four ranked entries: 500, 300, 100 and 50 XP."""
    return [
        make_entry(1, 500, total_tasks_completed=12),
        make_entry(2, 300, total_tasks_completed=7),
        make_entry(3, 100, total_tasks_completed=3, is_current_user=True),
        make_entry(4, 50, total_tasks_completed=1),
    ]


@pytest.fixture
def source_holder() -> dict:
    """Mutable slot the API tests fill with the source to inject."""
    return {"source": StaticSource([])}


@pytest.fixture
async def async_client(source_holder: dict) -> AsyncGenerator[AsyncClient, None]:
    """Fixture to provide an async test client for the API."""

    # Override the upstream client with whatever the test put in the holder
    def override_get_leaderboard_source():
        return source_holder["source"]

    app.dependency_overrides[get_leaderboard_source] = override_get_leaderboard_source

    transport = ASGITransport(app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    # Clean up the override after the test
    del app.dependency_overrides[get_leaderboard_source]
