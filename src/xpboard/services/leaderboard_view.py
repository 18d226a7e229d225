# src/xpboard/services/leaderboard_view.py

"""State machine behind a friends leaderboard view.

A view moves between four states:

    idle -> loading -> loaded
                    -> loaded_with_fallback

Activation, an explicit refresh or a change of viewer identity sends it
back to ``loading``. Fetch failures are never raised to the caller; they
become ``loaded_with_fallback`` with the viewer alone at rank 1.

Only the most recent trigger may land. Each trigger bumps a generation
counter and cancels the previous in-flight fetch, and a result belonging
to an older generation is dropped on arrival.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Protocol

from xpboard.exceptions import LeaderboardUnavailableError
from xpboard.ranking import aggregate, arrange_podium, find_current_user, partition
from xpboard.schemas.leaderboard import (
    LeaderboardEntry,
    LeaderboardSnapshot,
    ViewerProfile,
    ViewStatus,
)
from xpboard.services.fallback import FALLBACK_ERROR_MESSAGE, fallback_leaderboard

logger = logging.getLogger(__name__)


class LeaderboardSource(Protocol):
    """Anything that can fetch a ranked leaderboard."""

    async def fetch_leaderboard(self) -> Sequence[LeaderboardEntry]: ...


def viewer_key(viewer: ViewerProfile | None) -> str | None:
    """Identity key of a viewer; a change of key triggers a reload."""
    return viewer.id if viewer is not None else None


def _retrieve_outcome(fetch: asyncio.Future) -> None:
    """Mark the outcome as read so dropped stale failures are not reported."""
    if not fetch.cancelled():
        fetch.exception()


def build_snapshot(
    status: ViewStatus,
    entries: tuple[LeaderboardEntry, ...],
    error: str | None = None,
) -> LeaderboardSnapshot:
    """Derive every render output from a single ranked tuple."""
    podium, remainder = partition(entries)
    return LeaderboardSnapshot(
        status=status,
        loading=status == ViewStatus.LOADING,
        error=error,
        entries=entries,
        podium=podium,
        podium_layout=tuple(arrange_podium(podium)),
        remainder=remainder,
        stats=aggregate(entries),
        current_user=find_current_user(entries),
    )


class LeaderboardView:
    """
    Owns the ranked sequence shown by one leaderboard view.

    The sequence is replaced wholesale on every load and never mutated in
    place; ``snapshot()`` always reflects exactly one load.
    """

    def __init__(
        self,
        source: LeaderboardSource,
        viewer: ViewerProfile | None = None,
    ) -> None:
        self._source = source
        self._viewer = viewer
        self._status = ViewStatus.IDLE
        self._entries: tuple[LeaderboardEntry, ...] = ()
        self._error: str | None = None
        self._generation = 0
        self._inflight: asyncio.Future | None = None
        self._snapshot = build_snapshot(self._status, self._entries)

    @property
    def status(self) -> ViewStatus:
        return self._status

    @property
    def entries(self) -> tuple[LeaderboardEntry, ...]:
        return self._entries

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def viewer(self) -> ViewerProfile | None:
        return self._viewer

    @property
    def loading(self) -> bool:
        return self._status == ViewStatus.LOADING

    def snapshot(self) -> LeaderboardSnapshot:
        """The render outputs for the current state."""
        return self._snapshot

    async def activate(self) -> LeaderboardSnapshot:
        """Called when the view becomes active."""
        return await self._load(trigger="activate")

    async def refresh(self) -> LeaderboardSnapshot:
        """Explicit user-requested reload."""
        return await self._load(trigger="refresh")

    async def set_viewer(self, viewer: ViewerProfile | None) -> LeaderboardSnapshot:
        """
        Switch the viewer. Reloads only when the viewer identity changes;
        otherwise the new profile is just kept for fallback synthesis.
        """
        changed = viewer_key(viewer) != viewer_key(self._viewer)
        self._viewer = viewer
        if not changed:
            return self._snapshot
        return await self._load(trigger="viewer_changed")

    def _transition(
        self,
        status: ViewStatus,
        entries: tuple[LeaderboardEntry, ...],
        error: str | None = None,
    ) -> None:
        self._status = status
        self._entries = entries
        self._error = error
        self._snapshot = build_snapshot(status, entries, error)

    async def _load(self, trigger: str) -> LeaderboardSnapshot:
        self._generation += 1
        generation = self._generation

        if self._inflight is not None and not self._inflight.done():
            logger.debug(
                "Cancelling superseded leaderboard fetch",
                extra={"generation": generation - 1, "trigger": trigger},
            )
            self._inflight.cancel()

        # Previous data is discarded; loading shows no stale content
        self._transition(ViewStatus.LOADING, ())

        fetch = asyncio.ensure_future(self._source.fetch_leaderboard())
        fetch.add_done_callback(_retrieve_outcome)
        self._inflight = fetch
        logger.debug(
            "Leaderboard fetch started",
            extra={"generation": generation, "trigger": trigger},
        )

        try:
            # wait() does not raise when the fetch itself is cancelled
            await asyncio.wait({fetch})
        except asyncio.CancelledError:
            fetch.cancel()
            raise

        if generation != self._generation:
            logger.debug(
                "Discarding stale leaderboard result",
                extra={"generation": generation, "latest": self._generation},
            )
            return self._snapshot

        self._inflight = None
        try:
            # A fetch cancelled from inside the source is a failure like any other
            if fetch.cancelled():
                raise LeaderboardUnavailableError("fetch was cancelled")
            entries = tuple(fetch.result())
        except Exception as e:
            logger.warning(
                "Leaderboard fetch failed, showing fallback: %s",
                e,
                extra={"generation": generation, "viewer_id": viewer_key(self._viewer)},
                exc_info=True,
            )
            self._transition(
                ViewStatus.LOADED_WITH_FALLBACK,
                fallback_leaderboard(self._viewer),
                FALLBACK_ERROR_MESSAGE,
            )
        else:
            logger.info(
                "Leaderboard loaded with %d entries",
                len(entries),
                extra={"generation": generation, "entry_count": len(entries)},
            )
            self._transition(ViewStatus.LOADED, entries)

        return self._snapshot
