# src/xpboard/schemas/leaderboard.py

"""Leaderboard schemas for friend XP rankings."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import ConfigDict, Field

from .common import CamelModel


class ViewStatus(str, Enum):
    """Lifecycle state of a leaderboard view."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    LOADED_WITH_FALLBACK = "loaded_with_fallback"


class LeaderboardEntry(CamelModel):
    """Single participant in a ranked leaderboard.

    Entries are trusted as ranked by the upstream authority: the sequence
    order is the ranking order and ``rank`` is never recomputed here.

    Attributes:
        id: Opaque participant identifier (wire name ``_id``)
        name: Display name
        email: Contact identifier, unused by ranking
        level: Participant level
        xp: Experience points, the sole ranking key
        total_tasks_completed: Number of completed tasks
        avatar: Optional image reference
        is_current_user: Whether this entry belongs to the viewer
        rank: Position in leaderboard (1-indexed)
    """

    # Upstream ids may arrive as numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str = Field(..., alias="_id", description="Opaque participant id")
    name: str
    email: str = ""
    level: int = Field(0, ge=0)
    xp: int = Field(0, ge=0, description="Experience points")
    total_tasks_completed: int = Field(0, ge=0)
    avatar: str | None = None
    is_current_user: bool = False
    rank: int = Field(..., ge=1, description="Position in leaderboard (1-indexed)")

    @property
    def initial(self) -> str:
        """Letter shown in place of a missing avatar."""
        return self.name[:1].upper()


class ViewerProfile(CamelModel):
    """Last-known profile of the person viewing the leaderboard.

    Every field is optional; missing values fall back to zero/empty when
    a fallback entry has to be synthesized.
    """

    id: str | None = None
    name: str | None = None
    email: str | None = None
    level: int | None = Field(None, ge=0)
    xp: int | None = Field(None, ge=0)
    total_tasks_completed: int | None = Field(None, ge=0)
    avatar: str | None = None


class SummaryStats(CamelModel):
    """Totals over every participant of a leaderboard.

    Attributes:
        participant_count: Number of entries
        combined_xp: Sum of xp over all entries
        combined_tasks: Sum of completed tasks over all entries
    """

    participant_count: int = Field(0, ge=0)
    combined_xp: int = Field(0, ge=0)
    combined_tasks: int = Field(0, ge=0)


class PodiumSlot(CamelModel):
    """A podium entry together with its medal position (1, 2 or 3)."""

    position: Literal[1, 2, 3]
    entry: LeaderboardEntry


class LeaderboardSnapshot(CamelModel):
    """Everything a rendering layer needs for one render cycle.

    All derived fields are computed from the same ``entries`` tuple.
    """

    status: ViewStatus
    loading: bool
    error: str | None = None
    entries: tuple[LeaderboardEntry, ...] = ()
    podium: tuple[LeaderboardEntry, ...] = ()
    podium_layout: tuple[PodiumSlot, ...] = ()
    remainder: tuple[LeaderboardEntry, ...] = ()
    stats: SummaryStats = Field(default_factory=SummaryStats)
    current_user: LeaderboardEntry | None = None
