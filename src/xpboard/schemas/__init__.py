# src/xpboard/schemas/__init__.py

"""Pydantic schemas for leaderboard data and view snapshots."""

from .common import CamelModel
from .leaderboard import (
    LeaderboardEntry,
    LeaderboardSnapshot,
    PodiumSlot,
    SummaryStats,
    ViewerProfile,
    ViewStatus,
)

__all__ = [
    # Common
    "CamelModel",
    # Leaderboard
    "LeaderboardEntry",
    "LeaderboardSnapshot",
    "PodiumSlot",
    "SummaryStats",
    "ViewerProfile",
    "ViewStatus",
]
