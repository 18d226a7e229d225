# src/xpboard/services/fallback.py

"""Synthesize a stand-in leaderboard when ranking data is unavailable."""

from __future__ import annotations

from xpboard.schemas.leaderboard import LeaderboardEntry, ViewerProfile

# User-visible advisory shown next to the fallback entry
FALLBACK_ERROR_MESSAGE = "Failed to load leaderboard. Please try again."


def synthesize_fallback_entry(viewer: ViewerProfile | None) -> LeaderboardEntry:
    """
    Build the single entry that represents the viewer at rank 1.

    Each profile field is copied when known; unknown fields become an
    empty string (text) or zero (counters). The result is always flagged
    as the current user.
    """
    profile = viewer or ViewerProfile()
    return LeaderboardEntry(
        id=profile.id or "",
        name=profile.name or "",
        email=profile.email or "",
        level=profile.level or 0,
        xp=profile.xp or 0,
        total_tasks_completed=profile.total_tasks_completed or 0,
        avatar=profile.avatar,
        is_current_user=True,
        rank=1,
    )


def fallback_leaderboard(
    viewer: ViewerProfile | None,
) -> tuple[LeaderboardEntry, ...]:
    """The one-entry ranked sequence shown after a failed fetch."""
    return (synthesize_fallback_entry(viewer),)
