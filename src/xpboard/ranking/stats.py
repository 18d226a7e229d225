# src/xpboard/ranking/stats.py

"""Summary totals across a whole leaderboard."""

from __future__ import annotations

from collections.abc import Sequence

from xpboard.schemas.leaderboard import LeaderboardEntry, SummaryStats


def aggregate(entries: Sequence[LeaderboardEntry]) -> SummaryStats:
    """
    Reduce the complete ranked sequence to participant count, combined XP
    and combined completed tasks.

    Always pass the full sequence, never the podium or remainder alone:
    the totals describe every participant.
    """
    combined_xp = 0
    combined_tasks = 0
    for entry in entries:
        combined_xp += entry.xp
        combined_tasks += entry.total_tasks_completed

    return SummaryStats(
        participant_count=len(entries),
        combined_xp=combined_xp,
        combined_tasks=combined_tasks,
    )
