# src/xpboard/ranking/partition.py

"""Split a ranked leaderboard into podium and remainder."""

from __future__ import annotations

from collections.abc import Sequence

from xpboard.schemas.leaderboard import LeaderboardEntry, PodiumSlot

PODIUM_SIZE = 3

# Medal positions left to right: runner-up, winner, third place
PODIUM_DISPLAY_ORDER = (2, 1, 3)


def partition(
    entries: Sequence[LeaderboardEntry],
) -> tuple[tuple[LeaderboardEntry, ...], tuple[LeaderboardEntry, ...]]:
    """
    Split ranked entries into the podium (first three) and the remainder.

    Order is preserved and nothing is filtered or re-sorted, so
    ``podium + remainder`` always equals the input. Short inputs (including
    an empty one) simply yield a short podium and an empty remainder.
    """
    return tuple(entries[:PODIUM_SIZE]), tuple(entries[PODIUM_SIZE:])


def arrange_podium(podium: Sequence[LeaderboardEntry]) -> list[PodiumSlot]:
    """
    Lay out podium entries for display: 2nd on the left, 1st centered,
    3rd on the right. Missing positions are skipped.
    """
    return [
        PodiumSlot(position=position, entry=podium[position - 1])
        for position in PODIUM_DISPLAY_ORDER
        if position <= len(podium)
    ]
