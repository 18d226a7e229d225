# src/xpboard/ranking/locator.py

"""Locate the viewer's own entry in a leaderboard."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from xpboard.schemas.leaderboard import LeaderboardEntry

logger = logging.getLogger(__name__)


def find_current_user(
    entries: Sequence[LeaderboardEntry],
) -> LeaderboardEntry | None:
    """
    Return the entry flagged ``is_current_user``, or None if there is none.

    At most one entry should carry the flag. If the upstream source marks
    several, the first one in ranking order wins and a warning is logged;
    the view keeps rendering.
    """
    flagged = [entry for entry in entries if entry.is_current_user]
    if not flagged:
        return None

    if len(flagged) > 1:
        logger.warning(
            "Multiple leaderboard entries flagged as current user, using rank %d",
            flagged[0].rank,
            extra={
                "flagged_count": len(flagged),
                "flagged_ids": [entry.id for entry in flagged],
            },
        )
    return flagged[0]
