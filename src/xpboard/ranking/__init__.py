# src/xpboard/ranking/__init__.py

"""Pure derivations over an already-ranked leaderboard."""

from .locator import find_current_user
from .partition import PODIUM_SIZE, arrange_podium, partition
from .stats import aggregate

__all__ = [
    "PODIUM_SIZE",
    "aggregate",
    "arrange_podium",
    "find_current_user",
    "partition",
]
