# tests/test_stats.py

"""Unit tests for leaderboard summary statistics."""

from conftest import make_entry
from xpboard.ranking.partition import partition
from xpboard.ranking.stats import aggregate


def test_aggregate_four_entries(four_entries):
    """Totals cover every entry, not just the podium."""
    stats = aggregate(four_entries)

    assert stats.participant_count == 4
    assert stats.combined_xp == 950
    assert stats.combined_tasks == 23


def test_aggregate_uses_full_sequence(four_entries):
    """Aggregating the podium alone would miss the remainder."""
    podium, _ = partition(four_entries)

    assert aggregate(four_entries).combined_xp == aggregate(podium).combined_xp + 50


def test_aggregate_empty():
    """Zero participants is a valid, error-free result."""
    stats = aggregate([])

    assert stats.participant_count == 0
    assert stats.combined_xp == 0
    assert stats.combined_tasks == 0


def test_aggregate_large_totals_do_not_truncate():
    """10,000 entries at 10^9 xp each sum exactly."""
    entries = [
        make_entry(rank, 10**9, total_tasks_completed=10**6)
        for rank in range(1, 10_001)
    ]

    stats = aggregate(entries)

    assert stats.participant_count == 10_000
    assert stats.combined_xp == 10**13
    assert stats.combined_tasks == 10**10


def test_aggregate_returns_fresh_value(four_entries):
    """Each call returns a new value and leaves the input untouched."""
    before = list(four_entries)

    first = aggregate(four_entries)
    second = aggregate(four_entries)

    assert first == second
    assert first is not second
    assert four_entries == before
