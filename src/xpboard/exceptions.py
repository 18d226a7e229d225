# src/xpboard/exceptions.py

"""Custom exception hierarchy for XPBoard.

This module provides a structured exception hierarchy that enables:
1. Proper HTTP status code mapping in API endpoints
2. Detailed error context for logging and debugging
"""

from __future__ import annotations


class XPBoardError(Exception):
    """Base exception for all XPBoard errors.

    Attributes:
        message: Human-readable error description
        details: Optional dict with additional context for logging/debugging
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# =============================================================================
# Data Source Errors
# =============================================================================


class LeaderboardUnavailableError(XPBoardError):
    """Raised when the ranking data source cannot produce a leaderboard.

    Network, HTTP status and payload problems all map to this one kind.
    The view never lets it escape; it is downgraded to the fallback state.
    """

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        details: dict = {"reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            message=f"Ranking data unavailable: {reason}",
            details=details,
        )


# =============================================================================
# Configuration Errors (HTTP 500)
# =============================================================================


class ConfigurationError(XPBoardError):
    """Raised when a required setting is missing or invalid."""

    def __init__(self, setting: str) -> None:
        super().__init__(
            message=f"Required setting {setting} is not configured",
            details={"setting": setting},
        )
