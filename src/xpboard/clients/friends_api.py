# src/xpboard/clients/friends_api.py

"""HTTP client for the friends API leaderboard resource."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from xpboard import config
from xpboard.exceptions import LeaderboardUnavailableError
from xpboard.schemas.leaderboard import LeaderboardEntry

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(list[LeaderboardEntry])

# Envelope keys the API has used for the ranked list
_ENVELOPE_KEYS = ("leaderboard", "data")


def _extract_entries(payload: Any) -> Any:
    """Unwrap ``{"leaderboard": [...]}`` / ``{"data": [...]}`` envelopes."""
    if isinstance(payload, dict):
        for key in _ENVELOPE_KEYS:
            if key in payload:
                return payload[key]
        raise LeaderboardUnavailableError("unexpected response shape")
    return payload


class FriendsAPIClient:
    """
    Fetches the viewer's friends leaderboard, already ranked by XP.

    Every failure (transport, HTTP status, malformed body) is raised as
    LeaderboardUnavailableError. There is no retry here.
    """

    def __init__(
        self,
        base_url: str,
        authorization: str | None = None,
        timeout: float = config.FRIENDS_API_TIMEOUT,
        path: str = config.FRIENDS_LEADERBOARD_PATH,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.path = path
        self.timeout = timeout
        self._headers = {"Accept": "application/json"}
        if authorization:
            self._headers["Authorization"] = authorization
        self._transport = transport

    async def fetch_leaderboard(self) -> list[LeaderboardEntry]:
        """GET the ranked leaderboard and validate every entry."""
        url = f"{self.base_url}{self.path}"
        async with httpx.AsyncClient(
            headers=self._headers,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise LeaderboardUnavailableError(
                    f"upstream returned {e.response.status_code}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.HTTPError as e:
                raise LeaderboardUnavailableError(
                    f"request failed: {type(e).__name__}"
                ) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise LeaderboardUnavailableError("response body is not JSON") from e

        try:
            entries = _entries_adapter.validate_python(_extract_entries(payload))
        except PydanticValidationError as e:
            raise LeaderboardUnavailableError(
                f"invalid leaderboard entries ({e.error_count()} errors)"
            ) from e

        logger.debug(
            "Fetched friends leaderboard",
            extra={"url": url, "entry_count": len(entries)},
        )
        return entries
