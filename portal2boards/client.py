"""HTTP client for the Portal 2 leaderboard service."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

import requests

from .entities import Aggregated, Chamber

__all__ = ["API_URL", "DEFAULT_USER_AGENT", "AggregatedMode", "BoardsError", "Client"]

API_URL = "https://board.iverb.me"
DEFAULT_USER_AGENT = "Portal2Boards.py/1.0"
_TIMEOUT = 30.0

_log = logging.getLogger(__name__)


class AggregatedMode(Enum):
    """Which aggregated ranking to request."""

    OVERALL = "overall"
    SINGLE_PLAYER = "sp"
    COOPERATIVE = "coop"
    CHAPTER = "chapter"


class BoardsError(Exception):
    """A request to the boards failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class Client:
    """A reusable session against the leaderboard service."""

    def __init__(self, user_agent: str = "") -> None:
        self.api = API_URL
        self.user_agent = f"{user_agent} {DEFAULT_USER_AGENT}" if user_agent else DEFAULT_USER_AGENT
        self._session = requests.Session()
        self._session.headers["User-Agent"] = self.user_agent

    def _fetch(self, url: str) -> Any:
        try:
            response = self._session.get(url, timeout=_TIMEOUT)
        except requests.RequestException as exc:
            _log.debug("request error -> %s (%s)", url, exc)
            raise BoardsError(f"request to {url} failed: {exc}") from exc
        _log.debug("request -> %s (%d)", url, response.status_code)
        if response.status_code != 200:
            raise BoardsError(
                f"{url} answered with status {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise BoardsError(f"{url} returned invalid JSON") from exc

    def get_aggregated(self, mode: AggregatedMode) -> Aggregated:
        """Fetch an aggregated ranking; chapter rankings are not supported."""
        if mode is AggregatedMode.CHAPTER:
            raise ValueError("chapter rankings are not supported")
        url = f"{self.api}/aggregated/{mode.value}/json"
        return Aggregated.from_json(self._fetch(url))

    def get_chamber(self, best_time_id: int) -> Chamber:
        """Fetch the board of one chamber by its time leaderboard id."""
        url = f"{self.api}/chamber/{best_time_id}/json"
        return Chamber.from_json(best_time_id, self._fetch(url))

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()