"""Client for the local in-game live client data API."""

from __future__ import annotations

import json
import logging
import warnings
from typing import Any

import requests

from liveoverlay.models import GameData, ModelError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://127.0.0.1:2999/liveclientdata"
DEFAULT_TIMEOUT = 5.0


class LiveClientError(RuntimeError):
    """Raised when a request to the live client API fails."""


def error_context(text: str, line: int) -> str:
    """Return the lines around a 1-based error line, the error line marked."""
    lines = text.splitlines()
    error_line = max(line - 1, 0)
    start = max(error_line - 2, 0)
    end = min(error_line + 3, len(lines))
    return "\n".join(
        f"{'>>> ' if number == line else '    '}{number}: {content}"
        for number, content in enumerate(lines[start:end], start=start + 1)
    )


class LiveClient:
    """Fetches data from the game's local HTTPS endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()
        # The game serves a self-signed certificate on localhost.
        self._session.verify = False

    def _request(self, endpoint: str) -> Any:
        url = f"{self.base_url}{endpoint}"
        try:
            with warnings.catch_warnings():
                warnings.filterwarnings("ignore", message="Unverified HTTPS request")
                response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise LiveClientError(f"request failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            status = f"{response.status_code} {response.reason or ''}".strip()
            raise LiveClientError(f"HTTP error: {status}")

        text = response.text
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            logger.error(
                "JSON parsing failed for %s: %s (line %d, column %d)\n%s",
                endpoint,
                exc.msg,
                exc.lineno,
                exc.colno,
                error_context(text, exc.lineno),
            )
            raise LiveClientError(f"JSON parsing failed: {exc}") from exc

    def is_game_active(self) -> bool:
        """Return True if the API answers with valid game statistics."""
        try:
            GameData.from_dict(self._request("/gamestats"))
        except (LiveClientError, ModelError):
            return False
        return True

    def get_all_game_data(self) -> Any:
        return self._request("/allgamedata")

    def get_events(self) -> Any:
        return self._request("/eventdata")

    def get_player_scores(self) -> Any:
        return self._request("/playerscores")

    def get_active_player(self) -> Any:
        return self._request("/activeplayer")

    def get_all_players(self) -> Any:
        return self._request("/playerlist")