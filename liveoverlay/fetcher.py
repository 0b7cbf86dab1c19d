"""Background polling of the live client API for fresh game information."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from liveoverlay.live_client import LiveClient, LiveClientError
from liveoverlay.models import GameInfo, ModelError

logger = logging.getLogger(__name__)

POLL_INTERVAL = 1.0
INACTIVE_DELAY = 5.0


def poll_once(client: Any) -> tuple[GameInfo | None, float]:
    """Fetch one snapshot of the game.

    Returns the parsed game information, or None when there is nothing to
    deliver, together with the number of seconds to wait before polling again.
    """
    if not client.is_game_active():
        logger.info("No active game detected. Waiting...")
        return None, INACTIVE_DELAY

    try:
        data = client.get_all_game_data()
    except LiveClientError as exc:
        logger.warning("Error fetching game data: %s", exc)
        return None, POLL_INTERVAL

    try:
        return GameInfo.from_dict(data), POLL_INTERVAL
    except ModelError as exc:
        logger.warning("Failed to parse game data structure: %s", exc)
        return None, POLL_INTERVAL


def run_fetcher(
    client: Any = None,
    deliver: Callable[[GameInfo], Any] | None = None,
    sleep: Callable[[float], Any] = time.sleep,
    stop: Callable[[], bool] | None = None,
) -> None:
    """Poll the game until ``stop`` returns True or ``deliver`` returns False.

    Each parsed snapshot is handed to ``deliver``; a return value of exactly
    False means the receiver is gone and ends the loop.
    """
    if client is None:
        client = LiveClient()
    if deliver is None:
        raise TypeError("run_fetcher() needs a deliver callback")
    logger.info("Starting live client API connection...")

    while stop is None or not stop():
        game_info, delay = poll_once(client)
        if game_info is not None and deliver(game_info) is False:
            logger.warning("Failed to send game data - receiver likely dropped")
            return
        sleep(delay)