"""Command that runs the overlay in a terminal."""

from __future__ import annotations

import argparse
import logging
import queue
import sys
import threading
from typing import Sequence

from liveoverlay.fetcher import poll_once, run_fetcher
from liveoverlay.live_client import DEFAULT_BASE_URL, LiveClient
from liveoverlay.models import GameInfo
from liveoverlay.overlay import VISIBLE_REPAINT_DELAY, OverlayState

logger = logging.getLogger(__name__)

_SCREEN_SIZES = {
    1920: (1920.0, 1080.0),
    2560: (2560.0, 1440.0),
}

HIDDEN_TEXT = "(overlay hidden)"


def screen_size(resolution: int | str) -> tuple[float, float]:
    """Return (width, height) of a supported screen resolution."""
    try:
        key = int(resolution)
    except (TypeError, ValueError):
        raise ValueError(f"unsupported resolution: {resolution!r}") from None
    try:
        return _SCREEN_SIZES[key]
    except KeyError:
        raise ValueError(f"unsupported resolution: {resolution!r}") from None


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="liveoverlay",
        description="Show the active player's statistics from the live client API.",
    )
    parser.add_argument(
        "--resolution",
        type=int,
        choices=sorted(_SCREEN_SIZES),
        default=1920,
        help="screen width the overlay is placed for",
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="base URL of the live client data API",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="poll the game once, print the overlay and exit",
    )
    return parser.parse_args(argv)


def _read_toggles(toggles: queue.Queue[None], stop: threading.Event) -> None:
    for _ in sys.stdin:
        if stop.is_set():
            return
        toggles.put(None)


def _drain(source: queue.Queue) -> list:
    drained = []
    while True:
        try:
            drained.append(source.get_nowait())
        except queue.Empty:
            return drained


def _run_once(client: LiveClient, state: OverlayState) -> int:
    game_info, _ = poll_once(client)
    if game_info is not None:
        state.receive(game_info)
    print(state.render())
    return 0 if game_info is not None else 1


def _run_loop(client: LiveClient, state: OverlayState) -> int:
    updates: queue.Queue[GameInfo] = queue.Queue()
    toggles: queue.Queue[None] = queue.Queue()
    stop = threading.Event()

    fetcher = threading.Thread(
        target=run_fetcher,
        kwargs={
            "client": client,
            "deliver": updates.put,
            "sleep": stop.wait,
            "stop": stop.is_set,
        },
        daemon=True,
    )
    reader = threading.Thread(target=_read_toggles, args=(toggles, stop), daemon=True)
    fetcher.start()
    reader.start()
    print("Press Enter to toggle the overlay, Ctrl+C to quit.")

    try:
        while not stop.is_set():
            hotkey_pressed = False
            for _ in _drain(toggles):
                hotkey_pressed = True
                state.toggle()
                logger.info("Window geometry: %s", state.window_geometry())
            for game_info in _drain(updates):
                state.receive(game_info)

            delay = state.repaint_delay(hotkey_pressed)
            if delay == 0.0:
                text = state.render()
                print(HIDDEN_TEXT if text is None else text, flush=True)
                delay = VISIBLE_REPAINT_DELAY
            stop.wait(delay)
    except KeyboardInterrupt:
        pass
    finally:
        stop.set()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the overlay; returns the process exit status."""
    args = _parse_args(argv)
    width, _height = screen_size(args.resolution)
    logger.info("Starting overlay...")

    client = LiveClient(base_url=args.base_url)
    state = OverlayState(width)
    if args.once:
        return _run_once(client, state)
    return _run_loop(client, state)


if __name__ == "__main__":
    sys.exit(main())