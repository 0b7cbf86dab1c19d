# liveoverlay

`liveoverlay` polls the live client data API that a running game serves on
`https://127.0.0.1:2999/liveclientdata`. It prints a compact stat panel for the
active player in the terminal. The panel shows:

- attack damage, ability power, armor and magic resist
- CS per minute
- move speed and crit chance
- lethality and armor penetration, or "Farm!!!" when the player has none
- magic penetration, or "Keep it up!" when the player has none
- attack speed, HP regen and life steal
- total gold, which is the current gold plus the price of owned items
- `ALIVE`, or `DEAD:` with the respawn timer

The game serves a self-signed certificate, so the client does not verify
certificates.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
liveoverlay [--resolution {1920,2560}] [--base-url URL] [--once]
```

- `--resolution` gives the screen width the overlay geometry is computed for.
  The default is 1920.
- `--base-url` sets the API base URL. The default is the local endpoint above.
- `--once` polls once, prints the panel and exits. If no game data could be
  read, it prints "Waiting for game data..." and exits with status 1.

Without `--once`, the command polls in the background. When no game is
running, it checks again after five seconds. While a game is running, it polls
once a second. It reprints the panel whenever new data arrives. Pressing Enter
toggles the panel between shown and `(overlay hidden)`. Ctrl+C quits.

## What it does not do

The panel is plain text in the terminal. There is no transparent,
always-on-top window over the game, and there is no global keyboard shortcut.
Visibility is toggled with Enter in the terminal that runs the command.
`OverlayState.window_geometry` computes where such a window would go, but
nothing draws one.

## Library use

- `liveoverlay.live_client.LiveClient(base_url, timeout, session)` talks to the
  API.
  - It has the methods `get_all_game_data`, `get_events`,
    `get_player_scores`, `get_active_player` and `get_all_players`. Each
    returns the decoded JSON.
  - `is_game_active` returns whether `/gamestats` answers with valid game
    statistics.
  - HTTP, connection and JSON failures raise `LiveClientError`.
  - `error_context(text, line)` returns the lines around a JSON error, with
    the error line marked.
- `liveoverlay.models.GameInfo.from_dict` turns the `/allgamedata` payload
  into frozen dataclasses: `ActivePlayer`, `Player`, `ChampionStats`,
  `Item`, `Score`, `Rune` and others. It raises `ModelError` when fields are
  missing or have the wrong type.
- `liveoverlay.fetcher.poll_once(client)` returns a `(GameInfo or None,
  seconds to wait)` pair.
- `liveoverlay.fetcher.run_fetcher(client, deliver, sleep, stop)` polls in a
  loop. It hands each snapshot to `deliver`. It stops when `stop()` is true or
  when `deliver` returns `False`.
- `liveoverlay.overlay` derives the panel contents:
  - `display_data` derives the values shown.
  - `left_column`, `right_column` and `status_line` build the rows.
  - `render_text` returns the panel as text.
  - `OverlayState` tracks visibility, the latest data and the repaint delay.
- `liveoverlay.main.screen_size(resolution)` returns the width and height for
  1920 or 2560. Other values raise `ValueError`.