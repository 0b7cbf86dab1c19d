"""Overlay state and the statistics it shows for the active player."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from liveoverlay.models import ChampionStats, GameInfo

logger = logging.getLogger(__name__)

Color = tuple[int, int, int]

MAGENTA: Color = (255, 0, 255)
PURPLE: Color = (128, 0, 128)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
GRAY: Color = (160, 160, 160)

HORIZONTAL_SCALE = 1.3
VERTICAL_SCALE = 1.2
TOP_OFFSET = 55.0
HIDDEN_POSITION = (-10000.0, -10000.0)
HIDDEN_SIZE = (1.0, 1.0)

VISIBLE_REPAINT_DELAY = 0.2
HIDDEN_REPAINT_DELAY = 1.0

WAITING_TEXT = "Waiting for game data..."

_ICONS = {
    "attack_damage": "⚔",
    "ability_power": "💫",
    "armor": "🛡",
    "magic_resist": "🟣",
    "attack_speed": "⚡",
    "health_regen": "💉",
    "life_steal": "❤",
    "gold": "💰",
}


@dataclass(frozen=True)
class StatRow:
    """One labelled value of the overlay."""

    label: str
    icon: str
    value: str
    color: Color


@dataclass(frozen=True)
class DisplayData:
    """Values derived from the game information for display."""

    riot_id: str
    cs_per_min: float
    total_gold: float
    is_dead: bool
    respawn_timer: float
    stats: ChampionStats

    @property
    def player_name(self) -> str:
        return self.riot_id.split("#", 1)[0]


def _fixed(value: float, digits: int) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{digits}f}"


def display_data(game_info: GameInfo | None) -> DisplayData | None:
    """Derive the displayed values, or None if the active player is not listed."""
    if game_info is None:
        return None
    player = game_info.active_player
    entry = next((p for p in game_info.all_players if p.riot_id == player.riot_id), None)
    if entry is None:
        return None

    minutes = game_info.game_data.game_time / 60.0
    creep_score = entry.scores.creep_score
    try:
        cs_per_min = creep_score / minutes
    except ZeroDivisionError:
        cs_per_min = math.copysign(math.inf, minutes) if creep_score else math.nan

    total_gold = player.current_gold + sum(float(item.price) for item in entry.items)
    return DisplayData(
        riot_id=player.riot_id,
        cs_per_min=cs_per_min,
        total_gold=total_gold,
        is_dead=entry.is_dead,
        respawn_timer=float(entry.respawn_timer),
        stats=player.champion_stats,
    )


def icon_for(name: str, fallback: str) -> str:
    """Return the icon for a named statistic, or the fallback."""
    return _ICONS.get(name, fallback)


def left_column(stats: ChampionStats, cs_per_min: float) -> list[StatRow]:
    """The offensive and defensive statistics of the left column."""
    return [
        StatRow("Attack Damage:", "⚔", _fixed(stats.attack_damage, 0), (255, 100, 100)),
        StatRow("Ability Power:", "✨", _fixed(stats.ability_power, 0), (100, 150, 255)),
        StatRow("Armor:", "🛡", _fixed(stats.armor, 0), (200, 200, 100)),
        StatRow("Magic Resist:", "🔮", _fixed(stats.magic_resist, 0), (150, 100, 255)),
        StatRow("CS/min:", "🗡", _fixed(cs_per_min, 1), (255, 215, 0)),
        StatRow("Move Speed: ", "💨", _fixed(stats.move_speed, 0), (100, 255, 100)),
        StatRow("Crit Chance:", "💥", _fixed(stats.crit_chance, 0) + "%", (255, 165, 0)),
    ]


def right_column(stats: ChampionStats, total_gold: float) -> list[StatRow]:
    """The penetration, sustain and gold statistics of the right column."""
    if (stats.lethality == 0.0 or stats.physical_lethality == 0.0) and stats.armor_pen == 1.0:
        lethality = "Farm!!!"
    else:
        lethality = (
            f"{_fixed(stats.lethality, 0)} | %{_fixed(100.0 * (1.0 - stats.armor_pen), 2)}"
        )

    flat_magic = stats.magic_lethality + stats.magic_pen
    if flat_magic == 0.0 and stats.magic_pen_percent == 1.0:
        magic_pen = "Keep it up!"
    else:
        magic_pen = (
            f"{_fixed(flat_magic, 0)} | %{_fixed(100.0 * (1.0 - stats.magic_pen_percent), 2)}"
        )

    return [
        StatRow("Lethality:", "", lethality, (255, 80, 80)),
        StatRow("Mag Pen:", "", magic_pen, PURPLE),
        StatRow("Att. Sp.:", "", f"{_fixed(stats.attack_speed, 2)} atk/s", (255, 255, 100)),
        StatRow("HP Regen:", "", f"{_fixed(stats.health_regen_rate, 1)} hp/s", (100, 255, 100)),
        StatRow("Life Steal:", "❤", _fixed(stats.life_steal, 0) + "%", (255, 100, 100)),
        StatRow("Total Gold:", "💰", _fixed(total_gold, 0), (255, 215, 0)),
    ]


def status_line(is_dead: bool, respawn_timer: float) -> str:
    """Return the alive/dead line shown under the right column."""
    if is_dead and respawn_timer > 0.0:
        return f"DEAD: {_fixed(respawn_timer, 1)}s"
    return "ALIVE"


def _row_text(row: StatRow) -> str:
    return " ".join(part for part in (row.label.strip(), row.icon, row.value) if part)


def render_text(data: DisplayData | None) -> str:
    """Render the overlay content as plain text."""
    if data is None:
        return WAITING_TEXT
    heading = f"Do Not Tilt UwU | {data.player_name}"
    lines = [heading, "-" * len(heading)]
    lines.extend(_row_text(row) for row in left_column(data.stats, data.cs_per_min))
    lines.append("")
    lines.extend(_row_text(row) for row in right_column(data.stats, data.total_gold))
    lines.append(status_line(data.is_dead, data.respawn_timer))
    return "\n".join(lines)


class OverlayState:
    """Visibility, latest game data and repaint scheduling of the overlay."""

    def __init__(self, screen_width: float) -> None:
        self.screen_width = float(screen_width)
        self.visible = True
        self.game_info: GameInfo | None = None
        self.data_changed = True

    def toggle(self) -> bool:
        """Flip visibility and return the new state."""
        self.visible = not self.visible
        logger.info("Toggling overlay visibility to: %s", self.visible)
        return self.visible

    def receive(self, game_info: GameInfo) -> None:
        """Store newly fetched game information."""
        self.game_info = game_info
        self.data_changed = True

    def window_geometry(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Return ((x, y), (width, height)) of the window for the current state."""
        if not self.visible:
            return HIDDEN_POSITION, HIDDEN_SIZE
        position = (self.screen_width - 360.0 * HORIZONTAL_SCALE, TOP_OFFSET)
        size = (355.0 * HORIZONTAL_SCALE, 195.0 * VERTICAL_SCALE)
        return position, size

    def repaint_delay(self, hotkey_pressed: bool = False) -> float:
        """Seconds until the next repaint; zero means repaint right away."""
        if self.data_changed or hotkey_pressed:
            self.data_changed = False
            return 0.0
        return VISIBLE_REPAINT_DELAY if self.visible else HIDDEN_REPAINT_DELAY

    def render(self) -> str | None:
        """Return the overlay text, or None while hidden."""
        if not self.visible:
            return None
        return render_text(display_data(self.game_info))