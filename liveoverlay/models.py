"""Typed records for the data served by the in-game live client API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class ModelError(ValueError):
    """Raised when a JSON document does not match the expected structure."""


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ModelError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ModelError(f"missing field `{key}`") from None


def _str(data: Any, key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ModelError(f"field `{key}`: expected a string, got {type(value).__name__}")
    return value


def _bool(data: Any, key: str) -> bool:
    value = _require(data, key)
    if not isinstance(value, bool):
        raise ModelError(f"field `{key}`: expected a boolean, got {type(value).__name__}")
    return value


def _float(data: Any, key: str) -> float:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ModelError(f"field `{key}`: expected a number, got {type(value).__name__}")
    return float(value)


def _uint(data: Any, key: str, bits: int) -> int:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ModelError(f"field `{key}`: expected an integer, got {type(value).__name__}")
    if not 0 <= value < (1 << bits):
        raise ModelError(f"field `{key}`: {value} is out of range for u{bits}")
    return value


def _nested(data: Any, key: str, parse: Callable[[Any], T]) -> T:
    value = _require(data, key)
    try:
        return parse(value)
    except ModelError as exc:
        raise ModelError(f"{key}: {exc}") from None


def _list(data: Any, key: str, parse: Callable[[Any], T]) -> list[T]:
    value = _require(data, key)
    if not isinstance(value, list):
        raise ModelError(f"field `{key}`: expected an array, got {type(value).__name__}")
    result = []
    for index, entry in enumerate(value):
        try:
            result.append(parse(entry))
        except ModelError as exc:
            raise ModelError(f"{key}[{index}]: {exc}") from None
    return result


@dataclass(frozen=True)
class Event:
    """A single game event such as a kill or an objective."""

    event_id: int
    event_name: str
    event_time: float

    @classmethod
    def from_dict(cls, data: Any) -> Event:
        return cls(
            event_id=_uint(data, "EventID", 32),
            event_name=_str(data, "EventName"),
            event_time=_float(data, "EventTime"),
        )


@dataclass(frozen=True)
class EventsWrapper:
    """The list of events that happened so far."""

    events: list[Event]

    @classmethod
    def from_dict(cls, data: Any) -> EventsWrapper:
        return cls(events=_list(data, "Events", Event.from_dict))


@dataclass(frozen=True)
class Item:
    """An item in a player's inventory."""

    name: str
    can_use: bool
    slot: int
    count: int
    price: int
    id: int

    @classmethod
    def from_dict(cls, data: Any) -> Item:
        return cls(
            name=_str(data, "displayName"),
            can_use=_bool(data, "canUse"),
            slot=_uint(data, "slot", 8),
            count=_uint(data, "count", 8),
            price=_uint(data, "price", 32),
            id=_uint(data, "itemID", 32),
        )


@dataclass(frozen=True)
class RuneType:
    """A rune or rune tree."""

    name: str
    id: int
    description: str

    @classmethod
    def from_dict(cls, data: Any) -> RuneType:
        return cls(
            name=_str(data, "displayName"),
            id=_uint(data, "id", 32),
            description=_str(data, "rawDescription"),
        )


@dataclass(frozen=True)
class Rune:
    """A player's keystone and rune trees."""

    keystone: RuneType
    primary_rune_tree: RuneType
    secondary_rune_tree: RuneType

    @classmethod
    def from_dict(cls, data: Any) -> Rune:
        return cls(
            keystone=_nested(data, "keystone", RuneType.from_dict),
            primary_rune_tree=_nested(data, "primaryRuneTree", RuneType.from_dict),
            secondary_rune_tree=_nested(data, "secondaryRuneTree", RuneType.from_dict),
        )


@dataclass(frozen=True)
class SummonerSpell:
    """One summoner spell."""

    display_name: str
    raw_description: str
    raw_display_name: str

    @classmethod
    def from_dict(cls, data: Any) -> SummonerSpell:
        return cls(
            display_name=_str(data, "displayName"),
            raw_description=_str(data, "rawDescription"),
            raw_display_name=_str(data, "rawDisplayName"),
        )


@dataclass(frozen=True)
class SummonerSpells:
    """A player's two summoner spells."""

    summoner_spell_one: SummonerSpell
    summoner_spell_two: SummonerSpell

    @classmethod
    def from_dict(cls, data: Any) -> SummonerSpells:
        return cls(
            summoner_spell_one=_nested(data, "summonerSpellOne", SummonerSpell.from_dict),
            summoner_spell_two=_nested(data, "summonerSpellTwo", SummonerSpell.from_dict),
        )


@dataclass(frozen=True)
class AbilityInfo:
    """One champion ability."""

    ability_level: int
    display_name: str
    id: str

    @classmethod
    def from_dict(cls, data: Any) -> AbilityInfo:
        return cls(
            ability_level=_uint(data, "abilityLevel", 8),
            display_name=_str(data, "displayName"),
            id=_str(data, "id"),
        )


@dataclass(frozen=True)
class Abilities:
    """A champion's passive and four active abilities."""

    passive: AbilityInfo
    q: AbilityInfo
    w: AbilityInfo
    e: AbilityInfo
    r: AbilityInfo

    @classmethod
    def from_dict(cls, data: Any) -> Abilities:
        return cls(
            **{
                name: _nested(data, name, AbilityInfo.from_dict)
                for name in ("passive", "q", "w", "e", "r")
            }
        )


@dataclass(frozen=True)
class Score:
    """A player's scoreboard."""

    assists: int
    deaths: int
    kills: int
    creep_score: int
    ward_score: float

    @classmethod
    def from_dict(cls, data: Any) -> Score:
        return cls(
            assists=_uint(data, "assists", 16),
            deaths=_uint(data, "deaths", 16),
            kills=_uint(data, "kills", 16),
            creep_score=_uint(data, "creepScore", 16),
            ward_score=_float(data, "wardScore"),
        )


_CHAMPION_STAT_KEYS = {
    "ability_haste": "abilityHaste",
    "ability_power": "abilityPower",
    "armor": "armor",
    "lethality": "armorPenetrationFlat",
    "armor_pen": "armorPenetrationPercent",
    "attack_damage": "attackDamage",
    "attack_range": "attackRange",
    "attack_speed": "attackSpeed",
    "bonus_armor_pen": "bonusArmorPenetrationPercent",
    "bonus_magic_pen": "bonusMagicPenetrationPercent",
    "crit_chance": "critChance",
    "crit_damage": "critDamage",
    "current_health": "currentHealth",
    "heal_shield_power": "healShieldPower",
    "health_regen_rate": "healthRegenRate",
    "life_steal": "lifeSteal",
    "magic_lethality": "magicLethality",
    "magic_pen": "magicPenetrationFlat",
    "magic_pen_percent": "magicPenetrationPercent",
    "magic_resist": "magicResist",
    "max_health": "maxHealth",
    "move_speed": "moveSpeed",
    "omnivamp": "omnivamp",
    "physical_lethality": "physicalLethality",
    "physical_vamp": "physicalVamp",
    "resource_max": "resourceMax",
    "resource_regen_rate": "resourceRegenRate",
    "resource_value": "resourceValue",
    "spell_vamp": "spellVamp",
    "tenacity": "tenacity",
}


@dataclass(frozen=True)
class ChampionStats:
    """The active player's current champion statistics."""

    ability_haste: float
    ability_power: float
    armor: float
    lethality: float
    armor_pen: float
    attack_damage: float
    attack_range: float
    attack_speed: float
    bonus_armor_pen: float
    bonus_magic_pen: float
    crit_chance: float
    crit_damage: float
    current_health: float
    heal_shield_power: float
    health_regen_rate: float
    life_steal: float
    magic_lethality: float
    magic_pen: float
    magic_pen_percent: float
    magic_resist: float
    max_health: float
    move_speed: float
    omnivamp: float
    physical_lethality: float
    physical_vamp: float
    resource_max: float
    resource_regen_rate: float
    resource_type: str
    resource_value: float
    spell_vamp: float
    tenacity: float

    @classmethod
    def from_dict(cls, data: Any) -> ChampionStats:
        values = {name: _float(data, key) for name, key in _CHAMPION_STAT_KEYS.items()}
        return cls(resource_type=_str(data, "resourceType"), **values)


@dataclass(frozen=True)
class Player:
    """An entry of the list of all players in the game."""

    champion_name: str
    is_bot: bool
    is_dead: bool
    level: int
    position: str
    respawn_timer: float
    riot_id: str
    team: str
    items: list[Item]
    runes: Rune
    scores: Score
    spells: SummonerSpells
    abilities: Abilities | None = field(default=None)

    @classmethod
    def from_dict(cls, data: Any) -> Player:
        return cls(
            champion_name=_str(data, "championName"),
            is_bot=_bool(data, "isBot"),
            is_dead=_bool(data, "isDead"),
            level=_uint(data, "level", 8),
            position=_str(data, "position"),
            respawn_timer=_float(data, "respawnTimer"),
            riot_id=_str(data, "riotId"),
            team=_str(data, "team"),
            items=_list(data, "items", Item.from_dict),
            runes=_nested(data, "runes", Rune.from_dict),
            scores=_nested(data, "scores", Score.from_dict),
            spells=_nested(data, "summonerSpells", SummonerSpells.from_dict),
        )


@dataclass(frozen=True)
class ActivePlayer:
    """The player running the client."""

    riot_id: str
    champion_stats: ChampionStats
    level: int
    team_relative_colors: bool
    current_gold: float
    player_op: Player | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ActivePlayer:
        player_op_raw = _require(data, "playerOp") if _has(data, "playerOp") else None
        player_op = (
            None
            if player_op_raw is None
            else _nested(data, "playerOp", Player.from_dict)
        )
        return cls(
            riot_id=_str(data, "riotId"),
            champion_stats=_nested(data, "championStats", ChampionStats.from_dict),
            level=_uint(data, "level", 8),
            team_relative_colors=_bool(data, "teamRelativeColors"),
            current_gold=_float(data, "currentGold"),
            player_op=player_op,
        )


def _has(data: Any, key: str) -> bool:
    if not isinstance(data, Mapping):
        raise ModelError(f"expected an object, got {type(data).__name__}")
    return key in data


@dataclass(frozen=True)
class GameData:
    """General information about the running game."""

    game_mode: str
    game_time: float

    @classmethod
    def from_dict(cls, data: Any) -> GameData:
        return cls(game_mode=_str(data, "gameMode"), game_time=_float(data, "gameTime"))


@dataclass(frozen=True)
class GameInfo:
    """Everything the live client reports about the current game."""

    active_player: ActivePlayer
    all_players: list[Player]
    events: EventsWrapper
    game_data: GameData

    @classmethod
    def from_dict(cls, data: Any) -> GameInfo:
        return cls(
            active_player=_nested(data, "activePlayer", ActivePlayer.from_dict),
            all_players=_list(data, "allPlayers", Player.from_dict),
            events=_nested(data, "events", EventsWrapper.from_dict),
            game_data=_nested(data, "gameData", GameData.from_dict),
        )