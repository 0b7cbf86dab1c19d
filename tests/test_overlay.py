import math

import pytest

from liveoverlay.models import GameInfo
from liveoverlay.overlay import (
    GREEN,
    HIDDEN_POSITION,
    HIDDEN_SIZE,
    PURPLE,
    WAITING_TEXT,
    DisplayData,
    OverlayState,
    StatRow,
    display_data,
    icon_for,
    left_column,
    render_text,
    right_column,
    status_line,
)

STAT_KEYS = [
    "abilityHaste", "abilityPower", "armor", "armorPenetrationFlat",
    "armorPenetrationPercent", "attackDamage", "attackRange", "attackSpeed",
    "bonusArmorPenetrationPercent", "bonusMagicPenetrationPercent", "critChance",
    "critDamage", "currentHealth", "healShieldPower", "healthRegenRate", "lifeSteal",
    "magicLethality", "magicPenetrationFlat", "magicPenetrationPercent", "magicResist",
    "maxHealth", "moveSpeed", "omnivamp", "physicalLethality", "physicalVamp",
    "resourceMax", "resourceRegenRate", "resourceValue", "spellVamp", "tenacity",
]


def rune(name):
    return {"displayName": name, "id": 8000, "rawDescription": name.lower()}


def spell(name):
    return {"displayName": name, "rawDescription": name, "rawDisplayName": name}


def make_game(riot_id="Tester#EUW", listed_id=None, creep=60, game_time=600.0,
              gold=500.0, prices=(1000, 300), is_dead=False, respawn=0.0, **stats):
    stat_values = {key: 0.0 for key in STAT_KEYS}
    stat_values["armorPenetrationPercent"] = 1.0
    stat_values["magicPenetrationPercent"] = 1.0
    stat_values.update(stats)
    stat_values["resourceType"] = "MANA"
    player = {
        "championName": "Annie",
        "isBot": False,
        "isDead": is_dead,
        "level": 5,
        "position": "MIDDLE",
        "respawnTimer": respawn,
        "riotId": listed_id or riot_id,
        "team": "ORDER",
        "items": [
            {"displayName": f"Item {n}", "canUse": False, "slot": n, "count": 1,
             "price": price, "itemID": 1000 + n}
            for n, price in enumerate(prices)
        ],
        "runes": {
            "keystone": rune("Electrocute"),
            "primaryRuneTree": rune("Domination"),
            "secondaryRuneTree": rune("Sorcery"),
        },
        "scores": {"assists": 0, "deaths": 1, "kills": 0, "creepScore": creep,
                   "wardScore": 0.0},
        "summonerSpells": {"summonerSpellOne": spell("Flash"),
                           "summonerSpellTwo": spell("Ignite")},
    }
    return GameInfo.from_dict({
        "activePlayer": {
            "riotId": riot_id,
            "championStats": stat_values,
            "level": 5,
            "teamRelativeColors": True,
            "currentGold": gold,
        },
        "allPlayers": [player],
        "events": {"Events": []},
        "gameData": {"gameMode": "CLASSIC", "gameTime": game_time},
    })


def test_display_data_none_without_game():
    assert display_data(None) is None


def test_display_data_none_when_player_not_listed():
    assert display_data(make_game(listed_id="Other#NA1")) is None


def test_display_data_values():
    data = display_data(make_game(creep=60, game_time=600.0, gold=500.0, prices=(1000, 300)))
    assert data.riot_id == "Tester#EUW"
    assert data.player_name == "Tester"
    assert data.total_gold == 500.0 + 1000 + 300
    assert data.cs_per_min * (600.0 / 60.0) == pytest.approx(60)
    assert data.is_dead is False


def test_display_data_at_game_start():
    assert display_data(make_game(creep=3, game_time=0.0)).cs_per_min == math.inf
    assert str(display_data(make_game(creep=0, game_time=0.0)).cs_per_min) == "nan"


@pytest.mark.parametrize(
    "name, icon",
    [("attack_damage", "⚔"), ("gold", "💰"), ("life_steal", "❤"), ("unknown", "?")],
)
def test_icon_for(name, icon):
    assert icon_for(name, "?") == icon


def test_left_column_labels_and_format():
    stats = make_game(attackDamage=65.4, critChance=25.0).active_player.champion_stats
    rows = left_column(stats, 7.25)
    assert [row.label for row in rows] == [
        "Attack Damage:", "Ability Power:", "Armor:", "Magic Resist:",
        "CS/min:", "Move Speed: ", "Crit Chance:",
    ]
    assert rows[0].value == "65"
    assert rows[6].value == "25%"
    assert rows[4] == StatRow("CS/min:", "🗡", f"{7.25:.1f}", (255, 215, 0))


def test_right_column_without_penetration():
    stats = make_game().active_player.champion_stats
    rows = right_column(stats, 1800.0)
    assert rows[0].value == "Farm!!!"
    assert rows[1].value == "Keep it up!"
    assert rows[1].color == PURPLE
    assert rows[-1].label == "Total Gold:"
    assert rows[-1].value == "1800"


def test_right_column_with_penetration():
    stats = make_game(
        armorPenetrationFlat=10.0, physicalLethality=10.0, armorPenetrationPercent=0.8,
        magicPenetrationFlat=6.0, magicPenetrationPercent=1.0,
    ).active_player.champion_stats
    rows = right_column(stats, 0.0)
    assert rows[0].value == "10 | %20.00"
    assert rows[1].value.startswith("6 | %")
    assert rows[1].value != "Keep it up!"


def test_status_line():
    assert status_line(True, 12.5) == "DEAD: 12.5s"
    assert status_line(True, 0.0) == "ALIVE"
    assert status_line(False, 12.5) == "ALIVE"


def test_render_text_waiting():
    assert render_text(None) == WAITING_TEXT == "Waiting for game data..."


def test_render_text_contents():
    text = render_text(display_data(make_game(is_dead=True, respawn=8.5)))
    lines = text.splitlines()
    assert lines[0] == "Do Not Tilt UwU | Tester"
    assert "Farm!!!" in text
    assert lines[-1] == "DEAD: 8.5s"


def test_overlay_state_toggle_and_geometry():
    state = OverlayState(2560)
    assert state.window_geometry() == ((2560 - 360.0 * 1.3, 55.0), (355.0 * 1.3, 195.0 * 1.2))
    assert state.toggle() is False
    assert state.window_geometry() == (HIDDEN_POSITION, HIDDEN_SIZE)
    assert state.render() is None
    assert state.toggle() is True


def test_overlay_state_repaint_delay():
    state = OverlayState(1920)
    assert state.repaint_delay() == 0.0
    assert state.repaint_delay() == 0.2
    assert state.repaint_delay(hotkey_pressed=True) == 0.0
    state.toggle()
    assert state.repaint_delay() == 1.0
    state.receive(make_game())
    assert state.repaint_delay() == 0.0


def test_overlay_state_render():
    state = OverlayState(1920)
    assert state.render() == WAITING_TEXT
    state.receive(make_game())
    assert state.render().startswith("Do Not Tilt UwU | Tester")
    assert state.render().endswith("ALIVE")


def test_display_data_fields_roundtrip():
    game = make_game()
    data = display_data(game)
    assert isinstance(data, DisplayData)
    assert data.stats == game.active_player.champion_stats
    assert status_line(data.is_dead, data.respawn_timer) == "ALIVE"
    assert GREEN == (0, 255, 0)