import io
from rich.console import Console
from monsternav.battle import factory
from monsternav.battle.session import BattleSession
from monsternav.ui.render import hp_color, render_battle, render_overworld, render_toast
from monsternav.world.overworld import Position, build_tiles


def to_text(renderable) -> str:
    con = Console(file=io.StringIO(), width=100, color_system=None)
    con.print(renderable)
    return con.file.getvalue()


def test_hp_colour_thresholds():
    assert hp_color(20, 20) == "green"
    assert hp_color(10, 20) == "yellow"
    assert hp_color(6, 20) == "yellow"
    assert hp_color(5, 20) == "red"
    assert hp_color(0, 20) == "red"


def test_overworld_shows_title_and_player():
    out = to_text(render_overworld(build_tiles(), Position(0, 0)))
    assert "Monster Navigator" in out
    assert "Use WASD or Arrow Keys to move" in out
    assert out.count("P") >= 1


def test_battle_screen_contents():
    s = BattleSession(factory.new_player(), factory.wild_monster())
    out = to_text(render_battle(s.state))
    assert "Wild Monster" in out and "15 / 15 HP" in out
    assert "20 / 20 HP" in out
    assert "[1] Punch" in out and "2 DMG - 100%" in out
    assert "debuff - 100%" in out


def test_battle_log_shows_recent_lines_only():
    s = BattleSession(factory.new_player(), factory.wild_monster())
    state = s.state.narrate("one", "two", "three", "four")
    out = to_text(render_battle(state, history_lines=3))
    assert "appears!" not in out and "one" not in out
    assert "two" in out and "four" in out


def test_debuff_line_for_enemy():
    s = BattleSession(factory.new_player(), factory.wild_monster().with_debuff(-1, 2))
    out = to_text(render_battle(s.state))
    assert "Attack debuffed! (2 turns left)" in out


def test_toast():
    out = to_text(render_toast("Victory!", "You defeated the wild monster!"))
    assert "Victory!" in out and "You defeated the wild monster!" in out
