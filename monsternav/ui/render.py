"""Rich renderables for the overworld, the battle screen and toasts.

Builders return renderables without printing so they can be checked in
tests; :func:`draw` clears the console and prints the active screen.
"""
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

from rich.align import Align
from rich.box import ROUNDED, HEAVY
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from monsternav.battle.models import Combatant
from monsternav.battle.session import BattleState, Phase
from monsternav.world.overworld import Position, TileType

TITLE = "Monster Navigator"
MOVE_HINT = "Use WASD or Arrow Keys to move"

TILE_STYLES = {
    "grass": "black on green",
    "path": "black on tan",
}
PLAYER_STYLE = "bold black on bright_yellow"


def hp_color(hp: int, max_hp: int) -> str:
    pct = (hp / max_hp) * 100 if max_hp > 0 else 0
    if pct > 50:
        return "green"
    if pct > 25:
        return "yellow"
    return "red"


def hp_bar(hp: int, max_hp: int, width: int = 24) -> Text:
    hp = max(0, min(hp, max_hp))
    filled = int(round((hp / max_hp) * width)) if max_hp > 0 else 0
    bar = Text("█" * filled, style=hp_color(hp, max_hp))
    bar.append("░" * (width - filled), style="grey37")
    return bar


def render_grid(tiles: Sequence[Sequence[TileType]], player: Position) -> Table:
    grid = Table.grid(padding=(0, 0))
    for _ in range(len(tiles[0]) if tiles else 0):
        grid.add_column()
    for y, row in enumerate(tiles):
        cells: List[Text] = []
        for x, tile in enumerate(row):
            if player.x == x and player.y == y:
                cells.append(Text(" P ", style=PLAYER_STYLE))
            else:
                cells.append(Text("   ", style=TILE_STYLES[tile]))
        grid.add_row(*cells)
    return grid


def render_overworld(tiles: Sequence[Sequence[TileType]], player: Position) -> Group:
    return Group(
        Align.center(Text(TITLE, style="bold bright_white")),
        Align.center(Text(MOVE_HINT, style="dim")),
        Align.center(Panel(render_grid(tiles, player), box=HEAVY, border_style="bright_blue", expand=False)),
    )


def render_combatant(c: Combatant, *, show_debuff: bool = False) -> Panel:
    head = Table.grid(expand=True)
    head.add_column(justify="left")
    head.add_column(justify="right")
    head.add_row(Text(c.name, style="bold"), Text(f"{c.hp} / {c.max_hp} HP", style="dim"))
    parts = [head, hp_bar(c.hp, c.max_hp)]
    if show_debuff and c.has_debuff():
        parts.append(Text(f"Attack debuffed! ({c.debuff_turns} turns left)", style="red"))
    return Panel(Group(*parts), box=ROUNDED)


def render_log(lines: Iterable[str]) -> Panel:
    return Panel(Text("\n".join(lines)), title="Battle", box=ROUNDED)


def render_attacks(c: Combatant, enabled: bool) -> Table:
    table = Table.grid(padding=(0, 2))
    style = "bold cyan" if enabled else "dim"
    for i, attack in enumerate(c.attacks, start=1):
        table.add_row(Text(f"[{i}] {attack.name}", style=style), Text(attack.label(), style="dim"))
    return table


def render_battle(state: BattleState, history_lines: int = 3) -> Group:
    enabled = state.phase is Phase.PLAYER_TURN and not state.player.is_fainted() and not state.enemy.is_fainted()
    return Group(
        render_combatant(state.enemy, show_debuff=True),
        render_log(state.recent(history_lines)),
        render_combatant(state.player),
        render_attacks(state.player, enabled),
    )


def render_toast(title: str, description: str, variant: str = "default") -> Panel:
    border = "red" if variant == "destructive" else "green"
    return Panel(Text(description), title=title, border_style=border, box=ROUNDED, expand=False)


def draw(console: Console, ctx, *, clear: bool = True, toast: Optional[object] = None):
    if clear:
        console.clear()
    if ctx.mode == "battle" and ctx.battle is not None:
        console.print(render_battle(ctx.battle.state, ctx.config.history_lines))
    else:
        console.print(render_overworld(ctx.overworld.tiles, ctx.overworld.position))
    if toast is not None:
        console.print(Align.center(render_toast(toast.title, toast.description, toast.variant)))
