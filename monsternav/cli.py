from __future__ import annotations
import argparse
import random
import time
from typing import List, Optional

from rich.console import Console

from monsternav.battle import factory
from monsternav.battle.session import BattleSession
from monsternav.core.logging import logger
from monsternav.game.context import GameContext, Notification
from monsternav.system.settings import Settings
from monsternav.ui.keys import Key, attack_index_for, direction_for, read_key
from monsternav.ui.render import draw

console = Console()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="monsternav", description="Walk the grass, fight wild monsters.")
    p.add_argument("--seed", type=int, default=None, help="fix the random seed")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARN", "ERROR"], default=None)
    p.add_argument("--auto", action="store_true", help="simulate one battle and print its log")
    return p


def simulate(seed: Optional[int] = None) -> BattleSession:
    rng = random.Random(seed)
    session = BattleSession(factory.new_player(), factory.wild_monster(), rng)
    session.run_auto(choose=lambda state: rng.randrange(len(state.player.attacks)))
    return session


def run_loop(ctx: GameContext, con: Console = console):
    toast: List[Optional[Notification]] = [None]
    ctx.on_notify(lambda note: toast.__setitem__(0, note))
    while True:
        draw(con, ctx, toast=toast[0])
        if not ctx.accepts_input():
            # Waiting on a pacing timer: no input is read until it fires
            deadline = ctx.scheduler.next_deadline()
            if deadline is None:
                logger.error("StalledWithoutTimer", mode=ctx.mode)
                return
            time.sleep(max(0.0, deadline - ctx.scheduler.clock()))
            ctx.tick()
            continue
        event = read_key()
        if event.key is Key.QUIT:
            ctx.scheduler.cancel_all()
            return
        toast[0] = None
        if ctx.mode == "exploring":
            direction = direction_for(event)
            if direction:
                ctx.move(direction)
        else:
            index = attack_index_for(event)
            if index is not None:
                ctx.attack(index)
        ctx.tick()


def run(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    settings = Settings.load()
    if args.log_level:
        settings.data.log_level = args.log_level
    if args.seed is not None:
        settings.data.seed = args.seed
    settings.apply_logging()
    if args.auto:
        session = simulate(settings.data.seed)
        for line in session.log:
            console.print(line)
        console.print(f"[bold]{session.outcome()}[/bold]")
        return
    ctx = GameContext(settings)
    try:
        run_loop(ctx)
    except KeyboardInterrupt:
        ctx.scheduler.cancel_all()
    console.print("Goodbye!")
