"""Top-level game controller.

Switches between exploring the overworld and fighting a wild monster,
owns the canonical player between encounters, and raises the victory /
defeat notifications. Delays between turns go through a :class:`Scheduler`
so the renderer can show each step before the next one lands.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Literal, Optional
import random

from monsternav.battle import factory
from monsternav.battle.models import Combatant
from monsternav.battle.session import BattleSession, BattleState, Phase
from monsternav.core.logging import logger
from monsternav.system.settings import Settings, SettingsData
from monsternav.world.overworld import Overworld
from .pacing import Scheduler

Mode = Literal["exploring", "battle"]

VICTORY_HEAL = 3


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = "default"


VICTORY = Notification("Victory!", "You defeated the wild monster!")
DEFEAT = Notification("Defeated!", "You were knocked out! Resetting...", variant="destructive")


class GameContext:
    def __init__(self, settings: Optional[Settings] = None, *, rng: Optional[random.Random] = None,
                 scheduler: Optional[Scheduler] = None):
        self.settings = settings
        data = self.config
        self.rng = rng or random.Random(data.seed)
        self.scheduler = scheduler or Scheduler()
        self.overworld = Overworld(self.rng)
        self.player: Combatant = factory.new_player()
        self.mode: Mode = "exploring"
        self.battle: Optional[BattleSession] = None
        self.notifications: List[Notification] = []
        self._listeners: List[Callable[[Notification], None]] = []

    @property
    def config(self) -> SettingsData:
        return self.settings.data if self.settings else SettingsData()

    def on_notify(self, fn: Callable[[Notification], None]):
        self._listeners.append(fn)

    def _notify(self, note: Notification):
        self.notifications.append(note)
        for fn in list(self._listeners):
            fn(note)

    # --- Exploring ---
    def move(self, direction: str) -> bool:
        """Returns True when the move started a battle."""
        if self.mode != "exploring":
            return False
        if self.overworld.move(direction):
            self.start_battle(factory.wild_monster())
            return True
        return False

    def start_battle(self, enemy: Combatant) -> BattleSession:
        session = BattleSession(self.player, enemy, self.rng)
        session.on_resolved(lambda state, s=session: self._on_resolved(s, state))
        self.battle = session
        self.mode = "battle"
        logger.info("BattleStart", enemy=enemy.name, player_hp=self.player.hp)
        return session

    # --- Battle ---
    def accepts_input(self) -> bool:
        if self.mode == "exploring":
            return True
        return self.battle is not None and self.battle.can_act()

    def attack(self, index: int) -> bool:
        session = self.battle
        if self.mode != "battle" or session is None:
            return False
        if not session.player_attack(index):
            return False
        if session.phase is Phase.ENEMY_TURN:
            self.scheduler.call_later(self.config.enemy_turn_delay,
                                      lambda s=session: self._enemy_turn(s))
        return True

    def _enemy_turn(self, session: BattleSession):
        if session is not self.battle:
            return
        session.enemy_turn()

    def _on_resolved(self, session: BattleSession, state: BattleState):
        self.scheduler.call_later(self.config.result_delay,
                                  lambda: self.finish_battle(session))

    def finish_battle(self, session: BattleSession):
        # Guards against a second call for the same encounter
        if session is not self.battle or not session.is_over():
            return
        if session.phase is Phase.VICTORY:
            self.player = session.player.healed(VICTORY_HEAL)
            note = VICTORY
        else:
            self.player = factory.new_player()
            self.overworld.reset()
            note = DEFEAT
        self.battle = None
        self.mode = "exploring"
        logger.info("BattleFinished", outcome=session.outcome(), player_hp=self.player.hp)
        self._notify(note)

    def tick(self, now: Optional[float] = None) -> int:
        return self.scheduler.run_due(now)

    def reset(self):
        """Back to a fresh start; pending timers are dropped first."""
        self.scheduler.cancel_all()
        self.battle = None
        self.mode = "exploring"
        self.player = factory.new_player()
        self.overworld.reset()
        self.notifications.clear()
        logger.info("GameReset")


__all__ = ["GameContext", "Notification", "VICTORY", "DEFEAT", "VICTORY_HEAL"]
