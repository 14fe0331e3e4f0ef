"""Battle session: the turn state machine for one encounter.

The session holds a frozen :class:`BattleState` and swaps it for a new one
on every transition. Turns resolve synchronously; any pacing between the
player's move and the enemy's reply belongs to the caller.

Out-of-turn requests (acting during the enemy's turn, after a side has
fainted, or with a bad attack index) are ignored and return ``False``.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Tuple
import random

from monsternav.core.logging import logger
from .core import resolve_attack, tick_debuff
from .models import Combatant


class Phase(Enum):
    PLAYER_TURN = "player_turn"
    ENEMY_TURN = "enemy_turn"
    VICTORY = "victory"
    DEFEAT = "defeat"

    @property
    def terminal(self) -> bool:
        return self in (Phase.VICTORY, Phase.DEFEAT)


@dataclass(frozen=True)
class BattleState:
    player: Combatant
    enemy: Combatant
    phase: Phase = Phase.PLAYER_TURN
    log: Tuple[str, ...] = ()

    def recent(self, n: int = 3) -> Tuple[str, ...]:
        return self.log[-n:] if n > 0 else ()

    def narrate(self, *lines: str) -> "BattleState":
        return replace(self, log=self.log + lines)


class BattleSession:
    def __init__(self, player: Combatant, enemy: Combatant, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.state = BattleState(player=player, enemy=enemy, log=(f"{enemy.name} appears!",))
        self.history: List[BattleState] = [self.state]
        self._listeners: List[Callable[[BattleState], None]] = []
        self._resolved_fired = False

    # ---------------- Accessors -----------------
    @property
    def player(self) -> Combatant:
        return self.state.player

    @property
    def enemy(self) -> Combatant:
        return self.state.enemy

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def log(self) -> Tuple[str, ...]:
        return self.state.log

    def is_over(self) -> bool:
        return self.state.phase.terminal

    def both_standing(self) -> bool:
        return not self.player.is_fainted() and not self.enemy.is_fainted()

    def can_act(self) -> bool:
        return self.phase is Phase.PLAYER_TURN and self.both_standing()

    def outcome(self) -> str:
        if self.phase is Phase.VICTORY:
            return "PLAYER_WIN"
        if self.phase is Phase.DEFEAT:
            return "PLAYER_LOSS"
        return "ONGOING"

    def on_resolved(self, fn: Callable[[BattleState], None]):
        self._listeners.append(fn)

    # ---------------- Transitions -----------------
    def _commit(self, state: BattleState):
        self.state = state
        self.history.append(state)
        if state.phase.terminal and not self._resolved_fired:
            self._resolved_fired = True
            logger.info("BattleResolved", outcome=self.outcome(), turns=len(self.history) - 1)
            for fn in list(self._listeners):
                fn(state)

    def player_attack(self, index: int) -> bool:
        if not self.can_act():
            logger.debug("PlayerAttackIgnored", phase=self.phase.value)
            return False
        attacks = self.player.attacks
        if not 0 <= index < len(attacks):
            logger.debug("PlayerAttackIgnored", index=index)
            return False
        attack = attacks[index]
        res = resolve_attack(self.player, self.enemy, attack, True, self.rng)
        logger.debug("AttackResolved", attacker=self.player.name, attack=attack.name,
                     hit=res.hit, damage=res.damage)
        state = replace(self.state, player=res.attacker, enemy=res.defender).narrate(res.narration)
        if res.defender.is_fainted():
            state = replace(state, phase=Phase.VICTORY).narrate(f"Victory! {res.defender.name} was defeated!")
        else:
            state = replace(state, phase=Phase.ENEMY_TURN)
        self._commit(state)
        return True

    def enemy_turn(self) -> bool:
        if self.phase is not Phase.ENEMY_TURN or not self.both_standing():
            logger.debug("EnemyTurnIgnored", phase=self.phase.value)
            return False
        enemy = tick_debuff(self.enemy)
        attack = self.rng.choice(enemy.attacks)
        res = resolve_attack(enemy, self.player, attack, False, self.rng)
        logger.debug("AttackResolved", attacker=enemy.name, attack=attack.name,
                     hit=res.hit, damage=res.damage)
        state = replace(self.state, enemy=res.attacker, player=res.defender).narrate(res.narration)
        if res.defender.is_fainted():
            state = replace(state, phase=Phase.DEFEAT).narrate("Defeat! You were knocked out!")
        else:
            state = replace(state, phase=Phase.PLAYER_TURN)
        self._commit(state)
        return True

    def run_auto(self, choose: Optional[Callable[[BattleState], int]] = None, max_turns: int = 200) -> str:
        """Play the battle out without pacing; ``choose`` picks the player's attack index."""
        turns = 0
        while not self.is_over() and turns < max_turns:
            if self.phase is Phase.PLAYER_TURN:
                self.player_attack(choose(self.state) if choose else 0)
            else:
                self.enemy_turn()
            turns += 1
        return self.outcome()


__all__ = ["BattleSession", "BattleState", "Phase"]
