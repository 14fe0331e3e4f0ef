"""Attack resolution.

Pure functions: given two combatants, an attack and a random source they
return new combatant values plus one line of narration. Nothing here
sleeps, prints or mutates its inputs.
"""
from __future__ import annotations
from dataclasses import dataclass
import random
from typing import Optional

from .models import Attack, Combatant, Debuff, Heal


@dataclass(frozen=True)
class AttackOutcome:
    attacker: Combatant
    defender: Combatant
    narration: str
    hit: bool
    damage: int = 0


def roll_hit(attack: Attack, rng: random.Random) -> bool:
    # Roll lies in [0, 100): accuracy 100 cannot miss, accuracy 0 cannot hit
    return rng.random() * 100 < attack.accuracy


def effective_damage(attacker: Combatant, attack: Attack, attacker_is_player: bool) -> int:
    damage = attack.damage
    if not attacker_is_player and attacker.debuff is not None:
        damage = max(0, damage + attacker.debuff)
    return damage


def resolve_attack(attacker: Combatant, defender: Combatant, attack: Attack,
                   attacker_is_player: bool, rng: Optional[random.Random] = None) -> AttackOutcome:
    rng = rng or random.Random()
    if not roll_hit(attack, rng):
        return AttackOutcome(attacker, defender, f"{attacker.name}'s {attack.name} missed!", hit=False)

    damage = effective_damage(attacker, attack, attacker_is_player)
    new_defender = defender.damaged(damage)
    new_attacker = attacker
    effect = attack.effect

    if isinstance(effect, Debuff):
        new_defender = new_defender.with_debuff(effect.value, effect.duration)
        text = f"{attacker.name} used {attack.name}! {defender.name}'s attack was reduced!"
    elif isinstance(effect, Heal):
        new_attacker = attacker.healed(effect.value)
        restored = new_attacker.hp - attacker.hp
        text = f"{attacker.name} used {attack.name}! Healed {restored} HP!"
    else:
        text = f"{attacker.name} used {attack.name}! Dealt {damage} damage!"
    return AttackOutcome(new_attacker, new_defender, text, hit=True, damage=damage)


def tick_debuff(combatant: Combatant) -> Combatant:
    """Count down a debuff before its holder acts.

    A debuff with turns left is decremented and still weakens the coming
    attack; one already at zero is cleared. Duration N therefore weakens
    exactly N attacks.
    """
    if combatant.debuff is None:
        return combatant
    turns = combatant.debuff_turns or 0
    if turns > 0:
        return combatant.with_debuff(combatant.debuff, turns - 1)
    return combatant.clear_debuff()


__all__ = ["AttackOutcome", "resolve_attack", "roll_hit", "effective_damage", "tick_debuff"]
