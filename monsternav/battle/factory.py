"""Factory helpers for the fixed combatant roster.

One player moveset and one enemy archetype; every encounter gets a fresh
enemy at full HP. Everything built here is validated so broken content
fails at start-up rather than mid-battle.
"""
from __future__ import annotations
from typing import Iterable

from monsternav.core.errors import ContentError
from .models import Attack, Combatant, Debuff, Heal

PLAYER_ATTACKS = (
    Attack(name="Punch", damage=2, accuracy=100),
    Attack(name="Kick", damage=3, accuracy=70),
    Attack(name="Shout", damage=0, accuracy=100, effect=Debuff(value=-1, duration=2)),
)

ENEMY_ATTACKS = (
    Attack(name="Bite", damage=3, accuracy=100),
    Attack(name="Lick", damage=0, accuracy=100, effect=Heal(value=1)),
)


def validate_attack(attack: Attack) -> Attack:
    if attack.damage < 0:
        raise ContentError(attack.name, f"damage must be >= 0, got {attack.damage}")
    if not 0 <= attack.accuracy <= 100:
        raise ContentError(attack.name, f"accuracy must be within 0..100, got {attack.accuracy}")
    effect = attack.effect
    if isinstance(effect, Debuff):
        if effect.value >= 0:
            raise ContentError(attack.name, f"debuff value must be negative, got {effect.value}")
        if effect.duration < 0:
            raise ContentError(attack.name, f"debuff duration must be >= 0, got {effect.duration}")
    elif isinstance(effect, Heal):
        if effect.value <= 0:
            raise ContentError(attack.name, f"heal value must be positive, got {effect.value}")
    elif effect is not None:
        raise ContentError(attack.name, f"unknown effect {effect!r}")
    return attack


def validate_combatant(c: Combatant) -> Combatant:
    if c.max_hp <= 0:
        raise ContentError(c.name, f"max_hp must be positive, got {c.max_hp}")
    if not c.attacks:
        raise ContentError(c.name, "attack roster is empty")
    if (c.debuff is None) != (c.debuff_turns is None):
        raise ContentError(c.name, "debuff and debuff_turns must be set together")
    for attack in c.attacks:
        validate_attack(attack)
    return c


def make_combatant(name: str, max_hp: int, attacks: Iterable[Attack]) -> Combatant:
    return validate_combatant(Combatant(name=name, hp=max_hp, max_hp=max_hp, attacks=tuple(attacks)))


def new_player() -> Combatant:
    return make_combatant("Player", 20, PLAYER_ATTACKS)


def wild_monster() -> Combatant:
    return make_combatant("Wild Monster", 15, ENEMY_ATTACKS)


__all__ = ["new_player", "wild_monster", "make_combatant", "validate_combatant",
           "validate_attack", "PLAYER_ATTACKS", "ENEMY_ATTACKS"]
