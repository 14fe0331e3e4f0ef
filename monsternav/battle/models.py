"""Value types for combatants and their attacks.

Every type here is frozen: a change to a combatant yields a new instance
via :func:`dataclasses.replace`, so battle snapshots can be kept and
compared freely.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Debuff:
    value: int          # negative damage modifier
    duration: int = 0   # enemy turns it stays active

    @property
    def kind(self) -> str:
        return "debuff"


@dataclass(frozen=True)
class Heal:
    value: int

    @property
    def kind(self) -> str:
        return "heal"


Effect = Union[Debuff, Heal]


@dataclass(frozen=True)
class Attack:
    name: str
    damage: int = 0
    accuracy: int = 100
    effect: Optional[Effect] = None

    def label(self) -> str:
        """Short button caption, e.g. ``2 DMG - 100%`` or ``heal - 100%``."""
        if self.damage > 0:
            head = f"{self.damage} DMG"
        elif self.effect is not None:
            head = self.effect.kind
        else:
            head = "0 DMG"
        return f"{head} - {self.accuracy}%"


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class Combatant:
    name: str
    hp: int
    max_hp: int
    attacks: Tuple[Attack, ...] = ()
    debuff: Optional[int] = None
    debuff_turns: Optional[int] = None

    def __post_init__(self):
        # Lists are accepted for convenience but stored as tuples
        if not isinstance(self.attacks, tuple):
            object.__setattr__(self, "attacks", tuple(self.attacks))
        object.__setattr__(self, "hp", _clamp(int(self.hp), 0, self.max_hp))

    def is_fainted(self) -> bool:
        return self.hp <= 0

    def has_debuff(self) -> bool:
        return self.debuff is not None

    def with_hp(self, hp: int) -> "Combatant":
        return replace(self, hp=_clamp(hp, 0, self.max_hp))

    def damaged(self, amount: int) -> "Combatant":
        return self.with_hp(self.hp - max(0, amount))

    def healed(self, amount: int) -> "Combatant":
        return self.with_hp(self.hp + max(0, amount))

    def with_debuff(self, value: int, turns: int) -> "Combatant":
        return replace(self, debuff=value, debuff_turns=max(0, turns))

    def clear_debuff(self) -> "Combatant":
        return replace(self, debuff=None, debuff_turns=None)

    def hp_ratio(self) -> float:
        return self.hp / self.max_hp if self.max_hp > 0 else 0.0


__all__ = ["Attack", "Combatant", "Debuff", "Heal", "Effect"]
