"""
Battle system package.
- models.py (Combatant, Attack, Debuff, Heal)
- core.py (hit rolls, damage, effects)
- factory.py (player moveset, wild monster archetype)
- session.py (turn state machine)
"""
from .session import BattleSession, BattleState, Phase
__all__ = ["BattleSession", "BattleState", "Phase"]
