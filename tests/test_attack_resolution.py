import random
from monsternav.battle.core import resolve_attack, tick_debuff, roll_hit
from monsternav.battle.models import Attack, Combatant, Debuff, Heal


def fighter(name="A", hp=20, max_hp=20, **kw):
    return Combatant(name=name, hp=hp, max_hp=max_hp, attacks=(Attack("Tap", 1),), **kw)


def test_full_accuracy_never_misses():
    rng = random.Random(12345)
    sure = Attack("Sure Shot", 1, 100)
    assert all(roll_hit(sure, rng) for _ in range(5000))


def test_zero_accuracy_always_misses():
    rng = random.Random(12345)
    never = Attack("Wild Swing", 9, 0)
    assert not any(roll_hit(never, rng) for _ in range(5000))


def test_boundary_roll_hits_at_full_accuracy(scripted):
    # Highest possible roll still lands under 100
    rng = scripted(rolls=[0.9999999999])
    res = resolve_attack(fighter(), fighter("B"), Attack("Sure", 2, 100), True, rng)
    assert res.hit and res.defender.hp == 18


def test_miss_leaves_both_unchanged(scripted):
    a, d = fighter(), fighter("B")
    res = resolve_attack(a, d, Attack("Kick", 3, 70), True, scripted(rolls=[0.75]))
    assert not res.hit
    assert res.attacker is a and res.defender is d
    assert res.narration == "A's Kick missed!"


def test_plain_damage_narration(scripted):
    res = resolve_attack(fighter(), fighter("B"), Attack("Punch", 2, 100), True, scripted(rolls=[0.0]))
    assert res.defender.hp == 18
    assert res.damage == 2
    assert res.narration == "A used Punch! Dealt 2 damage!"


def test_damage_clamped_at_zero(scripted):
    res = resolve_attack(fighter(), fighter("B", hp=1), Attack("Smash", 9, 100), True, scripted(rolls=[0.5]))
    assert res.defender.hp == 0


def test_enemy_debuff_reduces_damage_floored(scripted):
    weak = fighter(debuff=-5, debuff_turns=1)
    res = resolve_attack(weak, fighter("P"), Attack("Bite", 3, 100), False, scripted(rolls=[0.1]))
    assert res.damage == 0
    assert res.defender.hp == 20  # never heals the target


def test_player_debuff_is_ignored(scripted):
    # Only the enemy side has its damage reduced
    p = fighter(debuff=-1, debuff_turns=2)
    res = resolve_attack(p, fighter("E"), Attack("Punch", 2, 100), True, scripted(rolls=[0.1]))
    assert res.damage == 2


def test_debuff_effect_overwrites_previous(scripted):
    enemy = fighter("E", debuff=-3, debuff_turns=5)
    shout = Attack("Shout", 0, 100, Debuff(-1, 2))
    res = resolve_attack(fighter("P"), enemy, shout, True, scripted(rolls=[0.2]))
    assert (res.defender.debuff, res.defender.debuff_turns) == (-1, 2)
    assert res.narration == "P used Shout! E's attack was reduced!"


def test_debuff_duration_defaults_to_zero(scripted):
    res = resolve_attack(fighter(), fighter("B"), Attack("Glare", 0, 100, Debuff(-2)), True, scripted(rolls=[0.2]))
    assert res.defender.debuff_turns == 0


def test_heal_targets_attacker_and_caps(scripted):
    attacker = fighter("E", hp=14, max_hp=15)
    defender = fighter("P", hp=10)
    res = resolve_attack(attacker, defender, Attack("Lick", 0, 100, Heal(1)), False, scripted(rolls=[0.2]))
    assert res.attacker.hp == 15
    assert res.defender.hp == 10
    assert res.narration == "E used Lick! Healed 1 HP!"
    again = resolve_attack(res.attacker, defender, Attack("Lick", 0, 100, Heal(1)), False, scripted(rolls=[0.2]))
    assert again.attacker.hp == 15
    assert again.narration.endswith("Healed 0 HP!")


def test_heal_applies_after_damage(scripted):
    drain = Attack("Drain", 4, 100, Heal(2))
    res = resolve_attack(fighter(hp=10), fighter("B"), drain, True, scripted(rolls=[0.0]))
    assert res.defender.hp == 16
    assert res.attacker.hp == 12


def test_tick_debuff_counts_down_then_clears():
    c = fighter(debuff=-1, debuff_turns=2)
    c = tick_debuff(c)
    assert (c.debuff, c.debuff_turns) == (-1, 1)
    c = tick_debuff(c)
    assert (c.debuff, c.debuff_turns) == (-1, 0)
    c = tick_debuff(c)
    assert c.debuff is None and c.debuff_turns is None
    assert tick_debuff(c) is c


def test_hp_bounds_hold_under_random_play():
    rng = random.Random(7)
    moves = [Attack("Hit", 4, 60), Attack("Mend", 0, 80, Heal(3)), Attack("Hex", 1, 90, Debuff(-2, 1))]
    a, d = fighter("A", hp=9, max_hp=9), fighter("B", hp=12, max_hp=12)
    for i in range(500):
        res = resolve_attack(a, d, rng.choice(moves), i % 2 == 0, rng)
        a, d = res.defender, res.attacker
        for c in (a, d):
            assert 0 <= c.hp <= c.max_hp
        if a.is_fainted() or d.is_fainted():
            a, d = a.with_hp(a.max_hp), d.with_hp(d.max_hp)
