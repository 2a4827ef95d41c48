"""Melee and ranged attacks between units."""

from __future__ import annotations

from skirmish.game_field import GameField
from skirmish.results import AttackResult
from skirmish.unit_heap import UnitHeap
from skirmish.units import Attribute, Mechanic, Unit


def attack(attacker: Unit, target: Unit, field: GameField, damage: int) -> AttackResult:
    """Deal ``damage`` to ``target``; a dead attacker does nothing."""
    if attacker.is_dead:
        return AttackResult()
    target.take_damage(damage)
    if target.is_dead:
        field.kill(target.id)
    return AttackResult(
        activity=True,
        attacker_id=attacker.id,
        target_id=target.id,
        damage=damage,
        target_hp=target.hp,
        target_died=target.is_dead,
    )


def _random_attack(
    field: GameField,
    heap: UnitHeap,
    unit: Unit,
    damage_stat: Attribute,
    min_radius: int,
    max_radius: int,
) -> AttackResult:
    target_id = field.random_unit_around(unit.id, min_radius, max_radius)
    if target_id is None:
        return AttackResult()
    return attack(unit, heap.get(target_id), field, unit.attribute(damage_stat))


def random_melee_attack(
    field: GameField, heap: UnitHeap, unit: Unit, damage_stat: Attribute
) -> AttackResult:
    """Hit a random living unit on an adjacent cell, damage taken from ``damage_stat``."""
    if not unit.allows(Mechanic.MELEE_ATTACK):
        return AttackResult(allowed=False)
    if unit.is_dead:
        return AttackResult()
    return _random_attack(field, heap, unit, damage_stat, 1, 1)


def random_range_attack(
    field: GameField, heap: UnitHeap, unit: Unit, damage_stat: Attribute
) -> AttackResult:
    """Shoot a random living unit between distance 2 and the unit's range."""
    if not unit.allows(Mechanic.RANGE_ATTACK):
        return AttackResult(allowed=False)
    if unit.is_dead:
        return AttackResult()
    reach = unit.attribute(Attribute.RANGE)
    if reach < 2:
        raise ValueError(f"range attack needs a range of at least 2, got {reach}")
    return _random_attack(field, heap, unit, damage_stat, 2, reach)