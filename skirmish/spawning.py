"""Creating units on the field and filling in their stat blocks."""

from __future__ import annotations

from typing import Any

from skirmish.commands import SpawnHunter, SpawnSwordsman
from skirmish.game_field import GameField
from skirmish.results import SpawnResult
from skirmish.unit_heap import UnitHeap
from skirmish.units import Attribute, Mechanic, Status, UnitType


def _base_unit(
    field: GameField | None, heap: UnitHeap, command: Any, name: str
) -> SpawnResult:
    """A unit that takes up a land cell, with no other stats yet."""
    if field is None:
        return SpawnResult(reason="Can not spawn unit without field")
    if field.is_out_of_field(command.x, command.y):
        return SpawnResult(reason="Can not spawn unit out off field")
    unit = heap.create(command.unit_id, name)
    unit.add_type(UnitType.LAND_SOLID)
    if not field.add_unit(unit, command.x, command.y):
        heap.erase([command.unit_id])
        return SpawnResult(reason="can not add unit in this coordinates")
    pos = field.position_of(unit.id)
    return SpawnResult(
        correct=True,
        unit_id=unit.id,
        unit_type=unit.name,
        x=pos.x,
        y=pos.y,
    )


def _base_live_unit(
    field: GameField | None, heap: UnitHeap, command: Any, name: str
) -> SpawnResult:
    """A unit that can move and has hit points."""
    result = _base_unit(field, heap, command, name)
    if not result.correct:
        return result
    unit = heap.get(command.unit_id)
    unit.allow(Mechanic.MOVE)
    unit.set_state(Status.HP, command.hp)
    if unit.is_dead:
        field.kill(unit.id)
    return result


def spawn_swordsman(
    field: GameField | None, heap: UnitHeap, command: SpawnSwordsman
) -> SpawnResult:
    """Create a swordsman: a melee fighter."""
    result = _base_live_unit(field, heap, command, "SpawnSwordsman")
    if not result.correct:
        return result
    unit = heap.get(command.unit_id)
    unit.set_attribute(Attribute.STRENGTH, command.strength)
    unit.allow(Mechanic.MELEE_ATTACK)
    return result


def spawn_hunter(
    field: GameField | None, heap: UnitHeap, command: SpawnHunter
) -> SpawnResult:
    """Create a hunter: shoots from afar, fights in melee when close."""
    if command.range < 2:
        return SpawnResult(reason="we try to SpawnHunter with small range")
    result = _base_live_unit(field, heap, command, "SpawnHunter")
    if not result.correct:
        return result
    unit = heap.get(command.unit_id)
    unit.set_attribute(Attribute.STRENGTH, command.strength)
    unit.set_attribute(Attribute.AGILITY, command.agility)
    unit.set_attribute(Attribute.RANGE, command.range)
    unit.allow(Mechanic.MELEE_ATTACK)
    unit.allow(Mechanic.RANGE_ATTACK)
    return result


def spawn(field: GameField | None, heap: UnitHeap, command: Any) -> SpawnResult:
    """Create the unit described by a spawn command of any known kind."""
    if isinstance(command, SpawnSwordsman):
        return spawn_swordsman(field, heap, command)
    if isinstance(command, SpawnHunter):
        return spawn_hunter(field, heap, command)
    raise TypeError(f"not a spawn command: {type(command).__name__}")