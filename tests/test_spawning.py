import random

import pytest

from skirmish.commands import SpawnHunter, SpawnSwordsman, Tick
from skirmish.coordinates import Position
from skirmish.game_field import GameField
from skirmish.spawning import spawn, spawn_hunter, spawn_swordsman
from skirmish.unit_heap import UnitHeap
from skirmish.units import Attribute, Mechanic


def _world():
    return GameField(10, 10, random.Random(1)), UnitHeap()


def test_spawn_swordsman_fills_stat_block():
    field, heap = _world()
    result = spawn_swordsman(field, heap, SpawnSwordsman(unit_id=1, x=2, y=3, hp=10, strength=5))
    assert result.correct
    assert result.unit_id == 1
    assert result.unit_type == "SpawnSwordsman"
    assert (result.x, result.y) == (2, 3)
    unit = heap.get(1)
    assert unit.hp == 10
    assert unit.attribute(Attribute.STRENGTH) == 5
    assert unit.allows(Mechanic.MOVE)
    assert unit.allows(Mechanic.MELEE_ATTACK)
    assert field.position_of(1) == Position(2, 3)


def test_spawn_hunter_fills_stat_block():
    field, heap = _world()
    command = SpawnHunter(unit_id=7, x=4, y=5, hp=8, agility=2, strength=1, range=4)
    result = spawn_hunter(field, heap, command)
    assert result.correct
    assert result.unit_type == "SpawnHunter"
    unit = heap.get(7)
    assert unit.attribute(Attribute.AGILITY) == 2
    assert unit.attribute(Attribute.STRENGTH) == 1
    assert unit.attribute(Attribute.RANGE) == 4
    assert unit.allows(Mechanic.RANGE_ATTACK)
    assert unit.allows(Mechanic.MELEE_ATTACK)
    assert unit.hp == 8


def test_hunter_with_small_range_is_rejected():
    field, heap = _world()
    result = spawn_hunter(field, heap, SpawnHunter(unit_id=1, x=0, y=0, hp=5, range=1))
    assert not result.correct
    assert result.reason == "we try to SpawnHunter with small range"
    assert 1 not in heap
    assert field.position_of(1) is None


def test_spawn_without_field():
    heap = UnitHeap()
    result = spawn_swordsman(None, heap, SpawnSwordsman(unit_id=1, hp=5))
    assert not result.correct
    assert result.reason == "Can not spawn unit without field"
    assert 1 not in heap


def test_spawn_out_of_field():
    field, heap = _world()
    result = spawn_swordsman(field, heap, SpawnSwordsman(unit_id=1, x=10, y=0, hp=5))
    assert not result.correct
    assert result.reason == "Can not spawn unit out off field"
    assert 1 not in heap


def test_spawn_on_occupied_cell():
    field, heap = _world()
    assert spawn_swordsman(field, heap, SpawnSwordsman(unit_id=1, x=1, y=1, hp=5)).correct
    result = spawn_swordsman(field, heap, SpawnSwordsman(unit_id=2, x=1, y=1, hp=5))
    assert not result.correct
    assert result.reason == "can not add unit in this coordinates"
    assert 2 not in heap
    assert 1 in heap
    assert field.position_of(1) == Position(1, 1)


def test_spawn_with_zero_hp_is_dead_on_arrival():
    field, heap = _world()
    result = spawn_swordsman(field, heap, SpawnSwordsman(unit_id=3, x=0, y=0, hp=0))
    assert result.correct
    assert heap.get(3).is_dead
    assert field.is_dead(3)


def test_spawn_dispatches_on_command_type():
    field, heap = _world()
    hunter = spawn(field, heap, SpawnHunter(unit_id=1, x=0, y=0, hp=5, range=2))
    swordsman = spawn(field, heap, SpawnSwordsman(unit_id=2, x=3, y=3, hp=5))
    assert hunter.unit_type == "SpawnHunter"
    assert swordsman.unit_type == "SpawnSwordsman"


def test_spawn_rejects_other_commands():
    field, heap = _world()
    with pytest.raises(TypeError):
        spawn(field, heap, Tick())