import pytest

from skirmish.unit_heap import UnitHeap
from skirmish.units import Status, Unit


def test_create_stores_unit():
    heap = UnitHeap()
    unit = heap.create(5, "Hunter")
    assert 5 in heap
    assert heap.get(5) is unit
    assert unit.name == "Hunter"
    assert len(heap) == 1


def test_get_missing_raises():
    heap = UnitHeap()
    with pytest.raises(KeyError):
        heap.get(1)
    assert 1 not in heap


def test_add_replaces_same_id():
    heap = UnitHeap()
    heap.create(1, "first")
    replacement = Unit(1, "second")
    heap.add(replacement)
    assert heap.get(1) is replacement
    assert len(heap) == 1


def test_erase_removes_and_ignores_missing():
    heap = UnitHeap()
    heap.create(1, "a")
    heap.create(2, "b")
    heap.erase({1, 99})
    assert 1 not in heap
    assert 2 in heap
    assert [u.id for u in heap] == [2]


def test_contains_dead():
    heap = UnitHeap()
    alive = heap.create(1, "a")
    alive.set_state(Status.HP, 3)
    assert heap.contains_dead() is False
    dead = heap.create(2, "b")
    dead.set_state(Status.HP, 0)
    assert heap.contains_dead() is True
    heap.erase([2])
    assert heap.contains_dead() is False