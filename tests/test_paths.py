import random

from skirmish.coordinates import Position
from skirmish.paths import UnitPaths


def make_paths():
    return UnitPaths(random.Random(42))


def test_no_target_means_no_step():
    paths = make_paths()
    assert paths.step(1, Position(0, 0), 5, 5) is None
    assert paths.has_target(1) is False
    assert paths.target_of(1) is None


def test_target_is_remembered_and_cleared():
    paths = make_paths()
    target = Position(3, 4)
    paths.set_target(1, target)
    assert paths.has_target(1)
    assert paths.target_of(1) == target
    paths.clear(1)
    assert not paths.has_target(1)
    paths.clear(1)
    assert paths.target_of(1) is None


def test_march_reaches_target_one_cell_per_step():
    paths = make_paths()
    start, target = Position(0, 0), Position(3, 5)
    paths.set_target(7, target)
    position = start
    steps = 0
    while paths.has_target(7):
        new = paths.step(7, position, 10, 10)
        assert position.distance(new) == 1
        assert target.distance(new) == target.distance(position) - 1
        position = new
        steps += 1
    assert position == target
    assert steps == start.distance(target)
    assert paths.step(7, position, 10, 10) is None


def test_step_avoids_obstacle():
    paths = make_paths()
    start, target = Position(0, 0), Position(2, 0)
    blocked = {Position(1, 0)}
    paths.set_target(1, target)
    new = paths.step(1, start, 3, 3, blocked)
    assert new not in blocked
    assert target.distance(new) < target.distance(start)


def test_step_stays_inside_field():
    paths = make_paths()
    paths.set_target(1, Position(5, 5))
    position = Position(0, 0)
    for _ in range(6):
        position = paths.step(1, position, 2, 2)
        assert position.x < 2 and position.y < 2
    assert paths.has_target(1)


def test_surrounded_unit_waits_in_place():
    paths = make_paths()
    position = Position(1, 1)
    paths.set_target(1, Position(4, 4))
    result = paths.step(1, position, 10, 10, set(position.neighbours()))
    assert result == position
    assert paths.has_target(1)


def test_arrival_clears_target():
    paths = make_paths()
    target = Position(1, 0)
    paths.set_target(2, target)
    assert paths.step(2, Position(0, 0), 5, 5) == target
    assert not paths.has_target(2)