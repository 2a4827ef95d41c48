"""Spatial state of the battlefield: positions, obstacles and deaths."""

from __future__ import annotations

import random
from collections.abc import Iterator
from typing import Any

from skirmish.coordinates import Position
from skirmish.paths import UnitPaths
from skirmish.randomness import random_choice
from skirmish.units import Unit, UnitType


class GameField:
    """Keeps unit positions, resolves collisions and finds targets."""

    def __init__(self, width: int, height: int, rng: Any = None) -> None:
        self._width = width
        self._height = height
        self._rng = rng if rng is not None else random
        self._dead: set[int] = set()
        self._units_at: dict[Position, set[int]] = {}
        self._positions: dict[int, Position] = {}
        self._solid: dict[int, bool] = {}
        self._obstacles: set[Position] = set()
        self._paths = UnitPaths(self._rng)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @staticmethod
    def _is_solid(unit: Unit) -> bool:
        try:
            return unit.has_type(UnitType.LAND_SOLID)
        except KeyError:
            return False

    def _place(self, unit_id: int, pos: Position) -> None:
        self._units_at.setdefault(pos, set()).add(unit_id)
        self._positions[unit_id] = pos
        if self._solid.get(unit_id):
            self._obstacles.add(pos)

    def _lift(self, unit_id: int) -> Position:
        pos = self._positions[unit_id]
        if self._solid.get(unit_id):
            self._obstacles.discard(pos)
        occupants = self._units_at.get(pos)
        if occupants is not None:
            occupants.discard(unit_id)
            if not occupants:
                del self._units_at[pos]
        return pos

    def add_unit(self, unit: Unit, x: int, y: int) -> bool:
        """Put ``unit`` on the field; False when a solid unit finds the cell taken."""
        pos = Position(x, y)
        solid = self._is_solid(unit)
        if solid and pos in self._obstacles:
            return False
        self._solid[unit.id] = solid
        self._place(unit.id, pos)
        return True

    def step(self, unit: Unit) -> bool:
        """Move a marching unit one cell; True if it moved or waited."""
        if self.is_dead(unit.id) or unit.is_dead:
            return False
        old = self._lift(unit.id)
        new = self._paths.step(unit.id, old, self._width, self._height, self._obstacles)
        self._place(unit.id, new if new is not None else old)
        return new is not None

    def kill(self, unit_id: int) -> None:
        """Mark the unit dead; its body stays until ``erase_dead_units``."""
        self._dead.add(unit_id)

    def is_dead(self, unit_id: int) -> bool:
        return unit_id in self._dead

    def march(self, unit_id: int, x: int, y: int) -> None:
        """Set the cell the unit heads for."""
        self._paths.set_target(unit_id, Position(x, y))

    def on_march(self, unit_id: int) -> bool:
        return self._paths.has_target(unit_id)

    def march_target(self, unit_id: int) -> Position | None:
        return self._paths.target_of(unit_id)

    def _random_live_unit_at(self, pos: Position) -> int | None:
        occupants = sorted(self._units_at.get(pos, ()))
        if not occupants:
            return None
        chosen = random_choice(occupants, self._rng)
        if not self.is_dead(chosen):
            return chosen
        return next((uid for uid in occupants if not self.is_dead(uid)), None)

    @staticmethod
    def _square(center: Position, radius: int) -> Iterator[Position]:
        for x in range(center.x - radius, center.x + radius + 1):
            for y in range(center.y - radius, center.y + radius + 1):
                yield Position(x, y)

    def units_in_radius(self, center: Position, min_radius: int, max_radius: int) -> list[int]:
        """One random living unit from each cell whose distance lies in the range."""
        found: list[int] = []
        for cell in self._square(center, max_radius):
            if cell.x < 0 or cell.y < 0 or cell == center:
                continue
            if min_radius <= center.distance(cell) <= max_radius:
                unit_id = self._random_live_unit_at(cell)
                if unit_id is not None:
                    found.append(unit_id)
        return found

    def units_around(self, unit_id: int, min_radius: int, max_radius: int) -> list[int]:
        """Like ``units_in_radius`` centred on the unit's cell."""
        center = self.position_of(unit_id)
        if center is None:
            return []
        return self.units_in_radius(center, min_radius, max_radius)

    def random_unit_around(self, unit_id: int, min_radius: int, max_radius: int) -> int | None:
        """A random unit from ``units_around``, or None when there is none."""
        candidates = self.units_around(unit_id, min_radius, max_radius)
        if not candidates:
            return None
        return random_choice(candidates, self._rng)

    def dead_units(self) -> frozenset[int]:
        return frozenset(self._dead)

    def erase_dead_units(self) -> None:
        """Remove the bodies of all dead units from the field."""
        for unit_id in self._dead:
            if unit_id in self._positions:
                self._lift(unit_id)
                del self._positions[unit_id]
            self._solid.pop(unit_id, None)
        self._dead.clear()

    def position_of(self, unit_id: int) -> Position | None:
        return self._positions.get(unit_id)

    def is_out_of_field(self, x: int, y: int) -> bool:
        return x < 0 or y < 0 or x >= self._width or y >= self._height