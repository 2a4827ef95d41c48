"""March targets and one-cell path stepping."""

from __future__ import annotations

import random
from collections.abc import Collection
from typing import Any

from skirmish.coordinates import Position


class UnitPaths:
    """Remembers where each unit marches and moves it one cell at a time."""

    def __init__(self, rng: Any = None) -> None:
        self._targets: dict[int, Position] = {}
        self._rng = rng if rng is not None else random

    def set_target(self, unit_id: int, position: Position) -> None:
        """Make ``position`` the unit's march target."""
        self._targets[unit_id] = position

    def clear(self, unit_id: int) -> None:
        """Forget the unit's march target, if it has one."""
        self._targets.pop(unit_id, None)

    def has_target(self, unit_id: int) -> bool:
        return unit_id in self._targets

    def target_of(self, unit_id: int) -> Position | None:
        """The unit's march target, or None when it is not marching."""
        return self._targets.get(unit_id)

    def step(
        self,
        unit_id: int,
        position: Position,
        width: int,
        height: int,
        obstacles: Collection[Position] = frozenset(),
    ) -> Position | None:
        """Move one cell towards the target.

        Returns the new position, which is the old one when every way is
        blocked, or None when the unit has no target. On arrival the target
        is forgotten.
        """
        target = self._targets.get(unit_id)
        if target is None:
            return None
        best = position
        best_distance: int | None = None
        for candidate in position.neighbours():
            if candidate.x >= width or candidate.y >= height:
                continue
            if candidate in obstacles:
                continue
            current = target.distance(candidate)
            if current == best_distance:
                if self._rng.randrange(2) == 0:
                    best = candidate
            elif best_distance is None or current < best_distance:
                best, best_distance = candidate, current
        if best == target:
            del self._targets[unit_id]
        return best