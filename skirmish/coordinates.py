"""Grid positions and the movement rules that go with them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """A field cell on a grid where diagonal moves are allowed."""

    x: int
    y: int

    def distance(self, other: Position) -> int:
        """Chebyshev distance: a diagonal step costs the same as a straight one."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def neighbours(self) -> list[Position]:
        """Cells reachable in one step, never going below zero on either axis."""
        x, y = self.x, self.y
        cells: list[tuple[int, int]] = []
        if x > 0:
            cells += [(x - 1, y), (x - 1, y + 1)]
        if y > 0:
            cells += [(x, y - 1), (x + 1, y - 1)]
        if x > 0 and y > 0:
            cells.append((x - 1, y - 1))
        cells += [(x + 1, y), (x + 1, y + 1), (x, y + 1)]
        return [Position(cx, cy) for cx, cy in cells]


@dataclass(frozen=True, order=True)
class ManhattanPosition:
    """A cell on a grid where a step moves along one axis only."""

    x: int
    y: int

    def distance(self, other: ManhattanPosition) -> int:
        """Manhattan distance between two cells."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def neighbours(self) -> list[ManhattanPosition]:
        """Cells reachable in one axis-aligned step, never going below zero."""
        x, y = self.x, self.y
        cells: list[tuple[int, int]] = []
        if x > 0:
            cells.append((x - 1, y))
        if y > 0:
            cells.append((x, y - 1))
        cells += [(x + 1, y), (x, y + 1)]
        return [ManhattanPosition(cx, cy) for cx, cy in cells]


@dataclass(frozen=True, order=True)
class SpatialPosition:
    """A cell with a height, for units that can fly; diagonal moves allowed."""

    x: int
    y: int
    z: int = 0

    def distance(self, other: SpatialPosition) -> int:
        """Distance where height difference adds to the vertical axis."""
        return max(
            abs(self.x - other.x),
            abs(self.y - other.y) + abs(self.z - other.z),
        )

    def neighbours(self) -> list[SpatialPosition]:
        """Cells reachable in one step on the same height level."""
        flat = Position(self.x, self.y).neighbours()
        return [SpatialPosition(cell.x, cell.y, self.z) for cell in flat]