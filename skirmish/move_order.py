"""Cyclic turn order with lazy removal of erased units."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class MoveOrder:
    """Units act in the order they were added; erased units drop out lazily."""

    def __init__(self) -> None:
        self._order: deque[int] = deque()
        self._dead: set[int] = set()

    def push(self, unit_id: int) -> None:
        """Add a unit to the end of the turn order."""
        self._order.append(unit_id)

    def erase(self, unit_ids: Iterable[int]) -> None:
        """Mark units for removal; they leave when they reach the front."""
        self._dead.update(unit_ids)

    def __len__(self) -> int:
        return len(self._order)

    def _clear_dead(self) -> None:
        while self._order and self._order[0] in self._dead:
            self._dead.discard(self._order.popleft())

    def _current(self) -> int | None:
        self._clear_dead()
        return self._order[0] if self._order else None

    def _advance(self) -> None:
        self._clear_dead()
        if self._order:
            self._order.rotate(-1)

    def turn_queue(self) -> list[int]:
        """One full cycle of living units, starting from the current one."""
        end = self._current()
        if end is None:
            return []
        queue: list[int] = []
        while True:
            queue.append(self._current())
            self._advance()
            if self._current() == end:
                break
        return queue