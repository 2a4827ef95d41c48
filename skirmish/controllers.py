"""Controllers that coordinate units, turns and spawning."""

from __future__ import annotations

from typing import Any

from skirmish.coordinates import Position
from skirmish.event_log import EventLog
from skirmish.events import Error
from skirmish.game_field import GameField
from skirmish.move_order import MoveOrder
from skirmish.primitives import try_spawn, try_start_march
from skirmish.unit_ai import UnitAI
from skirmish.unit_heap import UnitHeap


class General:
    """Gives orders to units: go there, do that."""

    def __init__(self, heap: UnitHeap, log: EventLog | None = None) -> None:
        self._heap = heap
        self._log = log if log is not None else EventLog()

    def march(self, tick: int, field: GameField, unit_id: int, target: Position) -> bool:
        """Order a unit to march to ``target``; True if the march started."""
        if unit_id not in self._heap:
            self._log.log(tick, Error("Simulation::March field unit is not exists."))
            return False
        unit = self._heap.get(unit_id)
        if field.position_of(unit_id) is None:
            self._log.log(
                tick,
                Error(
                    "Simulation::March field is not created. "
                    "Use Simulation::CreateMap before."
                ),
            )
            return False
        if field.is_out_of_field(target.x, target.y):
            self._log.log(
                tick, Error("Simulation::March incorrect position. Target is out of map.")
            )
            return False
        return try_start_march(field, unit, target, tick, self._log)


class TurnMaster:
    """Runs the AI of every unit during a turn."""

    def __init__(
        self, heap: UnitHeap, move_order: MoveOrder, log: EventLog | None = None
    ) -> None:
        self._heap = heap
        self._move_order = move_order
        self._log = log if log is not None else EventLog()
        self._ai: dict[int, UnitAI] = {}

    def set_unit_ai(self, unit_id: int, ai_type: type[UnitAI], field: GameField) -> None:
        """Give the unit a brain of class ``ai_type``."""
        self._ai[unit_id] = ai_type(field, self._heap, self._log)

    def tick(self, tick: int) -> bool:
        """Let every unit in turn order act; True if any of them did anything."""
        if len(self._move_order) == 0:
            return False
        activity = False
        for unit_id in self._move_order.turn_queue():
            unit = self._heap.get(unit_id)
            if self._ai[unit_id].tick(unit, tick):
                activity = True
        return activity


class TurnPreparation:
    """Handles the start and end of a turn."""

    def __init__(self, heap: UnitHeap, move_order: MoveOrder) -> None:
        self._heap = heap
        self._move_order = move_order

    def prepare(self, field: GameField) -> None:
        """Clear the field, the heap and the turn order of dead units."""
        dead = field.dead_units()
        self._move_order.erase(dead)
        self._heap.erase(dead)
        field.erase_dead_units()
        if self._heap.contains_dead():
            raise RuntimeError("a dead unit was left in the heap")

    def finish(self, field: GameField) -> None:
        """End-of-turn hook; the current rules need nothing done here."""
        return None


class UnitSpawner:
    """Creates units in the heap and on the field and queues them for turns."""

    def __init__(
        self, heap: UnitHeap, move_order: MoveOrder, log: EventLog | None = None
    ) -> None:
        self._heap = heap
        self._move_order = move_order
        self._log = log if log is not None else EventLog()

    def spawn(self, field: GameField | None, tick: int, command: Any) -> bool:
        """Create the unit described by ``command``; True on success."""
        if command.unit_id in self._heap:
            self._log.log(
                tick,
                Error("Simulation::spawnCommand trying to recreate unit with same id."),
            )
            return False
        if not try_spawn(field, self._heap, command, tick, self._log):
            return False
        self._move_order.push(command.unit_id)
        return True