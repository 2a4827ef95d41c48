"""The simulation: reacts to commands by coordinating the controllers."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Any

from skirmish.commands import CreateMap, March, SpawnHunter, SpawnSwordsman, Tick
from skirmish.controllers import General, TurnMaster, TurnPreparation, UnitSpawner
from skirmish.coordinates import Position
from skirmish.event_log import EventLog
from skirmish.events import Error, MapCreated
from skirmish.game_field import GameField
from skirmish.move_order import MoveOrder
from skirmish.unit_ai import HunterAI, SwordsmanAI, UnitAI
from skirmish.unit_heap import UnitHeap


@dataclass
class SimulationStatus:
    """State after the last tick: which tick it was and whether the run is over."""

    tick: int = 0
    finished: bool = False


class Simulation:
    """Mediator between incoming commands and the controllers."""

    def __init__(self, log: EventLog | None = None, rng: Any = None) -> None:
        self._log = log if log is not None else EventLog()
        self._rng = rng if rng is not None else random
        self._current_tick = 0
        self._status = SimulationStatus()
        self._heap = UnitHeap()
        self._move_order = MoveOrder()
        self._field: GameField | None = None
        self._preparation = TurnPreparation(self._heap, self._move_order)
        self._turn_master = TurnMaster(self._heap, self._move_order, self._log)
        self._spawner = UnitSpawner(self._heap, self._move_order, self._log)
        self._general = General(self._heap, self._log)

    @property
    def field(self) -> GameField | None:
        return self._field

    @property
    def heap(self) -> UnitHeap:
        return self._heap

    def status(self) -> SimulationStatus:
        """A copy of the status after the last tick."""
        return replace(self._status)

    def command(self, command: Any) -> None:
        """Carry out one command; unknown kinds are logged as errors."""
        if isinstance(command, CreateMap):
            self._create_map(command)
        elif isinstance(command, Tick):
            self._tick()
        elif isinstance(command, March):
            self._march(command)
        elif isinstance(command, SpawnSwordsman):
            self._spawn(command, SwordsmanAI)
        elif isinstance(command, SpawnHunter):
            self._spawn(command, HunterAI)
        else:
            self._log.log(self._current_tick, Error("Simulation::command type not found."))

    def _tick(self) -> None:
        if self._field is None:
            self._log.log(
                self._current_tick,
                Error(
                    "Simulation::Tick field is not created. "
                    "Use Simulation::CreateMap before. Simulation done."
                ),
            )
            self._status.finished = True
            return
        self._status.finished = False
        self._status.tick = self._current_tick
        self._preparation.prepare(self._field)
        activity = self._turn_master.tick(self._current_tick)
        self._status.finished = not activity
        self._preparation.finish(self._field)
        self._current_tick += 1

    def _create_map(self, command: CreateMap) -> None:
        if self._field is not None:
            self._log.log(
                self._current_tick, Error("Simulation::CreateMap we try to create map twice.")
            )
            return
        if command.width <= 0 or command.height <= 0:
            self._log.log(self._current_tick, Error("Simulation::CreateMap incorrect sizes."))
            return
        self._field = GameField(command.width, command.height, self._rng)
        self._log.log(
            self._current_tick, MapCreated(width=command.width, height=command.height)
        )

    def _march(self, command: March) -> None:
        if self._field is None:
            self._log.log(
                self._current_tick,
                Error(
                    "Simulation::March field is not created. "
                    "Use Simulation::CreateMap before."
                ),
            )
            return
        self._general.march(
            self._current_tick,
            self._field,
            command.unit_id,
            Position(command.target_x, command.target_y),
        )

    def _spawn(self, command: Any, ai_type: type[UnitAI]) -> None:
        if self._spawner.spawn(self._field, self._current_tick, command):
            self._turn_master.set_unit_ai(command.unit_id, ai_type, self._field)