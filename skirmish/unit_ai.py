"""What each kind of unit does on its turn."""

from __future__ import annotations

from skirmish.event_log import EventLog
from skirmish.game_field import GameField
from skirmish.primitives import try_melee_attack, try_range_attack, try_step
from skirmish.unit_heap import UnitHeap
from skirmish.units import Attribute, Unit


class UnitAI:
    """Base behaviour: a unit that does nothing on its turn."""

    def __init__(
        self, field: GameField, heap: UnitHeap, log: EventLog | None = None
    ) -> None:
        self.field = field
        self.heap = heap
        self.log = log if log is not None else EventLog()

    def tick(self, unit: Unit, tick: int) -> bool:
        """Act for one turn; True if the unit did anything, waiting included."""
        return False


class HunterAI(UnitAI):
    """Shoots if it can, otherwise fights in melee, otherwise marches."""

    def tick(self, unit: Unit, tick: int) -> bool:
        return (
            try_range_attack(self.field, self.heap, unit, tick, self.log, Attribute.AGILITY)
            or try_melee_attack(self.field, self.heap, unit, tick, self.log, Attribute.STRENGTH)
            or try_step(self.field, unit, tick, self.log)
        )


class SwordsmanAI(UnitAI):
    """Fights in melee if anyone is adjacent, otherwise marches."""

    def tick(self, unit: Unit, tick: int) -> bool:
        return (
            try_melee_attack(self.field, self.heap, unit, tick, self.log, Attribute.STRENGTH)
            or try_step(self.field, unit, tick, self.log)
        )