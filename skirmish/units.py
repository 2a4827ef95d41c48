"""Units and the enumerations that make up their stat block."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Mechanic(Enum):
    """Actions a unit is permitted to perform."""

    MOVE = auto()
    RANGE_ATTACK = auto()
    MELEE_ATTACK = auto()


class Attribute(Enum):
    """Fixed characteristics of a unit."""

    STRENGTH = auto()
    AGILITY = auto()
    RANGE = auto()


class Status(Enum):
    """Changing values and effects on a unit."""

    HP = auto()
    FRACTION = auto()


class UnitType(Enum):
    """Options used when a unit is spawned."""

    LAND_SOLID = auto()


@dataclass(eq=False)
class Unit:
    """A unit: its identity and its stat block.

    Reading a stat that was never set raises KeyError.
    """

    id: int
    name: str = "defaultUnit"
    _mechanics: dict[Mechanic, bool] = field(default_factory=dict, repr=False)
    _attributes: dict[Attribute, int] = field(default_factory=dict, repr=False)
    _status: dict[Status, int] = field(default_factory=dict, repr=False)
    _types: dict[UnitType, bool] = field(default_factory=dict, repr=False)

    def allows(self, mechanic: Mechanic) -> bool:
        return self._mechanics[mechanic]

    def allow(self, mechanic: Mechanic, allowed: bool = True) -> None:
        self._mechanics[mechanic] = allowed

    def attribute(self, attribute: Attribute) -> int:
        return self._attributes[attribute]

    def set_attribute(self, attribute: Attribute, value: int) -> None:
        self._attributes[attribute] = value

    def state(self, status: Status) -> int:
        return self._status[status]

    def set_state(self, status: Status, value: int) -> None:
        self._status[status] = value

    def has_type(self, unit_type: UnitType) -> bool:
        return self._types[unit_type]

    def add_type(self, unit_type: UnitType) -> None:
        self._types[unit_type] = True

    @property
    def hp(self) -> int:
        """Current hit points."""
        return self._status[Status.HP]

    @property
    def is_dead(self) -> bool:
        return self.hp == 0

    def take_damage(self, damage: int) -> None:
        """Lose ``damage`` hit points, never dropping below zero."""
        self._status[Status.HP] = max(self.hp - damage, 0)