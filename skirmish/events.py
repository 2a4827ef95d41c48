"""Events written to the simulation log."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


def _named(wire: str, default: Any = 0) -> Any:
    """A field printed as ``wire`` in the log."""
    return field(default=default, metadata={"wire": wire})


@dataclass(frozen=True)
class Error:
    """Something the simulation could not do."""

    NAME: ClassVar[str] = "ERROR"

    description: str = _named("description", "")


@dataclass(frozen=True)
class MapCreated:
    NAME: ClassVar[str] = "MAP_CREATED"

    width: int = _named("width")
    height: int = _named("height")


@dataclass(frozen=True)
class MarchEnded:
    NAME: ClassVar[str] = "MARCH_ENDED"

    unit_id: int = _named("unitId")
    x: int = _named("x")
    y: int = _named("y")


@dataclass(frozen=True)
class MarchStarted:
    NAME: ClassVar[str] = "MARCH_STARTED"

    unit_id: int = _named("unitId")
    x: int = _named("x")
    y: int = _named("y")
    target_x: int = _named("targetX")
    target_y: int = _named("targetY")


@dataclass(frozen=True)
class UnitAttacked:
    NAME: ClassVar[str] = "UNIT_ATTACKED"

    attacker_unit_id: int = _named("attackerUnitId")
    target_unit_id: int = _named("targetUnitId")
    damage: int = _named("damage")
    target_hp: int = _named("targetHp")


@dataclass(frozen=True)
class UnitDied:
    NAME: ClassVar[str] = "UNIT_DIED"

    unit_id: int = _named("unitId")


@dataclass(frozen=True)
class UnitMoved:
    NAME: ClassVar[str] = "UNIT_MOVED"

    unit_id: int = _named("unitId")
    x: int = _named("x")
    y: int = _named("y")


@dataclass(frozen=True)
class UnitSpawned:
    NAME: ClassVar[str] = "UNIT_SPAWNED"

    unit_id: int = _named("unitId")
    unit_type: str = _named("unitType", "")
    x: int = _named("x")
    y: int = _named("y")