"""Commands read from a scenario file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


def _named(wire: str) -> Any:
    """An integer field defaulting to zero, printed and parsed as ``wire``."""
    return field(default=0, metadata={"wire": wire})


@dataclass(frozen=True)
class CreateMap:
    """Create the battlefield with the given size."""

    NAME: ClassVar[str] = "CREATE_MAP"

    width: int = _named("width")
    height: int = _named("height")


@dataclass(frozen=True)
class March:
    """Order a unit to march to a target cell."""

    NAME: ClassVar[str] = "MARCH"

    unit_id: int = _named("unitId")
    target_x: int = _named("targetX")
    target_y: int = _named("targetY")


@dataclass(frozen=True)
class SpawnHunter:
    """Place a hunter on the field."""

    NAME: ClassVar[str] = "SPAWN_HUNTER"

    unit_id: int = _named("unitId")
    x: int = _named("x")
    y: int = _named("y")
    hp: int = _named("hp")
    agility: int = _named("agility")
    strength: int = _named("strength")
    range: int = _named("range")


@dataclass(frozen=True)
class SpawnSwordsman:
    """Place a swordsman on the field."""

    NAME: ClassVar[str] = "SPAWN_SWORDSMAN"

    unit_id: int = _named("unitId")
    x: int = _named("x")
    y: int = _named("y")
    hp: int = _named("hp")
    strength: int = _named("strength")


@dataclass(frozen=True)
class Tick:
    """Advance the simulation by one turn."""

    NAME: ClassVar[str] = "TICK_SIMULATION"