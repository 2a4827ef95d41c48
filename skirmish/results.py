"""Outcomes of game mechanics, detailed enough to be logged."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MechanicResult:
    """The least every mechanic reports.

    ``activity`` tells whether the mechanic was carried out. ``allowed`` is
    False when the unit is forbidden to use the mechanic at all.
    """

    activity: bool = False
    allowed: bool = True


@dataclass
class AttackResult(MechanicResult):
    """One unit hitting another, melee or ranged."""

    attacker_id: int | None = None
    target_id: int | None = None
    damage: int = 0
    target_hp: int = 0
    target_died: bool = False


@dataclass
class MarchResult(MechanicResult):
    """A march being started or a single step of it."""

    unit_id: int | None = None
    x: int | None = None
    y: int | None = None
    march_ended: bool = False
    target_x: int | None = None
    target_y: int | None = None


@dataclass
class SpawnResult(MechanicResult):
    """A unit being created, or the reason it was not."""

    correct: bool = False
    reason: str = ""
    unit_id: int | None = None
    unit_type: str = ""
    x: int | None = None
    y: int | None = None