"""How unit AI uses the game mechanics, and how each outcome is logged."""

from __future__ import annotations

from typing import Any

from skirmish.attack import random_melee_attack, random_range_attack
from skirmish.coordinates import Position
from skirmish.event_log import EventLog
from skirmish.events import (
    Error,
    MarchEnded,
    MarchStarted,
    UnitAttacked,
    UnitDied,
    UnitMoved,
    UnitSpawned,
)
from skirmish.game_field import GameField
from skirmish.marching import next_step, start_march
from skirmish.results import AttackResult, MarchResult, SpawnResult
from skirmish.spawning import spawn
from skirmish.unit_heap import UnitHeap
from skirmish.units import Attribute, Unit


def log_attack(result: AttackResult, tick: int, log: EventLog) -> None:
    """Log an attack that happened, and the target's death if it died."""
    if not result.activity:
        return
    log.log(
        tick,
        UnitAttacked(
            attacker_unit_id=result.attacker_id,
            target_unit_id=result.target_id,
            damage=result.damage,
            target_hp=result.target_hp,
        ),
    )
    if result.target_died:
        log.log(tick, UnitDied(unit_id=result.target_id))


def log_move(result: MarchResult, tick: int, log: EventLog) -> None:
    """Log a step (also a step in place), and the end of the march if reached."""
    if not result.activity:
        return
    log.log(tick, UnitMoved(unit_id=result.unit_id, x=result.x, y=result.y))
    if result.march_ended:
        log.log(tick, MarchEnded(unit_id=result.unit_id, x=result.x, y=result.y))


def log_march_start(result: MarchResult, tick: int, log: EventLog) -> None:
    """Log that a march began."""
    if not result.activity:
        return
    log.log(
        tick,
        MarchStarted(
            unit_id=result.unit_id,
            x=result.x,
            y=result.y,
            target_x=result.target_x,
            target_y=result.target_y,
        ),
    )


def log_spawn(result: SpawnResult, tick: int, log: EventLog) -> None:
    """Log a spawned unit, or an error saying why it could not be spawned."""
    if not result.correct:
        log.log(
            tick,
            Error(
                "Simulation::spawnCommand can not spawn by this command. Reason: "
                + result.reason
            ),
        )
        return
    log.log(
        tick,
        UnitSpawned(
            unit_id=result.unit_id,
            unit_type=result.unit_type,
            x=result.x,
            y=result.y,
        ),
    )


def try_step(field: GameField, unit: Unit, tick: int, log: EventLog) -> bool:
    """Take one march step; True if the unit moved or waited."""
    result = next_step(field, unit)
    log_move(result, tick, log)
    return result.activity


def try_start_march(
    field: GameField, unit: Unit, target: Position, tick: int, log: EventLog
) -> bool:
    """Start marching to ``target``; True if the unit is now marching."""
    result = start_march(field, unit, target)
    log_march_start(result, tick, log)
    return result.activity


def try_melee_attack(
    field: GameField,
    heap: UnitHeap,
    unit: Unit,
    tick: int,
    log: EventLog,
    damage_stat: Attribute,
) -> bool:
    """Hit an adjacent unit; True if an attack was made."""
    result = random_melee_attack(field, heap, unit, damage_stat)
    log_attack(result, tick, log)
    return result.activity


def try_range_attack(
    field: GameField,
    heap: UnitHeap,
    unit: Unit,
    tick: int,
    log: EventLog,
    damage_stat: Attribute,
) -> bool:
    """Shoot a unit within range; True if an attack was made."""
    result = random_range_attack(field, heap, unit, damage_stat)
    log_attack(result, tick, log)
    return result.activity


def try_spawn(
    field: GameField | None, heap: UnitHeap, command: Any, tick: int, log: EventLog
) -> bool:
    """Create the unit described by ``command``; True on success."""
    result = spawn(field, heap, command)
    log_spawn(result, tick, log)
    return result.correct