"""Starting a march and stepping along it."""

from __future__ import annotations

from skirmish.coordinates import Position
from skirmish.game_field import GameField
from skirmish.results import MarchResult
from skirmish.units import Mechanic, Unit


def _describe(field: GameField, unit: Unit, activity: bool) -> MarchResult:
    pos = field.position_of(unit.id)
    target = field.march_target(unit.id)
    return MarchResult(
        activity=activity,
        unit_id=unit.id,
        x=pos.x if pos is not None else None,
        y=pos.y if pos is not None else None,
        march_ended=not field.on_march(unit.id),
        target_x=target.x if target is not None else None,
        target_y=target.y if target is not None else None,
    )


def next_step(field: GameField, unit: Unit) -> MarchResult:
    """Move the unit one cell towards its march target."""
    if not unit.allows(Mechanic.MOVE):
        return MarchResult(allowed=False)
    activity = field.step(unit)
    return _describe(field, unit, activity)


def start_march(field: GameField, unit: Unit, target: Position) -> MarchResult:
    """Give the unit ``target`` as the cell to march to."""
    if not unit.allows(Mechanic.MOVE):
        return MarchResult(allowed=False)
    field.march(unit.id, target.x, target.y)
    result = _describe(field, unit, field.on_march(unit.id))
    result.march_ended = False
    return result