"""Storage of all units by id."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from skirmish.units import Unit


class UnitHeap:
    """Holds every unit of the simulation, keyed by id."""

    def __init__(self) -> None:
        self._units: dict[int, Unit] = {}

    def add(self, unit: Unit) -> None:
        """Store ``unit``, replacing any unit with the same id."""
        self._units[unit.id] = unit

    def create(self, unit_id: int, name: str = "defaultUnit") -> Unit:
        """Create and store a fresh unit, returning it."""
        unit = Unit(unit_id, name)
        self.add(unit)
        return unit

    def get(self, unit_id: int) -> Unit:
        """The unit with ``unit_id``; raises KeyError when absent."""
        try:
            return self._units[unit_id]
        except KeyError:
            raise KeyError(f"no unit with id {unit_id}") from None

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._units

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units.values())

    def erase(self, unit_ids: Iterable[int]) -> None:
        """Remove the given units; ids that are absent are ignored."""
        for unit_id in unit_ids:
            self._units.pop(unit_id, None)

    def contains_dead(self) -> bool:
        """Whether any stored unit has no hit points left."""
        return any(unit.is_dead for unit in self._units.values())