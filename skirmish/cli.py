"""Command line entry point: run a scenario file to completion."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Sequence

from skirmish.commands import CreateMap, March, SpawnHunter, SpawnSwordsman, Tick
from skirmish.event_log import EventLog
from skirmish.parser import CommandParseError, CommandParser
from skirmish.simulation import Simulation, SimulationStatus

SEED = 42


def run(stream: Iterable[str], log: EventLog | None = None) -> SimulationStatus:
    """Feed the scenario to a fresh simulation and tick it until it finishes."""
    simulation = Simulation(log=log, rng=random.Random(SEED))
    parser = CommandParser()
    for command_type in (CreateMap, SpawnSwordsman, SpawnHunter, March):
        parser.add(command_type, simulation.command)
    parser.parse(stream)
    while True:
        simulation.command(Tick())
        status = simulation.status()
        if status.finished:
            return status


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error: No file specified in command line argument", file=sys.stderr)
        return 1
    path = args[0]
    try:
        with open(path, encoding="utf-8") as scenario:
            run(scenario, EventLog())
    except FileNotFoundError:
        print(f"Error: File not found - {path}", file=sys.stderr)
        return 1
    except CommandParseError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())