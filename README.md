# skirmish

A small turn-based battle simulation. Units (swordsmen and hunters) are
placed on a rectangular grid, can be ordered to march, and fight whoever
is in reach. Every event of the simulation is printed as a log line.

## Installation

```
pip install .
```

## Running a scenario

Write a scenario file, one command per line. Empty lines and lines
starting with `//` are ignored.

```
CREATE_MAP 10 10
SPAWN_SWORDSMAN 1 0 0 5 2
SPAWN_HUNTER 2 9 0 10 5 1 4
MARCH 1 9 0
```

Then run:

```
skirmish scenario.txt
```

The commands are:

| Command           | Arguments                                  |
|-------------------|--------------------------------------------|
| `CREATE_MAP`      | `width height`                             |
| `SPAWN_SWORDSMAN` | `unitId x y hp strength`                   |
| `SPAWN_HUNTER`    | `unitId x y hp agility strength range`     |
| `MARCH`           | `unitId targetX targetY`                   |

After the file is read, the simulation ticks (starting at tick 0) until
a tick passes in which no unit does anything. Each event is written to
standard output as `[tick] NAME field=value ...`, for example:

```
[0] MAP_CREATED width=10 height=10
[0] UNIT_SPAWNED unitId=1 unitType=SpawnSwordsman x=0 y=0
[0] UNIT_SPAWNED unitId=2 unitType=SpawnHunter x=9 y=0
[0] MARCH_STARTED unitId=1 x=0 y=0 targetX=9 targetY=0
```

followed by `UNIT_MOVED`, `MARCH_ENDED`, `UNIT_ATTACKED` and `UNIT_DIED`
events as the battle plays out. Commands that cannot be carried out (a
second `CREATE_MAP`, a spawn outside the map or on an occupied cell, a
duplicate unit id, a hunter with a range below 2, a march before the map
exists or to a cell outside it) are logged as `ERROR` events and the run
goes on.

`skirmish` exits with status 1 and a message on standard error when it is
not given exactly one file, when the file does not exist, or when a line
names an unknown command.

## Unit behaviour

- A **swordsman** attacks a random adjacent unit with its strength;
  otherwise it takes a step towards its march target.
- A **hunter** first shoots a random unit at distance 2 up to its range
  with its agility, then tries a melee attack with its strength, and
  otherwise steps towards its march target.

Distances allow diagonal moves (a unit's neighbourhood is the 8 cells
around it). A unit blocked on every side waits in place. Dead units stay
on the field as obstacles until the start of the next tick. The command
line run uses a random generator with a fixed seed, so a scenario always
plays out the same way.

## Using it from Python

```python
import io
import sys

from skirmish.cli import run
from skirmish.event_log import EventLog

scenario = io.StringIO("CREATE_MAP 5 5\nSPAWN_SWORDSMAN 1 0 0 5 2\n")
status = run(scenario, EventLog(sys.stdout))
print(status.tick, status.finished)
```

`run` returns the `SimulationStatus` of the last tick. The building
blocks can also be used directly: `skirmish.simulation.Simulation`
(whose `command` method takes the command objects from
`skirmish.commands`: `CreateMap`, `SpawnSwordsman`, `SpawnHunter`,
`March`, `Tick`), `skirmish.parser.CommandParser`,
`skirmish.game_field.GameField` and `skirmish.event_log.EventLog`, which
writes to any text stream given to it, or to standard output.

## What it does not do

The simulation runs to completion in one go and only prints its log. It
has no interactive mode, no display of the map and no way to save or
resume a battle.

## Tests

```
pip install .[test]
pytest
```