"""Reading commands from a scenario text stream."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import fields
from typing import Any

UINT32_MAX = 0xFFFFFFFF

_WORD = re.compile(r"\s*(\S+)")
_NUMBER = re.compile(r"\s*([+-]?\d+)")


class CommandParseError(Exception):
    """A line of the scenario names a command that is not registered."""


def _read_command(command_type: type, rest: str) -> Any:
    """Fill the command's fields in order from ``rest``.

    Reading stops at the first field that cannot be read; it and the
    fields after it keep their defaults.
    """
    values: dict[str, Any] = {}
    pos = 0
    for f in fields(command_type):
        if isinstance(f.default, str):
            match = _WORD.match(rest, pos)
            if match is None:
                break
            values[f.name] = match.group(1)
            pos = match.end()
            continue
        match = _NUMBER.match(rest, pos)
        if match is None:
            break
        value = int(match.group(1))
        pos = match.end()
        if abs(value) > UINT32_MAX:
            values[f.name] = UINT32_MAX
            break
        values[f.name] = value % (UINT32_MAX + 1)
    return command_type(**values)


class CommandParser:
    """Dispatches scenario lines to handlers registered per command type."""

    def __init__(self) -> None:
        self._commands: dict[str, tuple[type, Callable[[Any], None]]] = {}

    def add(self, command_type: type, handler: Callable[[Any], None]) -> CommandParser:
        """Register ``handler`` for ``command_type``; returns the parser for chaining."""
        name = command_type.NAME
        if name in self._commands:
            raise ValueError(f"Command already exists: {name}")
        self._commands[name] = (command_type, handler)
        return self

    def parse(self, stream: Iterable[str]) -> None:
        """Read every line, skipping blanks and ``//`` comments, and dispatch it."""
        for raw in stream:
            line = raw.rstrip("\n")
            if not line or line.startswith("//"):
                continue
            match = _WORD.match(line)
            if match is None:
                continue
            name = match.group(1)
            entry = self._commands.get(name)
            if entry is None:
                raise CommandParseError(f"Unknown command: {name}")
            command_type, handler = entry
            handler(_read_command(command_type, line[match.end():]))