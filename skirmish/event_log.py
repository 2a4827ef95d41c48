"""Printing of events and commands as log lines."""

from __future__ import annotations

import sys
from dataclasses import fields
from typing import Any, TextIO


def format_fields(record: Any) -> str:
    """Render every field of ``record`` as ``name=value `` in declaration order."""
    return "".join(
        f"{f.metadata.get('wire', f.name)}={getattr(record, f.name)} "
        for f in fields(record)
    )


def print_debug(stream: TextIO, record: Any) -> None:
    """Write ``record`` to ``stream`` as its name followed by its fields."""
    stream.write(f"{record.NAME} {format_fields(record)}\n")


class EventLog:
    """Writes events, one line each, prefixed by the tick they happened on."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def log(self, tick: int, event: Any) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"[{tick}] {event.NAME} {format_fields(event)}\n")
        stream.flush()