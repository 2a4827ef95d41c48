"""Random helpers shared by the simulation."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def random_choice(items: Iterable[T], rng: Any = None) -> T:
    """Pick one element of ``items`` uniformly using ``rng`` (or the global generator)."""
    pool = list(items)
    if not pool:
        raise ValueError("cannot choose from an empty collection")
    generator = rng if rng is not None else random
    return pool[generator.randrange(len(pool))]