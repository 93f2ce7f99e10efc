"""structure/prober.py — wykrywanie najwyższego / najniższego poziomu w pliku."""

from __future__ import annotations

from enum import StrEnum
from typing import Iterable

from data_model.outline import LEVELS
from structure.separator_patterns import PATTERNS


class Direction(StrEnum):
    UP   = "up"    # od poziomu 1 w dół hierarchii → najogólniejszy obecny poziom
    DOWN = "down"  # od poziomu 3 w górę → najdrobniejszy obecny poziom


def probe_level(lines: Iterable[str], direction: Direction = Direction.UP) -> int | None:
    """
    Zwraca pierwszy poziom (w kolejności wyznaczonej przez direction), dla
    którego choć jedna linia pasuje do znacznika tego poziomu.

    None — żaden poziom 1..3 nie występuje (nie ma czego podsumować).
    """
    candidates = [line for line in lines if line.startswith("#")]
    order = LEVELS if direction == Direction.UP else tuple(reversed(LEVELS))

    for level in order:
        marker = PATTERNS[level].marker
        if any(marker.match(line) for line in candidates):
            return level

    return None
