"""
structure/separator_patterns.py — wzorce regex separatorów sekcji.

Konwencja: linia zaczyna się od n znaków '#' (n = 1..3), po których następuje
dokładnie 4 − n spacji, więc treść zawsze zaczyna się w kolumnie 5:

  #   ______________________________   poziom 1, separator
  #   komentarz poziomu 1              poziom 1, komentarz
  ##  ..............................   poziom 2, separator
  ### .. . . . . . . . . . . . . . .   poziom 3, separator

Każdy SeparatorPattern zawiera:
  - level  : poziom szczegółowości (1 = najwyższy)
  - marker : sam znacznik z wcięciem (używany przez prober)
  - brk    : pełna linia separatora (treść = same znaki _ . i spacje)
  - comment: pełna linia komentarza (treść nie zaczyna się od _ ani .)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from data_model.outline import LEVELS

MARKER_CHAR = "#"
BREAK_GLYPHS = "_."

# Łączna szerokość znacznika i wcięcia.
MARKER_WIDTH = 4


@dataclass(frozen=True, slots=True)
class SeparatorPattern:
    level: int
    marker: re.Pattern[str]
    brk: re.Pattern[str]
    comment: re.Pattern[str]


def _prefix(level: int) -> str:
    # (?=\S): wcięcie musi mieć dokładnie 4 − n spacji
    return "^" + re.escape(MARKER_CHAR * level) + " " * (MARKER_WIDTH - level) + r"(?=\S)"


def _build(level: int) -> SeparatorPattern:
    prefix = _prefix(level)
    glyphs = re.escape(BREAK_GLYPHS)
    return SeparatorPattern(
        level=level,
        marker=re.compile(prefix),
        brk=re.compile(prefix + f"[{glyphs}][{glyphs} ]*$"),
        comment=re.compile(prefix + f"(?P<comment>[^{glyphs}].*)$"),
    )


PATTERNS: dict[int, SeparatorPattern] = {level: _build(level) for level in LEVELS}
