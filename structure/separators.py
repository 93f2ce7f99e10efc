"""
structure/separators.py — generowanie linii separatorów i komentarzy sekcji.

Wygenerowane linie spełniają konwencję rozpoznawaną przez classifier:
  poziom 1: "#   " + "_" * k
  poziom 2: "##  " + "." * k
  poziom 3: "### " + ". " * k  (bez końcowej spacji)
"""

from __future__ import annotations

from data_model.outline import LEVELS
from structure.separator_patterns import MARKER_CHAR, MARKER_WIDTH

DEFAULT_WIDTH = 80

_FILL: dict[int, str] = {
    1: "_",
    2: ".",
    3: ". ",
}


def _prefix(level: int) -> str:
    if level not in LEVELS:
        raise ValueError(f"Poziom musi być jednym z {LEVELS}, otrzymano: {level}")
    return MARKER_CHAR * level + " " * (MARKER_WIDTH - level)


def make_break(level: int, width: int = DEFAULT_WIDTH) -> str:
    """Linia separatora o łącznej długości width (co najmniej jeden znak wypełnienia)."""
    prefix = _prefix(level)
    fill = _FILL[level]
    n = max(width - MARKER_WIDTH, 1)
    return (prefix + fill * n)[: MARKER_WIDTH + n].rstrip()


def make_comment(level: int, text: str) -> str:
    prefix = _prefix(level)
    text = text.strip()
    if not text:
        raise ValueError("Komentarz sekcji nie może być pusty.")
    if text[0] in "_.":
        raise ValueError(f"Komentarz sekcji nie może zaczynać się od '{text[0]}'.")
    return prefix + text


def make_section(level: int, text: str, width: int = DEFAULT_WIDTH) -> list[str]:
    """Para (separator, komentarz) tego samego poziomu."""
    return [make_break(level, width), make_comment(level, text)]
