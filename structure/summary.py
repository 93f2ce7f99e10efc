"""
structure/summary.py — filtrowanie i formatowanie podsumowania struktury.

Architektura:
  linie pliku → classify_lines() → Outline
  → _drop_lowest_breaks()   (opcjonalnie, poziom z probe_level(DOWN))
  → _filter_granularity()
  → _resolve_width() → obcięcie linii
  → _format_lines()  (numery linii, nagłówek, tytuł)
  → SummaryDocument

Każdy etap zwraca nową listę; żaden nie modyfikuje wejścia.

Kluczowe funkcje publiczne:
  render(outline, options, source)          -> SummaryDocument | None
  summarize_lines(lines, options, source)   -> SummaryDocument | None
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from data_model.outline import LEVELS, LineKind, Outline, SummaryDocument
from structure.classifier import classify_lines
from structure.prober import Direction, probe_level

HEADER = "line  level section"
TITLE_PREFIX = "Summarized structure of "


@dataclass(frozen=True, slots=True)
class SummaryOptions:
    """
    Opcje podsumowania.

    - min_granularity: najdrobniejszy poziom ujęty w podsumowaniu (1..3)
    - suppress_lowest: usuń separatory najniższego wyświetlanego poziomu
    - width:           szerokość linii; None → długość najdłuższego komentarza
    - line_numbers:    poprzedź wpisy numerem linii i tabulatorem
    - header:          dodaj nagłówek kolumn
    - title:           dodaj tytuł z nazwą pliku
    """
    min_granularity: int = 3
    suppress_lowest: bool = True
    width: int | None = None
    line_numbers: bool = True
    header: bool = True
    title: bool = True

    def __post_init__(self) -> None:
        if self.min_granularity not in LEVELS:
            raise ValueError(
                f"min_granularity musi być jednym z {LEVELS}, otrzymano: {self.min_granularity}"
            )
        if self.width is not None and self.width < 1:
            raise ValueError(f"width musi być dodatnie, otrzymano: {self.width}")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def summarize_lines(
    lines: Iterable[str],
    options: SummaryOptions | None = None,
    source: str = "",
) -> SummaryDocument | None:
    """Klasyfikuje linie pliku i buduje podsumowanie (None gdy brak dopasowań)."""
    return render(classify_lines(lines), options, source)


def render(
    outline: Outline,
    options: SummaryOptions | None = None,
    source: str = "",
) -> SummaryDocument | None:
    """
    Buduje SummaryDocument z rozpoznanych linii.

    Zwraca None, gdy po filtrowaniu nie zostaje żaden wpis. To nie jest błąd,
    wywołujący zgłasza to jako informację.
    """
    options = options or SummaryOptions()

    # Krok 1: usuń separatory najniższego poziomu
    if options.suppress_lowest:
        outline = _drop_lowest_breaks(outline, options.min_granularity)

    # Krok 2: zostaw poziomy <= min_granularity
    outline = _filter_granularity(outline, options.min_granularity)

    if not outline:
        return None

    # Krok 3: szerokość i obcięcie
    width = _resolve_width(outline, options.width)
    entries = [c.truncated(width) for c in outline]

    # Krok 4: numery linii, nagłówek, tytuł
    return SummaryDocument(
        source=source,
        entries=entries,
        width=width,
        lines=_format_lines(entries, options, source),
    )


# ---------------------------------------------------------------------------
# Etapy
# ---------------------------------------------------------------------------

def _drop_lowest_breaks(outline: Outline, min_granularity: int) -> Outline:
    lowest = probe_level((c.text for c in outline), Direction.DOWN)
    if lowest is None:
        return outline
    # Najniższy poziom, który faktycznie trafi do wyniku.
    target = min(min_granularity, lowest)
    return [c for c in outline if not (c.is_break and c.level == target)]


def _filter_granularity(outline: Outline, min_granularity: int) -> Outline:
    return [c for c in outline if c.level <= min_granularity]


def _resolve_width(outline: Outline, width: int | None) -> int:
    if width is not None:
        return width
    comments = [len(c.text) for c in outline if c.kind is LineKind.COMMENT]
    if comments:
        return max(comments)
    # same separatory, bez obcinania
    return max(len(c.text) for c in outline)


def _format_lines(entries: Outline, options: SummaryOptions, source: str) -> list[str]:
    if options.line_numbers:
        body = [f"{c.line_no}\t{c.text}" for c in entries]
    else:
        body = [c.text for c in entries]

    head: list[str] = []
    if options.title:
        head += [TITLE_PREFIX + source, ""]
    if options.header:
        head.append(HEADER)
    return head + body
