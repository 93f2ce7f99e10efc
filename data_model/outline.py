"""
data_model/outline.py — model linii pliku źródłowego i podsumowania struktury.

Line            — surowa linia pliku (numer 1-based + tekst bez znaku nowej linii).
ClassifiedLine  — linia rozpoznana jako separator (BREAK) lub komentarz sekcji
                  (COMMENT) wraz z poziomem szczegółowości 1..3.
Outline         — lista ClassifiedLine w kolejności pliku (rosnące line_no).
SummaryDocument — gotowe podsumowanie jednego pliku (tytuł, nagłówek, wpisy).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TypeAlias

# Poziomy szczegółowości: 1 = najogólniejszy, 3 = najdrobniejszy.
LEVELS: tuple[int, ...] = (1, 2, 3)


class LineKind(StrEnum):
    """Rodzaj rozpoznanej linii."""
    BREAK   = "break"    # linia separatora (same znaki _ lub .)
    COMMENT = "comment"  # komentarz sekcji


@dataclass(frozen=True, slots=True)
class Line:
    line_no: int   # 1-based
    text: str


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """
    Linia pasująca do konwencji separatorów.

    - line_no: numer linii w pliku źródłowym (1-based)
    - text:    tekst linii (po ewentualnym obcięciu do szerokości)
    - level:   poziom szczegółowości 1..3 (= liczba znaków '#')
    - kind:    BREAK lub COMMENT
    """
    line_no: int
    text: str
    level: int
    kind: LineKind

    @property
    def is_break(self) -> bool:
        return self.kind is LineKind.BREAK

    @property
    def comment(self) -> str | None:
        """Treść komentarza za znacznikiem i wcięciem (None dla separatora)."""
        if self.is_break:
            return None
        # znacznik + wcięcie zawsze zajmują 4 kolumny
        return self.text[4:]

    def truncated(self, width: int) -> ClassifiedLine:
        if len(self.text) <= width:
            return self
        return replace(self, text=self.text[:width])


# Kolekcja rozpoznanych linii w kolejności pliku.
Outline: TypeAlias = list[ClassifiedLine]


@dataclass(slots=True)
class SummaryDocument:
    """
    Podsumowanie struktury jednego pliku.

    - source:  nazwa pliku źródłowego (do tytułu i komunikatów)
    - entries: wpisy po filtrowaniu i obcięciu, w kolejności pliku
    - width:   szerokość użyta do obcięcia linii
    - lines:   kompletne linie wyjściowe (tytuł, nagłówek, wpisy)
    """
    source: str
    entries: Outline
    width: int
    lines: list[str]

    def to_text(self) -> str:
        return "\n".join(self.lines) + "\n"
