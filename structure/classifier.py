"""
structure/classifier.py — klasyfikacja linii jako separator / komentarz sekcji.

Kluczowe funkcje publiczne:
  classify(line, line_no)  -> ClassifiedLine | None
  classify_lines(lines)    -> Outline

Linie niepasujące do konwencji (brak znacznika, złe wcięcie, wcięcie przed '#',
pusta treść) są pomijane bez zgłaszania błędu.
"""

from __future__ import annotations

from typing import Iterable

from data_model.outline import ClassifiedLine, Line, LineKind, Outline
from structure.separator_patterns import PATTERNS


def classify(line: Line | str, line_no: int = 0) -> ClassifiedLine | None:
    """
    Klasyfikuje pojedynczą linię.

    Args:
        line:    Line albo surowy tekst linii (bez znaku nowej linii).
        line_no: Numer linii, gdy podano surowy tekst.
    """
    if isinstance(line, Line):
        line_no, text = line.line_no, line.text
    else:
        text = line

    # Szybkie odrzucenie zwykłych linii kodu
    if not text.startswith("#"):
        return None

    for pat in PATTERNS.values():
        if not pat.marker.match(text):
            continue
        if pat.brk.match(text):
            return ClassifiedLine(line_no, text, pat.level, LineKind.BREAK)
        if pat.comment.match(text):
            return ClassifiedLine(line_no, text, pat.level, LineKind.COMMENT)
        # znacznik poprawny, ale treść zaczyna się od _ lub . i zawiera tekst
        return None

    return None


def classify_lines(lines: Iterable[str]) -> Outline:
    """Klasyfikuje wszystkie linie pliku; numeracja od 1, kolejność zachowana."""
    outline: Outline = []
    for line_no, text in enumerate(lines, start=1):
        classified = classify(text, line_no)
        if classified is not None:
            outline.append(classified)
    return outline
