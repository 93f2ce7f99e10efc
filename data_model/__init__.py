"""
data_model — struktury danych sumstr.

Użycie:
  from data_model import ClassifiedLine, SummaryDocument, ...

Moduły:
  outline — LEVELS, LineKind, Line, ClassifiedLine, Outline, SummaryDocument
"""

from .outline import (
    LEVELS,
    LineKind,
    Line,
    ClassifiedLine,
    Outline,
    SummaryDocument,
)

__all__ = [
    "LEVELS",
    "LineKind",
    "Line",
    "ClassifiedLine",
    "Outline",
    "SummaryDocument",
]
