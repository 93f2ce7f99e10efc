"""
structure — podsumowanie struktury plików na podstawie komentarzy-separatorów.

Publiczne API:
  classify(line, line_no)             → ClassifiedLine | None
  classify_lines(lines)               → Outline
  probe_level(lines, direction)       → poziom 1..3 | None
  SummaryOptions                      opcje podsumowania
  render(outline, options, source)    → SummaryDocument | None
  summarize_lines(lines, options)     → SummaryDocument | None
  summarize_file(path, options)       → SummaryDocument | None
  summarize_files(paths, ...)         → Iterator[FileResult]
  make_section(level, text, width)    → [separator, komentarz]
"""

from .classifier import classify, classify_lines
from .driver     import (
    FileResult,
    output_name,
    resolve_inputs,
    summarize_file,
    summarize_files,
)
from .prober     import Direction, probe_level
from .separators import make_break, make_comment, make_section
from .summary    import HEADER, SummaryOptions, render, summarize_lines

__all__ = [
    "classify",
    "classify_lines",
    "Direction",
    "probe_level",
    "HEADER",
    "SummaryOptions",
    "render",
    "summarize_lines",
    "FileResult",
    "output_name",
    "resolve_inputs",
    "summarize_file",
    "summarize_files",
    "make_break",
    "make_comment",
    "make_section",
]
