"""
structure/driver.py — przetwarzanie jednego lub wielu plików.

Kluczowe funkcje publiczne:
  resolve_inputs(file_in, dir_in, extension)                 -> list[Path]
  output_name(path, extension)                               -> str
  summarize_file(path, options)                              -> SummaryDocument | None
  summarize_files(paths, options, dir_out, file_out, ...)    -> Iterator[FileResult]

Błąd odczytu jednego pliku nie przerywa przetwarzania kolejnych — trafia do
FileResult.error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from data_model.outline import SummaryDocument
from structure.summary import SummaryOptions, summarize_lines

OUTPUT_PREFIX = "code_summary-"

# Tylko znaki nowej linii; str.splitlines() dzieli też na \f, \v, \x85, \u2028 itd.
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


@dataclass(slots=True)
class FileResult:
    """
    Wynik przetworzenia jednego pliku.

    - document: None gdy brak dopasowań albo wystąpił błąd
    - output:   ścieżka zapisanego pliku (None → wynik dla konsoli)
    - error:    opis błędu odczytu / zapisu
    """
    path: Path
    document: SummaryDocument | None = None
    output: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def resolve_inputs(
    file_in: str | Path | None = None,
    dir_in: str | Path | None = None,
    extension: str = ".py",
) -> list[Path]:
    """
    Zwraca listę plików do podsumowania.

    - file_in podany  → jeden plik (względem dir_in, jeśli podano katalog)
    - tylko dir_in    → wszystkie pliki z katalogu kończące się na extension,
                        posortowane po nazwie
    """
    if file_in is not None:
        path = Path(file_in)
        if dir_in is not None:
            path = Path(dir_in) / path
        return [path]

    if dir_in is None:
        raise ValueError("Podaj plik wejściowy albo katalog.")

    directory = Path(dir_in)
    if not directory.is_dir():
        raise FileNotFoundError(f"Katalog nie istnieje: {directory}")

    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.name.endswith(extension)),
        key=lambda p: p.name,
    )


def output_name(path: str | Path, extension: str = "") -> str:
    """code_summary-<nazwa bez ostatniego rozszerzenia><extension>"""
    return f"{OUTPUT_PREFIX}{Path(path).stem}{extension}"


def split_lines(text: str) -> list[str]:
    """Dzieli tekst na linie wyłącznie po \\n, \\r\\n i \\r (bez końcowej pustej linii)."""
    lines = _NEWLINE_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def summarize_file(path: str | Path, options: SummaryOptions | None = None) -> SummaryDocument | None:
    path = Path(path)
    # utf-8-sig: BOM z edytorów Windows nie trafia do pierwszej linii
    text = path.read_text(encoding="utf-8-sig")
    return summarize_lines(split_lines(text), options, source=path.name)


def summarize_files(
    paths: Iterable[Path],
    options: SummaryOptions | None = None,
    dir_out: str | Path | None = None,
    file_out: str | None = None,
    out_extension: str = "",
) -> Iterator[FileResult]:
    """
    Przetwarza pliki po kolei. Gdy dir_out jest podany, każde podsumowanie
    zapisywane jest do dir_out / (file_out lub output_name(...)).
    """
    for path in paths:
        result = FileResult(path=path)
        try:
            result.document = summarize_file(path, options)
            if result.document is not None and dir_out is not None:
                out_dir = Path(dir_out)
                out_dir.mkdir(parents=True, exist_ok=True)
                out_path = out_dir / (file_out or output_name(path, out_extension))
                out_path.write_text(result.document.to_text(), encoding="utf-8")
                result.output = out_path
        except FileNotFoundError:
            result.error = f"Plik nie istnieje: {path}"
        except (OSError, UnicodeDecodeError) as e:
            result.error = f"{type(e).__name__}: {e}"
        yield result
