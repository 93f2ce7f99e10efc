"""Komenda: sumstr separator — generuje separator sekcji z komentarzem."""

from __future__ import annotations

import argparse
import sys

from structure.separators import DEFAULT_WIDTH, make_break, make_section


def run(args: argparse.Namespace) -> None:
    try:
        if args.text:
            lines = make_section(args.level, args.text, args.width)
        else:
            lines = [make_break(args.level, args.width)]
    except ValueError as e:
        print(e, file=sys.stderr)
        raise SystemExit(1)

    print("\n".join(lines))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "separator",
        help="Generuje separator sekcji (i komentarz) danego poziomu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wypisuje linię separatora sekcji i opcjonalnie komentarz sekcji, gotowe do
wklejenia do pliku źródłowego.

Przykłady:
  sumstr separator 1 "wczytanie danych"
  sumstr separator 2 "walidacja" --width 60
  sumstr separator 3
        """,
    )
    p.add_argument(
        "level",
        type=int,
        choices=[1, 2, 3],
        metavar="POZIOM",
        help="Poziom separatora: 1, 2 lub 3.",
    )
    p.add_argument(
        "text",
        metavar="TEKST",
        nargs="?",
        default=None,
        help="Komentarz sekcji (domyślnie: sam separator).",
    )
    p.add_argument(
        "--width", "-w",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Łączna szerokość linii separatora (domyślnie: {DEFAULT_WIDTH}).",
    )
    p.set_defaults(func=run)
