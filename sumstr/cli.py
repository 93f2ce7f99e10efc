"""
sumstr — podsumowanie struktury kodu na podstawie komentarzy-separatorów.

Użycie:
  sumstr <komenda> [opcje]

Komendy:
  summarize   Tworzy podsumowanie struktury pliku lub wszystkich plików katalogu.
  separator   Generuje parę separator + komentarz sekcji danego poziomu.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, więc wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.console import Console

from sumstr._config import get_settings
from sumstr.commands import separator as cmd_separator
from sumstr.commands import summarize as cmd_summarize

err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="sumstr",
        description="sumstr — podsumowanie struktury kodu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="sumstr 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_summarize.add_parser(subparsers, settings)
    cmd_separator.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    try:
        parser = build_parser()
    except ValueError as e:
        err_console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
