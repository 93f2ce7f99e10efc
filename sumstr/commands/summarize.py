"""Komenda: sumstr summarize — podsumowanie struktury pliku / katalogu."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from data_model.outline import SummaryDocument
from structure.driver import resolve_inputs, summarize_files
from structure.prober import Direction, probe_level
from structure.summary import SummaryOptions
from sumstr._config import Settings

err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _print_document(doc: SummaryDocument) -> None:
    # zwykły print, bo rich zamieniłby tabulatory na spacje
    print(doc.to_text(), end="")


def _show_table(doc: SummaryDocument) -> None:
    top = probe_level((c.text for c in doc.entries), Direction.UP) or 1

    table = Table(
        title=doc.source,
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("LINE",    justify="right", no_wrap=True, style="dim")
    table.add_column("LVL",     justify="right", no_wrap=True)
    table.add_column("KIND",    no_wrap=True)
    table.add_column("SECTION", no_wrap=False, max_width=80)

    for entry in doc.entries:
        indent = "  " * (entry.level - top)
        text = "─" * 8 if entry.is_break else entry.comment or ""
        table.add_row(
            str(entry.line_no),
            str(entry.level),
            entry.kind.value,
            Text(indent + text),
            style="bold cyan" if entry.level == top and not entry.is_break else None,
        )

    err_console.print()
    err_console.print(table)
    err_console.print(f"  [dim]{len(doc.entries)} wpisów[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    if args.file is None and args.dir is None:
        err_console.print("[red]Podaj plik wejściowy albo katalog (--dir).[/red]")
        raise SystemExit(1)

    try:
        options = SummaryOptions(
            min_granularity=args.granularity,
            suppress_lowest=args.suppress_lowest,
            width=args.width,
            line_numbers=args.line_numbers,
            header=args.header,
            title=args.title,
        )
    except ValueError as e:
        err_console.print(f"[red]Nieprawidłowe opcje:[/red] {e}")
        raise SystemExit(1)

    try:
        paths = resolve_inputs(args.file, args.dir, args.ext)
    except FileNotFoundError as e:
        err_console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    if not paths:
        err_console.print(f"[yellow]Brak plików z rozszerzeniem {args.ext} w {args.dir}.[/yellow]")
        return

    if args.file_out and len(paths) > 1:
        err_console.print("[red]--file-out wymaga pojedynczego pliku wejściowego.[/red]")
        raise SystemExit(1)

    if args.file_out and args.out_dir is None:
        err_console.print("[yellow]--file-out bez --out-dir jest ignorowane, wynik trafia do konsoli.[/yellow]")

    failed = 0
    summarized: list[str] = []

    for result in summarize_files(
        paths,
        options,
        dir_out=args.out_dir,
        file_out=args.file_out,
        out_extension=args.out_ext,
    ):
        if not result.ok:
            failed += 1
            err_console.print(f"[red]Błąd:[/red] {result.error}")
            continue

        if result.document is None:
            err_console.print(
                f"[yellow]{result.path.name}: brak linii pasujących do wzorca separatorów.[/yellow]"
            )
            continue

        if result.output is None:
            _print_document(result.document)
        else:
            summarized.append(str(result.path))
            err_console.print(f"[green]Zapisano:[/green] {result.output}")

        if args.show:
            _show_table(result.document)

    if args.out_dir is not None and summarized:
        err_console.print("Podsumowano następujące pliki:")
        for name in summarized:
            err_console.print(f"  {name}", markup=False)

    if failed:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"oczekiwano liczby dodatniej, otrzymano: {value}")
    return n


def add_parser(subparsers: argparse._SubParsersAction, settings: Settings) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "summarize",
        help="Tworzy podsumowanie struktury pliku lub katalogu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Tworzy podsumowanie struktury kodu na podstawie separatorów sekcji:

  #   ______________________________   poziom 1
  #   komentarz poziomu 1
  ##  ..............................   poziom 2
  ##  komentarz poziomu 2
  ### .. . . . . . . . . . . . . . .   poziom 3
  ### komentarz poziomu 3

Przykłady:
  sumstr summarize skrypt.py
  sumstr summarize skrypt.py --granularity 2 --no-title
  sumstr summarize --dir src --ext .py --out-dir podsumowania --out-ext .txt
  sumstr summarize skrypt.py --show
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        nargs="?",
        default=None,
        help="Plik do podsumowania (względem --dir, jeśli podano).",
    )
    p.add_argument(
        "--dir", "-d",
        metavar="KATALOG",
        default=None,
        help="Katalog wejściowy; bez PLIK podsumowuje wszystkie pliki z --ext.",
    )
    p.add_argument(
        "--ext",
        metavar="EXT",
        default=settings.extension,
        help=f"Rozszerzenie plików w trybie katalogu (domyślnie: {settings.extension}).",
    )
    p.add_argument(
        "--out-dir", "-o",
        metavar="KATALOG",
        default=None,
        help="Zapisz podsumowania do katalogu (domyślnie: konsola).",
    )
    p.add_argument(
        "--file-out",
        metavar="NAZWA",
        default=None,
        help="Nazwa pliku wynikowego (domyślnie: code_summary-<nazwa pliku>).",
    )
    p.add_argument(
        "--out-ext",
        metavar="EXT",
        default=settings.out_extension,
        help="Rozszerzenie dopisywane do nazw plików wynikowych.",
    )
    p.add_argument(
        "--granularity", "-g",
        type=int,
        choices=[1, 2, 3],
        default=settings.granularity,
        help=f"Najdrobniejszy poziom ujęty w podsumowaniu (domyślnie: {settings.granularity}).",
    )
    p.add_argument(
        "--width", "-w",
        type=_positive_int,
        default=settings.width,
        help="Szerokość linii (domyślnie: długość najdłuższego komentarza).",
    )
    p.add_argument(
        "--keep-lowest",
        dest="suppress_lowest",
        action="store_false",
        help="Zachowaj separatory najniższego poziomu.",
    )
    p.add_argument(
        "--no-line-numbers",
        dest="line_numbers",
        action="store_false",
        help="Nie wypisuj numerów linii.",
    )
    p.add_argument(
        "--no-header",
        dest="header",
        action="store_false",
        help="Nie wypisuj nagłówka kolumn.",
    )
    p.add_argument(
        "--no-title",
        dest="title",
        action="store_false",
        help="Nie wypisuj tytułu z nazwą pliku.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl dodatkowo tabelę wpisów w terminalu.",
    )
    p.set_defaults(func=run)
