"""Tests for file resolution and batch processing."""

from __future__ import annotations

from pathlib import Path

import pytest

from structure.driver import (
    FileResult,
    output_name,
    resolve_inputs,
    split_lines,
    summarize_file,
    summarize_files,
)
from structure.summary import SummaryOptions

SOURCE = "\n".join([
    "#   ____________________",
    "#   load data",
    "x = 1",
    "##  ....................",
    "##  clean",
    "",
])


def _write(path: Path, text: str = SOURCE) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_resolve_single_file(tmp_path: Path) -> None:
    assert resolve_inputs("a.py") == [Path("a.py")]
    assert resolve_inputs("a.py", tmp_path) == [tmp_path / "a.py"]


def test_resolve_directory_filters_and_sorts(tmp_path: Path) -> None:
    _write(tmp_path / "b.py")
    _write(tmp_path / "a.py")
    _write(tmp_path / "notes.txt")
    (tmp_path / "sub.py").mkdir()

    assert resolve_inputs(dir_in=tmp_path, extension=".py") == [
        tmp_path / "a.py",
        tmp_path / "b.py",
    ]


def test_resolve_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        resolve_inputs(dir_in=tmp_path / "missing")


def test_resolve_requires_input() -> None:
    with pytest.raises(ValueError):
        resolve_inputs()


@pytest.mark.parametrize(
    ("name", "ext", "expected"),
    [
        ("script.py", "", "code_summary-script"),
        ("script.py", ".txt", "code_summary-script.txt"),
        ("archive.tar.gz", "", "code_summary-archive.tar"),
        ("Makefile", ".md", "code_summary-Makefile.md"),
    ],
)
def test_output_name(name: str, ext: str, expected: str) -> None:
    assert output_name(Path("some/dir") / name, ext) == expected


def test_summarize_file_uses_file_name_as_title(tmp_path: Path) -> None:
    path = _write(tmp_path / "script.py")
    doc = summarize_file(path, SummaryOptions())

    assert doc is not None
    assert doc.lines[0] == "Summarized structure of script.py"
    # level 2 break is the lowest separator and is suppressed
    assert [e.line_no for e in doc.entries] == [1, 2, 5]


def test_summarize_files_writes_outputs(tmp_path: Path) -> None:
    src = tmp_path / "src"
    src.mkdir()
    paths = [_write(src / "a.py"), _write(src / "b.py")]
    out = tmp_path / "out"

    results = list(summarize_files(paths, SummaryOptions(), dir_out=out, out_extension=".txt"))

    assert [r.ok for r in results] == [True, True]
    assert [r.output for r in results] == [out / "code_summary-a.txt", out / "code_summary-b.txt"]
    text = (out / "code_summary-a.txt").read_text(encoding="utf-8")
    assert text.startswith("Summarized structure of a.py\n\nline  level section\n")


def test_summarize_files_explicit_file_out(tmp_path: Path) -> None:
    path = _write(tmp_path / "a.py")
    [result] = summarize_files([path], SummaryOptions(), dir_out=tmp_path, file_out="outline.txt")
    assert result.output == tmp_path / "outline.txt"
    assert result.output.exists()


def test_summarize_files_console_mode(tmp_path: Path) -> None:
    path = _write(tmp_path / "a.py")
    [result] = summarize_files([path], SummaryOptions())
    assert result.output is None
    assert result.document is not None


def test_failure_does_not_abort_batch(tmp_path: Path) -> None:
    good = _write(tmp_path / "good.py")
    bad = tmp_path / "bad.py"
    bad.write_bytes(b"\xff\xfe\x00 not utf-8 \x80")
    missing = tmp_path / "missing.py"

    results: list[FileResult] = list(summarize_files([missing, bad, good], SummaryOptions()))

    assert [r.ok for r in results] == [False, False, True]
    assert "missing.py" in (results[0].error or "")
    assert "UnicodeDecodeError" in (results[1].error or "")
    assert results[2].document is not None


def test_no_match_writes_nothing(tmp_path: Path) -> None:
    path = _write(tmp_path / "plain.py", "x = 1\n# comment\n")
    out = tmp_path / "out"

    [result] = summarize_files([path], SummaryOptions(), dir_out=out)

    assert result.ok
    assert result.document is None
    assert result.output is None
    assert not out.exists()


def test_form_feed_does_not_shift_line_numbers(tmp_path: Path) -> None:
    path = _write(tmp_path / "paged.py", "x = 1  # page\x0cbreak\n#   Intro\n")
    doc = summarize_file(path, SummaryOptions(title=False, header=False))

    assert doc is not None
    assert doc.lines == ["2\t#   Intro"]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a\nb\n", ["a", "b"]),
        ("a\r\nb", ["a", "b"]),
        ("a\rb\r", ["a", "b"]),
        ("a\x0cb\x0bc d\n", ["a\x0cb\x0bc d"]),
        ("a\n\nb", ["a", "", "b"]),
        ("", []),
    ],
)
def test_split_lines_only_on_newlines(text: str, expected: list[str]) -> None:
    assert split_lines(text) == expected


def test_utf8_bom_is_stripped_from_first_line(tmp_path: Path) -> None:
    path = tmp_path / "bom.py"
    path.write_bytes("\ufeff#   Intro\n##  detail\n".encode("utf-8"))

    doc = summarize_file(path, SummaryOptions(title=False, header=False))

    assert doc is not None
    assert doc.lines == ["1\t#   Intro", "2\t##  detail"]
