"""Unit tests for console rendering."""

import io

from rich.console import Console

from commithub.cli.render import render_file_diff
from commithub.diff.engine import FIRST_COMMIT, MODIFIED, FileDiff
from commithub.diff.text_diff import diff_lines


def _console() -> tuple:
    output = io.StringIO()
    return Console(file=output, width=20, force_terminal=False, color_system=None), output


def test_long_content_line_is_not_wrapped() -> None:
    console, output = _console()
    line = "value = 12345 " * 6

    render_file_diff(console, FileDiff("a.txt", FIRST_COMMIT, line + "\n"))

    assert line in output.getvalue()


def test_long_added_line_is_not_wrapped() -> None:
    console, output = _console()
    old, new = "x\n", "x\n" + "added " * 8 + "\n"

    render_file_diff(console, FileDiff("a.txt", MODIFIED, new, diff_lines(old, new)))

    assert "++ " + "added " * 8 in output.getvalue()


def test_content_is_printed_verbatim() -> None:
    console, output = _console()

    render_file_diff(console, FileDiff("a.txt", FIRST_COMMIT, "[red]x[/red] 0x1F\n"))

    assert "[red]x[/red] 0x1F" in output.getvalue()
