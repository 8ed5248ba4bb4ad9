from __future__ import annotations

from pathlib import Path

from modal_edit.adapters.textual import CellCanvas
from modal_edit.buffer import Buffer
from modal_edit.editor import Editor
from modal_edit.modes import TextInput
from modal_edit.render import FramePainter, Rect, clip_to_width, scroll_top
from modal_edit.runtime.config import RenderSettings

SETTINGS = RenderSettings()


def paint(editor: Editor, width: int = 40, height: int = 4) -> CellCanvas:
    canvas = CellCanvas(width, height, background=SETTINGS.background)
    FramePainter(SETTINGS).paint(editor.view(), canvas, Rect(0, 0, width, height))
    return canvas


def make_editor(*lines: str, line: int = 0, char: int = 0) -> Editor:
    buffer = Buffer(list(lines), source_path=Path("demo.txt"))
    buffer.state.line, buffer.state.char = line, char
    return Editor(buffer)


def test_lines_and_status_are_drawn() -> None:
    canvas = paint(make_editor("hello", "world"))

    assert canvas.row_text(0).startswith("hello")
    assert canvas.row_text(1).startswith("world")
    status = canvas.row_text(3)
    assert status.startswith(" NORMAL ")
    assert "demo.txt" in status
    assert "1:1" in status


def test_status_shows_mode_and_dirty_flag() -> None:
    editor = make_editor("ab")
    editor.dispatch(TextInput("i"))
    editor.dispatch(TextInput("z"))

    status = paint(editor).row_text(3)

    assert status.startswith(" INSERT ")
    assert "[+]" in status


def test_cursor_cell_is_highlighted() -> None:
    canvas = paint(make_editor("abc", char=1))

    assert canvas.background_at(1, 0) == SETTINGS.cursor
    assert canvas.background_at(0, 0) == SETTINGS.current_line
    assert canvas.background_at(2, 0) == SETTINGS.current_line
    assert canvas.background_at(0, 1) == SETTINGS.background


def test_wide_glyph_cursor_spans_two_cells() -> None:
    canvas = paint(make_editor("a漢b", char=1))

    assert canvas.background_at(1, 0) == SETTINGS.cursor
    assert canvas.background_at(2, 0) == SETTINGS.cursor
    assert canvas.background_at(3, 0) == SETTINGS.current_line


def test_long_lines_are_clipped() -> None:
    canvas = paint(make_editor("x" * 50), width=10)

    assert canvas.row_text(0) == "x" * 10


def test_view_scrolls_to_cursor() -> None:
    lines = [f"line {index}" for index in range(10)]
    canvas = paint(make_editor(*lines, line=8), height=4)

    rows = [canvas.row_text(row).rstrip() for row in range(3)]
    assert rows == ["line 6", "line 7", "line 8"]


def test_scroll_top() -> None:
    assert scroll_top(0, 2, 5, 10) == 0
    assert scroll_top(0, 7, 5, 10) == 3
    assert scroll_top(5, 1, 5, 10) == 1
    assert scroll_top(8, 9, 5, 10) == 5


def test_clip_to_width_measures_cells() -> None:
    canvas = CellCanvas(1, 1)

    assert clip_to_width(canvas, "abc", 5) == "abc"
    assert clip_to_width(canvas, "漢字x", 3) == "漢"
    assert clip_to_width(canvas, "abc", 0) == ""
