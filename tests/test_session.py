from __future__ import annotations

from typing import List

from modal_edit.buffer import Buffer
from modal_edit.editor import Editor, EditorView
from modal_edit.modes import ESCAPE, EditorMode, KeyDown, Quit, TextInput
from modal_edit.session import run_session, should_quit


def make_editor(*lines: str) -> Editor:
    return Editor(Buffer(list(lines) or None))


def test_should_quit_on_quit_event() -> None:
    editor = make_editor("abc")

    assert should_quit(editor, Quit())


def test_should_quit_on_q_only_in_normal() -> None:
    editor = make_editor("abc")

    assert should_quit(editor, TextInput("q"))
    editor.dispatch(TextInput("i"))
    assert not should_quit(editor, TextInput("q"))
    assert not should_quit(editor, KeyDown("q"))


def test_run_session_renders_every_event() -> None:
    editor = make_editor("ab")
    frames: List[EditorView] = []
    events = [TextInput("i"), TextInput("X"), KeyDown(ESCAPE)]

    report = run_session(editor, events, render=frames.append)

    assert report.events == 3
    assert report.frames == 4
    assert not report.quit
    assert frames[0].lines == ("ab",)
    assert frames[2].mode is EditorMode.INSERT
    assert frames[-1].lines == ("Xab",)


def test_run_session_stops_at_quit() -> None:
    editor = make_editor("ab")
    events = [TextInput("x"), TextInput("q"), TextInput("x")]

    report = run_session(editor, events)

    assert report.quit
    assert report.events == 1
    assert report.frames == 0
    assert editor.buffer.lines == ("b",)


def test_q_in_insert_mode_is_text() -> None:
    editor = make_editor("")
    events = [TextInput("i"), TextInput("q"), KeyDown(ESCAPE), Quit()]

    report = run_session(editor, events)

    assert report.quit
    assert editor.buffer.lines == ("q",)


def test_save_failure_does_not_end_session() -> None:
    editor = make_editor("ab")
    events = [TextInput("w"), TextInput("x")]

    report = run_session(editor, events)

    assert not report.quit
    assert report.events == 2
    assert [failure.status for failure in report.failures] == ["save_failed"]
    assert editor.buffer.lines == ("b",)
