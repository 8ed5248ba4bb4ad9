from __future__ import annotations

from typing import List

from modal_edit.adapters.textual import (
    CellCanvas,
    TextualEditorAdapter,
    TextualUIHooks,
    translate_key,
)
from modal_edit.buffer import Buffer
from modal_edit.editor import Editor, EditorView
from modal_edit.modes import ESCAPE, EditorMode, KeyDown, TextInput


def make_adapter(
    *lines: str,
) -> tuple[TextualEditorAdapter, List[EditorView], List[str], List[str]]:
    editor = Editor(Buffer(list(lines) or None))
    views: List[EditorView] = []
    statuses: List[str] = []
    quits: List[str] = []
    hooks = TextualUIHooks(
        update_view=views.append,
        update_status=statuses.append,
        request_quit=lambda: quits.append("quit"),
    )
    return TextualEditorAdapter(editor, hooks), views, statuses, quits


def test_translate_key() -> None:
    assert translate_key("escape") == KeyDown(ESCAPE)
    assert translate_key("a", "a") == TextInput("a")
    assert translate_key("dollar_sign", "$") == TextInput("$")
    assert translate_key("tab", "\t") == KeyDown("tab")
    assert translate_key("up") == KeyDown("up")


def test_adapter_updates_view_and_status() -> None:
    adapter, views, statuses, _ = make_adapter("ab")

    adapter.handle_textual_key("i", character="i")
    adapter.handle_textual_key("x", character="x")
    adapter.handle_textual_key("escape")

    assert len(views) == 4
    assert views[-1].lines == ("xab",)
    assert views[-1].mode is EditorMode.NORMAL
    assert statuses == ["enter_insert", "exit_insert"]


def test_q_in_normal_requests_quit() -> None:
    adapter, views, _, quits = make_adapter("ab")

    result = adapter.handle_textual_key("q", character="q")

    assert result is None
    assert quits == ["quit"]
    assert len(views) == 1


def test_q_in_insert_is_typed() -> None:
    adapter, views, _, quits = make_adapter("")

    adapter.handle_textual_key("i", character="i")
    adapter.handle_textual_key("q", character="q")

    assert quits == []
    assert views[-1].lines == ("q",)


def test_adapter_logs_bus_events() -> None:
    editor = Editor(Buffer(["ab"]))
    lines: List[str] = []
    TextualEditorAdapter(
        editor, TextualUIHooks(update_view=lambda view: None, log=lines.append)
    )

    editor.dispatch(TextInput("i"))

    assert any(
        line.startswith("event ->") and "mode.switch" in line for line in lines
    )


def test_canvas_to_text_merges_styled_runs() -> None:
    canvas = CellCanvas(4, 1, background="black")
    canvas.fill_rect(0, 0, 2, 1, "blue")
    canvas.draw_text(0, 0, "abcd", "white")

    text = canvas.to_text()

    assert text.plain == "abcd"
    assert len(text.spans) == 2
