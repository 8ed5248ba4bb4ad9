"""Synchronous input loop: one event, one dispatch, one frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from modal_edit.editor import Editor, EditorView
from modal_edit.modes import EditorMode, ModeResult, Quit, TextInput
from modal_edit.runtime import telemetry

QUIT_COMMAND = "q"

FrameSink = Callable[[EditorView], None]


def should_quit(editor: Editor, event: object) -> bool:
    """Quit is decided at the loop boundary, before the editor sees the event."""

    if isinstance(event, Quit):
        return True
    return (
        editor.mode is EditorMode.NORMAL
        and isinstance(event, TextInput)
        and event.text == QUIT_COMMAND
    )


@dataclass
class SessionReport:
    events: int = 0
    frames: int = 0
    quit: bool = False
    failures: List[ModeResult] = field(default_factory=list)


def run_session(
    editor: Editor,
    events: Iterable[object],
    render: Optional[FrameSink] = None,
) -> SessionReport:
    """Drain ``events`` into ``editor`` until a quit signal or exhaustion.

    ``render`` receives a fresh view after every dispatched event. Save
    failures are collected on the report instead of ending the session.
    """

    report = SessionReport()
    logger = telemetry.get_logger("modal_edit.session")
    if render is not None:
        render(editor.view())
        report.frames += 1
    for event in events:
        if should_quit(editor, event):
            report.quit = True
            break
        report.events += 1
        result = editor.dispatch(event)
        if result.error is not None:
            logger.warning(f"dispatch failed: {result.message}")
            report.failures.append(result)
        if render is not None:
            render(editor.view())
            report.frames += 1
    telemetry.record_event(
        "session.end",
        data={"events": report.events, "quit": report.quit},
        logger_name="modal_edit.session",
    )
    return report


__all__ = ["QUIT_COMMAND", "SessionReport", "run_session", "should_quit"]
