"""Mode-transition actions shared by the Normal and Insert tables."""

from __future__ import annotations

from modal_edit.modes.base_mode import EditorMode, ModeContext, ModeResult


def _insert(message: str) -> ModeResult:
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT, message=message)


def enter_insert_mode(context: ModeContext, match) -> ModeResult:
    del context, match
    return _insert("enter_insert")


def insert_at_line_start(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_line_start()
    return _insert("enter_insert")


def append_after_cursor(context: ModeContext, match) -> ModeResult:
    del match
    buffer = context.buffer
    if buffer.cursor_char >= len(buffer.current_line) - 1:
        buffer.set_append_pending(True)
    buffer.move_right()
    return _insert("enter_append")


def append_at_line_end(context: ModeContext, match) -> ModeResult:
    del match
    buffer = context.buffer
    buffer.move_line_end()
    buffer.set_append_pending(True)
    buffer.move_right()
    return _insert("enter_append")


def open_line_below(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.insert_blank_line_below()
    context.buffer.move_down()
    return _insert("open_line")


def open_line_above(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.insert_blank_line_above()
    return _insert("open_line")


def exit_to_normal_mode(context: ModeContext, match) -> ModeResult:
    del match
    # Step back while the one-past-end slot is still valid, then drop it.
    context.buffer.move_left()
    context.buffer.set_append_pending(False)
    return ModeResult(consumed=True, switch_to=EditorMode.NORMAL, message="exit_insert")


def noop_action(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="noop")


__all__ = [
    "enter_insert_mode",
    "insert_at_line_start",
    "append_after_cursor",
    "append_at_line_end",
    "open_line_below",
    "open_line_above",
    "exit_to_normal_mode",
    "noop_action",
]
