"""Cursor motions bound in Normal mode."""

from __future__ import annotations

from modal_edit.modes.base_mode import ModeContext, ModeResult


def _moved() -> ModeResult:
    return ModeResult(consumed=True, status="motion")


def move_left(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_left()
    return _moved()


def move_right(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_right()
    return _moved()


def move_up(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_up()
    return _moved()


def move_down(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_down()
    return _moved()


def move_line_start(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_line_start()
    return _moved()


def move_line_end(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_line_end()
    return _moved()


def move_document_top(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_document_top()
    return _moved()


def move_document_bottom(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_document_bottom()
    return _moved()


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_line_start",
    "move_line_end",
    "move_document_top",
    "move_document_bottom",
]
