"""Editing verbs bound by the per-mode command tables."""

from .core import (
    append_after_cursor,
    append_at_line_end,
    enter_insert_mode,
    exit_to_normal_mode,
    insert_at_line_start,
    noop_action,
    open_line_above,
    open_line_below,
)
from .edit import delete_char, delete_line, insert_text, save_buffer

__all__ = [
    "append_after_cursor",
    "append_at_line_end",
    "enter_insert_mode",
    "exit_to_normal_mode",
    "insert_at_line_start",
    "noop_action",
    "open_line_above",
    "open_line_below",
    "delete_char",
    "delete_line",
    "insert_text",
    "save_buffer",
]
