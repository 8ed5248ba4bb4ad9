"""Cursor normalization and invariant checks shared across buffer services."""

from __future__ import annotations

from typing import Sequence

from .state import CursorState


class CursorInvariantError(AssertionError):
    """Raised by ``check_cursor`` when a cursor escaped normalization."""

    def __init__(self, message: str, *, cursor: tuple[int, int]) -> None:
        super().__init__(f"{message}: {cursor}")
        self.cursor = cursor


def char_limit(line: str, append_pending: bool) -> int:
    """Largest valid ``char`` index on ``line``."""

    if append_pending:
        return len(line)
    return max(0, len(line) - 1)


def normalize_cursor(lines: Sequence[str], state: CursorState) -> CursorState:
    state.line = max(0, min(state.line, len(lines) - 1))
    limit = char_limit(lines[state.line], state.append_pending)
    state.char = max(0, min(state.char, limit))
    return state


def check_cursor(lines: Sequence[str], state: CursorState) -> None:
    if not lines:
        raise CursorInvariantError("document has no lines", cursor=state.position)
    if not 0 <= state.line < len(lines):
        raise CursorInvariantError("line out of range", cursor=state.position)
    limit = char_limit(lines[state.line], state.append_pending)
    if not 0 <= state.char <= limit:
        raise CursorInvariantError("char out of range", cursor=state.position)
