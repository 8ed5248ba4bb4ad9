"""Cursor position and the append-pending sub-state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (line, char)


@dataclass(slots=True)
class CursorState:
    """Mutable cursor owned by a Buffer.

    Fields may hold out-of-range values only while a Buffer mutator is
    running; ``validation.normalize_cursor`` restores the invariants.
    """

    line: int = 0
    char: int = 0
    append_pending: bool = False

    @property
    def position(self) -> Cursor:
        return (self.line, self.char)
