"""Line buffer with a normalized 2-D cursor."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from pathlib import Path
from typing import ContextManager, List, Optional, Sequence

from modal_edit.runtime import telemetry

from .document import read_lines, split_text, write_lines
from .errors import NoBackingFile
from .state import Cursor, CursorState
from .validation import normalize_cursor


@dataclass(frozen=True, slots=True)
class BufferView:
    """Read-only snapshot of a buffer for renderers and tests."""

    lines: tuple[str, ...]
    cursor: Cursor
    append_pending: bool
    source_path: Optional[Path]
    dirty: bool


class Buffer:
    def __init__(
        self,
        lines: Optional[Sequence[str]] = None,
        *,
        source_path: Optional[Path] = None,
    ) -> None:
        self._lines: List[str] = list(lines) if lines else [""]
        self.source_path = source_path
        self.state = CursorState()
        self.dirty = False
        self.logger = telemetry.get_logger("modal_edit.buffer")

    @classmethod
    def load(cls, path: str | Path) -> "Buffer":
        resolved = Path(path).resolve()
        buffer = cls(read_lines(resolved), source_path=resolved)
        telemetry.record_event(
            "buffer.load",
            data={"path": resolved, "lines": buffer.line_count},
            logger_name="modal_edit.buffer",
        )
        return buffer

    @classmethod
    def from_text(cls, text: str, *, source_path: Optional[Path] = None) -> "Buffer":
        return cls(split_text(text), source_path=source_path)

    # -- read surface -----------------------------------------------------

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def cursor_line(self) -> int:
        return self.state.line

    @property
    def cursor_char(self) -> int:
        return self.state.char

    @property
    def append_pending(self) -> bool:
        return self.state.append_pending

    @property
    def current_line(self) -> str:
        return self._lines[self.state.line]

    def current_character(self) -> Optional[str]:
        line = self.current_line
        if self.state.char < len(line):
            return line[self.state.char]
        return None

    def current_line_is_empty(self) -> bool:
        return not self.current_line

    def snapshot(self) -> BufferView:
        return BufferView(
            lines=self.lines,
            cursor=self.state.position,
            append_pending=self.state.append_pending,
            source_path=self.source_path,
            dirty=self.dirty,
        )

    # -- persistence ------------------------------------------------------

    def save(self) -> None:
        if self.source_path is None:
            raise NoBackingFile()
        write_lines(self.source_path, self._lines)
        self.dirty = False
        telemetry.record_event(
            "buffer.save",
            data={"path": self.source_path, "lines": self.line_count},
            logger_name="modal_edit.buffer",
        )

    # -- edits ------------------------------------------------------------

    def insert_text(self, text: str) -> None:
        with Transaction(self, "insert_text", edits=True):
            line = self.current_line
            at = self.state.char
            self._lines[self.state.line] = line[:at] + text + line[at:]

    def delete_char_at_cursor(self) -> None:
        with Transaction(self, "delete_char", edits=True) as tx:
            line = self.current_line
            at = self.state.char
            if at >= len(line):
                tx.unchanged()
                return
            self._lines[self.state.line] = line[:at] + line[at + 1 :]

    def delete_current_line(self) -> None:
        with Transaction(self, "delete_line", edits=True):
            if len(self._lines) == 1:
                self._lines[0] = ""
            else:
                del self._lines[self.state.line]

    def insert_blank_line_above(self) -> None:
        with Transaction(self, "insert_line_above", edits=True):
            self._lines.insert(self.state.line, "")

    def insert_blank_line_below(self) -> None:
        with Transaction(self, "insert_line_below", edits=True):
            self._lines.insert(self.state.line + 1, "")

    def set_append_pending(self, flag: bool) -> None:
        with Transaction(self, "append_pending"):
            self.state.append_pending = flag

    # -- motions ----------------------------------------------------------

    def move_up(self) -> None:
        with Transaction(self, "move_up"):
            self.state.line -= 1

    def move_down(self) -> None:
        with Transaction(self, "move_down"):
            self.state.line += 1

    def move_left(self) -> None:
        with Transaction(self, "move_left"):
            self.state.char -= 1

    def move_right(self) -> None:
        self.move_right_by(1)

    def move_right_by(self, count: int) -> None:
        with Transaction(self, "move_right"):
            self.state.char += count

    def move_line_start(self) -> None:
        with Transaction(self, "move_line_start"):
            self.state.char = 0

    def move_line_end(self) -> None:
        with Transaction(self, "move_line_end"):
            self.state.char = len(self.current_line) - 1

    def move_document_top(self) -> None:
        with Transaction(self, "move_document_top"):
            self.state.line = 0

    def move_document_bottom(self) -> None:
        with Transaction(self, "move_document_bottom"):
            self.state.line = len(self._lines) - 1


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one public mutator: telemetry span, dirty tracking, normalization.

    Normalization runs exactly once, on exit, even when the body returns early.
    """

    def __init__(self, buffer: Buffer, label: str, *, edits: bool = False) -> None:
        self.buffer = buffer
        self.label = label
        self.edits = edits
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            logger_name="modal_edit.buffer",
            metadata={"cursor": self.buffer.state.position},
        )
        self._span_cm.__enter__()
        return self

    def unchanged(self) -> None:
        self.edits = False

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None:
                normalize_cursor(self.buffer._lines, self.buffer.state)
                if self.edits:
                    self.buffer.dirty = True
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False
