"""Text <-> line conversion and the load/save file contract."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from modal_edit.runtime.telemetry import span

from .errors import BufferIOError

ENCODING = "utf-8"


def split_text(text: str) -> List[str]:
    """Split on ``\\n`` and ``\\r\\n`` only; a final terminator adds no line.

    Other Unicode line boundaries (form feed, U+2028, ...) stay inside their
    line so that saving an unedited buffer reproduces the file.
    """

    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: Sequence[str]) -> str:
    return "\n".join(lines)


def read_lines(path: Path) -> List[str]:
    with span(
        "document::read", component="document", metadata={"path": path}
    ) as handle:
        try:
            with path.open(encoding=ENCODING, newline="") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            handle.add_metadata("error", type(exc).__name__)
            raise BufferIOError(f"cannot read {path}: {exc}", path=path) from exc
        lines = split_text(text)
        handle.add_metadata("lines", len(lines))
        return lines


def write_lines(path: Path, lines: Sequence[str]) -> None:
    """Overwrite ``path`` in place (truncate + write, no temp file)."""

    with span(
        "document::write", component="document", metadata={"path": path}
    ) as handle:
        try:
            with path.open("w", encoding=ENCODING, newline="") as fh:
                fh.write(join_lines(lines))
        except OSError as exc:
            handle.add_metadata("error", type(exc).__name__)
            raise BufferIOError(f"cannot write {path}: {exc}", path=path) from exc
        handle.add_metadata("lines", len(lines))
