"""Errors raised when a buffer is loaded from or saved to its backing file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class BufferFileError(RuntimeError):
    """Base class for load/save failures; ``path`` is ``None`` for unbacked buffers."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class BufferIOError(BufferFileError):
    """The backing file could not be read, decoded, or written.

    The underlying ``OSError`` / ``UnicodeDecodeError`` is chained as
    ``__cause__``.
    """


class NoBackingFile(BufferFileError):
    """Save was requested on a buffer that was never loaded from a file."""

    def __init__(self) -> None:
        super().__init__("buffer has no backing file")
