"""Line buffer, cursor normalization, and the load/save contract."""

from .buffer import Buffer, BufferView, Transaction
from .errors import BufferFileError, BufferIOError, NoBackingFile
from .state import Cursor, CursorState
from .validation import CursorInvariantError, check_cursor, normalize_cursor

__all__ = [
    "Buffer",
    "BufferView",
    "Transaction",
    "BufferFileError",
    "BufferIOError",
    "NoBackingFile",
    "Cursor",
    "CursorState",
    "CursorInvariantError",
    "check_cursor",
    "normalize_cursor",
]
