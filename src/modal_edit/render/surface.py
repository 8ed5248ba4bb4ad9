"""Display-surface contract the painter draws through."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Rect:
    x: int
    y: int
    w: int
    h: int


class Surface(Protocol):
    """Three primitives: filled rectangles, string measurement, string drawing.

    Units are whatever the host uses (pixels, terminal cells).
    """

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        ...

    def text_width(self, text: str) -> int:
        ...

    def draw_text(self, x: int, y: int, text: str, color: str) -> None:
        ...


__all__ = ["Rect", "Surface"]
