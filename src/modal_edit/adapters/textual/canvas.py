"""Terminal cell grid implementing the ``Surface`` contract via Rich styles."""

from __future__ import annotations

from typing import List, Optional

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text


class CellCanvas:
    """Fixed-size grid of cells; one unit of x/y/w/h is one terminal cell."""

    def __init__(self, width: int, height: int, *, background: str = "black") -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._chars: List[List[str]] = [
            [" "] * self.width for _ in range(self.height)
        ]
        self._fg: List[List[Optional[str]]] = [
            [None] * self.width for _ in range(self.height)
        ]
        self._bg: List[List[Optional[str]]] = [
            [background] * self.width for _ in range(self.height)
        ]

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        for row in range(max(0, y), min(self.height, y + h)):
            bg_row = self._bg[row]
            for col in range(max(0, x), min(self.width, x + w)):
                bg_row[col] = color

    def text_width(self, text: str) -> int:
        return cell_len(text)

    def draw_text(self, x: int, y: int, text: str, color: str) -> None:
        if not 0 <= y < self.height:
            return
        col = x
        for char in text:
            width = cell_len(char)
            if width == 0:
                continue
            if col + width > self.width:
                break
            if col >= 0:
                self._chars[y][col] = char
                self._fg[y][col] = color
                # Trailing cells of a wide glyph render as nothing.
                for extra in range(1, width):
                    self._chars[y][col + extra] = ""
                    self._fg[y][col + extra] = color
            col += width

    def row_text(self, row: int) -> str:
        return "".join(self._chars[row])

    def background_at(self, x: int, y: int) -> Optional[str]:
        return self._bg[y][x]

    def to_text(self) -> Text:
        output = Text(no_wrap=True, overflow="crop")
        for row in range(self.height):
            if row:
                output.append("\n")
            run: List[str] = []
            run_style: Optional[Style] = None
            for col in range(self.width):
                char = self._chars[row][col]
                if not char:
                    continue
                style = Style(color=self._fg[row][col], bgcolor=self._bg[row][col])
                if style != run_style and run:
                    output.append("".join(run), style=run_style)
                    run = []
                run_style = style
                run.append(char)
            if run:
                output.append("".join(run), style=run_style)
        return output


__all__ = ["CellCanvas"]
