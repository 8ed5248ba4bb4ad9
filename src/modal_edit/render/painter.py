"""Paints an ``EditorView`` onto a ``Surface``.

The painter owns the only presentation state there is (the vertical scroll
offset); everything else is read from the view each frame.
"""

from __future__ import annotations

from typing import Optional

from modal_edit.editor import EditorView
from modal_edit.modes import EditorMode
from modal_edit.runtime.config import MODE_STYLES, RenderSettings

from .surface import Rect, Surface


def clip_to_width(surface: Surface, text: str, width: int) -> str:
    """Longest prefix of ``text`` whose measured width fits in ``width``."""

    if surface.text_width(text) <= width:
        return text
    low, high = 0, len(text)
    while low < high:
        mid = (low + high + 1) // 2
        if surface.text_width(text[:mid]) <= width:
            low = mid
        else:
            high = mid - 1
    return text[:low]


def scroll_top(top: int, cursor_line: int, rows: int, line_count: int) -> int:
    """Adjust ``top`` so ``cursor_line`` is inside a window of ``rows`` lines."""

    rows = max(1, rows)
    if cursor_line < top:
        top = cursor_line
    elif cursor_line >= top + rows:
        top = cursor_line - rows + 1
    return max(0, min(top, max(0, line_count - rows)))


class FramePainter:
    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self.settings = settings or RenderSettings()
        self.top = 0

    def _display(self, text: str) -> str:
        return text.expandtabs(self.settings.tab_width)

    def paint(self, view: EditorView, surface: Surface, bounds: Rect) -> None:
        settings = self.settings
        surface.fill_rect(
            bounds.x, bounds.y, bounds.w, bounds.h, settings.background
        )
        text_rows = max(1, bounds.h // settings.line_height - 1)
        self.top = scroll_top(self.top, view.cursor_line, text_rows, len(view.lines))

        visible = view.lines[self.top : self.top + text_rows]
        for offset, line in enumerate(visible):
            index = self.top + offset
            y = bounds.y + offset * settings.line_height
            if index == view.cursor_line:
                self._paint_cursor_line(view, surface, bounds, y, line)
            shown = clip_to_width(surface, self._display(line), bounds.w)
            if shown:
                surface.draw_text(bounds.x, y, shown, settings.text)

        self._paint_status(view, surface, bounds)

    def _paint_cursor_line(
        self, view: EditorView, surface: Surface, bounds: Rect, y: int, line: str
    ) -> None:
        settings = self.settings
        surface.fill_rect(
            bounds.x, y, bounds.w, settings.line_height, settings.current_line
        )
        prefix_width = surface.text_width(self._display(line[: view.cursor_char]))
        if view.mode is EditorMode.NORMAL:
            # Block cursor spans the glyph so proportional fonts line up.
            glyph = self._display(view.current_character or " ")
            cursor_width = surface.text_width(glyph)
        else:
            cursor_width = settings.cursor_width
        if prefix_width < bounds.w:
            surface.fill_rect(
                bounds.x + prefix_width,
                y,
                min(cursor_width, bounds.w - prefix_width),
                settings.line_height,
                settings.cursor,
            )

    def _paint_status(self, view: EditorView, surface: Surface, bounds: Rect) -> None:
        settings = self.settings
        style = MODE_STYLES[view.mode.value]
        y = bounds.y + bounds.h - settings.line_height
        label = f" {style.label} "
        label_width = surface.text_width(label)
        surface.fill_rect(
            bounds.x, y, bounds.w, settings.line_height, settings.current_line
        )
        surface.fill_rect(bounds.x, y, label_width, settings.line_height, style.color)
        surface.draw_text(bounds.x, y, label, settings.background)

        name = str(view.path) if view.path else "[no file]"
        if view.dirty:
            name += " [+]"
        position = f"{view.cursor_line + 1}:{view.cursor_char + 1}"
        detail = f" {name}  {position}  {view.status}".rstrip()
        x = bounds.x + label_width
        shown = clip_to_width(surface, detail, bounds.w - label_width)
        if shown:
            surface.draw_text(x, y, shown, settings.text)


__all__ = ["FramePainter", "clip_to_width", "scroll_top"]
