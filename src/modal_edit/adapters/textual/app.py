"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from modal_edit.buffer import BufferIOError
from modal_edit.editor import Editor, EditorView
from modal_edit.render import FramePainter, Rect
from modal_edit.runtime import telemetry
from modal_edit.runtime.config import RenderSettings

from .canvas import CellCanvas
from .controller import TextualEditorAdapter, TextualUIHooks


class ModalEditApp(App[None]):
    """Full-screen view of one buffer, repainted after every key."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor-view {
		height: 1fr;
		width: 1fr;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, editor: Editor, *, settings: RenderSettings | None = None
    ) -> None:
        super().__init__()
        self.editor = editor
        self.painter = FramePainter(settings or RenderSettings.from_env())
        self.adapter: TextualEditorAdapter | None = None
        self.logger = telemetry.get_logger("modal_edit.adapters.textual")
        self._view_widget: Static | None = None
        self._last_view: EditorView | None = None

    def compose(self) -> ComposeResult:
        self._view_widget = Static("", id="editor-view")
        yield self._view_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            request_quit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.editor, hooks)
        self.call_after_refresh(self._repaint)

    def on_resize(self, event: events.Resize) -> None:
        del event
        self.call_after_refresh(self._repaint)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+c", "ctrl+q"}:
            return
        character = event.character if event.is_printable else None
        self.adapter.handle_textual_key(event.key, character=character)
        event.stop()

    def _update_view(self, view: EditorView) -> None:
        self._last_view = view
        self._repaint()

    def _repaint(self) -> None:
        if self._view_widget is None or self._last_view is None:
            return
        width, height = self._view_widget.size
        if width <= 0 or height <= 0:
            return
        canvas = CellCanvas(width, height, background=self.painter.settings.background)
        self.painter.paint(self._last_view, canvas, Rect(0, 0, width, height))
        self._view_widget.update(canvas.to_text())

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="modal-edit", description="Edit a text file with modal commands."
    )
    parser.add_argument("path", help="File to open; it must already exist")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum log level (overrides MODAL_EDIT_LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    telemetry.configure(quiet=True, level=args.log_level)
    try:
        editor = Editor.open(args.path)
    except BufferIOError as exc:
        print(f"modal-edit: {exc}", file=sys.stderr)
        return 1
    ModalEditApp(editor).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    sys.exit(main())
