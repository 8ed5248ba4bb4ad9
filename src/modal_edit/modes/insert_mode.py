"""Insert mode: text is spliced into the buffer, only Escape is a command."""

from __future__ import annotations

from typing import Optional

from modal_edit.actions import edit as edit_actions
from modal_edit.runtime import telemetry

from .base_mode import EditorEvent, EditorMode, Mode, ModeContext, ModeResult, TextInput


class InsertMode(Mode):
    name = EditorMode.INSERT

    def __init__(self, context: ModeContext, resolver) -> None:
        super().__init__(context, resolver)
        self.logger = telemetry.get_logger("modal_edit.modes.insert")

    def on_enter(self, previous: Optional[EditorMode]) -> None:
        del previous
        # Typing at column 0 of an empty line needs the one-past-end slot.
        buffer = self.context.buffer
        if buffer.current_line_is_empty() and not buffer.append_pending:
            self.logger.debug("empty line: forcing append-pending")
            buffer.set_append_pending(True)

    def fallback(self, event: EditorEvent) -> ModeResult:
        if isinstance(event, TextInput) and event.text:
            return edit_actions.insert_text(self.context, event.text)
        return ModeResult(consumed=False, status="ignored")
