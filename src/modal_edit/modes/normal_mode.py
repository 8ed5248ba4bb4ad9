"""Normal mode: every typed token is a command name, never text."""

from __future__ import annotations

from typing import Optional

from modal_edit.runtime import telemetry

from .base_mode import EditorMode, Mode, ModeContext


class NormalMode(Mode):
    name = EditorMode.NORMAL

    def __init__(self, context: ModeContext, resolver) -> None:
        super().__init__(context, resolver)
        self.logger = telemetry.get_logger("modal_edit.modes.normal")

    def on_enter(self, previous: Optional[EditorMode]) -> None:
        del previous
        if self.context.buffer.append_pending:
            self.logger.debug("clearing append-pending")
            self.context.buffer.set_append_pending(False)
