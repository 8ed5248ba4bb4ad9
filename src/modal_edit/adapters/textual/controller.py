"""Adapter that feeds Textual key events into an Editor and reports back via hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from modal_edit.editor import Editor, EditorView
from modal_edit.modes import ESCAPE, EditorEvent, KeyDown, ModeResult, TextInput
from modal_edit.session import should_quit


def _noop(*_args, **_kwargs) -> None:
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[EditorView], None]
    update_status: Callable[[str], None] = _noop
    request_quit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


def translate_key(key: str, character: Optional[str] = None) -> EditorEvent:
    """Map a Textual key name (plus printable character) to a core event."""

    if key == "escape":
        return KeyDown(ESCAPE)
    if character and character.isprintable():
        return TextInput(character)
    return KeyDown(key)


class TextualEditorAdapter:
    """Bridges Editor dispatch and bus events to a Textual-friendly surface."""

    def __init__(self, editor: Editor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_view()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[ModeResult]:
        """Dispatch one key; returns ``None`` when the key ended the session."""

        event = translate_key(key, character)
        self._log_state("key ->", key=key, event=event)
        if should_quit(self.editor, event):
            self._log_state("quit <-")
            self.hooks.request_quit()
            return None

        result = self.editor.dispatch(event)
        if result.message:
            self.hooks.update_status(result.message)
        self._refresh_view()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def _subscribe_events(self) -> None:
        bus = self.editor.bus
        for event in ("mode.switch", "buffer.saved", "buffer.save_failed"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.editor.view())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.editor.buffer
        return {
            "mode": self.editor.mode.value,
            "cursor": (buffer.cursor_line, buffer.cursor_char),
            "append_pending": buffer.append_pending,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "translate_key"]
