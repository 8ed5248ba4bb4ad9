"""Editor: owns the buffer and the active mode, and dispatches input events."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Type

from modal_edit.buffer import Buffer
from modal_edit.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from modal_edit.modes import (
    EditorEvent,
    EditorMode,
    InsertMode,
    KeyDown,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
    NormalMode,
    TextInput,
)
from modal_edit.runtime import telemetry


@dataclass(frozen=True, slots=True)
class EditorView:
    """Per-frame snapshot handed to renderers; never aliases live state."""

    mode: EditorMode
    lines: tuple[str, ...]
    cursor_line: int
    cursor_char: int
    current_character: Optional[str]
    current_line_is_empty: bool
    append_pending: bool
    status: str
    path: Optional[Path]
    dirty: bool


class Editor:
    """Two-mode state machine around a single, exclusively owned Buffer."""

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        keymap_registry: KeymapRegistry | None = None,
        load_defaults: bool = True,
        bus: ModeBus | None = None,
    ) -> None:
        self.context = ModeContext(buffer=buffer or Buffer(), bus=bus or ModeBus())
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="modal_edit.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = KeymapResolver(
            self.keymap_registry, logger_name="modal_edit.keymaps"
        )
        self.status = ""
        self._modes: Dict[EditorMode, Mode] = {}
        self._active: Optional[EditorMode] = None
        self.register_mode(NormalMode)
        self.register_mode(InsertMode)

    @classmethod
    def open(
        cls, path: str | Path, *, keymap_registry: KeymapRegistry | None = None
    ) -> "Editor":
        """Load ``path`` into a fresh buffer; raises ``BufferIOError``."""

        return cls(Buffer.load(path), keymap_registry=keymap_registry)

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    @property
    def bus(self) -> ModeBus:
        return self.context.bus

    @property
    def mode(self) -> EditorMode:
        if self._active is None:
            raise RuntimeError("no mode registered")
        return self._active

    @property
    def active_mode(self) -> Mode:
        return self._modes[self.mode]

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        mode = mode_cls(self.context, self.keymap_resolver)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: EditorMode) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self._active
        if previous == name:
            return
        if previous is not None:
            self._modes[previous].on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous)
        telemetry.record_event(
            "mode.switch",
            data={"mode": name.value},
            logger_name="modal_edit.editor",
        )
        self.bus.emit("mode.switch", name)

    def dispatch(self, event: EditorEvent | object) -> ModeResult:
        """Run one input event to completion.

        Quit and unknown event types are left to the surrounding loop.
        """

        if not isinstance(event, (KeyDown, TextInput)):
            return ModeResult(consumed=False, status="ignored")

        mode = self.active_mode
        with telemetry.span(
            name=f"mode::{mode.name.value}",
            component=True,
            logger_name="modal_edit.editor",
            metadata={"event": event, "mode": mode.name.value},
        ):
            result = mode.handle_event(event)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        if result.message:
            self.status = result.message
        return result

    def view(self) -> EditorView:
        buffer = self.buffer
        return EditorView(
            mode=self.mode,
            lines=buffer.lines,
            cursor_line=buffer.cursor_line,
            cursor_char=buffer.cursor_char,
            current_character=buffer.current_character(),
            current_line_is_empty=buffer.current_line_is_empty(),
            append_pending=buffer.append_pending,
            status=self.status,
            path=buffer.source_path,
            dirty=buffer.dirty,
        )


__all__ = ["Editor", "EditorView"]
