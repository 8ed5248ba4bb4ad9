"""Input events, dispatch results, and the base class shared by editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Union

from modal_edit.buffer import Buffer
from modal_edit.runtime import telemetry

if TYPE_CHECKING:  # pragma: no cover
    from modal_edit.keymaps import KeymapResolver, ResolutionMatch

ESCAPE = "Escape"


@dataclass(frozen=True, slots=True)
class Quit:
    """Application-quit request; handled by the input loop, never by a mode."""


@dataclass(frozen=True, slots=True)
class KeyDown:
    """Physical key with no printable form (only ``Escape`` drives the core)."""

    symbol: str


@dataclass(frozen=True, slots=True)
class TextInput:
    """Composed, newline-free text from the input source."""

    text: str


EditorEvent = Union[Quit, KeyDown, TextInput]


class EditorMode(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_event`` and ``Editor.dispatch``."""

    consumed: bool
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None
    error: Optional[Exception] = None


class ModeBus:
    """Minimal event bus letting modes and hosts exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode and action can access."""

    buffer: Buffer
    bus: ModeBus = field(default_factory=ModeBus)


class Mode:
    """Base class for editor modes; subclasses supply ``name`` and a fallback."""

    name: EditorMode

    def __init__(self, context: ModeContext, resolver: "KeymapResolver") -> None:
        self.context = context
        self._resolver = resolver

    def on_enter(self, previous: Optional[EditorMode]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[EditorMode]) -> None:
        del next_mode

    def handle_event(self, event: EditorEvent) -> ModeResult:
        token = event_to_token(event)
        if token is not None:
            result = self._resolver.resolve(self.name.value, token)
            if result.status == "match" and result.match:
                return self._execute_match(result.match)
        return self.fallback(event)

    def fallback(self, event: EditorEvent) -> ModeResult:
        del event
        return ModeResult(consumed=False, status="ignored")

    def _execute_match(self, match: "ResolutionMatch") -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


def event_to_token(event: object) -> Optional[str]:
    """Keymap token for ``event``; ``None`` for events no table can match."""

    if isinstance(event, TextInput):
        return f"text:{event.text}"
    if isinstance(event, KeyDown):
        return f"key:{event.symbol}"
    return None
