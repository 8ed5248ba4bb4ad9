"""Editor modes, input events, and dispatch results."""

from .base_mode import (
    ESCAPE,
    EditorEvent,
    EditorMode,
    KeyDown,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
    Quit,
    TextInput,
    event_to_token,
)
from .normal_mode import NormalMode
from .insert_mode import InsertMode

__all__ = [
    "ESCAPE",
    "EditorEvent",
    "EditorMode",
    "KeyDown",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "Quit",
    "TextInput",
    "event_to_token",
    "NormalMode",
    "InsertMode",
]
