"""Triggers, actions, and the bindings that join them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

TriggerKind = Literal["text", "key"]


@dataclass(frozen=True, slots=True)
class Trigger:
    """Typed text or a key-down symbol that a binding reacts to."""

    kind: TriggerKind
    value: str

    def __post_init__(self) -> None:
        if self.kind not in ("text", "key"):
            raise ValueError(f"unknown trigger kind '{self.kind}'")
        if not self.value:
            raise ValueError("trigger value cannot be empty")

    @classmethod
    def text(cls, value: str) -> "Trigger":
        return cls("text", value)

    @classmethod
    def key(cls, symbol: str) -> "Trigger":
        return cls("key", symbol)

    @property
    def token(self) -> str:
        return f"{self.kind}:{self.value}"


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named handler invoked as ``handler(context, match)``."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("action id cannot be empty")
        if not callable(self.handler):
            raise TypeError(f"handler for '{self.id}' is not callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a trigger in one mode with an action id."""

    id: str
    mode: str
    trigger: Trigger
    action_id: str
    origin: str = "user"

    def __post_init__(self) -> None:
        for name in ("id", "mode", "action_id"):
            if not getattr(self, name):
                raise ValueError(f"binding {name} cannot be empty")

    @property
    def token(self) -> str:
        return self.trigger.token


__all__ = ["ActionRef", "Binding", "Trigger", "TriggerKind"]
