"""Environment-driven settings and per-mode display configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "MODAL_EDIT_"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def env_int(name: str, fallback: int) -> int:
    value = env(name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True)
class ModeStyle:
    """Status-line presentation for a mode."""

    label: str
    color: str


MODE_STYLES: Mapping[str, ModeStyle] = {
    "normal": ModeStyle("NORMAL", "#98C379"),
    "insert": ModeStyle("INSERT", "#E8B86D"),
}


@dataclass(frozen=True)
class RenderSettings:
    """Palette and cursor geometry used by the painter."""

    background: str = "black"
    current_line: str = "grey23"
    cursor: str = "blue"
    text: str = "white"
    line_height: int = 1
    cursor_width: int = 1
    tab_width: int = 4

    @classmethod
    def from_env(cls) -> "RenderSettings":
        return cls(
            cursor_width=max(1, env_int("CURSOR_WIDTH", 1)),
            tab_width=max(1, env_int("TAB_WIDTH", 4)),
        )


__all__ = [
    "ENV_PREFIX",
    "MODE_STYLES",
    "ModeStyle",
    "RenderSettings",
    "env",
    "env_flag",
    "env_int",
]
