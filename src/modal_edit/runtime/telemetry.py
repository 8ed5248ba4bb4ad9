"""Logging for the editor, built on telelog.

Everything logs through cached ``telelog.Logger`` instances that share one
``telelog.Config``. The config is derived from ``MODAL_EDIT_*`` environment
variables (see ``LogSettings``) unless a host calls ``configure`` first.

Two helpers carry most of the traffic:

* ``record_event`` writes one structured ``event::<name>`` line.
* ``span`` profiles a block, optionally tracks it as a component, and writes
  a closing ``span::end`` line with whatever metadata the block attached.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Optional, Tuple, cast

import telelog  # type: ignore[import]

from .config import env, env_flag, env_int

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = "modal_edit"

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


@dataclass(frozen=True)
class LogSettings:
    level: str = "INFO"
    console: bool = True
    color: bool = True
    json: bool = False
    file: Optional[str] = None
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls) -> "LogSettings":
        buffered = env_flag("LOG_BUFFERED", False)
        return cls(
            level=(env("LOG_LEVEL") or "INFO").upper(),
            console=not env_flag("DISABLE_CONSOLE", False),
            color=not env_flag("NO_COLOR", False),
            json=env_flag("LOG_JSON", False),
            file=env("LOG_FILE") or None,
            buffer_size=env_int("LOG_BUFFER_SIZE", 2048) if buffered else None,
        )


def build_config(settings: LogSettings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.color)
    config.with_json_format(settings.json)
    if settings.file:
        config.with_file_output(settings.file)
    if settings.buffer_size:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    return config


def configure(
    settings: Optional[LogSettings] = None,
    *,
    quiet: bool = False,
    level: Optional[str] = None,
) -> LogSettings:
    """Rebuild the shared config and drop cached loggers.

    ``quiet`` turns console output off; full-screen hosts own the terminal,
    so they log to ``MODAL_EDIT_LOG_FILE`` only. ``level`` overrides
    ``MODAL_EDIT_LOG_LEVEL``.
    """

    global _config
    settings = settings or LogSettings.from_env()
    if quiet:
        settings = replace(settings, console=False)
    if level:
        settings = replace(settings, level=level.upper())
    _config = build_config(settings)
    _loggers.clear()
    return settings


def get_logger(name: Optional[str] = None) -> Any:
    global _config
    key = name or DEFAULT_LOGGER_NAME
    logger = _loggers.get(key)
    if logger is None:
        if _config is None:
            _config = build_config(LogSettings.from_env())
        logger = tl.Logger.with_config(key, _config)
        _loggers[key] = logger
    return logger


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _write(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    # telelog exposes ``<level>_with(message, pairs)`` for structured output.
    level = level.lower()
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, [(key, _text(value)) for key, value in data.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _write(get_logger(logger_name), level, f"event::{name}", dict(data or {}))


@dataclass
class SpanHandle:
    """Lets a block attach details to the ``span::end`` line of its span."""

    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def payload(self, **extra: Any) -> Dict[str, Any]:
        data: Dict[str, Any] = {"span": self.name}
        if self.component:
            data["component"] = self.component
        data.update(self.metadata)
        data.update(extra)
        return data


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``.

    ``component=True`` tracks the block as a component of the same name; a
    string names the component explicitly. ``metadata`` is pushed as logger
    context for the duration of the block.
    """

    logger = get_logger(logger_name)
    component_name = name if component is True else component or None
    handle = SpanHandle(name, cast(Optional[str], component_name))
    pushed: List[Tuple[str, str]] = [
        (key, _text(value)) for key, value in (metadata or {}).items()
    ]

    with ExitStack() as stack:
        for key, value in pushed:
            logger.add_context(key, value)
            stack.callback(logger.remove_context, key)
        if handle.component:
            stack.enter_context(logger.track_component(handle.component))
        stack.enter_context(logger.profile(name))
        try:
            yield handle
        except Exception as exc:
            _write(logger, "error", "span::fail", handle.payload(reason=str(exc)))
            raise
        _write(logger, "debug", "span::end", handle.payload())


__all__ = [
    "LogSettings",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
