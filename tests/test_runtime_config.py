from __future__ import annotations

import pytest

from modal_edit.runtime import telemetry
from modal_edit.runtime.config import RenderSettings, env_flag, env_int
from modal_edit.runtime.telemetry import LogSettings


def test_env_helpers_read_prefixed_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODAL_EDIT_FLAG", "yes")
    monkeypatch.setenv("MODAL_EDIT_COUNT", "12")
    monkeypatch.setenv("MODAL_EDIT_BROKEN", "twelve")

    assert env_flag("FLAG", False)
    assert not env_flag("MISSING", False)
    assert env_int("COUNT", 1) == 12
    assert env_int("BROKEN", 3) == 3


def test_render_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODAL_EDIT_CURSOR_WIDTH", "2")
    monkeypatch.setenv("MODAL_EDIT_TAB_WIDTH", "0")

    settings = RenderSettings.from_env()

    assert settings.cursor_width == 2
    assert settings.tab_width == 1


def test_log_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODAL_EDIT_LOG_LEVEL", "warning")
    monkeypatch.setenv("MODAL_EDIT_DISABLE_CONSOLE", "1")
    monkeypatch.setenv("MODAL_EDIT_LOG_BUFFERED", "true")
    monkeypatch.setenv("MODAL_EDIT_LOG_BUFFER_SIZE", "64")
    monkeypatch.delenv("MODAL_EDIT_LOG_FILE", raising=False)

    settings = LogSettings.from_env()

    assert settings.level == "WARNING"
    assert not settings.console
    assert settings.file is None
    assert settings.buffer_size == 64


def test_configure_quiet_overrides_console_and_level(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("MODAL_EDIT_DISABLE_CONSOLE", raising=False)

    try:
        settings = telemetry.configure(quiet=True, level="debug")
        assert not settings.console
        assert settings.level == "DEBUG"
        assert telemetry.get_logger("modal_edit.test") is telemetry.get_logger(
            "modal_edit.test"
        )
    finally:
        telemetry.configure()
