"""Tests for ScrollSettings.from_env."""

from __future__ import annotations

import pytest

from pi.scrollback.config import DEFAULT_WHEEL_LINES, ScrollSettings


class TestScrollSettingsFromEnv:
    def test_defaults(self) -> None:
        settings = ScrollSettings.from_env({})
        assert settings == ScrollSettings(
            scroll_enabled=False, mouse_tracking=False, wheel_lines=DEFAULT_WHEEL_LINES
        )

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes"])
    def test_truthy_flags(self, value: str) -> None:
        settings = ScrollSettings.from_env({"PI_SCROLL_MODE": value, "PI_MOUSE_TRACKING": value})
        assert settings.scroll_enabled is True
        assert settings.mouse_tracking is True

    @pytest.mark.parametrize("value", ["", "0", "false", "off"])
    def test_falsy_flags(self, value: str) -> None:
        assert ScrollSettings.from_env({"PI_SCROLL_MODE": value}).scroll_enabled is False

    def test_wheel_lines(self) -> None:
        assert ScrollSettings.from_env({"PI_SCROLL_WHEEL_LINES": " 5 "}).wheel_lines == 5

    @pytest.mark.parametrize("value", ["abc", "0", "-2"])
    def test_invalid_wheel_lines_fall_back(self, value: str) -> None:
        settings = ScrollSettings.from_env({"PI_SCROLL_WHEEL_LINES": value})
        assert settings.wheel_lines == DEFAULT_WHEEL_LINES

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PI_SCROLL_MODE", "1")
        monkeypatch.delenv("PI_MOUSE_TRACKING", raising=False)
        monkeypatch.delenv("PI_SCROLL_WHEEL_LINES", raising=False)
        settings = ScrollSettings.from_env()
        assert settings.scroll_enabled is True
        assert settings.mouse_tracking is False
