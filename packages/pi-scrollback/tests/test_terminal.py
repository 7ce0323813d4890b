"""Tests for pi.scrollback.terminal -- mouse tracking toggles."""

from __future__ import annotations

from pi.scrollback.terminal import set_mouse_tracking

from .virtual_terminal import VirtualTerminal


class TestSetMouseTracking:
    """set_mouse_tracking writes the DEC private mode toggles."""

    def test_enable_wheel_reporting(self) -> None:
        term = VirtualTerminal()
        set_mouse_tracking(term, True)
        assert term.output == "\x1b[?1000h\x1b[?1006h"

    def test_enable_with_buttons_adds_drag_tracking(self) -> None:
        term = VirtualTerminal()
        set_mouse_tracking(term, True, buttons=True)
        assert term.output == "\x1b[?1000h\x1b[?1002h\x1b[?1006h"

    def test_disable_resets_modes_in_reverse(self) -> None:
        term = VirtualTerminal()
        set_mouse_tracking(term, False, buttons=True)
        assert term.output == "\x1b[?1006l\x1b[?1002l\x1b[?1000l"

    def test_toggle_round_trip(self) -> None:
        term = VirtualTerminal()
        set_mouse_tracking(term, True)
        term.clear_buffer()
        set_mouse_tracking(term, False)
        assert term.output == "\x1b[?1006l\x1b[?1000l"
