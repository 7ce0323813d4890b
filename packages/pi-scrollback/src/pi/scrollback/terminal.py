"""Terminal capability surface consumed by the scroll layout.

The layout only needs the current dimensions (re-read every frame, since
they change on resize) and a way to write control sequences such as the
mouse tracking toggles.  The raw-mode driver itself lives elsewhere.
"""

from __future__ import annotations

from typing import Protocol

from pi.scrollback.mouse import mouse_tracking_sequence


class Terminal(Protocol):
    """Interface for the terminal the layout is drawn into."""

    def write(self, data: str) -> None: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...


def set_mouse_tracking(terminal: Terminal, enabled: bool, buttons: bool = False) -> None:
    """Turn SGR mouse reporting on or off on *terminal*."""
    terminal.write(mouse_tracking_sequence(enabled, buttons=buttons))
