"""Scroll-mode settings, read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_WHEEL_LINES = 3


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").lower() in ("1", "true", "yes")


@dataclass
class ScrollSettings:
    """Toggles the surrounding UI passes to the scroll layout.

    ``scroll_enabled`` switches the layout between the plain bottom-fixed
    rendering and the sliced, scrollable viewport.  ``mouse_tracking`` picks
    the full mouse decoder (buttons and drags) over the wheel-only one.
    """

    scroll_enabled: bool = False
    mouse_tracking: bool = False
    wheel_lines: int = DEFAULT_WHEEL_LINES

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ScrollSettings:
        """Build settings from ``PI_SCROLL_MODE``, ``PI_MOUSE_TRACKING`` and
        ``PI_SCROLL_WHEEL_LINES``."""
        if environ is None:
            environ = os.environ

        wheel_lines = DEFAULT_WHEEL_LINES
        raw = environ.get("PI_SCROLL_WHEEL_LINES", "").strip()
        if raw:
            try:
                wheel_lines = int(raw)
            except ValueError:
                wheel_lines = DEFAULT_WHEEL_LINES
            if wheel_lines < 1:
                wheel_lines = DEFAULT_WHEEL_LINES

        return cls(
            scroll_enabled=_env_flag(environ, "PI_SCROLL_MODE"),
            mouse_tracking=_env_flag(environ, "PI_MOUSE_TRACKING"),
            wheel_lines=wheel_lines,
        )
