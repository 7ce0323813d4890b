"""StaticLines component - renders a fixed list of lines."""

from __future__ import annotations

from pi.scrollback.utils import clip_to_width


class StaticLines:
    """StaticLines component - renders a fixed list of lines, clipped to width."""

    def __init__(self, lines: list[str] | None = None) -> None:
        self._lines = list(lines) if lines else []

    def set_lines(self, lines: list[str]) -> None:
        self._lines = list(lines)

    def invalidate(self) -> None:
        pass

    def render(self, width: int) -> list[str]:
        return [clip_to_width(line, width) for line in self._lines]
