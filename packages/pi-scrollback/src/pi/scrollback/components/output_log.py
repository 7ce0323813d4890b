"""OutputLog component - append-only scrollback that renders by viewport."""

from __future__ import annotations

from pi.scrollback.component import Viewport, ViewportRenderResult
from pi.scrollback.utils import clip_to_width


class OutputLog:
    """Append-only log of output lines.

    Lines are clipped to the render width.  Clipped lines are cached for the
    last width seen; appends extend the cache instead of discarding it, so a
    streaming producer only pays for the new lines.
    """

    def __init__(self, lines: list[str] | None = None) -> None:
        self._lines: list[str] = list(lines) if lines else []

        # Cache
        self._cached_width: int | None = None
        self._cached_lines: list[str] | None = None

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def append(self, text: str) -> None:
        """Append *text*, one line per ``\\n``-separated segment."""
        self.append_lines(text.split("\n"))

    def append_lines(self, lines: list[str]) -> None:
        self._lines.extend(lines)
        if self._cached_lines is not None and self._cached_width is not None:
            width = self._cached_width
            self._cached_lines.extend(clip_to_width(line, width) for line in lines)

    def clear(self) -> None:
        self._lines.clear()
        self.invalidate()

    def invalidate(self) -> None:
        self._cached_width = None
        self._cached_lines = None

    def _clipped(self, width: int) -> list[str]:
        if self._cached_lines is None or self._cached_width != width:
            self._cached_lines = [clip_to_width(line, width) for line in self._lines]
            self._cached_width = width
        return self._cached_lines

    def render(self, width: int) -> list[str]:
        return list(self._clipped(width))

    def render_viewport(self, width: int, viewport: Viewport) -> ViewportRenderResult:
        lines = self._clipped(width)
        top = max(0, viewport.top)
        height = max(0, viewport.height)
        return ViewportRenderResult(lines=lines[top : top + height], content_height=len(lines))
