"""Sticky headers: keep a block's header on screen while scrolling through it."""

from __future__ import annotations

from pi.scrollback.component import (
    Component,
    Viewport,
    ViewportRenderResult,
    invalidate_component,
)
from pi.scrollback.utils import strip_ansi

DEFAULT_SCAN_LIMIT = 20


def find_header_line_index(lines: list[str], scan_limit: int = DEFAULT_SCAN_LIMIT) -> int | None:
    """Return the index of the first non-blank line within *scan_limit* rows."""
    limit = min(len(lines), max(1, scan_limit))
    for i in range(limit):
        if strip_ansi(lines[i]).strip():
            return i
    return None


def apply_sticky_header(
    lines: list[str],
    viewport_top: int,
    *,
    header_index: int | None = None,
    scan_limit: int = DEFAULT_SCAN_LIMIT,
    viewport_height: int | None = None,
) -> list[str]:
    """Pin the header line at row *viewport_top* once it has scrolled away.

    *lines* is the full content of a block and *viewport_top* the block row
    shown at the top of the screen.  With a *viewport_height* hint the top is
    clamped to the last reachable scroll position before deciding whether the
    header is still naturally visible.  The input list is never mutated.
    """
    if not lines:
        return lines
    if viewport_top <= 0 or viewport_top >= len(lines):
        return lines

    effective_top = viewport_top
    if viewport_height:
        effective_top = min(viewport_top, max(0, len(lines) - viewport_height))

    if header_index is None:
        header_index = find_header_line_index(lines, scan_limit)
    if header_index is None or not 0 <= header_index < len(lines):
        return lines
    if effective_top <= header_index:
        return lines

    pinned = list(lines)
    pinned[viewport_top] = lines[header_index]
    return pinned


class StickyBlock:
    """Wraps a block component so its header sticks while it is scrolled.

    The wrapped child is rendered in full; the header is then pinned to the
    first row of whatever window is requested.
    """

    def __init__(
        self,
        child: Component,
        header_index: int | None = None,
        scan_limit: int = DEFAULT_SCAN_LIMIT,
    ) -> None:
        self.child = child
        self.header_index = header_index
        self.scan_limit = scan_limit

    def invalidate(self) -> None:
        invalidate_component(self.child)

    def render(self, width: int) -> list[str]:
        return self.child.render(width)

    def render_viewport(self, width: int, viewport: Viewport) -> ViewportRenderResult:
        lines = self.child.render(width)
        top = max(0, viewport.top)
        height = max(0, viewport.height)
        pinned = apply_sticky_header(
            lines,
            top,
            header_index=self.header_index,
            scan_limit=self.scan_limit,
        )
        return ViewportRenderResult(lines=pinned[top : top + height], content_height=len(lines))
