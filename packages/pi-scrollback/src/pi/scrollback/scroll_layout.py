"""Scrollable output region above a pinned fixed region.

``ScrollLayout`` composes two components into one frame: an *output*
component holding the growing transcript and a *fixed* component (editor,
footer) that must always be fully visible at the bottom of the terminal.

With scrolling disabled the layout simply stacks both renders.  With
scrolling enabled it produces exactly ``terminal.rows`` lines per frame:

* the fixed lines are anchored at the bottom (clipped to their last rows when
  taller than the terminal);
* the output fills the remaining rows through the viewport contract, so a
  ``ViewportAware`` transcript only renders what is on screen;
* while following, the window tracks the live edge; once the user scrolls
  away it stays put as new output arrives;
* an optional selection is drawn in inverse video over the visible rows.

All state is recomputed synchronously on every frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from pi.scrollback.component import (
    UNBOUNDED_HEIGHT,
    Component,
    Viewport,
    ViewportRenderResult,
    invalidate_component,
    is_viewport_aware,
    render_viewport,
)
from pi.scrollback.config import ScrollSettings
from pi.scrollback.mouse import MouseEventDecoder, ScrollEvent, is_mouse_sequence
from pi.scrollback.terminal import Terminal
from pi.scrollback.utils import INVERSE, RESET, clamp, slice_by_column, visible_width

logger = logging.getLogger(__name__)

__all__ = ["OutputSelection", "ScrollLayout", "ScrollState"]

EMPTY_LINE = ""


# ---------------------------------------------------------------------------
# State types
# ---------------------------------------------------------------------------


@dataclass
class ScrollState:
    """Scroll bookkeeping owned by a ``ScrollLayout``.

    ``scroll_offset`` is the logical output row shown at the top of the
    scrollable region.  ``last_*`` values come from the most recent frame and
    bound explicit scroll calls until the next frame re-validates them.
    """

    enabled: bool = False
    scroll_offset: int = 0
    follow_output: bool = True
    last_content_height: int = 0
    last_available_height: int = 0

    @property
    def max_scroll_offset(self) -> int:
        return max(0, self.last_content_height - self.last_available_height)


@dataclass(frozen=True)
class OutputSelection:
    """A selection in visible-row coordinates of the output region."""

    start_row: int
    start_col: int
    end_row: int
    end_col: int

    def normalized(self) -> OutputSelection:
        """Return the selection with its start before its end."""
        if (self.start_row, self.start_col) <= (self.end_row, self.end_col):
            return self
        return OutputSelection(
            start_row=self.end_row,
            start_col=self.end_col,
            end_row=self.start_row,
            end_col=self.start_col,
        )


# ---------------------------------------------------------------------------
# ScrollLayout
# ---------------------------------------------------------------------------


class ScrollLayout:
    """Layout keeping *fixed* at the bottom while *output* scrolls above it.

    *host* is the ``Terminal`` whose rows bound the frame, or any object
    exposing one as ``host.terminal`` (such as a TUI).
    """

    def __init__(
        self,
        host: Terminal | object,
        output: Component,
        fixed: Component,
        settings: ScrollSettings | None = None,
    ) -> None:
        self._terminal: Terminal = getattr(host, "terminal", host)  # type: ignore[assignment]
        self._output = output
        self._fixed = fixed

        if settings is None:
            settings = ScrollSettings.from_env()
        self._wheel_lines = max(1, settings.wheel_lines)
        self._decoder = MouseEventDecoder(buttons=settings.mouse_tracking)

        self._state = ScrollState()
        self._selection: OutputSelection | None = None
        self._last_visible_output: list[str] = []
        self._last_visible_fixed: list[str] = []
        self._last_fixed_height: int = 0

        if settings.scroll_enabled:
            self.set_enabled(True)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_enabled(self, enabled: bool) -> None:
        """Switch scroll mode on or off.

        Either way the layout starts over at the bottom in follow mode with no
        selection.
        """
        if self._state.enabled == enabled:
            return
        self._state = ScrollState(enabled=enabled)
        self._selection = None
        logger.debug("scroll mode %s", "enabled" if enabled else "disabled")

    def is_enabled(self) -> bool:
        return self._state.enabled

    def set_mouse_tracking(self, enabled: bool) -> None:
        """Decode button/drag events too (``True``) or wheel events only."""
        self._decoder.buttons = enabled

    @property
    def decoder(self) -> MouseEventDecoder:
        return self._decoder

    # ------------------------------------------------------------------
    # Scrolling
    # ------------------------------------------------------------------

    def scroll_by(self, lines: int) -> None:
        """Scroll *lines* rows back into older output (negative: toward the
        live edge)."""
        if not self._state.enabled or lines == 0:
            return
        self._set_scroll_offset(self._state.scroll_offset - lines)

    def scroll_by_page(self, pages: int) -> None:
        """Scroll by whole pages, keeping one row of overlap between pages."""
        if not self._state.enabled or pages == 0:
            return
        page_size = max(1, self._state.last_available_height - 1)
        self.scroll_by(pages * page_size)

    def scroll_to_top(self) -> None:
        if not self._state.enabled:
            return
        self._set_scroll_offset(0)

    def scroll_to_bottom(self) -> None:
        """Jump to the live edge and resume following new output."""
        state = self._state
        state.follow_output = True
        state.scroll_offset = state.max_scroll_offset if state.enabled else 0
        self._selection = None

    def _set_scroll_offset(self, offset: int) -> None:
        state = self._state
        max_offset = state.max_scroll_offset
        state.scroll_offset = clamp(offset, 0, max_offset)
        state.follow_output = state.scroll_offset == max_offset
        self._selection = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> ScrollState:
        """A snapshot of the current scroll state."""
        return replace(self._state)

    def get_scroll_offset(self) -> int:
        return self._state.scroll_offset

    def get_max_scroll_offset(self) -> int:
        return self._state.max_scroll_offset

    def is_at_bottom(self) -> bool:
        return self._state.scroll_offset == self._state.max_scroll_offset

    def is_scrolled(self) -> bool:
        """``True`` when the user has scrolled away from the live edge."""
        return not self.is_at_bottom()

    def get_output_height(self) -> int:
        """Rows available to the output region in the last frame."""
        return self._state.last_available_height

    def get_visible_output_lines(self) -> list[str]:
        """Output rows as last put on screen (before selection styling)."""
        return list(self._last_visible_output)

    def get_visible_fixed_lines(self) -> list[str]:
        return list(self._last_visible_fixed)

    def set_output_selection(self, selection: OutputSelection | None) -> None:
        self._selection = selection

    def get_output_selection(self) -> OutputSelection | None:
        return self._selection

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_input(self, data: str | bytes) -> bool:
        """Apply a mouse wheel chunk; return ``True`` if *data* was mouse input
        the layout consumed.

        Button events are left to the caller (selection handling lives
        outside the layout).  Mouse reports the decoder rejects are still
        reported as consumed so they never reach keyboard handling.
        """
        event = self._decoder.decode(data)
        if event is None:
            return is_mouse_sequence(data)
        if isinstance(event, ScrollEvent):
            self.scroll_by(-event.delta * self._wheel_lines)
            return True
        return False

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def invalidate(self) -> None:
        invalidate_component(self._output)
        invalidate_component(self._fixed)

    def render(self, width: int) -> list[str]:
        """Render a frame sized to the terminal's current row count."""
        return self._compose(width, max(0, self._terminal.rows))

    def render_viewport(self, width: int, viewport: Viewport) -> ViewportRenderResult:
        """Render the layout into *viewport* rather than the whole terminal."""
        lines = self._compose(width, max(0, viewport.height))
        content_height = self._state.last_content_height + self._last_fixed_height
        if not self._state.enabled:
            top = max(0, viewport.top)
            lines = lines[top : top + max(0, viewport.height)]
        return ViewportRenderResult(lines=lines, content_height=content_height)

    def _compose(self, width: int, viewport_height: int) -> list[str]:
        fixed_lines = self._fixed.render(width)
        self._last_fixed_height = len(fixed_lines)

        if not self._state.enabled:
            return self._compose_unscrolled(width, fixed_lines)

        if len(fixed_lines) > viewport_height:
            fixed_lines = fixed_lines[len(fixed_lines) - viewport_height :] if viewport_height > 0 else []
        available_height = max(0, viewport_height - len(fixed_lines))

        output_lines = self._render_output_window(width, available_height)
        if len(output_lines) < available_height:
            output_lines = output_lines + [EMPTY_LINE] * (available_height - len(output_lines))

        self._last_visible_output = list(output_lines)
        self._last_visible_fixed = list(fixed_lines)
        return [*self._apply_output_selection(output_lines), *fixed_lines]

    def _compose_unscrolled(self, width: int, fixed_lines: list[str]) -> list[str]:
        result = render_viewport(
            self._output, width, Viewport(width=width, height=UNBOUNDED_HEIGHT, top=0)
        )
        state = self._state
        state.scroll_offset = 0
        state.follow_output = True
        state.last_content_height = result.content_height
        state.last_available_height = 0

        self._last_visible_output = list(result.lines)
        self._last_visible_fixed = list(fixed_lines)
        return [*result.lines, *fixed_lines]

    def _render_output_window(self, width: int, available_height: int) -> list[str]:
        """Render the output rows for this frame and settle the scroll offset."""
        state = self._state
        previous_offset = state.scroll_offset

        if is_viewport_aware(self._output):
            result = render_viewport(
                self._output,
                width,
                Viewport(width=width, height=available_height, top=previous_offset),
            )
            content_height = result.content_height
            offset = self._settle_offset(content_height, available_height)
            if offset != previous_offset:
                # The first window was stale; ask again at the corrected top.
                result = render_viewport(
                    self._output,
                    width,
                    Viewport(width=width, height=available_height, top=offset),
                )
                content_height = result.content_height
                offset = min(offset, max(0, content_height - available_height))
            lines = result.lines[:available_height]
        else:
            full = self._output.render(width)
            content_height = len(full)
            offset = self._settle_offset(content_height, available_height)
            lines = full[offset : offset + available_height]

        if offset != previous_offset:
            self._selection = None

        max_offset = max(0, content_height - available_height)
        following = offset == max_offset
        if following != state.follow_output:
            logger.debug("follow mode %s at offset %d/%d", "on" if following else "off", offset, max_offset)

        state.scroll_offset = offset
        state.follow_output = following
        state.last_content_height = content_height
        state.last_available_height = available_height
        return lines

    def _settle_offset(self, content_height: int, available_height: int) -> int:
        max_offset = max(0, content_height - available_height)
        if self._state.follow_output:
            return max_offset
        return clamp(self._state.scroll_offset, 0, max_offset)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def _apply_output_selection(self, lines: list[str]) -> list[str]:
        if self._selection is None or not lines:
            return lines

        selection = self._selection.normalized()
        last_row = len(lines) - 1
        if selection.end_row < 0 or selection.start_row > last_row:
            return lines

        # Rows clipped off either end extend the selection to that edge.
        start_row, start_col = selection.start_row, selection.start_col
        if start_row < 0:
            start_row, start_col = 0, 0
        end_row, end_col = selection.end_row, selection.end_col
        clip_end = end_row > last_row
        if clip_end:
            end_row = last_row

        highlighted = list(lines)
        for index in range(start_row, end_row + 1):
            line = lines[index]
            line_width = visible_width(line)
            row_start = start_col if index == start_row else 0
            row_end = end_col if index == end_row and not clip_end else line_width
            highlighted[index] = _highlight_columns(line, row_start, row_end, line_width)
        return highlighted


def _highlight_columns(line: str, start_col: int, end_col: int, line_width: int) -> str:
    """Wrap visible columns ``[start_col, end_col)`` of *line* in inverse video."""
    start = clamp(start_col, 0, line_width)
    end = clamp(end_col, 0, line_width)
    if start >= end:
        return line

    before = slice_by_column(line, 0, start, strict=True)
    middle = slice_by_column(line, start, end - start, strict=True)
    after = slice_by_column(line, end, line_width - end, strict=True)
    return f"{before}{INVERSE}{middle}{RESET}{after}"
