"""pi-scrollback: scrollable output with a pinned fixed region for terminal UIs."""

# Component / viewport contract
from pi.scrollback.component import (
    UNBOUNDED_HEIGHT,
    Component,
    Container,
    Viewport,
    ViewportAware,
    ViewportRenderResult,
    is_viewport_aware,
    render_viewport,
)

# Components (re-exported from components package)
from pi.scrollback.components import OutputLog, StaticLines

# Settings
from pi.scrollback.config import ScrollSettings

# Mouse input
from pi.scrollback.mouse import (
    ButtonEvent,
    MouseEvent,
    MouseEventDecoder,
    MouseModifiers,
    ScrollEvent,
    is_mouse_sequence,
    mouse_tracking_sequence,
    parse_mouse_event,
)

# Layout
from pi.scrollback.scroll_layout import OutputSelection, ScrollLayout, ScrollState

# Sticky headers
from pi.scrollback.sticky_header import StickyBlock, apply_sticky_header, find_header_line_index

# Terminal interface
from pi.scrollback.terminal import Terminal, set_mouse_tracking

# Utilities
from pi.scrollback.utils import slice_by_column, strip_ansi, visible_width

__all__ = [
    # Component contract
    "UNBOUNDED_HEIGHT",
    "Component",
    "Container",
    "Viewport",
    "ViewportAware",
    "ViewportRenderResult",
    "is_viewport_aware",
    "render_viewport",
    # Components
    "OutputLog",
    "StaticLines",
    # Settings
    "ScrollSettings",
    # Mouse
    "ButtonEvent",
    "MouseEvent",
    "MouseEventDecoder",
    "MouseModifiers",
    "ScrollEvent",
    "is_mouse_sequence",
    "mouse_tracking_sequence",
    "parse_mouse_event",
    # Layout
    "OutputSelection",
    "ScrollLayout",
    "ScrollState",
    # Sticky headers
    "StickyBlock",
    "apply_sticky_header",
    "find_header_line_index",
    # Terminal
    "Terminal",
    "set_mouse_tracking",
    # Utilities
    "slice_by_column",
    "strip_ansi",
    "visible_width",
]
