"""Rendering contract shared by everything the scroll layout composes.

Provides the ``Component`` protocol, the optional ``ViewportAware``
capability for partial rendering of tall content, the ``render_viewport``
helper that falls back to a full render for plain components, and a
``Container`` that propagates viewports to its children.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

__all__ = [
    "UNBOUNDED_HEIGHT",
    "Component",
    "Container",
    "Viewport",
    "ViewportAware",
    "ViewportRenderResult",
    "invalidate_component",
    "is_viewport_aware",
    "render_viewport",
]

# Stand-in for an infinitely tall viewport ("render everything").
UNBOUNDED_HEIGHT = sys.maxsize


# ---------------------------------------------------------------------------
# Viewport types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Viewport:
    """A visible window of ``height`` rows starting at logical row ``top``."""

    width: int
    height: int
    top: int = 0


@dataclass
class ViewportRenderResult:
    """Rows produced for a viewport plus the true total content height."""

    lines: list[str] = field(default_factory=list)
    content_height: int = 0


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


class Component(Protocol):
    """A renderable terminal component.

    ``invalidate`` is optional -- checked at call-sites via ``getattr``.
    """

    def render(self, width: int) -> list[str]:
        """Render the component into a list of terminal lines."""
        ...


@runtime_checkable
class ViewportAware(Protocol):
    """A component that can render only the rows inside a viewport.

    ``lines`` holds at most ``viewport.height`` rows covering logical rows
    ``[viewport.top, viewport.top + viewport.height)``.  ``content_height`` is
    always the full logical height, however many rows were produced.
    """

    def render(self, width: int) -> list[str]: ...

    def render_viewport(self, width: int, viewport: Viewport) -> ViewportRenderResult: ...


def is_viewport_aware(component: object | None) -> bool:
    """Type-guard: return ``True`` if *component* implements ``ViewportAware``."""
    return component is not None and isinstance(component, ViewportAware)


def invalidate_component(component: object) -> None:
    """Call ``invalidate()`` on *component* if it has one."""
    inv = getattr(component, "invalidate", None)
    if inv is not None:
        inv()


def _window(viewport: Viewport) -> tuple[int, int]:
    top = max(0, viewport.top)
    return top, max(0, viewport.height)


def render_viewport(
    component: Component, width: int, viewport: Viewport
) -> ViewportRenderResult:
    """Render *viewport* of *component*, natively when supported.

    Plain components are rendered in full and sliced in memory, which yields
    the same rows a native implementation would, only more expensively.
    """
    if is_viewport_aware(component):
        result = component.render_viewport(width, viewport)  # type: ignore[attr-defined]
        return ViewportRenderResult(
            lines=list(result.lines),
            content_height=max(result.content_height, len(result.lines)),
        )

    lines = component.render(width)
    top, height = _window(viewport)
    return ViewportRenderResult(lines=lines[top : top + height], content_height=len(lines))


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------


class Container:
    """Renders its children sequentially.

    Also ``ViewportAware``: each child is asked only for the rows that fall
    inside the window, with a viewport expressed in the child's own row
    coordinates, so nested blocks can pin their headers.
    """

    def __init__(self) -> None:
        self.children: list[Component] = []

    def add_child(self, component: Component) -> None:
        """Append *component* to the children list."""
        self.children.append(component)

    def remove_child(self, component: Component) -> None:
        """Remove *component* from the children list (no-op if absent)."""
        try:
            self.children.remove(component)
        except ValueError:
            pass

    def clear(self) -> None:
        """Remove all children."""
        self.children.clear()

    def invalidate(self) -> None:
        """Invalidate every child."""
        for child in self.children:
            invalidate_component(child)

    def render(self, width: int) -> list[str]:
        """Render all children and concatenate their line output."""
        lines: list[str] = []
        for child in self.children:
            lines.extend(child.render(width))
        return lines

    def render_viewport(self, width: int, viewport: Viewport) -> ViewportRenderResult:
        window_top, window_height = _window(viewport)
        window_end = window_top + window_height

        lines: list[str] = []
        row = 0  # logical row where the current child starts
        for child in self.children:
            child_top = max(0, window_top - row)
            child_height = max(0, window_end - row - child_top)
            result = render_viewport(
                child, width, Viewport(width=width, height=child_height, top=child_top)
            )
            lines.extend(result.lines[:child_height])
            row += result.content_height

        return ViewportRenderResult(lines=lines, content_height=row)
