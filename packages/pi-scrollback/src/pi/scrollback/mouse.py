"""SGR extended mouse protocol decoding.

Terminals in SGR mouse mode (DEC private mode 1006) report events as
``ESC [ < Cb ; Cx ; Cy M`` (press/motion/wheel) or ``... m`` (release), with
1-based cell coordinates.  ``parse_mouse_event`` decodes one input chunk into
a ``ScrollEvent`` or ``ButtonEvent``; ``MouseEventDecoder`` adds the
wheel-only restricted mode used when full mouse tracking is off.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Literal, Union

logger = logging.getLogger(__name__)

__all__ = [
    "ButtonEvent",
    "MouseButton",
    "MouseEvent",
    "MouseEventDecoder",
    "MouseModifiers",
    "ScrollEvent",
    "is_mouse_sequence",
    "mouse_tracking_sequence",
    "parse_mouse_event",
]

# ---------------------------------------------------------------------------
# Protocol constants
# ---------------------------------------------------------------------------

# Fields over nine digits are out of range and never decode.
_SGR_MOUSE_RE = re.compile(r"\x1b\[<([0-9]{1,9});([0-9]{1,9});([0-9]{1,9})([mM])")
_SGR_MOUSE_SHAPE_RE = re.compile(r"\x1b\[<[^mM]*[mM]")

_MOD_SHIFT = 4
_MOD_ALT = 8
_MOD_CTRL = 16
_MOTION = 32
_WHEEL = 64
_BUTTON_MASK = 3

# DEC private modes: 1000 normal tracking, 1002 button-event (drag)
# tracking, 1006 SGR extended coordinates.
_MOUSE_MODES_RESTRICTED = (1000, 1006)
_MOUSE_MODES_FULL = (1000, 1002, 1006)

MouseButton = Literal["left", "middle", "right"]
MouseAction = Literal["press", "release", "drag"]

_BUTTONS: dict[int, MouseButton] = {0: "left", 1: "middle", 2: "right"}


# ---------------------------------------------------------------------------
# Event types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MouseModifiers:
    shift: bool = False
    alt: bool = False
    ctrl: bool = False


@dataclass(frozen=True)
class ScrollEvent:
    """Wheel event. ``delta`` is -1 for up and +1 for down."""

    delta: int
    x: int
    y: int
    modifiers: MouseModifiers = field(default_factory=MouseModifiers)
    type: Literal["scroll"] = "scroll"


@dataclass(frozen=True)
class ButtonEvent:
    """Button press, release, or drag (motion with a button held)."""

    action: MouseAction
    button: MouseButton
    x: int
    y: int
    modifiers: MouseModifiers = field(default_factory=MouseModifiers)
    type: Literal["button"] = "button"


MouseEvent = Union[ScrollEvent, ButtonEvent]


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _as_text(data: str | bytes) -> str:
    if isinstance(data, bytes):
        # latin-1 maps every byte, so decoding cannot fail
        return data.decode("latin-1")
    return data


def is_mouse_sequence(data: str | bytes) -> bool:
    """Return ``True`` if *data* is shaped like an SGR mouse report.

    Lets a host swallow mouse chunks (including ones a restricted decoder
    discards) instead of treating them as key presses.
    """
    return _SGR_MOUSE_SHAPE_RE.fullmatch(_as_text(data)) is not None


def parse_mouse_event(data: str | bytes) -> MouseEvent | None:
    """Decode a single SGR mouse report.

    Returns ``None`` for anything that is not a complete, well-formed report
    or whose button/wheel code has no meaning.  Never raises.
    """
    match = _SGR_MOUSE_RE.fullmatch(_as_text(data))
    if match is None:
        return None

    code = int(match.group(1))
    x = max(0, int(match.group(2)) - 1)
    y = max(0, int(match.group(3)) - 1)
    final = match.group(4)

    modifiers = MouseModifiers(
        shift=bool(code & _MOD_SHIFT),
        alt=bool(code & _MOD_ALT),
        ctrl=bool(code & _MOD_CTRL),
    )

    if code & _WHEEL:
        wheel = code & _BUTTON_MASK
        if wheel == 0:
            delta = -1
        elif wheel == 1:
            delta = 1
        else:
            return None
        return ScrollEvent(delta=delta, x=x, y=y, modifiers=modifiers)

    button = _BUTTONS.get(code & _BUTTON_MASK)
    if button is None:
        return None

    action: MouseAction
    if code & _MOTION:
        action = "drag"
    elif final == "m":
        action = "release"
    else:
        action = "press"
    return ButtonEvent(action=action, button=button, x=x, y=y, modifiers=modifiers)


class MouseEventDecoder:
    """Stateless decoder with a full and a restricted (wheel-only) mode.

    Restricted mode is the default: full button tracking takes over the
    terminal's native text selection, so button and drag reports are only
    surfaced when the host has opted into mouse-driven selection.
    """

    def __init__(self, buttons: bool = False) -> None:
        self.buttons = buttons

    def decode(self, data: str | bytes) -> MouseEvent | None:
        event = parse_mouse_event(data)
        if event is None:
            return None
        if not self.buttons and not isinstance(event, ScrollEvent):
            logger.debug("discarding %s %s event in restricted mode", event.button, event.action)
            return None
        return event


def mouse_tracking_sequence(enable: bool, buttons: bool = False) -> str:
    """Return the escapes that switch SGR mouse reporting on or off.

    With *buttons* the terminal also reports motion while a button is held,
    which drag selection needs.
    """
    modes = _MOUSE_MODES_FULL if buttons else _MOUSE_MODES_RESTRICTED
    suffix = "h" if enable else "l"
    if not enable:
        modes = tuple(reversed(modes))
    return "".join(f"\x1b[?{mode}{suffix}" for mode in modes)
