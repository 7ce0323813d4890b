"""Stock components for feeding a scroll layout."""

from pi.scrollback.components.output_log import OutputLog
from pi.scrollback.components.static_lines import StaticLines

__all__ = [
    "OutputLog",
    "StaticLines",
]
