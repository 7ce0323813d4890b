"""Terminal line utilities: ANSI stripping, width measurement, column slicing.

Styled lines are opaque strings; these helpers measure and cut them by
*visible* columns so that SGR/OSC/APC bytes never count as occupying cells.
Measuring and slicing share one notion of cell width, so a column range
taken from ``visible_width`` always lands on the same characters when cut
with ``slice_by_column``.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

import grapheme
import wcwidth as _wcwidth

INVERSE = "\x1b[7m"
RESET = "\x1b[0m"

# A tab is drawn as a fixed run of cells, not expanded to tab stops.
TAB_WIDTH = 3


# ---------------------------------------------------------------------------
# Escape sequences
# ---------------------------------------------------------------------------

# CSI styling/cursor codes, plus OSC (hyperlinks) and APC (image payloads)
# terminated by BEL or ST.
_ANSI_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"
    r"|\x1b[\]_].*?(?:\x07|\x1b\\)",
    re.DOTALL,
)


def strip_ansi(text: str) -> str:
    """Remove styling escape sequences, leaving only visible text."""
    return _ANSI_RE.sub("", text)


def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """Return ``(code, length)`` for the escape sequence starting at *pos*,
    or ``None`` if no complete CSI, OSC or APC sequence starts there."""
    match = _ANSI_RE.match(text, pos)
    if match is None:
        return None
    return match.group(), match.end() - pos


def _segments(line: str) -> Iterator[tuple[str, bool]]:
    """Split *line* into ``(chunk, is_escape)`` pairs, in order."""
    pos = 0
    for match in _ANSI_RE.finditer(line):
        if match.start() > pos:
            yield line[pos : match.start()], False
        yield match.group(), True
        pos = match.end()
    if pos < len(line):
        yield line[pos:], False


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


# ---------------------------------------------------------------------------
# Cell width
# ---------------------------------------------------------------------------

_WIDE_JOINERS = frozenset((0xFE0F, 0x200D))  # VS16, ZWJ


def _is_wide_sequence(cluster: str) -> bool:
    for ch in cluster:
        cp = ord(ch)
        if cp in _WIDE_JOINERS:
            return True
        # Skin tone modifiers and regional indicators (flags)
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return True
    first = ord(cluster[0])
    return first >= 0x1F000 or 0x2600 <= first <= 0x27BF


def cell_width(cluster: str) -> int:
    """Return how many terminal cells one grapheme cluster occupies."""
    if not cluster:
        return 0
    if cluster == "\t":
        return TAB_WIDTH

    if len(cluster) == 1:
        cp = ord(cluster)
        if cp < 0x20 or 0x7F <= cp <= 0x9F:
            return 0
        return max(_wcwidth.wcwidth(cluster), 0)

    if _is_wide_sequence(cluster):
        return 2
    category = unicodedata.category(cluster[0])
    if category.startswith("M") or category == "Cf":
        return 0
    return max(_wcwidth.wcwidth(cluster[0]), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    Escape sequences take no cells and a tab takes ``TAB_WIDTH``.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)
    return sum(cell_width(cluster) for cluster in grapheme.graphemes(stripped))


# ---------------------------------------------------------------------------
# Column slicing
# ---------------------------------------------------------------------------


def slice_by_column(
    line: str,
    start_col: int,
    length: int,
    strict: bool = False,
) -> str:
    """Extract *length* visible columns starting at *start_col* from *line*.

    Escape codes inside the range are kept, as are codes directly after it
    (usually a reset).  A cluster wider than one cell that straddles either
    edge is kept whole, or with *strict* replaced by spaces for the cells
    that fall inside the range.
    """
    if length <= 0:
        return ""

    end_col = start_col + length
    out: list[str] = []
    col = 0

    for chunk, is_escape in _segments(line):
        if is_escape:
            if col >= start_col:
                out.append(chunk)
            continue
        if col >= end_col:
            break

        for cluster in grapheme.graphemes(chunk):
            if col >= end_col:
                return "".join(out)
            width = cell_width(cluster)
            cluster_end = col + width
            if cluster_end <= start_col:
                col = cluster_end
                continue

            straddles = col < start_col or cluster_end > end_col
            if straddles and strict and width > 1:
                out.append(" " * (min(cluster_end, end_col) - max(col, start_col)))
            else:
                out.append(cluster)
            col = cluster_end

    return "".join(out)


def clip_to_width(line: str, width: int) -> str:
    """Cut *line* so it occupies at most *width* visible columns."""
    if width <= 0:
        return ""
    if visible_width(line) <= width:
        return line
    return slice_by_column(line, 0, width, strict=True)
