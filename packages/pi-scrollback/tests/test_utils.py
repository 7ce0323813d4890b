"""Tests for pi.scrollback.utils -- terminal line utilities."""

from __future__ import annotations

from pi.scrollback.utils import (
    clamp,
    clip_to_width,
    extract_ansi_code,
    slice_by_column,
    strip_ansi,
    visible_width,
)


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


class TestVisibleWidth:
    """Measure the visible terminal width of text."""

    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_ansi_codes_do_not_count(self) -> None:
        # Bold "hi" then reset -- only "hi" contributes width.
        assert visible_width("\x1b[1mhi\x1b[0m") == 2

    def test_wide_cjk_characters_count_as_two(self) -> None:
        assert visible_width("世") == 2

    def test_mixed_ascii_and_wide(self) -> None:
        assert visible_width("A世B") == 4

    def test_tab_counts_as_three_spaces(self) -> None:
        assert visible_width("\t") == 3

    def test_osc8_hyperlink_does_not_count(self) -> None:
        text = "\x1b]8;;https://example.com\x07link\x1b]8;;\x07"
        assert visible_width(text) == 4

    def test_apc_sequence_does_not_count(self) -> None:
        assert visible_width("\x1b_payload\x07visible") == 7


# ---------------------------------------------------------------------------
# strip_ansi / extract_ansi_code
# ---------------------------------------------------------------------------


class TestStripAnsi:
    def test_removes_sgr(self) -> None:
        assert strip_ansi("\x1b[1m\x1b[31mabc\x1b[0m") == "abc"

    def test_plain_text_unchanged(self) -> None:
        assert strip_ansi("plain") == "plain"

    def test_escape_only_line_is_empty(self) -> None:
        assert strip_ansi("\x1b[31m\x1b[0m") == ""


class TestExtractAnsiCode:
    def test_csi(self) -> None:
        assert extract_ansi_code("x\x1b[31my", 1) == ("\x1b[31m", 5)

    def test_osc_with_bel(self) -> None:
        code = "\x1b]8;;https://a.b\x07"
        assert extract_ansi_code(code + "x", 0) == (code, len(code))

    def test_apc_with_st(self) -> None:
        code = "\x1b_data\x1b\\"
        assert extract_ansi_code(code, 0) == (code, len(code))

    def test_not_an_escape(self) -> None:
        assert extract_ansi_code("abc", 0) is None

    def test_unterminated(self) -> None:
        assert extract_ansi_code("\x1b[31", 0) is None


# ---------------------------------------------------------------------------
# slice_by_column
# ---------------------------------------------------------------------------


class TestSliceByColumn:
    """Cut lines by visible columns, keeping escape codes."""

    def test_plain_slice(self) -> None:
        assert slice_by_column("hello world", 6, 5) == "world"

    def test_zero_length(self) -> None:
        assert slice_by_column("hello", 1, 0) == ""

    def test_past_end(self) -> None:
        assert slice_by_column("abc", 5, 3) == ""

    def test_styles_inside_range_kept(self) -> None:
        line = "ab\x1b[31mcd\x1b[0mef"
        assert slice_by_column(line, 1, 4) == "b\x1b[31mcd\x1b[0me"

    def test_trailing_reset_included(self) -> None:
        line = "\x1b[1mbold\x1b[0m"
        assert slice_by_column(line, 0, 4) == "\x1b[1mbold\x1b[0m"

    def test_codes_before_range_dropped(self) -> None:
        line = "\x1b[31mred\x1b[0m plain"
        assert slice_by_column(line, 4, 5) == "plain"

    def test_strict_pads_split_wide_char_at_end(self) -> None:
        # U+4E16 occupies columns 1-2; a 2-column slice from 0 cuts it.
        assert slice_by_column("A世B", 0, 2, strict=True) == "A "

    def test_strict_pads_split_wide_char_at_start(self) -> None:
        assert slice_by_column("A世B", 2, 2, strict=True) == " B"

    def test_non_strict_keeps_wide_char(self) -> None:
        assert slice_by_column("A世B", 0, 2) == "A世"

    def test_tab_occupies_three_columns(self) -> None:
        assert slice_by_column("a\tbcd", 4, 1) == "b"
        assert slice_by_column("a\tbcd", 0, 4) == "a\t"

    def test_strict_pads_split_tab(self) -> None:
        assert slice_by_column("a\tb", 0, 2, strict=True) == "a "
        assert slice_by_column("a\tb", 0, 2) == "a\t"

    def test_agrees_with_visible_width(self) -> None:
        for line in ("a\tbcd", "\x1b[1mx\t\x1b[0m世z", "plain"):
            width = visible_width(line)
            assert visible_width(slice_by_column(line, 0, width)) == width
            assert slice_by_column(line, width, 5) == ""


# ---------------------------------------------------------------------------
# clip_to_width / clamp
# ---------------------------------------------------------------------------


class TestClipToWidth:
    def test_short_line_unchanged(self) -> None:
        line = "\x1b[32mok\x1b[0m"
        assert clip_to_width(line, 10) is line

    def test_long_line_clipped(self) -> None:
        assert clip_to_width("abcdefgh", 3) == "abc"

    def test_wide_chars_never_overflow(self) -> None:
        clipped = clip_to_width("世世世", 3)
        assert visible_width(clipped) <= 3

    def test_zero_width(self) -> None:
        assert clip_to_width("abc", 0) == ""


class TestClamp:
    def test_within(self) -> None:
        assert clamp(5, 0, 10) == 5

    def test_bounds(self) -> None:
        assert clamp(-3, 0, 10) == 0
        assert clamp(42, 0, 10) == 10
