"""Tests for display width, grapheme handling, truncation and wrapping."""

from querent.ui.components import format_float, wrap_text
from querent.ui.primitives import graphemes, take_width, text_width, truncate_text


class TestTextWidth:
    def test_ascii(self):
        assert text_width("hello") == 5

    def test_wide_characters(self):
        assert text_width("中文") == 4

    def test_combining_marks(self):
        assert text_width("e\u0301") == 1

    def test_ansi_codes_ignored(self):
        assert text_width("\x1b[31mred\x1b[0m") == 3

    def test_flag_is_two_cells(self):
        assert text_width("\U0001F1FA\U0001F1F8") == 2

    def test_decomposed_hangul_syllable(self):
        assert text_width("\u1112\u1161\u11ab") == 2

    def test_emoji_presentation_selector(self):
        assert text_width("\u2764\ufe0f") == 2


class TestGraphemes:
    def test_combining_mark_joins_base(self):
        assert graphemes("e\u0301x") == ["e\u0301", "x"]

    def test_zwj_sequence_is_one_cluster(self):
        family = "\U0001F468\u200d\U0001F469"
        assert graphemes(family) == [family]

    def test_regional_indicator_pair_is_one_cluster(self):
        flags = "\U0001F1FA\U0001F1F8\U0001F1EB\U0001F1F7"
        assert graphemes(flags) == ["\U0001F1FA\U0001F1F8", "\U0001F1EB\U0001F1F7"]

    def test_hangul_jamo_form_one_cluster(self):
        assert graphemes("\u1112\u1161\u11abx") == ["\u1112\u1161\u11ab", "x"]

    def test_take_width_keeps_whole_graphemes(self):
        assert take_width("中文字", 5) == "中文"
        assert take_width("e\u0301abc", 2) == "e\u0301a"


class TestTruncateText:
    def test_no_truncation_needed(self):
        assert truncate_text("short", 10) == "short"

    def test_exact_length(self):
        assert truncate_text("12345", 5) == "12345"

    def test_truncates_with_suffix(self):
        assert truncate_text("hello world", 8) == "hello..."

    def test_custom_suffix(self):
        assert truncate_text("hello world", 8, "~") == "hello w~"

    def test_very_short_max_len(self):
        assert truncate_text("hello", 2) == "he"

    def test_wide_characters(self):
        assert truncate_text("中文中文", 5) == "中..."


class TestWrapText:
    def test_fits(self):
        assert wrap_text("hello world", 20) == ["hello world"]

    def test_breaks_between_words(self):
        assert wrap_text("hello world foo", 11) == ["hello world", "foo"]

    def test_initial_offset(self):
        """A word that doesn't fit after the offset starts on the next line."""
        assert wrap_text("hello world", 10, 8) == ["", "hello", "world"]

    def test_long_word_is_broken(self):
        assert wrap_text("abcdefghij", 4) == ["abcd", "efgh", "ij"]

    def test_newlines_kept(self):
        assert wrap_text("a\nb", 10) == ["a", "b"]


class TestFormatFloat:
    def test_plain(self):
        assert format_float(1.5) == "1.5"
        assert format_float(0.0) == "0.0"

    def test_extreme_magnitudes_use_scientific(self):
        assert format_float(1e25) == "1.000000e+25"

    def test_infinity(self):
        assert format_float(float("inf")) == "inf"
