"""
Tests for the text and character input widgets.

Editing keys, grapheme-aware deletion, masking and horizontal scrolling.
"""

from querent.ui.components import Layout
from querent.ui.primitives import KeyCode, KeyEvent, KeyModifiers, TestBackend
from querent.ui.widgets import CharInput, StringInput, find_word_left, find_word_right


def typed(text: str, widget=None) -> StringInput:
    widget = widget or StringInput()
    for ch in text:
        widget.handle_key(KeyEvent.from_char(ch))
    return widget


class TestWordBoundaries:
    def test_find_word_left(self):
        assert find_word_left("hello world", 11) == 6
        assert find_word_left("hello world", 6) == 0
        assert find_word_left("hello", 0) == 0

    def test_find_word_right(self):
        assert find_word_right("hello world", 0) == 6
        assert find_word_right("hello world", 6) == 11

    def test_punctuation_is_a_word(self):
        assert find_word_right("foo.bar", 0) == 3


class TestStringInputEditing:
    """Tests for readline-style editing."""

    def test_typing_inserts_at_caret(self):
        widget = typed("ac")
        assert widget.handle_key(KeyEvent.key(KeyCode.LEFT))
        typed("b", widget)
        assert widget.value == "abc"
        assert widget.at == 2

    def test_backspace_and_delete(self):
        widget = typed("abc")
        widget.handle_key(KeyEvent.key(KeyCode.BACKSPACE))
        assert widget.value == "ab"
        widget.handle_key(KeyEvent.key(KeyCode.HOME))
        widget.handle_key(KeyEvent.key(KeyCode.DELETE))
        assert widget.value == "b"
        assert widget.at == 0

    def test_backspace_at_start_is_ignored(self):
        widget = StringInput()
        assert not widget.handle_key(KeyEvent.key(KeyCode.BACKSPACE))

    def test_delete_word_before_caret(self):
        widget = typed("hello world")
        widget.handle_key(KeyEvent.ctrl("w"))
        assert widget.value == "hello "

    def test_delete_word_after_caret(self):
        widget = typed("hello world")
        widget.handle_key(KeyEvent.key(KeyCode.HOME))
        widget.handle_key(KeyEvent.alt("d"))
        assert widget.value == "world"

    def test_delete_to_start_and_end(self):
        widget = typed("hello world")
        widget.set_at(5)
        widget.handle_key(KeyEvent.ctrl("k"))
        assert widget.value == "hello"
        widget.handle_key(KeyEvent.ctrl("u"))
        assert widget.value == ""

    def test_word_movement(self):
        widget = typed("hello world")
        widget.handle_key(KeyEvent.key(KeyCode.LEFT, KeyModifiers.CONTROL))
        assert widget.at == 6
        widget.handle_key(KeyEvent.alt("b"))
        assert widget.at == 0
        widget.handle_key(KeyEvent.key(KeyCode.RIGHT, KeyModifiers.CONTROL))
        assert widget.at == 6

    def test_movement_at_the_ends_is_not_handled(self):
        widget = typed("ab")
        assert not widget.handle_key(KeyEvent.key(KeyCode.END))
        assert not widget.handle_key(KeyEvent.key(KeyCode.RIGHT))

    def test_backspace_removes_whole_grapheme(self):
        widget = typed("xe\u0301")
        widget.handle_key(KeyEvent.key(KeyCode.BACKSPACE))
        assert widget.value == "x"

    def test_backspace_removes_whole_flag(self):
        widget = typed("a\U0001F1FA\U0001F1F8")
        widget.handle_key(KeyEvent.key(KeyCode.BACKSPACE))
        assert widget.value == "a"

    def test_caret_moves_by_grapheme(self):
        widget = typed("e\u0301x")
        widget.handle_key(KeyEvent.key(KeyCode.HOME))
        widget.handle_key(KeyEvent.key(KeyCode.RIGHT))
        assert widget.at == 2

    def test_filter_rejects_characters(self):
        widget = StringInput(lambda c: c if c.isdigit() else None)
        assert not widget.handle_key(KeyEvent.from_char("a"))
        assert widget.handle_key(KeyEvent.from_char("7"))
        assert widget.value == "7"

    def test_has_value_after_erasing(self):
        widget = typed("a")
        widget.handle_key(KeyEvent.key(KeyCode.BACKSPACE))
        assert widget.value == ""
        assert widget.has_value()
        assert not StringInput().has_value()


class TestStringInputRendering:
    def test_mask(self):
        backend = TestBackend()
        widget = typed("abc", StringInput().with_mask("*"))
        widget.render(Layout.new(0, (80, 24)), backend)
        assert backend.line(0) == "***"
        assert widget.value == "abc"

    def test_hidden_output(self):
        backend = TestBackend()
        widget = typed("abc", StringInput().with_hidden_output())
        layout = Layout.new(4, (80, 24))
        widget.render(layout, backend)
        assert backend.lines() == []
        assert widget.cursor_pos(Layout.new(4, (80, 24))) == (4, 0)

    def test_scrolls_to_keep_caret_visible(self):
        backend = TestBackend((10, 5))
        widget = typed("abcdefghijklmnopqrst")
        widget.render(Layout.new(0, (10, 5)), backend)
        assert backend.line(0) == "lmnopqrst"
        assert widget.cursor_pos(Layout.new(0, (10, 5))) == (9, 0)

    def test_moves_to_next_line_when_full(self):
        """With fewer than two cells left the input starts on a new line."""
        layout = Layout.new(79, (80, 24))
        assert typed("ab").height(layout) == 2
        assert layout.offset_y == 1
        assert layout.line_offset == 2


class TestCharInput:
    def test_typing_replaces(self):
        widget = CharInput()
        widget.handle_key(KeyEvent.from_char("a"))
        widget.handle_key(KeyEvent.from_char("b"))
        assert widget.finish() == "b"

    def test_filter(self):
        widget = CharInput(lambda c: c if c in "yn" else None)
        assert not widget.handle_key(KeyEvent.from_char("x"))
        assert widget.value is None

    def test_backspace_clears(self):
        widget = CharInput()
        widget.handle_key(KeyEvent.from_char("a"))
        assert widget.handle_key(KeyEvent.key(KeyCode.BACKSPACE))
        assert widget.value is None
        assert not widget.handle_key(KeyEvent.key(KeyCode.BACKSPACE))

    def test_cursor_after_character(self):
        widget = CharInput()
        widget.handle_key(KeyEvent.from_char("y"))
        assert widget.cursor_pos(Layout.new(10, (80, 24))) == (11, 0)
