"""
Tests for the input driver.

Covers how a prompt session ends (finish, Ctrl+C, end of input, each Esc
policy) and that the terminal is always handed back out of raw mode.
"""

from unittest.mock import patch

import pytest

from querent.core import Aborted, Eof, Interrupted, ValidationError
from querent.ui.primitives import KeyCode, KeyEvent, TestBackend, TestEvents
from querent.ui.widgets import Input, OnEsc, Prompt, StringInput, Validation

from tests.conftest import ENTER, ESC, keys


class EchoPrompt(Prompt):
    """A bare text input that refuses to finish empty."""

    def __init__(self, default=None):
        self.input = StringInput()
        self.default = default

    def height(self, layout):
        return self.input.height(layout)

    def render(self, layout, backend):
        self.input.render(layout, backend)

    def cursor_pos(self, layout):
        return self.input.cursor_pos(layout)

    def handle_key(self, key):
        return self.input.handle_key(key)

    def validate(self):
        if not self.input.value:
            raise ValidationError("Please type something")
        return Validation.FINISH

    def finish(self):
        return self.input.value

    def has_default(self):
        return self.default is not None

    def finish_default(self):
        return self.default


def assert_released(backend: TestBackend):
    assert not backend.raw_mode
    assert backend.raw_mode_enables == backend.raw_mode_disables == 1


class TestInputFinish:
    """Tests for prompts that complete."""

    def test_returns_finished_value(self, backend):
        result = Input(EchoPrompt(), backend).run(keys("hi", ENTER))
        assert result == "hi"
        assert_released(backend)

    def test_prompt_is_cleared(self, backend):
        Input(EchoPrompt(), backend).run(keys("hi", ENTER))
        assert backend.lines() == []
        assert backend.get_cursor_pos() == (0, 0)

    def test_redraws_after_each_key(self, backend):
        prompt = EchoPrompt()
        events = TestEvents([KeyEvent.from_char("a"), KeyEvent.ctrl("c")])
        with pytest.raises(Interrupted):
            Input(prompt, backend).run(events)
        assert backend.line(0) == "a"

    def test_validation_error_shown_below(self, backend):
        with pytest.raises(Interrupted):
            Input(EchoPrompt(), backend).run(keys(ENTER, KeyEvent.ctrl("c")))
        assert backend.line(1) == "✖ Please type something"

    def test_validation_error_then_finish(self, backend):
        result = Input(EchoPrompt(), backend).run(keys(ENTER, "x", ENTER))
        assert result == "x"
        assert backend.lines() == []
        assert_released(backend)


class TestInputEnds:
    """Tests for sessions that end without an answer."""

    def test_ctrl_c_interrupts(self, backend):
        with pytest.raises(Interrupted):
            Input(EchoPrompt(), backend).run(keys("ab", KeyEvent.ctrl("c")))
        assert_released(backend)
        # The prompt stays on screen and the cursor moves below it
        assert backend.line(0) == "ab"
        assert backend.get_cursor_pos() == (0, 1)

    def test_end_of_input(self, backend):
        with pytest.raises(Eof):
            Input(EchoPrompt(), backend).run(keys(KeyCode.NULL))
        assert_released(backend)

    def test_esc_terminate(self, backend):
        with pytest.raises(Aborted):
            Input(EchoPrompt(), backend, OnEsc.TERMINATE).run(keys("a", ESC))
        assert_released(backend)

    def test_esc_skip_question(self, backend):
        result = Input(EchoPrompt(), backend, OnEsc.SKIP_QUESTION).run(keys("a", ESC))
        assert result is None
        assert backend.lines() == []
        assert_released(backend)

    def test_esc_ignored(self, backend):
        result = Input(EchoPrompt(), backend, OnEsc.IGNORE).run(keys(ESC, "a", ENTER))
        assert result == "a"

    def test_esc_picks_default(self, backend):
        result = Input(EchoPrompt(default="fallback"), backend).run(keys("a", ESC))
        assert result == "fallback"
        assert_released(backend)

    def test_terminal_released_on_unexpected_error(self, backend):
        with pytest.raises(RuntimeError):
            Input(EchoPrompt(), backend).run(keys("a"))
        assert_released(backend)


class TestInputTerminalState:
    def test_hidden_cursor_is_restored(self, backend):
        with patch.object(backend, "hide_cursor", wraps=backend.hide_cursor) as hide:
            Input(EchoPrompt(), backend, hide_cursor=True).run(keys("a", ENTER))
        hide.assert_called_once()
        assert backend.cursor_visible

    def test_cursor_left_at_caret(self, backend):
        prompt = EchoPrompt()
        with pytest.raises(RuntimeError):
            Input(prompt, backend).run(keys("abc"))
        # Ran out of events mid-prompt; the last frame put the caret after "abc"
        assert backend.line(0) == "abc"
        assert backend.get_cursor_pos() == (3, 0)

    def test_suspended_leaves_raw_mode(self, backend):
        driver = Input(EchoPrompt(), backend)
        with driver.terminal:
            driver.init()
            with driver.suspended():
                assert not backend.raw_mode
            assert backend.raw_mode
        assert backend.raw_mode_enables == 2
        assert backend.raw_mode_disables == 2

    def test_scrolls_when_prompt_starts_at_the_bottom(self):
        backend = TestBackend((80, 24), cursor=(0, 22))
        backend.write("previous output\n")
        with pytest.raises(Interrupted):
            Input(EchoPrompt(), backend).run(keys(ENTER, KeyEvent.ctrl("c")))
        # The error line needed one more row, so everything moved up by one
        assert backend.line(21) == "previous output"
        assert backend.line(23) == "✖ Please type something"
