"""
Tests for the int and float questions.

Parsing and its error messages, the arrow key adjustments (with 64-bit
wrapping for ints), defaults and the validate/filter hooks.
"""

import math

import pytest

from querent.core import Interrupted
from querent.questions import Answer, Question, prompt_one_with
from querent.questions.number import INT_MAX, INT_MIN, parse_float, parse_int, wrap_int
from querent.ui.primitives import Color, KeyEvent

from tests.conftest import BACKSPACE, DOWN, ENTER, ESC, HOME, PAGE_DOWN, PAGE_UP, TAB, UP, keys


class TestParseInt:
    def test_valid(self):
        assert parse_int("42") == 42
        assert parse_int("-7") == -7
        assert parse_int("+3") == 3

    def test_empty(self):
        with pytest.raises(ValueError, match="cannot parse integer from empty string"):
            parse_int("")

    def test_invalid_digit(self):
        with pytest.raises(ValueError, match="invalid digit found in string"):
            parse_int("2-")

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="too large"):
            parse_int(str(INT_MAX + 1))
        with pytest.raises(ValueError, match="too small"):
            parse_int(str(INT_MIN - 1))

    def test_wrap_int(self):
        assert wrap_int(INT_MAX + 1) == INT_MIN
        assert wrap_int(INT_MIN - 1) == INT_MAX
        assert wrap_int(5) == 5


class TestParseFloat:
    def test_valid(self):
        assert parse_float("1.5") == 1.5
        assert parse_float("1e3") == 1000.0
        assert parse_float("-inf") == -math.inf

    def test_empty(self):
        with pytest.raises(ValueError, match="cannot parse float from empty string"):
            parse_float("")

    def test_invalid(self):
        with pytest.raises(ValueError, match="invalid float literal"):
            parse_float("1.2.3")


class TestIntQuestion:
    """Tests for asking an int."""

    def test_validate_rejections_then_accept(self, backend):
        """Empty, failing and unparsable entries are all rejected before 32 is accepted."""
        question = Question.int("n", validate=lambda n, answers: n > 3)
        events = keys(ENTER, "2", ENTER, "-", ENTER, BACKSPACE, HOME, "3", ENTER)
        assert prompt_one_with(question, backend, events) == Answer.int(32)

    def test_letters_are_ignored(self, backend):
        answer = prompt_one_with(Question.int("n"), backend, keys("1a2", ENTER))
        assert answer.as_int() == 12

    def test_arrow_keys_adjust(self, backend):
        events = keys("5", UP, UP, PAGE_DOWN, DOWN, ENTER)
        assert prompt_one_with(Question.int("n"), backend, events).as_int() == -4

    def test_page_up(self, backend):
        events = keys("5", PAGE_UP, ENTER)
        assert prompt_one_with(Question.int("n"), backend, events).as_int() == 15

    def test_wraps_at_the_top(self, backend):
        events = keys(str(INT_MAX), UP, ENTER)
        assert prompt_one_with(Question.int("n"), backend, events).as_int() == INT_MIN

    def test_arrows_ignored_while_unparsable(self, backend):
        events = keys(UP, "4", ENTER)
        assert prompt_one_with(Question.int("n"), backend, events).as_int() == 4

    def test_default(self, backend):
        answer = prompt_one_with(Question.int("n", default=10), backend, keys(ENTER))
        assert answer.as_int() == 10

    def test_tab_fills_default(self, backend):
        events = keys(TAB, UP, ENTER)
        assert prompt_one_with(Question.int("n", default=10), backend, events).as_int() == 11

    def test_esc_picks_default(self, backend):
        events = keys("99", ESC)
        assert prompt_one_with(Question.int("n", default=10), backend, events).as_int() == 10

    def test_filter(self, backend):
        question = Question.int("n", filter=lambda n, answers: n * 2)
        assert prompt_one_with(question, backend, keys("21", ENTER)).as_int() == 42

    def test_filter_applies_to_default_on_esc(self, backend):
        question = Question.int("n", default=10, filter=lambda n, answers: n * 2)
        assert prompt_one_with(question, backend, keys("99", ESC)).as_int() == 20

    def test_filter_applies_to_default_on_enter(self, backend):
        question = Question.int("n", default=10, filter=lambda n, answers: n + 1)
        assert prompt_one_with(question, backend, keys(ENTER)).as_int() == 11

    def test_validate_message(self, backend):
        question = Question.int("n", validate=lambda n, answers: n > 3 or "must be more than 3")
        with pytest.raises(Interrupted):
            prompt_one_with(question, backend, keys("2", ENTER, KeyEvent.ctrl("c")))
        assert backend.line(1) == "✖ must be more than 3"

    def test_parse_error_shown(self, backend):
        with pytest.raises(Interrupted):
            prompt_one_with(Question.int("n"), backend, keys("-", ENTER, KeyEvent.ctrl("c")))
        assert backend.line(1) == "✖ invalid digit found in string"


class TestIntRendering:
    def test_default_hint(self, backend):
        with pytest.raises(Interrupted):
            prompt_one_with(Question.int("n", default=10), backend, keys(KeyEvent.ctrl("c")))
        assert backend.line(0) == "? n: (10)"

    def test_validate_on_key_colours_input(self, backend):
        question = Question.int("n", validate_on_key=lambda n, answers: n > 3)
        with pytest.raises(Interrupted):
            prompt_one_with(question, backend, keys("2", KeyEvent.ctrl("c")))
        # "? n: › " is 7 cells wide
        assert backend.line(0) == "? n: › 2"
        assert backend.style_at(7, 0).fg is Color.RED

    def test_summary_line(self, backend):
        prompt_one_with(Question.int("n", message="How many?"), backend, keys("3", ENTER))
        assert backend.line(0) == "✔ How many? · 3"


class TestFloatQuestion:
    def test_typed(self, backend):
        answer = prompt_one_with(Question.float("f"), backend, keys("1.5", ENTER))
        assert answer == Answer.float(1.5)

    def test_scientific_notation(self, backend):
        answer = prompt_one_with(Question.float("f"), backend, keys("1e3", ENTER))
        assert answer.as_float() == 1000.0

    def test_arrow_keys_adjust(self, backend):
        answer = prompt_one_with(Question.float("f"), backend, keys("1.5", UP, ENTER))
        assert answer.as_float() == 2.5

    def test_infinity_stays_infinite(self, backend):
        answer = prompt_one_with(Question.float("f"), backend, keys("inf", UP, ENTER))
        assert answer.as_float() == math.inf

    def test_invalid_literal(self, backend):
        with pytest.raises(Interrupted):
            prompt_one_with(Question.float("f"), backend, keys("1..2", ENTER, KeyEvent.ctrl("c")))
        assert backend.line(1) == "✖ invalid float literal"

    def test_default_hint_uses_float_format(self, backend):
        question = Question.float("f", default=1e25)
        with pytest.raises(Interrupted):
            prompt_one_with(question, backend, keys(KeyEvent.ctrl("c")))
        assert backend.line(0) == "? f: (1.000000e+25)"

    def test_summary_line(self, backend):
        prompt_one_with(Question.float("f"), backend, keys("2", ENTER))
        assert backend.line(0) == "✔ f: · 2.0"
