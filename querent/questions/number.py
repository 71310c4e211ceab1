"""
Int and Float questions.

Both are a text input restricted to characters that can appear in a number.
Up/Down add or subtract 1 and PageUp/PageDown 10. Ints are 64-bit and wrap
around at the ends of the range.
"""

import re

from ..core.errors import ValidationError
from ..ui.components import PromptHeader, format_float
from ..ui.primitives import Backend, KeyCode, KeyEvent
from ..ui.primitives.colors import CYAN, PLAIN, RED
from ..ui.widgets import StringInput, Validation
from .answer import Answer, Answers
from .kind import LinePrompt, QuestionKind
from .options import check

INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1

INT_PATTERN = re.compile(r'[+-]?[0-9]+')

KEY_DELTAS = {
    KeyCode.UP: 1,
    KeyCode.DOWN: -1,
    KeyCode.PAGE_UP: 10,
    KeyCode.PAGE_DOWN: -10,
}


def wrap_int(n: int) -> int:
    """Wrap to the signed 64-bit range."""
    return ((n - INT_MIN) % 2 ** 64) + INT_MIN


def parse_int(text: str) -> int:
    """Parse a signed 64-bit integer. Raises ValueError with a readable message."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not INT_PATTERN.fullmatch(text):
        raise ValueError("invalid digit found in string")
    n = int(text)
    if n > INT_MAX:
        raise ValueError("number too large to fit in target type")
    if n < INT_MIN:
        raise ValueError("number too small to fit in target type")
    return n


def parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    try:
        return float(text)
    except ValueError:
        raise ValueError("invalid float literal") from None


class NumberPrompt(LinePrompt):
    """Shared prompt for both number kinds; the question supplies parsing."""

    def __init__(self, message: str, question: "Number", answers: Answers):
        default = question.default
        hint = question.format(default) if default is not None else None
        super().__init__(PromptHeader(message, hint=hint), StringInput(question.filter_char))
        self.question = question
        self.answers = answers
        self.is_valid = True

    def parse(self):
        return self.question.parse(self.input.value)

    def _validate_on_key(self):
        try:
            n = self.parse()
        except ValueError:
            self.is_valid = False
            return
        if self.question.validate_on_key is not None:
            self.is_valid = bool(self.question.validate_on_key(n, self.answers))
        else:
            self.is_valid = True

    def render(self, layout, backend: Backend):
        self.input.set_style(PLAIN if self.is_valid else RED)
        super().render(layout, backend)

    def handle_key(self, key: KeyEvent) -> bool:
        if self.input.handle_key(key):
            self._validate_on_key()
            return True

        default = self.question.default
        if key.code is KeyCode.TAB and default is not None and not self.input.value:
            self.input.set_value(self.question.format(default))
            self.is_valid = True
            return True

        delta = KEY_DELTAS.get(key.code)
        if delta is None:
            return False
        try:
            n = self.parse()
        except ValueError:
            return False
        self.input.set_value(self.question.format(self.question.add(n, delta)))
        self._validate_on_key()
        return True

    def _use_default(self) -> bool:
        return not self.input.value and self.question.default is not None

    def validate(self) -> Validation:
        if self._use_default():
            return Validation.FINISH
        try:
            n = self.parse()
        except ValueError as e:
            raise ValidationError(str(e)) from None
        error = check(self.question.validate, n, self.answers)
        if error is not None:
            raise ValidationError(error)
        return Validation.FINISH

    def finish(self):
        n = self.question.default if self._use_default() else self.parse()
        if self.question.filter is not None:
            n = self.question.filter(n, self.answers)
        return n

    def has_default(self) -> bool:
        return self.question.default is not None

    def finish_default(self):
        n = self.question.default
        if self.question.filter is not None:
            n = self.question.filter(n, self.answers)
        return n


class Number(QuestionKind):
    """
    Common options of Int and Float.

    Args:
        default: Answer used when Enter is pressed without typing
        validate: validate(n, answers) -> True, False or an error message
        validate_on_key: validate_on_key(n, answers) -> bool, colours the input red when False
        filter: filter(n, answers) -> the number to store
        transform: transform(n, answers, backend) writes the answer summary
    """

    def __init__(self, default=None, validate=None, validate_on_key=None, filter=None,
                 transform=None):
        self.default = default
        self.validate = validate
        self.validate_on_key = validate_on_key
        self.filter = filter
        self.transform = transform

    @staticmethod
    def filter_char(c: str) -> str | None:
        if (c.isascii() and c.isdigit()) or c in "+-":
            return c
        return None

    def parse(self, text: str):
        raise NotImplementedError

    def add(self, n, delta: int):
        raise NotImplementedError

    def format(self, n) -> str:
        return str(n)

    def build_prompt(self, message: str, answers: Answers) -> NumberPrompt:
        return NumberPrompt(message, self, answers)

    def write_answer(self, value, backend: Backend):
        backend.write_styled(self.format(value), CYAN)


class Int(Number):
    """Signed 64-bit integer."""

    def parse(self, text: str) -> int:
        return parse_int(text)

    def add(self, n: int, delta: int) -> int:
        return wrap_int(n + delta)

    def to_answer(self, value: int) -> Answer:
        return Answer.int(value)


class Float(Number):
    """Floating point number. Accepts inf as well as plain and scientific notation."""

    @staticmethod
    def filter_char(c: str) -> str | None:
        if Number.filter_char(c) is not None or c in ".eEinf":
            return c
        return None

    def parse(self, text: str) -> float:
        return parse_float(text)

    def add(self, n: float, delta: int) -> float:
        return n + delta

    def format(self, n: float) -> str:
        return format_float(n)

    def to_answer(self, value: float) -> Answer:
        return Answer.float(value)
