"""
Confirm question: a yes/no answer.
"""

from ..core.errors import ValidationError
from ..ui.components import PromptHeader
from ..ui.primitives import Backend
from ..ui.primitives.colors import CYAN
from ..ui.widgets import CharInput, Validation
from .answer import Answer, Answers
from .kind import LinePrompt, QuestionKind


def confirm_hint(default: bool | None) -> str:
    if default is None:
        return "y/n"
    return "Y/n" if default else "y/N"


class ConfirmPrompt(LinePrompt):

    def __init__(self, message: str, default: bool | None = None):
        super().__init__(
            PromptHeader(message, hint=confirm_hint(default)),
            CharInput(lambda c: c if c in "yYnN" else None),
        )
        self.default = default

    def validate(self) -> Validation:
        if self.input.value is not None or self.default is not None:
            return Validation.FINISH
        raise ValidationError("Please enter (y/n)")

    def finish(self) -> bool:
        value = self.input.value
        if value is None:
            return bool(self.default)
        return value in "yY"

    def has_default(self) -> bool:
        return self.default is not None

    def finish_default(self) -> bool:
        return bool(self.default)


class Confirm(QuestionKind):
    """Yes/no question. `default` is used when Enter is pressed without typing."""

    def __init__(self, default: bool | None = None, transform=None):
        self.default = default
        self.transform = transform

    def build_prompt(self, message: str, answers: Answers) -> ConfirmPrompt:
        return ConfirmPrompt(message, self.default)

    def to_answer(self, value: bool) -> Answer:
        return Answer.bool(value)

    def write_answer(self, value: bool, backend: Backend):
        backend.write_styled("Yes" if value else "No", CYAN)
