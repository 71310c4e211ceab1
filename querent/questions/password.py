"""
Password question: text input that never shows what was typed.
"""

from ..core.errors import ValidationError
from ..ui.components import Delimiter, PromptHeader
from ..ui.primitives import Backend
from ..ui.primitives.colors import MUTED
from ..ui.widgets import StringInput, Validation
from .answer import Answer, Answers
from .kind import LinePrompt, QuestionKind
from .options import check

HIDDEN_HINT = "input is hidden"


class PasswordPrompt(LinePrompt):

    def __init__(self, message: str, question: "Password", answers: Answers):
        header = PromptHeader(message)
        input_widget = StringInput()
        if question.mask:
            input_widget.with_mask(question.mask)
        else:
            header.with_hint(HIDDEN_HINT, Delimiter.SQUARE_BRACKETS)
            input_widget.with_hidden_output()
        super().__init__(header, input_widget)
        self.question = question
        self.answers = answers

    def validate(self) -> Validation:
        error = check(self.question.validate, self.input.value, self.answers)
        if error is not None:
            raise ValidationError(error)
        return Validation.FINISH

    def finish(self) -> str:
        value = self.input.value
        if self.question.filter is not None:
            value = self.question.filter(value, self.answers)
        return value


class Password(QuestionKind):
    """
    Hidden text.

    Args:
        mask: Character drawn for every typed character. Without one nothing is drawn.
        validate: validate(text, answers) -> True, False or an error message
        filter: filter(text, answers) -> the text to store
        transform: transform(text, answers, backend) writes the answer summary
    """

    def __init__(self, mask: str | None = None, validate=None, filter=None, transform=None):
        self.mask = mask
        self.validate = validate
        self.filter = filter
        self.transform = transform

    def build_prompt(self, message: str, answers: Answers) -> PasswordPrompt:
        return PasswordPrompt(message, self, answers)

    def to_answer(self, value: str) -> Answer:
        return Answer.string(value)

    def write_answer(self, value: str, backend: Backend):
        backend.write_styled("[hidden]", MUTED)
