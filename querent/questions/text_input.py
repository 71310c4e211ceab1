"""
Free-form text question, with optional autocompletion.

Tab asks the auto_complete hook for suggestions. A single suggestion
replaces the text. Several open a list under the input: Tab and the arrow
keys move through it (the text always shows the hovered suggestion), Enter
closes it, and editing the text closes it too.
"""

from ..core.errors import ValidationError
from ..ui.components import Layout, PromptHeader
from ..ui.primitives import Backend, KeyCode, KeyEvent
from ..ui.primitives.colors import CYAN, PLAIN, RED
from ..ui.widgets import Select, StringInput, Validation
from .answer import Answer, Answers
from .choice import DEFAULT_PAGE_SIZE, ChoiceList
from .kind import LinePrompt, QuestionKind
from .options import check


class InputPrompt(LinePrompt):

    def __init__(self, message: str, question: "TextInput", answers: Answers):
        super().__init__(PromptHeader(message, hint=question.default), StringInput())
        self.question = question
        self.answers = answers
        self.is_valid = True
        self.completions: ChoiceList | None = None
        self.select: Select | None = None

    def _close_completions(self):
        self.completions = None
        self.select = None

    def _complete(self):
        suggestions = [str(s) for s in self.question.auto_complete(self.input.value, self.answers)]
        if not suggestions:
            raise ValueError("auto_complete must return at least one suggestion")

        self.input.set_value(suggestions[0])
        if len(suggestions) > 1:
            self.completions = ChoiceList(
                suggestions,
                page_size=self.question.page_size,
                should_loop=self.question.should_loop,
            )
            self.select = Select(self.completions)

    def _validate_on_key(self):
        if self.question.validate_on_key is not None:
            self.is_valid = bool(self.question.validate_on_key(self.input.value, self.answers))

    def height(self, layout: Layout) -> int:
        height = super().height(layout)
        if self.select is not None:
            height += self.select.height(layout) - 1
        return height

    def render(self, layout: Layout, backend: Backend):
        self.input.set_style(PLAIN if self.is_valid else RED)
        super().render(layout, backend)
        if self.select is not None:
            self.select.render(layout, backend)

    def handle_key(self, key: KeyEvent) -> bool:
        if key.code is KeyCode.TAB:
            if self.question.auto_complete is not None:
                if self.select is None:
                    self._complete()
                    return True
                key = KeyEvent.key(KeyCode.DOWN)
            elif self.question.default is not None and not self.input.value:
                self.input.set_value(self.question.default)
                self.is_valid = True
                return True

        if self.input.handle_key(key):
            self._validate_on_key()
            self._close_completions()
            return True

        if self.select is not None and self.select.handle_key(key):
            self.input.set_value(self.completions[self.select.get_at()].text)
            return True
        return False

    def validate(self) -> Validation:
        if self.select is not None:
            self._close_completions()
            return Validation.CONTINUE

        if not self.input.has_value() and self.question.default is not None:
            return Validation.FINISH

        error = check(self.question.validate, self.input.value, self.answers)
        if error is not None:
            raise ValidationError(error)
        return Validation.FINISH

    def _filter(self, value: str) -> str:
        if self.question.filter is not None:
            return self.question.filter(value, self.answers)
        return value

    def finish(self) -> str:
        if self.input.has_value():
            return self._filter(self.input.value)
        return self._filter(self.question.default or "")

    def has_default(self) -> bool:
        return self.question.default is not None

    def finish_default(self) -> str:
        return self._filter(self.question.default)


class TextInput(QuestionKind):
    """
    Free-form text.

    Args:
        default: Answer used when Enter is pressed without typing
        validate: validate(text, answers) -> True, False or an error message
        validate_on_key: validate_on_key(text, answers) -> bool, colours the text red when False
        filter: filter(text, answers) -> the text to store
        transform: transform(text, answers, backend) writes the answer summary
        auto_complete: auto_complete(text, answers) -> non-empty list of suggestions
    """

    def __init__(self, default: str | None = None, validate=None, validate_on_key=None,
                 filter=None, transform=None, auto_complete=None,
                 page_size: int = DEFAULT_PAGE_SIZE, should_loop: bool = True):
        self.default = default
        self.validate = validate
        self.validate_on_key = validate_on_key
        self.filter = filter
        self.transform = transform
        self.auto_complete = auto_complete
        self.page_size = page_size
        self.should_loop = should_loop

    def build_prompt(self, message: str, answers: Answers) -> InputPrompt:
        return InputPrompt(message, self, answers)

    def to_answer(self, value: str) -> Answer:
        return Answer.string(value)

    def write_answer(self, value: str, backend: Backend):
        backend.write_styled(value, CYAN)
