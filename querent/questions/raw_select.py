"""
Raw select question: a numbered list, answered by typing the number.

The list can still be navigated with the arrow keys; moving the hover
writes its number into the answer field.
"""

from ..core.errors import ValidationError
from ..ui.components import Layout, PromptHeader, first_line
from ..ui.primitives import Backend, KeyEvent
from ..ui.primitives.colors import CYAN, MUTED, PLAIN
from ..ui.widgets import Select, StringInput, Validation
from .answer import Answer, Answers, ListItem
from .choice import DEFAULT_PAGE_SIZE, ChoiceList
from .kind import ListPrompt, QuestionKind

ANSWER_PROMPT = "  Answer: "


class NumberedChoiceList(ChoiceList):
    """Choices drawn as `  N) text`, numbered from 1 and skipping separators."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.numbers: dict[int, int] = {}
        for number, (index, _) in enumerate(self.items(), start=1):
            self.numbers[index] = number

    def index_of(self, number: int) -> int | None:
        for index, n in self.numbers.items():
            if n == number:
                return index
        return None

    def _prefix(self, index: int) -> str:
        return f"  {self.numbers[index]}) "

    def height_at(self, index: int, layout: Layout) -> int:
        if self.choices[index].is_separator:
            return 1
        layout.offset_x += len(self._prefix(index))
        return self.text_widget(index).height(layout)

    def render_item(self, index: int, hovered: bool, layout: Layout, backend: Backend):
        text = self.text_widget(index)
        if self.choices[index].is_separator:
            backend.write("   ")
            layout.offset_x += 3
            text.style = MUTED
            text.render(layout.with_max_height(1), backend)
            return

        style = CYAN if hovered else PLAIN
        prefix = self._prefix(index)
        backend.write_styled(prefix, style)
        layout.offset_x += len(prefix)
        text.style = style
        text.render(layout, backend)


class RawSelectPrompt(ListPrompt):

    def __init__(self, message: str, choices: NumberedChoiceList):
        select = Select(choices)
        if choices.default is not None:
            select.set_at(choices.default)
        super().__init__(PromptHeader(message), select)
        self.choices = choices
        self.input = StringInput(lambda c: c if c.isascii() and c.isdigit() else None)

    def _answer_line(self, layout: Layout) -> int:
        height = self.header.height(layout) + self.select.height(layout) - 1
        layout.line_offset = len(ANSWER_PROMPT)
        return height

    def height(self, layout: Layout) -> int:
        return self._answer_line(layout) + self.input.height(layout)

    def render(self, layout: Layout, backend: Backend):
        self.header.render(layout, backend)
        self.select.render(layout, backend)
        backend.move_cursor_to(layout.offset_x, layout.offset_y)
        backend.write(ANSWER_PROMPT)
        layout.line_offset = len(ANSWER_PROMPT)
        self.input.render(layout, backend)

    def cursor_pos(self, layout: Layout) -> tuple[int, int]:
        layout = layout.copy()
        self._answer_line(layout)
        return self.input.cursor_pos(layout)

    def handle_key(self, key: KeyEvent) -> bool:
        if self.input.handle_key(key):
            index = None
            if self.input.value:
                index = self.choices.index_of(int(self.input.value))
            # Nothing is hovered while the typed number matches no item
            self.select.set_at(len(self.choices) + 1 if index is None else index)
            return True

        if self.select.handle_key(key):
            self.input.set_value(str(self.choices.numbers[self.select.get_at()]))
            return True
        return False

    def validate(self) -> Validation:
        if not self.select.is_hovering():
            raise ValidationError("Please enter a valid choice")
        return Validation.FINISH

    def finish(self) -> ListItem:
        index = self.select.get_at()
        return ListItem(index, self.choices[index].text)


class RawSelect(QuestionKind):
    """
    One item out of a numbered list.

    Args:
        choices: Items, Choice objects or Separators
        default: Index of the item hovered initially
        transform: transform(item, answers, backend) writes the answer summary
    """

    def __init__(self, choices=(), default: int | None = None,
                 page_size: int = DEFAULT_PAGE_SIZE, should_loop: bool = True, transform=None):
        self.choices = NumberedChoiceList(choices, default, page_size, should_loop)
        self.transform = transform

    def build_prompt(self, message: str, answers: Answers) -> RawSelectPrompt:
        return RawSelectPrompt(message, self.choices)

    def to_answer(self, value: ListItem) -> Answer:
        return Answer.list_item(value)

    def write_answer(self, value: ListItem, backend: Backend):
        backend.write_styled(first_line(value.text), CYAN)
