"""
Multi select question: check any number of items in a list.
"""

from ..core.errors import ValidationError
from ..ui.components import Layout, PromptHeader, comma_separated, first_line
from ..ui.primitives import Backend, KeyEvent, symbols
from ..ui.primitives.colors import CYAN, MUTED, PLAIN, SUCCESS
from ..ui.widgets import Select, Validation
from .answer import Answer, Answers, ListItem
from .choice import DEFAULT_PAGE_SIZE, ChoiceList
from .kind import ListPrompt, QuestionKind
from .options import check

MULTI_SELECT_HINT = "Press <space> to select, <a> to toggle all, <i> to invert selection"


class CheckboxList(ChoiceList):
    """Choices with a checked flag per row."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.selected = [False] * len(self.choices)

    def clear_separators(self):
        """Separators can never be checked."""
        for i, choice in enumerate(self.choices):
            if choice.is_separator:
                self.selected[i] = False

    def toggle(self, index: int):
        if self.is_selectable(index):
            self.selected[index] = not self.selected[index]

    def toggle_all(self):
        """Check everything, or uncheck everything if it was all checked already."""
        state = any(not self.selected[i] for i, _ in self.items())
        for i, _ in self.items():
            self.selected[i] = state

    def invert(self):
        for i, _ in self.items():
            self.selected[i] = not self.selected[i]

    def height_at(self, index: int, layout: Layout) -> int:
        layout.offset_x += 4
        return self.text_widget(index).height(layout)

    def render_item(self, index: int, hovered: bool, layout: Layout, backend: Backend):
        symbol_set = symbols.current()
        if hovered:
            backend.write_styled(f"{symbol_set.pointer} ", CYAN)
        else:
            backend.write("  ")

        text = self.text_widget(index)
        if not self.is_selectable(index):
            backend.write("  ")
            text.style = MUTED
        else:
            if self.selected[index]:
                backend.write_styled(f"{symbol_set.completed} ", SUCCESS)
            else:
                backend.write("  ")
            text.style = CYAN if hovered else PLAIN

        layout.offset_x += 4
        text.render(layout, backend)


class MultiSelectPrompt(ListPrompt):

    def __init__(self, message: str, question: "MultiSelect", answers: Answers):
        self.list = CheckboxList(question.choices, None, question.page_size, question.should_loop)
        for index in question.default:
            self.list.toggle(index)
        super().__init__(PromptHeader(message, hint=MULTI_SELECT_HINT), Select(self.list))
        self.question = question
        self.answers = answers

    def handle_key(self, key: KeyEvent) -> bool:
        if key.is_char(' '):
            self.list.toggle(self.select.get_at())
        elif key.is_char('a'):
            self.list.toggle_all()
        elif key.is_char('i'):
            self.list.invert()
        else:
            return self.select.handle_key(key)
        return True

    def validate(self) -> Validation:
        self.list.clear_separators()
        error = check(self.question.validate, list(self.list.selected), self.answers)
        if error is not None:
            raise ValidationError(error)
        return Validation.FINISH

    def finish(self) -> list[ListItem]:
        self.list.clear_separators()
        selected = list(self.list.selected)
        if self.question.filter is not None:
            selected = self.question.filter(selected, self.answers)
        return [
            ListItem(i, choice.text)
            for i, choice in enumerate(self.list.choices)
            if selected[i] and not choice.is_separator
        ]


class MultiSelect(QuestionKind):
    """
    Any number of items out of a list.

    Args:
        choices: Items, Choice objects or Separators
        default: Indices of the items checked initially
        validate: validate(selected, answers) with selected a list of bools, one per choice
        filter: filter(selected, answers) -> the list of bools to use
        transform: transform(items, answers, backend) writes the answer summary
    """

    hide_cursor = True

    def __init__(self, choices=(), default=(), page_size: int = DEFAULT_PAGE_SIZE,
                 should_loop: bool = True, validate=None, filter=None, transform=None):
        # Raises ValueError for an invalid page_size or default
        checked = ChoiceList(choices, None, page_size, should_loop)
        for index in default:
            if not 0 <= index < len(checked.choices):
                raise ValueError(f"default index {index} is out of range")
            if checked.choices[index].is_separator:
                raise ValueError("a separator cannot be checked by default")
        self.choices = list(choices)
        self.default = list(default)
        self.page_size = page_size
        self.should_loop = should_loop
        self.validate = validate
        self.filter = filter
        self.transform = transform

    def build_prompt(self, message: str, answers: Answers) -> MultiSelectPrompt:
        return MultiSelectPrompt(message, self, answers)

    def to_answer(self, value: list[ListItem]) -> Answer:
        return Answer.list_items(value)

    def write_answer(self, value: list[ListItem], backend: Backend):
        backend.write_styled(comma_separated([first_line(item.text) for item in value]), CYAN)
