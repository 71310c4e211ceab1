"""
Select question: pick one item from a list.
"""

from ..ui.components import PromptHeader, first_line
from ..ui.primitives import Backend
from ..ui.primitives.colors import CYAN
from ..ui.widgets import Select as SelectWidget
from .answer import Answer, Answers, ListItem
from .choice import DEFAULT_PAGE_SIZE, ChoiceList
from .kind import ListPrompt, QuestionKind


class SelectPrompt(ListPrompt):

    def __init__(self, message: str, choices: ChoiceList):
        select = SelectWidget(choices)
        if choices.default is not None:
            select.set_at(choices.default)
        super().__init__(PromptHeader(message), select)
        self.choices = choices

    def finish(self) -> ListItem:
        index = self.select.get_at()
        return ListItem(index, self.choices[index].text)


class Select(QuestionKind):
    """
    One item out of a list.

    Args:
        choices: Items, Choice objects or Separators
        default: Index of the item hovered initially
        transform: transform(item, answers, backend) writes the answer summary
    """

    hide_cursor = True

    def __init__(self, choices=(), default: int | None = None,
                 page_size: int = DEFAULT_PAGE_SIZE, should_loop: bool = True, transform=None):
        self.choices = ChoiceList(choices, default, page_size, should_loop)
        self.transform = transform

    def build_prompt(self, message: str, answers: Answers) -> SelectPrompt:
        return SelectPrompt(message, self.choices)

    def to_answer(self, value: ListItem) -> Answer:
        return Answer.list_item(value)

    def write_answer(self, value: ListItem, backend: Backend):
        backend.write_styled(first_line(value.text), CYAN)
