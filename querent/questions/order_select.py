"""
Order select question: arrange the items of a list.

Space picks up the hovered item; while it is held, Up and Down move it
through the list. Space again puts it down.
"""

from ..core.errors import ValidationError
from ..ui.components import Layout, PromptHeader, comma_separated, first_line
from ..ui.primitives import Backend, Color, KeyEvent, Movement, symbols
from ..ui.primitives.colors import CYAN, PLAIN, Style
from ..ui.widgets import Select, Validation
from .answer import Answer, Answers, ListItem
from .choice import DEFAULT_PAGE_SIZE, ChoiceList
from .kind import ListPrompt, QuestionKind
from .options import check

ORDER_SELECT_HINT = "Press <space> to take and place an option, and <up> and <down> to move"

GRABBED = Style(fg=Color.BLACK, bg=Color.CYAN)


class OrderList(ChoiceList):
    """Choices in a user-defined order. order[row] is the choice's original index."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if any(c.is_separator for c in self.choices):
            raise ValueError("order select choices cannot contain separators")
        self.order = list(range(len(self.choices)))
        self.grabbed = False

    def swap(self, a: int, b: int):
        self.order[a], self.order[b] = self.order[b], self.order[a]

    def _label(self, row: int) -> str:
        return f"({row + 1}/{len(self.choices)}) "

    def height_at(self, index: int, layout: Layout) -> int:
        layout.offset_x += 2 + len(self._label(index))
        return self.text_widget(self.order[index]).height(layout)

    def render_item(self, index: int, hovered: bool, layout: Layout, backend: Backend):
        if hovered:
            style = GRABBED if self.grabbed else CYAN
            backend.write_styled(f"{symbols.current().pointer} ", style)
        else:
            style = PLAIN
            backend.write("  ")

        label = self._label(index)
        backend.write_styled(label, style)
        layout.offset_x += 2 + len(label)

        text = self.text_widget(self.order[index])
        text.style = style
        text.render(layout, backend)


class OrderSelectPrompt(ListPrompt):

    def __init__(self, message: str, question: "OrderSelect", answers: Answers):
        self.list = OrderList(question.choices, None, question.page_size, question.should_loop)
        super().__init__(PromptHeader(message, hint=ORDER_SELECT_HINT), Select(self.list))
        self.question = question
        self.answers = answers

    def _move_grabbed(self, movement: Movement):
        at = self.select.get_at()
        last = len(self.list) - 1
        if movement is Movement.UP:
            other = at - 1 if at > 0 else (last if self.list.should_loop else at)
        else:
            other = at + 1 if at < last else (0 if self.list.should_loop else at)
        if other != at:
            self.list.swap(at, other)

    def handle_key(self, key: KeyEvent) -> bool:
        if key.is_char(' '):
            self.list.grabbed = not self.list.grabbed
            return True

        movement = Movement.from_key(key)
        if self.list.grabbed and movement in (Movement.UP, Movement.DOWN):
            self._move_grabbed(movement)
        return self.select.handle_key(key)

    def validate(self) -> Validation:
        error = check(self.question.validate, list(self.list.order), self.answers)
        if error is not None:
            raise ValidationError(error)
        return Validation.FINISH

    def finish(self) -> list[ListItem]:
        order = list(self.list.order)
        if self.question.filter is not None:
            order = self.question.filter(order, self.answers)
        return [ListItem(i, self.list[i].text) for i in order]


class OrderSelect(QuestionKind):
    """
    Every item of a list, in the order the user arranges them.

    Args:
        choices: The items; separators are not allowed
        validate: validate(order, answers) with order the original indices in their new order
        filter: filter(order, answers) -> the order to use
        transform: transform(items, answers, backend) writes the answer summary
    """

    hide_cursor = True

    def __init__(self, choices=(), page_size: int = DEFAULT_PAGE_SIZE, should_loop: bool = True,
                 validate=None, filter=None, transform=None):
        OrderList(choices, None, page_size, should_loop)
        self.choices = list(choices)
        self.page_size = page_size
        self.should_loop = should_loop
        self.validate = validate
        self.filter = filter
        self.transform = transform

    def build_prompt(self, message: str, answers: Answers) -> OrderSelectPrompt:
        return OrderSelectPrompt(message, self, answers)

    def to_answer(self, value: list[ListItem]) -> Answer:
        return Answer.list_items(value)

    def write_answer(self, value: list[ListItem], backend: Backend):
        backend.write_styled(comma_separated([first_line(item.text) for item in value]), CYAN)
