"""
Expand question: pick an item by its one-letter key.

The compact form only shows the keys in the hint, and previews the item of
the key typed so far. Answering `h` expands the full list of items with
their keys, which can also be browsed with the arrow keys.
"""

from dataclasses import dataclass

from ..ui.components import Layout, Line, PromptHeader, Text, first_line
from ..ui.primitives import Backend, KeyCode, KeyEvent, symbols
from ..ui.primitives.colors import CYAN, MUTED, PLAIN
from ..ui.widgets import CharInput, Prompt, Select, Validation
from .answer import Answer, Answers, ExpandItem
from .choice import DEFAULT_PAGE_SIZE, Choice, ChoiceList
from .kind import QuestionKind

HELP_KEY = "h"
HELP_TEXT = "Help, list all options"
ANSWER_PROMPT = "  Answer: "


@dataclass
class ExpandChoice(Choice):
    """An item and the key that picks it."""
    key: str = ""


def to_expand_choice(item) -> Choice:
    """Accept Choice objects as-is and (key, text) pairs as items."""
    if isinstance(item, Choice):
        return item
    key, text = item
    return ExpandChoice(text, key)


class KeyedChoiceList(ChoiceList):
    """Choices drawn as `  k) text`, plus a last row for the help key."""

    def __init__(self, choices, page_size: int = DEFAULT_PAGE_SIZE, should_loop: bool = True):
        super().__init__([to_expand_choice(c) for c in choices], None, page_size, should_loop)
        self.keys: list[str] = []
        for choice in self.choices:
            if choice.is_separator:
                continue
            key = getattr(choice, "key", "")
            if len(key) != 1:
                raise ValueError(f"expand keys must be a single character, got {key!r}")
            key = key.lower()
            if key == HELP_KEY:
                raise ValueError("the key 'h' is reserved for help")
            if key in self.keys:
                raise ValueError(f"duplicate expand key {key!r}")
            choice.key = key
            self.keys.append(key)
        self.help_text = Text(HELP_TEXT)
        self.pending: str | None = None

    @property
    def help_index(self) -> int:
        return len(self.choices)

    def __len__(self) -> int:
        return len(self.choices) + 1

    def is_selectable(self, index: int) -> bool:
        return index == self.help_index or not self.choices[index].is_separator

    def key_at(self, index: int) -> str:
        return HELP_KEY if index == self.help_index else self.choices[index].key

    def index_of(self, key: str) -> int:
        if key == HELP_KEY:
            return self.help_index
        for index, choice in enumerate(self.choices):
            if not choice.is_separator and choice.key == key:
                return index
        raise KeyError(key)

    def text_at(self, index: int) -> Text:
        if index == self.help_index:
            return self.help_text
        return self.text_widget(index)

    def height_at(self, index: int, layout: Layout) -> int:
        if index < self.help_index and self.choices[index].is_separator:
            return 1
        layout.offset_x += 5
        return self.text_at(index).height(layout)

    def render_item(self, index: int, hovered: bool, layout: Layout, backend: Backend):
        if index < self.help_index and self.choices[index].is_separator:
            backend.write("   ")
            layout.offset_x += 3
            text = self.text_widget(index)
            text.style = MUTED
            text.render(layout.with_max_height(1), backend)
            return

        key = self.key_at(index)
        style = CYAN if key == self.pending else PLAIN
        backend.write_styled(f"  {key}) ", style)
        layout.offset_x += 5
        text = self.text_at(index)
        text.style = style
        text.render(layout, backend)


class ExpandPrompt(Prompt):

    def __init__(self, message: str, choices: KeyedChoiceList, default: str):
        self.choices = choices
        self.default = default

        help_key = HELP_KEY.upper() if default == HELP_KEY else HELP_KEY
        hint = "".join(k.upper() if k == default else k for k in choices.keys) + help_key
        self.header = PromptHeader(message, hint=hint)

        valid_keys = set(choices.keys) | {HELP_KEY}
        self.input = CharInput(lambda c: c.lower() if c.lower() in valid_keys else None)
        self.select = Select(choices)
        choices.pending = None
        self.expanded = False

    def _set_pending(self, key: str | None):
        self.input.set_value(key)
        self.choices.pending = key
        if key is not None:
            self.select.set_at(self.choices.index_of(key))

    def _preview(self) -> Text | Line:
        key = self.input.value
        if key == HELP_KEY:
            return Line(HELP_TEXT)
        text = self.choices.text_widget(self.choices.index_of(key))
        text.style = PLAIN
        return text

    # Compact form

    def _compact_height(self, layout: Layout) -> int:
        height = self.header.height(layout) + self.input.height(layout) - 1
        if self.input.value is None:
            return height
        layout.next_line()
        offset_x = layout.offset_x
        layout.offset_x += 2
        height += self._preview().height(layout)
        layout.offset_x = offset_x
        return height

    def _render_compact(self, layout: Layout, backend: Backend):
        self.header.render(layout, backend)
        self.input.render(layout, backend)
        if self.input.value is None:
            return
        layout.next_line()
        backend.move_cursor_to(layout.offset_x, layout.offset_y)
        backend.write_styled(symbols.current().arrow, CYAN)
        backend.write(" ")
        offset_x = layout.offset_x
        layout.offset_x += 2
        self._preview().render(layout, backend)
        layout.offset_x = offset_x

    # Expanded form

    def _answer_line(self, layout: Layout) -> int:
        height = self.header.height(layout) + self.select.height(layout) - 1
        layout.line_offset = len(ANSWER_PROMPT)
        return height

    def _expanded_height(self, layout: Layout) -> int:
        return self._answer_line(layout) + self.input.height(layout)

    def _render_expanded(self, layout: Layout, backend: Backend):
        self.header.render(layout, backend)
        self.select.render(layout, backend)
        backend.move_cursor_to(layout.offset_x, layout.offset_y)
        backend.write(ANSWER_PROMPT)
        layout.line_offset = len(ANSWER_PROMPT)
        self.input.render(layout, backend)

    # Widget

    def height(self, layout: Layout) -> int:
        if self.expanded:
            return self._expanded_height(layout)
        return self._compact_height(layout)

    def render(self, layout: Layout, backend: Backend):
        if self.expanded:
            self._render_expanded(layout, backend)
        else:
            self._render_compact(layout, backend)

    def cursor_pos(self, layout: Layout) -> tuple[int, int]:
        layout = layout.copy()
        if self.expanded:
            self._answer_line(layout)
        else:
            self.header.height(layout)
        return self.input.cursor_pos(layout)

    def handle_key(self, key: KeyEvent) -> bool:
        if self.input.handle_key(key):
            self._set_pending(self.input.value)
            return True
        if not self.expanded:
            return False
        if key.code is KeyCode.ESC:
            self.expanded = False
            return True
        if self.select.handle_key(key):
            self._set_pending(self.choices.key_at(self.select.get_at()))
            return True
        return False

    # Prompt

    def _chosen_key(self) -> str:
        return self.input.value or self.default

    def validate(self) -> Validation:
        if self._chosen_key() == HELP_KEY:
            self.expanded = True
            self._set_pending(None)
            return Validation.CONTINUE
        return Validation.FINISH

    def _item(self, key: str) -> ExpandItem:
        choice = self.choices[self.choices.index_of(key)]
        return ExpandItem(key, choice.text)

    def finish(self) -> ExpandItem:
        return self._item(self._chosen_key())

    def has_default(self) -> bool:
        return self.default != HELP_KEY

    def finish_default(self) -> ExpandItem:
        return self._item(self.default)


class Expand(QuestionKind):
    """
    One item out of a list, picked by key.

    Args:
        choices: (key, text) pairs, ExpandChoice objects or Separators. Keys are
            single characters, unique, and can't be `h`.
        default: Key used when Enter is pressed without typing. Defaults to help.
        transform: transform(item, answers, backend) writes the answer summary
    """

    def __init__(self, choices=(), default: str | None = None,
                 page_size: int = DEFAULT_PAGE_SIZE, should_loop: bool = True, transform=None):
        self.choices = KeyedChoiceList(choices, page_size, should_loop)
        default = (default or HELP_KEY).lower()
        if default != HELP_KEY and default not in self.choices.keys:
            raise ValueError(f"default key {default!r} is not one of the choices")
        self.default = default
        self.transform = transform

    def build_prompt(self, message: str, answers: Answers) -> ExpandPrompt:
        return ExpandPrompt(message, self.choices, self.default)

    def to_answer(self, value: ExpandItem) -> Answer:
        return Answer.expand_item(value)

    def write_answer(self, value: ExpandItem, backend: Backend):
        backend.write_styled(first_line(value.text), CYAN)
