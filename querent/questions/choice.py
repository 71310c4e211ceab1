"""
Choices for list questions.
"""

from dataclasses import dataclass
from typing import Any

from ..ui.components import Layout, Text
from ..ui.primitives import Backend, symbols
from ..ui.primitives.colors import CYAN, MUTED, PLAIN
from ..ui.widgets.select import MIN_PAGE_SIZE, SelectList

DEFAULT_SEPARATOR = "──────────────"
DEFAULT_PAGE_SIZE = 15


@dataclass
class Choice:
    """A selectable item."""
    value: Any

    @property
    def is_separator(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return str(self.value)


@dataclass
class Separator(Choice):
    """A line between items that can't be selected."""
    value: Any = DEFAULT_SEPARATOR

    @property
    def is_separator(self) -> bool:
        return True


class DefaultSeparator(Separator):
    """Separator drawn with the stock line."""

    def __init__(self):
        super().__init__(DEFAULT_SEPARATOR)


def to_choice(item) -> Choice:
    """Accept Choice objects as-is and wrap anything else as an item."""
    if isinstance(item, Choice):
        return item
    return Choice(item)


class ChoiceList(SelectList):
    """
    Choices plus paging settings.

    Also a SelectList in its own right: rows are drawn as a pointer and the
    choice text, which is what a plain select question shows.
    """

    def __init__(self, choices=(), default: int | None = None,
                 page_size: int = DEFAULT_PAGE_SIZE, should_loop: bool = True):
        self.choices = [to_choice(c) for c in choices]
        self.page_size = page_size
        self.should_loop = should_loop
        self.default = None
        if page_size < MIN_PAGE_SIZE:
            raise ValueError(f"page_size must be at least {MIN_PAGE_SIZE}")
        if default is not None:
            self.set_default(default)
        self._texts: dict[int, Text] = {}

    def set_default(self, default: int):
        if not 0 <= default < len(self.choices):
            raise ValueError(f"default index {default} is out of range")
        if self.choices[default].is_separator:
            raise ValueError("the default choice cannot be a separator")
        self.default = default

    def __len__(self) -> int:
        return len(self.choices)

    def __getitem__(self, index: int) -> Choice:
        return self.choices[index]

    def __iter__(self):
        return iter(self.choices)

    def is_selectable(self, index: int) -> bool:
        return not self.choices[index].is_separator

    def items(self) -> list[tuple[int, Choice]]:
        """(index, choice) for every selectable choice."""
        return [(i, c) for i, c in enumerate(self.choices) if not c.is_separator]

    def text_widget(self, index: int) -> Text:
        """Cached Text widget for a choice, so wrapping isn't redone every frame."""
        choice = self.choices[index]
        text = self._texts.get(index)
        if text is None or text.text != choice.text:
            text = Text(choice.text)
            self._texts[index] = text
        return text

    def height_at(self, index: int, layout: Layout) -> int:
        layout.offset_x += 2
        return self.text_widget(index).height(layout)

    def render_item(self, index: int, hovered: bool, layout: Layout, backend: Backend):
        choice = self.choices[index]
        if hovered:
            backend.write_styled(f"{symbols.current().pointer} ", CYAN)
        else:
            backend.write("  ")
        layout.offset_x += 2
        text = self.text_widget(index)
        if choice.is_separator:
            text.style = MUTED
        else:
            text.style = CYAN if hovered else PLAIN
        text.render(layout, backend)
