"""
Prompt header component.

The "? message (hint) " line every question starts with, and the
"✔ message · answer" line it is replaced by once answered.
"""

from enum import Enum

from ..primitives import Backend, symbols
from ..primitives.colors import BOLD, MUTED, RED, SUCCESS
from ..primitives.terminal import text_width
from .layout import Layout
from .widget import Widget


class Delimiter(Enum):
    """Brackets around a hint."""
    PARENTHESES = ("(", ")")
    BRACES = ("{", "}")
    SQUARE_BRACKETS = ("[", "]")
    ANGLE_BRACKETS = ("<", ">")
    NONE = ("", "")

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]


class PromptHeader(Widget):
    """
    Question header.

    With a hint: `? message (hint) `. Without one: `? message › `. The cursor
    rests right after the header, so inputs continue on the same line.
    """

    def __init__(self, message: str, hint: str | None = None,
                 delimiter: Delimiter = Delimiter.PARENTHESES):
        self.message = message
        self.hint = hint
        self.delimiter = delimiter

    def with_hint(self, hint: str | None, delimiter: Delimiter | None = None) -> "PromptHeader":
        self.hint = hint
        if delimiter is not None:
            self.delimiter = delimiter
        return self

    def width(self) -> int:
        width = 2 + text_width(self.message) + 1
        if self.hint is not None:
            delimiters = len(self.delimiter.open) + len(self.delimiter.close)
            return width + text_width(self.hint) + delimiters + 1
        return width + 2

    def relative_cursor_pos(self, layout: Layout) -> tuple[int, int]:
        """End of the header relative to the layout, accounting for wrapping."""
        total = layout.line_offset + self.width()
        available = max(layout.available_width(), 1)
        return total % available, total // available

    def height(self, layout: Layout) -> int:
        x, y = self.relative_cursor_pos(layout)
        layout.line_offset = x
        layout.offset_y += y
        return y + 1

    def render(self, layout: Layout, backend: Backend):
        symbol_set = symbols.current()
        backend.move_cursor_to(layout.offset_x + layout.line_offset, layout.offset_y)
        backend.write_styled("? ", SUCCESS)
        backend.write_styled(self.message, BOLD)
        backend.write(" ")
        if self.hint is not None:
            hint = f"{self.delimiter.open}{self.hint}{self.delimiter.close}"
            backend.write_styled(hint, MUTED)
            backend.write(" ")
        else:
            backend.write_styled(symbol_set.arrow, MUTED)
            backend.write(" ")
        self.height(layout)

    def cursor_pos(self, layout: Layout) -> tuple[int, int]:
        return layout.offset_cursor(self.relative_cursor_pos(layout))


def write_finished_message(backend: Backend, message: str, skipped: bool = False):
    """
    Write the start of an answered question's summary line.

    The caller writes the answer (and the newline) afterwards. Skipped
    questions get a cross and "Skipped" and the line is finished here.
    """
    symbol_set = symbols.current()
    if skipped:
        backend.write_styled(symbol_set.cross, RED)
    else:
        backend.write_styled(symbol_set.completed, SUCCESS)
    backend.write(" ")
    backend.write_styled(message, BOLD)
    backend.write(" ")
    backend.write_styled(symbol_set.middle_dot, MUTED)
    backend.write(" ")
    if skipped:
        backend.write_styled("Skipped", MUTED)
        backend.write("\n")
