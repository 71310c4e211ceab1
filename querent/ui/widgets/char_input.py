"""
Single character input widget.
"""

from ..components.layout import Layout
from ..components.widget import Widget
from ..primitives import Backend, KeyCode, KeyEvent
from ..primitives.terminal import grapheme_width
from .string_input import fit_on_line


class CharInput(Widget):
    """Holds at most one character, typed over to replace."""

    def __init__(self, filter_map=None):
        # filter_map(ch) returns the character to keep, or None to reject it
        self.filter_map = filter_map or (lambda c: c)
        self.value: str | None = None

    def set_value(self, value: str | None):
        self.value = value

    def finish(self) -> str | None:
        return self.value

    def _width(self) -> int:
        return grapheme_width(self.value) if self.value else 0

    def handle_key(self, key: KeyEvent) -> bool:
        if key.is_plain_char():
            ch = self.filter_map(key.char)
            if ch is None:
                return False
            self.value = ch
            return True
        if key.code in (KeyCode.BACKSPACE, KeyCode.DELETE) and self.value is not None:
            self.value = None
            return True
        return False

    def height(self, layout: Layout) -> int:
        skipped = fit_on_line(layout)
        layout.line_offset += self._width()
        return 1 + skipped

    def render(self, layout: Layout, backend: Backend):
        fit_on_line(layout)
        backend.move_cursor_to(layout.offset_x + layout.line_offset, layout.offset_y)
        if self.value:
            backend.write(self.value)
        layout.line_offset += self._width()

    def cursor_pos(self, layout: Layout) -> tuple[int, int]:
        layout = layout.copy()
        fit_on_line(layout)
        return layout.offset_x + layout.line_offset + self._width(), layout.offset_y
