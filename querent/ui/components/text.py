"""
Static text widgets.

Text wraps across as many lines as it needs; Line stays on one line and is
cut short with an ellipsis.
"""

from ...core.errors import FormatError
from ..primitives import Backend
from ..primitives.colors import PLAIN, Style
from ..primitives.terminal import text_width, truncate_text
from .formatting import wrap_text
from .layout import Layout
from .widget import Widget


class Text(Widget):
    """Word-wrapped block of text."""

    def __init__(self, text: str, style: Style = PLAIN):
        self.text = text
        self.style = style
        self._cache_key = None
        self._lines: list[str] = []

    def lines(self, layout: Layout) -> list[str]:
        key = (layout.available_width(), layout.line_offset)
        if key != self._cache_key:
            self._lines = wrap_text(self.text, layout.available_width(), layout.line_offset)
            self._cache_key = key
        return self._lines

    def height(self, layout: Layout) -> int:
        height = min(len(self.lines(layout)), layout.max_height)
        layout.next_line(height)
        return height

    def render(self, layout: Layout, backend: Backend):
        if layout.max_height == 0:
            raise FormatError("no rows available to render text")

        lines = self.lines(layout)
        start = layout.get_start(len(lines))
        visible = lines[start:start + layout.max_height]

        for i, line in enumerate(visible):
            x = layout.offset_x
            if i == 0 and start == 0:
                x += layout.line_offset
            backend.move_cursor_to(x, layout.offset_y + i)
            backend.write_styled(line, self.style)

        layout.next_line(len(visible))


class Line(Widget):
    """Single line of text, truncated with an ellipsis when it doesn't fit."""

    def __init__(self, text: str, style: Style = PLAIN):
        self.text = text
        self.style = style

    def height(self, layout: Layout) -> int:
        layout.next_line()
        return 1

    def render(self, layout: Layout, backend: Backend):
        width = layout.line_width()
        backend.move_cursor_to(layout.offset_x + layout.line_offset, layout.offset_y)
        if text_width(self.text) <= width:
            backend.write_styled(self.text, self.style)
        elif width <= 3:
            backend.write('.' * max(width, 0))
        else:
            backend.write_styled(truncate_text(self.text, width), self.style)
        layout.next_line()
