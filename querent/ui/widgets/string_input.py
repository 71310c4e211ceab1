"""
Single-line text input widget.

Supports readline-style editing: character and word movement, deleting
words, deleting to either end. Text scrolls horizontally to keep the caret
visible, and can be masked for passwords.
"""

import re

from ..components.layout import Layout
from ..components.widget import Widget
from ..primitives import Backend, KeyCode, KeyEvent, KeyModifiers, Movement
from ..primitives.colors import PLAIN, Style
from ..primitives.terminal import grapheme_boundaries, grapheme_width, graphemes

WORD_PATTERN = re.compile(r'\w+|[^\w\s]')

# Inputs need at least this many cells; otherwise they start on the next line
MIN_INPUT_WIDTH = 2


def word_starts(text: str) -> list[int]:
    return [m.start() for m in WORD_PATTERN.finditer(text)]


def find_word_left(text: str, at: int) -> int:
    """Start of the word before (or containing) position `at`."""
    starts = word_starts(text[:at])
    return starts[-1] if starts else 0


def find_word_right(text: str, at: int) -> int:
    """Start of the next word after position `at`, or the end of the text."""
    for start in word_starts(text):
        if start > at:
            return start
    return len(text)


def fit_on_line(layout: Layout, min_width: int = MIN_INPUT_WIDTH) -> int:
    """
    Move to the next line if the current one is too full.

    Returns the number of rows skipped (0 or 1).
    """
    if layout.line_offset > 0 and layout.line_width() < min_width:
        layout.next_line()
        return 1
    return 0


class StringInput(Widget):
    """Editable string with a caret."""

    def __init__(self, filter_map=None):
        # filter_map(ch) returns the character to insert, or None to reject it
        self.filter_map = filter_map or (lambda c: c)
        self.value = ""
        self.at = 0
        self.mask: str | None = None
        self.hide_output = False
        self.style = PLAIN
        self._typed = False

    def with_mask(self, mask: str) -> "StringInput":
        self.mask = mask
        return self

    def with_hidden_output(self) -> "StringInput":
        self.hide_output = True
        return self

    def set_value(self, value: str):
        """Replace the text and move the caret to the end."""
        self.value = value
        self.at = len(value)

    def set_at(self, at: int):
        bounds = grapheme_boundaries(self.value)
        self.at = max(b for b in bounds if b <= max(at, 0))

    def has_value(self) -> bool:
        """True once anything was typed, even if it has been erased since."""
        return self._typed or bool(self.value)

    def finish(self) -> str:
        return self.value

    def set_style(self, style: Style):
        self.style = style

    # Editing

    def _prev_boundary(self) -> int:
        return max(b for b in grapheme_boundaries(self.value) if b < self.at)

    def _next_boundary(self) -> int:
        return min(b for b in grapheme_boundaries(self.value) if b > self.at)

    def _delete(self, start: int, end: int):
        self.value = self.value[:start] + self.value[end:]
        self.at = start

    def handle_key(self, key: KeyEvent) -> bool:
        ctrl = key.has(KeyModifiers.CONTROL)
        alt = key.has(KeyModifiers.ALT)
        length = len(self.value)

        if ctrl and key.is_char('u'):
            if self.at > 0:
                self._delete(0, self.at)
                return True
            return False

        if (key.code is KeyCode.BACKSPACE and alt) or ((ctrl or alt) and key.is_char('w')):
            if self.at > 0:
                self._delete(find_word_left(self.value, self.at), self.at)
                return True
            return False

        if key.code is KeyCode.BACKSPACE:
            if self.at > 0:
                self._delete(self._prev_boundary(), self.at)
                return True
            return False

        if ctrl and key.is_char('k'):
            if self.at < length:
                self.value = self.value[:self.at]
                return True
            return False

        if alt and (key.is_char('d') or key.code is KeyCode.DELETE):
            if self.at < length:
                at = self.at
                self._delete(at, find_word_right(self.value, at))
                return True
            return False

        if key.code is KeyCode.DELETE or (ctrl and key.is_char('d')):
            if self.at < length:
                at = self.at
                self._delete(at, self._next_boundary())
                return True
            return False

        if key.is_plain_char():
            ch = self.filter_map(key.char)
            if not ch:
                return False
            self.value = self.value[:self.at] + ch + self.value[self.at:]
            self.at += len(ch)
            self._typed = True
            return True

        movement = Movement.from_key(key)
        if movement is Movement.PREV_WORD and self.at > 0:
            self.at = find_word_left(self.value, self.at)
        elif movement is Movement.NEXT_WORD and self.at < length:
            self.at = find_word_right(self.value, self.at)
        elif movement is Movement.LEFT and self.at > 0:
            self.at = self._prev_boundary()
        elif movement is Movement.RIGHT and self.at < length:
            self.at = self._next_boundary()
        elif movement is Movement.HOME and self.at > 0:
            self.at = 0
        elif movement is Movement.END and self.at < length:
            self.at = length
        else:
            return False
        return True

    # Rendering

    def _display(self) -> tuple[list[tuple[str, int]], int]:
        """
        The graphemes as drawn (with their widths) and the caret's column.
        """
        if self.hide_output:
            return [], 0
        cells = []
        caret_col = 0
        position = 0
        for cluster in graphemes(self.value):
            shown = self.mask if self.mask is not None else cluster
            width = grapheme_width(shown)
            if position < self.at:
                caret_col += width
            cells.append((shown, width))
            position += len(cluster)
        return cells, caret_col

    def _window(self, layout: Layout) -> tuple[str, int, int]:
        """Visible text, its width and the caret column within it."""
        cells, caret_col = self._display()
        # One cell stays free for the caret at the end of the text
        line_width = max(layout.line_width(), 0)
        room = max(line_width - 1, 0)
        start_col = max(0, caret_col - room)

        shown = []
        col = 0
        used = 0
        for text, width in cells:
            if col >= start_col:
                if used + width > line_width:
                    break
                shown.append(text)
                used += width
            col += width
        return ''.join(shown), used, caret_col - start_col

    def height(self, layout: Layout) -> int:
        skipped = fit_on_line(layout)
        _, width, _ = self._window(layout)
        layout.line_offset += width
        return 1 + skipped

    def render(self, layout: Layout, backend: Backend):
        fit_on_line(layout)
        text, width, _ = self._window(layout)
        backend.move_cursor_to(layout.offset_x + layout.line_offset, layout.offset_y)
        backend.write_styled(text, self.style)
        layout.line_offset += width

    def cursor_pos(self, layout: Layout) -> tuple[int, int]:
        layout = layout.copy()
        fit_on_line(layout)
        _, _, caret = self._window(layout)
        return layout.offset_x + layout.line_offset + caret, layout.offset_y
