"""
Text formatting helpers.

Word wrapping measured in terminal cells, and number/list formatting shared
by the prompts.
"""

import math

from ..primitives import graphemes, take_width, text_width


def wrap_text(text: str, width: int, initial_offset: int = 0) -> list[str]:
    """
    Word-wrap text to lines of at most `width` cells.

    The first line has `initial_offset` fewer cells available (it continues a
    line something else already started). Runs of whitespace collapse, words
    longer than a line are broken, and explicit newlines are kept. If the
    first line has no room at all, it is returned empty.
    """
    width = max(width, 1)
    lines = []
    available = width - initial_offset
    if available < 1:
        lines.append('')
        available = width

    for paragraph in text.split('\n'):
        current = ''
        current_width = 0
        for word in paragraph.split():
            word_width = text_width(word)
            gap = 1 if current else 0
            if current_width + gap + word_width <= available:
                current = f"{current} {word}" if current else word
                current_width += gap + word_width
                continue

            if current or available < width:
                lines.append(current)
                available = width
            # Break words that cannot fit on a line of their own
            while word_width > available:
                part = take_width(word, available) or graphemes(word)[0]
                lines.append(part)
                available = width
                word = word[len(part):]
                word_width = text_width(word)
            current = word
            current_width = word_width

        lines.append(current)
        available = width

    return lines


def format_float(value: float) -> str:
    """Plain notation, or scientific when the magnitude is extreme."""
    if value != 0 and math.isfinite(value) and abs(math.log10(abs(value))) > 19:
        return f"{value:e}"
    return repr(value)


def comma_separated(items: list[str]) -> str:
    return ", ".join(items)


def first_line(text: str) -> str:
    return text.split('\n', 1)[0]
