"""
UI components.

Visual building blocks: layout, static text, the prompt header.
"""

from .layout import Layout, RenderRegion
from .widget import Widget
from .text import Text, Line
from .header import PromptHeader, Delimiter, write_finished_message
from .formatting import (
    wrap_text,
    format_float,
    comma_separated,
    first_line,
)

__all__ = [
    "Layout",
    "RenderRegion",
    "Widget",
    "Text",
    "Line",
    "PromptHeader",
    "Delimiter",
    "write_finished_message",
    "wrap_text",
    "format_float",
    "comma_separated",
    "first_line",
]
