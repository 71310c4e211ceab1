"""
Terminal I/O primitives.

Low-level terminal control, keyboard input, colors and glyphs.
"""

from .terminal import (
    strip_ansi,
    graphemes,
    grapheme_width,
    grapheme_boundaries,
    text_width,
    truncate_text,
    take_width,
)
from .keyboard_input import (
    KeyCode,
    KeyModifiers,
    KeyEvent,
    EventSource,
    TerminalEvents,
    TestEvents,
    decode_char,
    decode_escape_sequence,
)
from .movement import Movement
from .colors import (
    Color,
    Rgb,
    rgb,
    Attributes,
    Style,
)
from .backend import (
    Backend,
    TerminalBackend,
    ClearType,
    MoveDirection,
)
from .test_backend import TestBackend
from . import symbols

__all__ = [
    # Terminal text
    "strip_ansi",
    "graphemes",
    "grapheme_width",
    "grapheme_boundaries",
    "text_width",
    "truncate_text",
    "take_width",
    # Keyboard input
    "KeyCode",
    "KeyModifiers",
    "KeyEvent",
    "EventSource",
    "TerminalEvents",
    "TestEvents",
    "decode_char",
    "decode_escape_sequence",
    "Movement",
    # Colors
    "Color",
    "Rgb",
    "rgb",
    "Attributes",
    "Style",
    # Backends
    "Backend",
    "TerminalBackend",
    "TestBackend",
    "ClearType",
    "MoveDirection",
    "symbols",
]
