"""
User interface module.

Organized into layers:
- primitives/: Terminal I/O (key events, backends, colors, symbols, text width)
- components/: Visual building blocks (layout, text, prompt header)
- widgets/: Interactive pieces (inputs, select engine, input driver)
"""

# Re-export commonly used items for convenience
from .primitives import (
    # Keyboard
    KeyCode,
    KeyModifiers,
    KeyEvent,
    EventSource,
    TerminalEvents,
    TestEvents,
    Movement,
    # Backends
    Backend,
    TerminalBackend,
    TestBackend,
    # Colors
    Color,
    Attributes,
    Style,
    symbols,
)
from .components import (
    Layout,
    Widget,
    Text,
    Line,
    PromptHeader,
    Delimiter,
)
from .widgets import (
    Prompt,
    Validation,
    CharInput,
    StringInput,
    Select,
    SelectList,
    Input,
    OnEsc,
)

__all__ = [
    "KeyCode",
    "KeyModifiers",
    "KeyEvent",
    "EventSource",
    "TerminalEvents",
    "TestEvents",
    "Movement",
    "Backend",
    "TerminalBackend",
    "TestBackend",
    "Color",
    "Attributes",
    "Style",
    "symbols",
    "Layout",
    "Widget",
    "Text",
    "Line",
    "PromptHeader",
    "Delimiter",
    "Prompt",
    "Validation",
    "CharInput",
    "StringInput",
    "Select",
    "SelectList",
    "Input",
    "OnEsc",
]
