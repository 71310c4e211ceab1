"""
Glyphs used when drawing prompts.

The active symbol set is process-wide; it is usually chosen once at startup
(see PromptSettings.apply) and read by every widget while rendering.
"""

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class SymbolSet:
    pointer: str
    arrow: str
    completed: str
    middle_dot: str
    cross: str
    box_top_left: str
    box_top_right: str
    box_bottom_left: str
    box_bottom_right: str
    box_horizontal: str
    box_vertical: str


UNICODE = SymbolSet(
    pointer='❯',
    arrow='›',
    completed='✔',
    middle_dot='·',
    cross='✖',
    box_top_left='┌',
    box_top_right='┐',
    box_bottom_left='└',
    box_bottom_right='┘',
    box_horizontal='─',
    box_vertical='│',
)

ASCII = SymbolSet(
    pointer='>',
    arrow='>',
    completed='?',
    middle_dot='~',
    cross='x',
    box_top_left='.',
    box_top_right='.',
    box_bottom_left="'",
    box_bottom_right="'",
    box_horizontal='-',
    box_vertical='|',
)

SYMBOL_SETS = {
    "unicode": UNICODE,
    "ascii": ASCII,
}

_lock = threading.Lock()
_current = UNICODE


def current() -> SymbolSet:
    """The symbol set widgets should draw with."""
    with _lock:
        return _current


def set_symbols(symbol_set: SymbolSet) -> SymbolSet:
    """Install a new symbol set. Returns the previous one."""
    global _current
    with _lock:
        previous = _current
        _current = symbol_set
        return previous


def symbols_by_name(name: str) -> SymbolSet:
    """Look up a preset by name ("unicode" or "ascii")."""
    try:
        return SYMBOL_SETS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown symbol set: {name!r}") from None
