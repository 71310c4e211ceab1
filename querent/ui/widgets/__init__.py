"""
Interactive widgets.

Text and character inputs, the select list engine, and the input driver
that runs a prompt to completion.
"""

from .base import Prompt, Validation
from .char_input import CharInput
from .string_input import StringInput, find_word_left, find_word_right
from .select import Select, SelectList, PAGINATION_HINT
from .input import Input, OnEsc, TerminalState

__all__ = [
    "Prompt",
    "Validation",
    "CharInput",
    "StringInput",
    "find_word_left",
    "find_word_right",
    "Select",
    "SelectList",
    "PAGINATION_HINT",
    "Input",
    "OnEsc",
    "TerminalState",
]
