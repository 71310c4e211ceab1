"""
Color and text attribute definitions for terminal output.
"""

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import NamedTuple


class Color(Enum):
    """Named terminal colors; the value is the SGR foreground code."""
    RESET = 39
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GREY = 37
    DARK_GREY = 90
    LIGHT_RED = 91
    LIGHT_GREEN = 92
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    LIGHT_MAGENTA = 95
    LIGHT_CYAN = 96
    WHITE = 97


class Rgb(NamedTuple):
    """A 24-bit color."""
    r: int
    g: int
    b: int


def rgb(r: int, g: int, b: int) -> Rgb:
    return Rgb(r, g, b)


class Attributes(IntFlag):
    """Text attribute bit flags."""
    NONE = 0
    BOLD = 1 << 0
    DIM = 1 << 1
    ITALIC = 1 << 2
    UNDERLINED = 1 << 3
    REVERSED = 1 << 4
    CROSSED_OUT = 1 << 5
    SLOW_BLINK = 1 << 6
    RAPID_BLINK = 1 << 7


# SGR codes to switch each attribute on and off
ATTRIBUTE_CODES = {
    Attributes.BOLD: (1, 22),
    Attributes.DIM: (2, 22),
    Attributes.ITALIC: (3, 23),
    Attributes.UNDERLINED: (4, 24),
    Attributes.SLOW_BLINK: (5, 25),
    Attributes.RAPID_BLINK: (6, 25),
    Attributes.REVERSED: (7, 27),
    Attributes.CROSSED_OUT: (9, 29),
}


def fg_sequence(color) -> str:
    """SGR escape setting the foreground color."""
    if isinstance(color, Rgb):
        return f"\x1b[38;2;{color.r};{color.g};{color.b}m"
    return f"\x1b[{color.value}m"


def bg_sequence(color) -> str:
    """SGR escape setting the background color."""
    if isinstance(color, Rgb):
        return f"\x1b[48;2;{color.r};{color.g};{color.b}m"
    return f"\x1b[{color.value + 10}m"


def attribute_sequence(attributes: Attributes, enable: bool = True) -> str:
    """SGR escape switching the given attributes on (or off)."""
    codes = []
    for flag, (on, off) in ATTRIBUTE_CODES.items():
        if attributes & flag:
            code = on if enable else off
            if code not in codes:
                codes.append(code)
    if not codes:
        return ""
    return "\x1b[" + ";".join(str(c) for c in codes) + "m"


@dataclass(frozen=True)
class Style:
    """Colors and attributes applied to a run of text."""
    fg: Color | Rgb | None = None
    bg: Color | Rgb | None = None
    attributes: Attributes = Attributes.NONE

    def is_plain(self) -> bool:
        return self.fg is None and self.bg is None and not self.attributes


# Styles the prompts share
PLAIN = Style()
BOLD = Style(attributes=Attributes.BOLD)
CYAN = Style(fg=Color.CYAN)
RED = Style(fg=Color.RED)
MUTED = Style(fg=Color.DARK_GREY)
SUCCESS = Style(fg=Color.LIGHT_GREEN)
