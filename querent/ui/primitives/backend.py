"""
Terminal control backends.

Backend is the capability every widget draws through. TerminalBackend
speaks ANSI/VT100 to a text stream; output is buffered until flush() so a
whole frame reaches the terminal in one write.
"""

import os
import re
import shutil
import sys
from abc import ABC, abstractmethod
from enum import Enum

from .colors import (
    Attributes,
    Style,
    attribute_sequence,
    bg_sequence,
    fg_sequence,
)

if os.name != 'nt':
    import select
    import termios
    import tty


class ClearType(Enum):
    ALL = "all"
    FROM_CURSOR_DOWN = "from_cursor_down"
    FROM_CURSOR_UP = "from_cursor_up"
    CURRENT_LINE = "current_line"
    UNTIL_NEW_LINE = "until_new_line"


class MoveDirection(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    NEXT_LINE = "next_line"
    PREV_LINE = "prev_line"
    COLUMN = "column"


class Backend(ABC):
    """Abstract terminal. Coordinates are 0-based (column, row)."""

    @abstractmethod
    def write(self, text: str):
        """Queue text for output at the cursor."""

    @abstractmethod
    def flush(self):
        """Send everything queued so far to the terminal."""

    @abstractmethod
    def set_fg(self, color):
        ...

    @abstractmethod
    def set_bg(self, color):
        ...

    @abstractmethod
    def set_attributes(self, attributes: Attributes):
        """Switch the given attributes on."""

    @abstractmethod
    def remove_attributes(self, attributes: Attributes):
        """Switch the given attributes off."""

    @abstractmethod
    def reset_style(self):
        """Back to default colors with no attributes."""

    @abstractmethod
    def move_cursor_to(self, x: int, y: int):
        ...

    @abstractmethod
    def get_cursor_pos(self) -> tuple[int, int]:
        ...

    @abstractmethod
    def show_cursor(self):
        ...

    @abstractmethod
    def hide_cursor(self):
        ...

    @abstractmethod
    def enable_raw_mode(self):
        ...

    @abstractmethod
    def disable_raw_mode(self):
        ...

    @abstractmethod
    def clear(self, clear_type: ClearType):
        ...

    @abstractmethod
    def scroll(self, dist: int):
        """Scroll the screen contents; positive moves them down, negative up."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Terminal (width, height)."""

    def move_cursor(self, direction: MoveDirection, n: int = 1):
        """Relative cursor movement. Column moves to absolute column n."""
        x, y = self.get_cursor_pos()
        if direction is MoveDirection.UP:
            y = max(0, y - n)
        elif direction is MoveDirection.DOWN:
            y += n
        elif direction is MoveDirection.LEFT:
            x = max(0, x - n)
        elif direction is MoveDirection.RIGHT:
            x += n
        elif direction is MoveDirection.NEXT_LINE:
            x, y = 0, y + n
        elif direction is MoveDirection.PREV_LINE:
            x, y = 0, max(0, y - n)
        elif direction is MoveDirection.COLUMN:
            x = n
        self.move_cursor_to(x, y)

    def set_style(self, style: Style):
        if style.fg is not None:
            self.set_fg(style.fg)
        if style.bg is not None:
            self.set_bg(style.bg)
        if style.attributes:
            self.set_attributes(style.attributes)

    def write_styled(self, text: str, style: Style):
        """Write text in the given style, then reset the style."""
        if style.is_plain():
            self.write(text)
            return
        self.set_style(style)
        self.write(text)
        self.reset_style()


# Cursor position report: ESC [ row ; col R
CURSOR_REPORT = re.compile(r'\x1b\[(\d+);(\d+)R')


class TerminalBackend(Backend):
    """ANSI/VT100 backend over a text stream (stdout by default)."""

    def __init__(self, out=None, inp=None):
        self.out = out or sys.stdout
        self.inp = inp or sys.stdin
        self._buffer: list[str] = []
        self._saved_mode = None

    def write(self, text: str):
        self._buffer.append(text)

    def flush(self):
        if self._buffer:
            self.out.write(''.join(self._buffer))
            self._buffer.clear()
        self.out.flush()

    def set_fg(self, color):
        self.write(fg_sequence(color))

    def set_bg(self, color):
        self.write(bg_sequence(color))

    def set_attributes(self, attributes: Attributes):
        self.write(attribute_sequence(attributes))

    def remove_attributes(self, attributes: Attributes):
        self.write(attribute_sequence(attributes, enable=False))

    def reset_style(self):
        self.write("\x1b[0m")

    def move_cursor_to(self, x: int, y: int):
        self.write(f"\x1b[{y + 1};{x + 1}H")

    def move_cursor(self, direction: MoveDirection, n: int = 1):
        if direction is MoveDirection.COLUMN:
            self.write(f"\x1b[{n + 1}G")
            return
        if n == 0:
            return
        code = {
            MoveDirection.UP: 'A',
            MoveDirection.DOWN: 'B',
            MoveDirection.RIGHT: 'C',
            MoveDirection.LEFT: 'D',
            MoveDirection.NEXT_LINE: 'E',
            MoveDirection.PREV_LINE: 'F',
        }[direction]
        self.write(f"\x1b[{n}{code}")

    def get_cursor_pos(self) -> tuple[int, int]:
        """Ask the terminal where the cursor is (ESC [ 6 n)."""
        self.flush()
        if os.name == 'nt':
            raise OSError("cursor position queries are not supported on this platform")

        fd = self.inp.fileno()
        old_settings = None
        if self._saved_mode is None:
            old_settings = termios.tcgetattr(fd)
            tty.setraw(fd)
        try:
            self.out.write("\x1b[6n")
            self.out.flush()
            response = ''
            while True:
                ready, _, _ = select.select([fd], [], [], 2.0)
                if not ready:
                    raise OSError("the terminal did not report the cursor position")
                ch = os.read(fd, 1).decode('ascii', errors='ignore')
                if not ch:
                    raise OSError("input closed while reading the cursor position")
                response += ch
                if ch == 'R':
                    break
        finally:
            if old_settings is not None:
                termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

        match = CURSOR_REPORT.search(response)
        if not match:
            raise OSError(f"could not parse cursor position report {response!r}")
        row, col = int(match.group(1)), int(match.group(2))
        return col - 1, row - 1

    def show_cursor(self):
        self.write("\x1b[?25h")

    def hide_cursor(self):
        self.write("\x1b[?25l")

    def enable_raw_mode(self):
        if os.name == 'nt' or self._saved_mode is not None:
            return
        fd = self.inp.fileno()
        self._saved_mode = termios.tcgetattr(fd)
        tty.setraw(fd)

    def disable_raw_mode(self):
        if os.name == 'nt' or self._saved_mode is None:
            return
        fd = self.inp.fileno()
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_mode)
        finally:
            self._saved_mode = None

    def clear(self, clear_type: ClearType):
        self.write({
            ClearType.ALL: "\x1b[2J",
            ClearType.FROM_CURSOR_DOWN: "\x1b[J",
            ClearType.FROM_CURSOR_UP: "\x1b[1J",
            ClearType.CURRENT_LINE: "\x1b[2K",
            ClearType.UNTIL_NEW_LINE: "\x1b[K",
        }[clear_type])

    def scroll(self, dist: int):
        if dist > 0:
            self.write(f"\x1b[{dist}T")
        elif dist < 0:
            self.write(f"\x1b[{-dist}S")

    def size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self.out.fileno())
            return size.columns, size.lines
        except (OSError, AttributeError, ValueError):
            size = shutil.get_terminal_size((80, 24))
            return size.columns, size.lines
