"""
Keyboard input handling for querent.

Decodes raw terminal input into KeyEvent values. TerminalEvents reads the
real keyboard; TestEvents replays a fixed list of keys.
"""

import codecs
import os
import re
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntFlag

# Platform-specific imports
if os.name == 'nt':
    import msvcrt
else:
    import fcntl
    import select


class KeyCode(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    ESC = "esc"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    BACK_TAB = "back_tab"
    DELETE = "delete"
    INSERT = "insert"
    F = "f"
    NULL = "null"


class KeyModifiers(IntFlag):
    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


@dataclass(frozen=True)
class KeyEvent:
    """
    A single key press.

    For KeyCode.CHAR, `char` holds the character; for KeyCode.F, `number`
    holds the function key number (1-12).
    """
    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    char: str | None = None
    number: int | None = None

    @classmethod
    def key(cls, code: KeyCode, modifiers: KeyModifiers = KeyModifiers.NONE) -> "KeyEvent":
        return cls(code, modifiers)

    @classmethod
    def from_char(cls, ch: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> "KeyEvent":
        return cls(KeyCode.CHAR, modifiers, char=ch)

    @classmethod
    def ctrl(cls, ch: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, KeyModifiers.CONTROL, char=ch)

    @classmethod
    def alt(cls, ch: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, KeyModifiers.ALT, char=ch)

    @classmethod
    def function(cls, number: int, modifiers: KeyModifiers = KeyModifiers.NONE) -> "KeyEvent":
        return cls(KeyCode.F, modifiers, number=number)

    def is_char(self, ch: str | None = None) -> bool:
        """True for a character key, optionally a specific one."""
        if self.code is not KeyCode.CHAR:
            return False
        return ch is None or self.char == ch

    def has(self, modifiers: KeyModifiers) -> bool:
        return bool(self.modifiers & modifiers)

    def is_plain_char(self) -> bool:
        """A character typed without Ctrl or Alt held."""
        return self.is_char() and not self.has(KeyModifiers.CONTROL | KeyModifiers.ALT)


# Escape sequences (after ESC) -> key codes. Modifier parameters are parsed separately.
UNIX_ESCAPE_CODES = {
    'A': KeyCode.UP,
    'B': KeyCode.DOWN,
    'C': KeyCode.RIGHT,
    'D': KeyCode.LEFT,
    'H': KeyCode.HOME,
    'F': KeyCode.END,
    'Z': KeyCode.BACK_TAB,
}

# CSI <number> ~ sequences
UNIX_TILDE_CODES = {
    1: KeyCode.HOME,
    2: KeyCode.INSERT,
    3: KeyCode.DELETE,
    4: KeyCode.END,
    5: KeyCode.PAGE_UP,
    6: KeyCode.PAGE_DOWN,
    7: KeyCode.HOME,
    8: KeyCode.END,
}

# CSI <number> ~ function keys
UNIX_FUNCTION_CODES = {
    11: 1, 12: 2, 13: 3, 14: 4,
    15: 5, 17: 6, 18: 7, 19: 8,
    20: 9, 21: 10, 23: 11, 24: 12,
}

# SS3 (ESC O) function keys
SS3_FUNCTION_CODES = {
    'P': 1,
    'Q': 2,
    'R': 3,
    'S': 4,
}

# Special character mappings
UNIX_SPECIAL_CHARS = {
    '\r': KeyCode.ENTER,
    '\n': KeyCode.ENTER,
    '\x7f': KeyCode.BACKSPACE,
    '\x08': KeyCode.BACKSPACE,
    '\t': KeyCode.TAB,
}

WINDOWS_KEY_CODES = {
    b'H': KeyCode.UP,
    b'P': KeyCode.DOWN,
    b'K': KeyCode.LEFT,
    b'M': KeyCode.RIGHT,
    b'G': KeyCode.HOME,
    b'O': KeyCode.END,
    b'I': KeyCode.PAGE_UP,
    b'Q': KeyCode.PAGE_DOWN,
    b'R': KeyCode.INSERT,
    b'S': KeyCode.DELETE,
}

# Ctrl+arrow on Windows arrives with its own codes
WINDOWS_CTRL_KEY_CODES = {
    b's': KeyCode.LEFT,
    b't': KeyCode.RIGHT,
    b'w': KeyCode.HOME,
    b'u': KeyCode.END,
}

WINDOWS_SPECIAL_CHARS = {
    b'\r': KeyCode.ENTER,
    b'\x08': KeyCode.BACKSPACE,
    b'\t': KeyCode.TAB,
}

CSI_PATTERN = re.compile(r'\[(\d*)(?:;(\d+))?([A-Za-z~])')


def _modifiers_from_param(param: str | None) -> KeyModifiers:
    """Decode the xterm modifier parameter (1 + bitmask of shift/alt/ctrl)."""
    if not param:
        return KeyModifiers.NONE
    mask = int(param) - 1
    modifiers = KeyModifiers.NONE
    if mask & 1:
        modifiers |= KeyModifiers.SHIFT
    if mask & 2:
        modifiers |= KeyModifiers.ALT
    if mask & 4:
        modifiers |= KeyModifiers.CONTROL
    return modifiers


def decode_char(ch: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> KeyEvent:
    """Decode a single (non-escape) character into a key event."""
    if ch in UNIX_SPECIAL_CHARS:
        return KeyEvent(UNIX_SPECIAL_CHARS[ch], modifiers)
    code = ord(ch)
    if code == 0:
        return KeyEvent.from_char(' ', modifiers | KeyModifiers.CONTROL)
    if 1 <= code <= 26:
        return KeyEvent.from_char(chr(code + 96), modifiers | KeyModifiers.CONTROL)
    if 28 <= code <= 31:
        return KeyEvent.from_char(chr(code + 24), modifiers | KeyModifiers.CONTROL)
    return KeyEvent.from_char(ch, modifiers)


def decode_escape_sequence(extra: str) -> tuple[KeyEvent | None, str]:
    """
    Decode the characters that followed an ESC.

    Returns the decoded event (None for unrecognised sequences) and whatever
    input was left over after the sequence.
    """
    if not extra:
        return KeyEvent(KeyCode.ESC), ''

    if extra[0] == 'O' and len(extra) >= 2:
        ch = extra[1]
        if ch in SS3_FUNCTION_CODES:
            return KeyEvent.function(SS3_FUNCTION_CODES[ch]), extra[2:]
        if ch in UNIX_ESCAPE_CODES:
            return KeyEvent(UNIX_ESCAPE_CODES[ch]), extra[2:]
        return None, extra[2:]

    if extra[0] == '[':
        match = CSI_PATTERN.match(extra)
        if not match:
            return None, ''
        number, param, final = match.groups()
        rest = extra[match.end():]
        modifiers = _modifiers_from_param(param)
        if final == '~':
            n = int(number) if number else 0
            if n in UNIX_TILDE_CODES:
                return KeyEvent(UNIX_TILDE_CODES[n], modifiers), rest
            if n in UNIX_FUNCTION_CODES:
                return KeyEvent.function(UNIX_FUNCTION_CODES[n], modifiers), rest
            return None, rest
        if final in SS3_FUNCTION_CODES:
            return KeyEvent.function(SS3_FUNCTION_CODES[final], modifiers), rest
        if final in UNIX_ESCAPE_CODES:
            code = UNIX_ESCAPE_CODES[final]
            if code is KeyCode.BACK_TAB:
                modifiers |= KeyModifiers.SHIFT
            return KeyEvent(code, modifiers), rest
        return None, rest

    # ESC followed by a plain key is that key with Alt held
    if extra[0] == '\x1b':
        return KeyEvent(KeyCode.ESC, KeyModifiers.ALT), extra[1:]
    return decode_char(extra[0], KeyModifiers.ALT), extra[1:]


def read_escape_sequence(fd: int) -> str:
    """
    Read remaining characters of an escape sequence after ESC was detected.

    Call this after reading \\x1b to get the full sequence.
    Returns the extra characters (not including the initial ESC).
    Unix only - Windows handles escape sequences differently.
    """
    if os.name == 'nt':
        return ''

    # Set non-blocking mode temporarily
    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
    try:
        # Wait for escape sequence bytes (returns immediately if already available)
        select.select([fd], [], [], 0.005)
        # Read any immediately available bytes
        try:
            extra = os.read(fd, 32)
        except (IOError, BlockingIOError):
            extra = b''
        return extra.decode('utf-8', errors='ignore')
    finally:
        fcntl.fcntl(fd, fcntl.F_SETFL, flags)


class EventSource(ABC):
    """Blocking source of key events."""

    @abstractmethod
    def next_event(self) -> KeyEvent:
        """Block until the next key press and return it."""

    def __iter__(self):
        return self

    def __next__(self) -> KeyEvent:
        return self.next_event()


class TerminalEvents(EventSource):
    """
    Key events read from the terminal.

    Expects the terminal to already be in raw mode (the input driver
    enables it); end of input is reported as KeyCode.NULL.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self._pending = ''
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')

    def _read_char(self, fd: int) -> str:
        """Read one complete character, or '' at end of input."""
        while True:
            data = os.read(fd, 1)
            if not data:
                return ''
            ch = self._decoder.decode(data)
            if ch:
                return ch

    def next_event(self) -> KeyEvent:
        if os.name == 'nt':
            return self._next_windows_event()

        fd = self.stream.fileno()
        while True:
            if self._pending:
                ch, self._pending = self._pending[0], self._pending[1:]
            else:
                ch = self._read_char(fd)
                if not ch:
                    return KeyEvent(KeyCode.NULL)

            if ch != '\x1b':
                return decode_char(ch)

            extra = self._pending or read_escape_sequence(fd)
            self._pending = ''
            event, self._pending = decode_escape_sequence(extra)
            if event is not None:
                return event
            # Unknown escape sequence, keep reading

    def _next_windows_event(self) -> KeyEvent:
        while True:
            ch = msvcrt.getwch()

            # Arrow/page keys send two characters: 0xe0 or 0x00 followed by key code
            if ch in ('\xe0', '\x00'):
                key_code = msvcrt.getwch().encode('latin-1', errors='ignore')
                if key_code in WINDOWS_KEY_CODES:
                    return KeyEvent(WINDOWS_KEY_CODES[key_code])
                if key_code in WINDOWS_CTRL_KEY_CODES:
                    return KeyEvent(WINDOWS_CTRL_KEY_CODES[key_code], KeyModifiers.CONTROL)
                continue

            if ch == '\x1b':
                return KeyEvent(KeyCode.ESC)

            raw = ch.encode('latin-1', errors='ignore')
            if raw in WINDOWS_SPECIAL_CHARS:
                return KeyEvent(WINDOWS_SPECIAL_CHARS[raw])

            if ch == '\x1a':
                # Ctrl+Z is end of input on Windows consoles
                return KeyEvent(KeyCode.NULL)

            return decode_char(ch)


class TestEvents(EventSource):
    """Replays a fixed sequence of key events."""

    __test__ = False  # not a pytest test class

    def __init__(self, events):
        self._events = list(events)
        self._position = 0

    def next_event(self) -> KeyEvent:
        if self._position >= len(self._events):
            raise RuntimeError("ran out of test events")
        event = self._events[self._position]
        self._position += 1
        return event

    @property
    def remaining(self) -> int:
        return len(self._events) - self._position
