"""
Navigation intents derived from key presses.
"""

from enum import Enum

from .keyboard_input import KeyCode, KeyEvent, KeyModifiers


class Movement(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    NEXT_WORD = "next_word"
    PREV_WORD = "prev_word"

    @classmethod
    def from_key(cls, key: KeyEvent) -> "Movement | None":
        """
        Map a key press to a movement, or None if it isn't one.

        Vim-style letters (h/j/k/l, g/G) count as movements here; widgets that
        accept text check for character input before asking for a movement.
        """
        word_modifiers = KeyModifiers.CONTROL | KeyModifiers.ALT
        ctrl = key.has(KeyModifiers.CONTROL)
        alt = key.has(KeyModifiers.ALT)

        if key.code is KeyCode.LEFT:
            return cls.PREV_WORD if key.has(word_modifiers) else cls.LEFT
        if key.code is KeyCode.RIGHT:
            return cls.NEXT_WORD if key.has(word_modifiers) else cls.RIGHT
        if key.code is KeyCode.UP:
            return cls.UP
        if key.code is KeyCode.DOWN:
            return cls.DOWN
        if key.code is KeyCode.PAGE_UP:
            return cls.PAGE_UP
        if key.code is KeyCode.PAGE_DOWN:
            return cls.PAGE_DOWN
        if key.code is KeyCode.HOME:
            return cls.HOME
        if key.code is KeyCode.END:
            return cls.END
        if key.code is not KeyCode.CHAR:
            return None

        ch = key.char
        if alt and ch == 'b':
            return cls.PREV_WORD
        if alt and ch == 'f':
            return cls.NEXT_WORD
        if ctrl:
            return CTRL_MOVEMENTS.get(ch)
        return CHAR_MOVEMENTS.get(ch)


CHAR_MOVEMENTS = {
    'k': Movement.UP,
    'j': Movement.DOWN,
    'h': Movement.LEFT,
    'l': Movement.RIGHT,
    'g': Movement.HOME,
    'G': Movement.END,
}

CTRL_MOVEMENTS = {
    'b': Movement.LEFT,
    'f': Movement.RIGHT,
    'a': Movement.HOME,
    'e': Movement.END,
}
