"""
The input driver.

Runs one prompt: takes the terminal into raw mode, draws the prompt below
the cursor, feeds it key events until it finishes, and gives the terminal
back however the session ends.
"""

from contextlib import contextmanager
from enum import Enum

from ...core.errors import Aborted, Eof, Interrupted, ValidationError
from ...core.logging import debug_log
from ..components.layout import Layout
from ..components.text import Text
from ..primitives import (
    Backend,
    ClearType,
    EventSource,
    KeyCode,
    KeyModifiers,
    MoveDirection,
    symbols,
)
from ..primitives.colors import RED
from .base import Prompt, Validation


class OnEsc(Enum):
    """What pressing Esc does to a question."""
    IGNORE = "ignore"
    SKIP_QUESTION = "skip_question"
    TERMINATE = "terminate"


class TerminalState:
    """
    Raw mode and cursor visibility for the duration of a prompt.

    Use as a context manager: whatever happens inside, the terminal is
    handed back (raw mode off, cursor visible) on the way out.
    """

    def __init__(self, backend: Backend, hide_cursor: bool = False):
        self.backend = backend
        self.hide_cursor = hide_cursor
        self.enabled = False

    def init(self):
        self.enabled = True
        if self.hide_cursor:
            self.backend.hide_cursor()
        self.backend.enable_raw_mode()

    def reset(self):
        self.enabled = False
        if self.hide_cursor:
            self.backend.show_cursor()
        self.backend.disable_raw_mode()
        self.backend.flush()

    @contextmanager
    def suspended(self):
        """Hand the terminal over to something else (e.g. an editor) for a while."""
        was_enabled = self.enabled
        if was_enabled:
            self.reset()
        try:
            yield
        finally:
            if was_enabled:
                self.init()

    def __enter__(self):
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.enabled:
            self.reset()
        return False


class Input:
    """
    Runs a Prompt against a backend and an event source.

    run() returns the prompt's finished value, or None when Esc skipped the
    question. Ctrl+C raises Interrupted, end of input raises Eof and Esc on a
    terminating question raises Aborted.
    """

    def __init__(self, prompt: Prompt, backend: Backend, on_esc: OnEsc = OnEsc.IGNORE,
                 hide_cursor: bool = False):
        self.prompt = prompt
        self.backend = backend
        self.on_esc = on_esc
        self.terminal = TerminalState(backend, hide_cursor)
        self.base_row = 0
        self.size = (0, 0)

    def layout(self) -> Layout:
        return Layout.new(0, self.size).with_offset(0, self.base_row)

    @contextmanager
    def suspended(self):
        """Leave raw mode while the block runs; redraw afterwards."""
        with self.terminal.suspended():
            yield
        self.base_row = self.backend.get_cursor_pos()[1]

    def adjust_scrollback(self, height: int):
        """Scroll the screen up if `height` rows from base_row don't fit."""
        term_height = self.size[1]
        if self.base_row > term_height - height:
            dist = min(self.base_row + height - term_height, self.base_row)
            self.backend.scroll(-dist)
            self.backend.move_cursor(MoveDirection.UP, dist)
            self.base_row -= dist

    def clear(self):
        self.backend.move_cursor_to(0, self.base_row)
        self.backend.clear(ClearType.FROM_CURSOR_DOWN)

    def flush(self):
        if not self.terminal.hide_cursor:
            x, y = self.prompt.cursor_pos(self.layout())
            self.backend.move_cursor_to(x, y)
        self.backend.flush()

    def render(self):
        self.size = self.backend.size()
        height = self.prompt.height(self.layout())
        self.adjust_scrollback(height)
        self.clear()
        self.prompt.render(self.layout(), self.backend)
        self.flush()

    def goto_last_line(self, height: int):
        """Move to the line just below the prompt."""
        self.adjust_scrollback(height + 1)
        self.backend.move_cursor_to(0, self.base_row + height)

    def print_error(self, message: str):
        """Redraw the prompt with the error message below it."""
        self.size = self.backend.size()
        height = self.prompt.height(self.layout())
        self.adjust_scrollback(height + 1)

        self.clear()
        self.prompt.render(self.layout(), self.backend)
        self.goto_last_line(height)

        self.backend.write_styled(symbols.current().cross, RED)
        self.backend.write(" ")

        error = Text(message)
        error_layout = Layout.new(2, self.size).with_offset(0, self.base_row + height)
        self.adjust_scrollback(height + error.height(error_layout.copy()))
        error_layout = Layout.new(2, self.size).with_offset(0, self.base_row + height)
        error.render(error_layout, self.backend)

        self.flush()

    def exit(self):
        """Leave the prompt on screen and release the terminal."""
        self.size = self.backend.size()
        height = self.prompt.height(self.layout())
        self.goto_last_line(height)
        self.terminal.reset()

    def init(self):
        """First draw; the terminal must already be in raw mode."""
        self.base_row = self.backend.get_cursor_pos()[1]
        self.prompt.session = self
        self.render()

    def run(self, events: EventSource):
        """Process events until the prompt finishes."""
        with self.terminal:
            self.init()
            debug_log(f"prompt started: {type(self.prompt).__name__}")

            while True:
                key = events.next_event()

                if key.code is KeyCode.CHAR and key.char == 'c' and key.has(KeyModifiers.CONTROL):
                    debug_log("prompt interrupted")
                    self.exit()
                    raise Interrupted()

                if key.code is KeyCode.NULL:
                    debug_log("end of input")
                    self.exit()
                    raise Eof()

                if key.code is KeyCode.ESC and self.on_esc is OnEsc.TERMINATE:
                    debug_log("esc: aborting")
                    self.exit()
                    raise Aborted()

                if key.code is KeyCode.ESC and self.on_esc is OnEsc.SKIP_QUESTION:
                    debug_log("esc: question skipped")
                    self.clear()
                    self.terminal.reset()
                    return None

                if key.code is KeyCode.ENTER:
                    try:
                        validation = self.prompt.validate()
                    except ValidationError as e:
                        debug_log(f"validation failed: {e.message}")
                        self.print_error(e.message)
                        continue
                    if validation is Validation.FINISH:
                        self.clear()
                        self.terminal.reset()
                        debug_log("prompt finished")
                        return self.prompt.finish()
                    self.render()
                    continue

                if self.prompt.handle_key(key):
                    self.render()
                elif key.code is KeyCode.ESC and self.prompt.has_default():
                    debug_log("esc: finishing with the default")
                    self.clear()
                    self.terminal.reset()
                    return self.prompt.finish_default()
