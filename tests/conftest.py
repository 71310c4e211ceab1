"""Pytest configuration and shared fixtures."""

import pytest

from querent.core import stop_session_log
from querent.questions import Answers
from querent.ui.primitives import KeyCode, KeyEvent, TestBackend, TestEvents, symbols


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "terminal: tests that need a real terminal (skipped in CI)"
    )


@pytest.fixture(autouse=True)
def unicode_symbols():
    """Every test starts with the unicode symbol set and no session log."""
    previous = symbols.set_symbols(symbols.UNICODE)
    yield
    symbols.set_symbols(previous)
    stop_session_log()


@pytest.fixture
def backend():
    """An 80x24 in-memory terminal with the cursor at the top left."""
    return TestBackend((80, 24))


@pytest.fixture
def answers():
    return Answers()


# ---------------------------------------------------------------------------
# Key event builders (functions, not fixtures)
# ---------------------------------------------------------------------------

def key_events(*items) -> list[KeyEvent]:
    """
    Build key events from a mix of strings, key codes and events.

    Strings are typed one character at a time, KeyCodes become plain key
    presses and KeyEvents are used as they are.
    """
    events = []
    for item in items:
        if isinstance(item, str):
            events.extend(KeyEvent.from_char(ch) for ch in item)
        elif isinstance(item, KeyCode):
            events.append(KeyEvent.key(item))
        else:
            events.append(item)
    return events


def keys(*items) -> TestEvents:
    """TestEvents replaying key_events(*items)."""
    return TestEvents(key_events(*items))


ENTER = KeyCode.ENTER
ESC = KeyCode.ESC
TAB = KeyCode.TAB
UP = KeyCode.UP
DOWN = KeyCode.DOWN
LEFT = KeyCode.LEFT
RIGHT = KeyCode.RIGHT
BACKSPACE = KeyCode.BACKSPACE
PAGE_UP = KeyCode.PAGE_UP
PAGE_DOWN = KeyCode.PAGE_DOWN
HOME = KeyCode.HOME
END = KeyCode.END
