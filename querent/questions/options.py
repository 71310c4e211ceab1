"""
Question options shared by every kind: message, when, ask_if_answered, on_esc.
"""

from dataclasses import dataclass
from typing import Any, Callable

from ..ui.widgets import OnEsc
from .answer import Answers


def resolve(getter, answers: Answers):
    """A getter is either a plain value or a function of the answers so far."""
    if callable(getter):
        return getter(answers)
    return getter


def check(validate: Callable | None, value, answers: Answers) -> str | None:
    """
    Run a validate hook.

    Hooks return True when the value is fine, and False or an error message
    otherwise. Returns the error message, or None if valid.
    """
    if validate is None:
        return None
    result = validate(value, answers)
    if result is True or result is None:
        return None
    if result is False:
        return "Invalid input"
    return str(result)


@dataclass
class Options:
    name: str
    message: Any = None
    when: Any = True
    ask_if_answered: bool = False
    on_esc: Any = OnEsc.IGNORE

    def __post_init__(self):
        if not self.name:
            raise ValueError("question name cannot be empty")

    def resolve_message(self, answers: Answers) -> str:
        if self.message is None:
            return f"{self.name}:"
        return str(resolve(self.message, answers))

    def resolve_when(self, answers: Answers) -> bool:
        return bool(resolve(self.when, answers))

    def resolve_on_esc(self, answers: Answers) -> OnEsc:
        return OnEsc(resolve(self.on_esc, answers))
