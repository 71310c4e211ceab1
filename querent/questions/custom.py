"""
User-defined prompts.

Subclass CustomPrompt to ask something the built-in kinds don't cover. The
prompt gets the backend and event source directly and can use the widgets
and the input driver in querent.ui the same way the built-in kinds do.
"""

from abc import ABC, abstractmethod

from ..ui.primitives import Backend, EventSource
from ..ui.widgets import OnEsc
from .answer import Answer, Answers


class CustomPrompt(ABC):
    """A question with its own interaction."""

    @abstractmethod
    def ask(self, message: str, answers: Answers, backend: Backend,
            events: EventSource, on_esc: OnEsc) -> Answer | None:
        """
        Ask the question and return its answer.

        on_esc is the resolved Esc behaviour of the question. Return None to
        skip the question or raise Aborted to end the questionnaire.
        """


class Custom:
    """Question kind that hands the whole interaction to a CustomPrompt."""

    def __init__(self, prompt: CustomPrompt):
        if not isinstance(prompt, CustomPrompt):
            raise TypeError("custom questions need a CustomPrompt")
        self.prompt = prompt

    def ask(self, message: str, answers: Answers, backend: Backend, events: EventSource,
            on_esc: OnEsc = OnEsc.IGNORE) -> Answer | None:
        return self.prompt.ask(message, answers, backend, events, on_esc)
