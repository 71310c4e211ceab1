"""
Base class for prompts driven by the input loop.
"""

from enum import Enum

from ..components.widget import Widget


class Validation(Enum):
    """What Enter should do."""
    FINISH = "finish"
    CONTINUE = "continue"


class Prompt(Widget):
    """
    A widget that produces a value.

    The input driver calls validate() on Enter. It returns FINISH to end the
    prompt (the driver then calls finish()), CONTINUE to keep going (the
    prompt changed state, e.g. expanded a list), or raises ValidationError
    to show a message and keep going.
    """

    # Set by the input driver while the prompt runs
    session = None

    def validate(self) -> Validation:
        return Validation.FINISH

    def finish(self):
        raise NotImplementedError

    def has_default(self) -> bool:
        """Whether Esc can finish the prompt with a default."""
        return False

    def finish_default(self):
        """The value to finish with when Esc picks the default."""
        raise NotImplementedError

    def close(self):
        """Release anything the prompt holds once the question is over."""
