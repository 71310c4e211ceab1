"""
Error types for querent.

Everything a prompt session can fail with, except I/O problems which surface as
the builtin OSError.
"""


class PromptError(Exception):
    """Base class for errors that end a prompt session."""
    pass


class Interrupted(PromptError):
    """Raised when the user presses Ctrl+C."""

    def __init__(self, message: str = "interrupted by the user"):
        super().__init__(message)


class Eof(PromptError):
    """Raised when the event source runs out of input."""

    def __init__(self, message: str = "end of input reached"):
        super().__init__(message)


class Aborted(PromptError):
    """Raised when Esc is pressed on a question configured to terminate."""

    def __init__(self, message: str = "aborted by the user"):
        super().__init__(message)


class FormatError(PromptError):
    """Raised when there is not enough room on screen to render a widget."""

    def __init__(self, message: str = "not enough space to render"):
        super().__init__(message)


class ValidationError(Exception):
    """
    A recoverable validation failure.

    Raised from Prompt.validate(); the input driver catches it and shows the
    message below the prompt instead of finishing.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
