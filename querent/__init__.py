"""
querent - Interactive terminal questionnaires.

Ask typed questions on the terminal (text, numbers, passwords, confirmations,
lists, an external editor, or your own prompts) and collect the answers.

Import from submodules directly:
    from querent.questions import Question, prompt
    from querent.config import PromptSettings, load_questions
    from querent.ui import TestBackend, TestEvents
"""

__version__ = "0.1.0"

from .core import Aborted, Eof, Interrupted, PromptError
from .questions import (
    Answer,
    Answers,
    ExpandItem,
    ListItem,
    Question,
    PromptModule,
    Separator,
    DefaultSeparator,
    prompt,
    prompt_with,
    prompt_one,
    prompt_one_with,
)
from .ui import OnEsc

__all__ = [
    "__version__",
    "PromptError",
    "Interrupted",
    "Eof",
    "Aborted",
    "Answer",
    "Answers",
    "ExpandItem",
    "ListItem",
    "Question",
    "PromptModule",
    "Separator",
    "DefaultSeparator",
    "OnEsc",
    "prompt",
    "prompt_with",
    "prompt_one",
    "prompt_one_with",
]
