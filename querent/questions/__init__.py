"""
Questions and answers.

Question kinds, the choices of list questions, typed answers and the
PromptModule that asks a sequence of questions.
"""

from .answer import Answer, AnswerKind, Answers, ExpandItem, ListItem
from .choice import Choice, Separator, DefaultSeparator, ChoiceList
from .options import Options
from .kind import QuestionKind
from .confirm import Confirm
from .text_input import TextInput
from .number import Int, Float
from .password import Password
from .editor import Editor
from .select import Select
from .raw_select import RawSelect
from .multi_select import MultiSelect
from .order_select import OrderSelect
from .expand import Expand, ExpandChoice
from .custom import Custom, CustomPrompt
from .question import Question
from .prompt_module import (
    PromptModule,
    prompt,
    prompt_with,
    prompt_one,
    prompt_one_with,
)

__all__ = [
    # Answers
    "Answer",
    "AnswerKind",
    "Answers",
    "ExpandItem",
    "ListItem",
    # Choices
    "Choice",
    "Separator",
    "DefaultSeparator",
    "ChoiceList",
    # Kinds
    "Options",
    "QuestionKind",
    "Confirm",
    "TextInput",
    "Int",
    "Float",
    "Password",
    "Editor",
    "Select",
    "RawSelect",
    "MultiSelect",
    "OrderSelect",
    "Expand",
    "ExpandChoice",
    "Custom",
    "CustomPrompt",
    # Asking
    "Question",
    "PromptModule",
    "prompt",
    "prompt_with",
    "prompt_one",
    "prompt_one_with",
]
