"""
Question: a name, the shared options and the kind of prompt to show.

Build questions with the classmethods, one per kind:

    Question.input("name", message="What's your name?", default="anon")
    Question.confirm("proceed", default=True)
    Question.select("size", choices=["S", "M", "L"], default=1)

Keyword arguments other than the shared options (message, when,
ask_if_answered, on_esc) go to the kind.
"""

from ..ui.widgets import OnEsc
from .confirm import Confirm
from .custom import Custom, CustomPrompt
from .editor import Editor
from .expand import Expand
from .multi_select import MultiSelect
from .number import Float, Int
from .options import Options
from .order_select import OrderSelect
from .password import Password
from .raw_select import RawSelect
from .select import Select
from .text_input import TextInput


class Question:

    def __init__(self, options: Options, kind):
        self.options = options
        self.kind = kind

    @property
    def name(self) -> str:
        return self.options.name

    def __repr__(self):
        return f"Question({self.name!r}, {type(self.kind).__name__})"

    @classmethod
    def build(cls, kind_class, name: str, message=None, when=True, ask_if_answered: bool = False,
              on_esc=OnEsc.IGNORE, **kwargs) -> "Question":
        options = Options(name, message, when, ask_if_answered, on_esc)
        return cls(options, kind_class(**kwargs))

    @classmethod
    def input(cls, name: str, **kwargs) -> "Question":
        return cls.build(TextInput, name, **kwargs)

    @classmethod
    def int(cls, name: str, **kwargs) -> "Question":
        return cls.build(Int, name, **kwargs)

    @classmethod
    def float(cls, name: str, **kwargs) -> "Question":
        return cls.build(Float, name, **kwargs)

    @classmethod
    def confirm(cls, name: str, **kwargs) -> "Question":
        return cls.build(Confirm, name, **kwargs)

    @classmethod
    def password(cls, name: str, **kwargs) -> "Question":
        return cls.build(Password, name, **kwargs)

    @classmethod
    def editor(cls, name: str, **kwargs) -> "Question":
        return cls.build(Editor, name, **kwargs)

    @classmethod
    def select(cls, name: str, **kwargs) -> "Question":
        return cls.build(Select, name, **kwargs)

    @classmethod
    def raw_select(cls, name: str, **kwargs) -> "Question":
        return cls.build(RawSelect, name, **kwargs)

    @classmethod
    def multi_select(cls, name: str, **kwargs) -> "Question":
        return cls.build(MultiSelect, name, **kwargs)

    @classmethod
    def order_select(cls, name: str, **kwargs) -> "Question":
        return cls.build(OrderSelect, name, **kwargs)

    @classmethod
    def expand(cls, name: str, **kwargs) -> "Question":
        return cls.build(Expand, name, **kwargs)

    @classmethod
    def custom(cls, name: str, prompt: CustomPrompt, message=None, when=True,
               ask_if_answered: bool = False, on_esc=OnEsc.IGNORE) -> "Question":
        return cls(Options(name, message, when, ask_if_answered, on_esc), Custom(prompt))
