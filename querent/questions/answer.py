"""
Answers collected from questions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class ListItem:
    """A choice picked from a list: its index in the choices and its text."""
    index: int
    text: str


@dataclass(frozen=True)
class ExpandItem:
    """A choice picked from an expand question: its key and its text."""
    key: str
    text: str


class AnswerKind(Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    LIST_ITEM = "list_item"
    EXPAND_ITEM = "expand_item"
    LIST_ITEMS = "list_items"


@dataclass(frozen=True)
class Answer:
    """A typed answer. Build with the constructors (Answer.int(3), ...)."""
    kind: AnswerKind
    value: Any

    @classmethod
    def string(cls, value: str) -> "Answer":
        return cls(AnswerKind.STRING, value)

    @classmethod
    def int(cls, value: int) -> "Answer":
        return cls(AnswerKind.INT, value)

    @classmethod
    def float(cls, value: float) -> "Answer":
        return cls(AnswerKind.FLOAT, value)

    @classmethod
    def bool(cls, value: bool) -> "Answer":
        return cls(AnswerKind.BOOL, value)

    @classmethod
    def list_item(cls, item: ListItem) -> "Answer":
        return cls(AnswerKind.LIST_ITEM, item)

    @classmethod
    def expand_item(cls, item: ExpandItem) -> "Answer":
        return cls(AnswerKind.EXPAND_ITEM, item)

    @classmethod
    def list_items(cls, items) -> "Answer":
        return cls(AnswerKind.LIST_ITEMS, tuple(items))

    def _expect(self, kind: AnswerKind):
        if self.kind is not kind:
            raise TypeError(f"answer is {self.kind.value}, not {kind.value}")
        return self.value

    def as_string(self) -> str:
        return self._expect(AnswerKind.STRING)

    def as_int(self) -> int:
        return self._expect(AnswerKind.INT)

    def as_float(self) -> float:
        return self._expect(AnswerKind.FLOAT)

    def as_bool(self) -> bool:
        return self._expect(AnswerKind.BOOL)

    def as_list_item(self) -> ListItem:
        return self._expect(AnswerKind.LIST_ITEM)

    def as_expand_item(self) -> ExpandItem:
        return self._expect(AnswerKind.EXPAND_ITEM)

    def as_list_items(self) -> tuple[ListItem, ...]:
        return self._expect(AnswerKind.LIST_ITEMS)

    def to_json(self):
        """Plain JSON-compatible value."""
        if self.kind in (AnswerKind.LIST_ITEM, AnswerKind.EXPAND_ITEM):
            return vars(self.value).copy()
        if self.kind is AnswerKind.LIST_ITEMS:
            return [vars(item).copy() for item in self.value]
        return self.value


class Answers(dict):
    """Answers by question name, in the order they were given."""

    def insert(self, name: str, answer: Answer) -> Answer:
        self[name] = answer
        return answer

    def to_json(self) -> dict:
        return {name: answer.to_json() for name, answer in self.items()}
