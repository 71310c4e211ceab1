"""
Questionnaire files.

A questionnaire is a JSON list of question definitions:

    [
      {"type": "input", "name": "user", "message": "Your name?", "default": "anon"},
      {"type": "confirm", "name": "admin", "default": false},
      {"type": "select", "name": "size", "choices": ["S", {"separator": null}, "L"]},
      {"type": "int", "name": "count", "when": {"question": "admin", "equals": true}}
    ]

Every definition needs a type and a name. "message", "ask_if_answered" and
"on_esc" ("ignore", "skip_question" or "terminate") are optional, and "when"
is either a boolean or a condition on an earlier answer. The remaining keys
are passed to the question kind.
"""

import json
from pathlib import Path

from ..questions import Answers, DefaultSeparator, Question, Separator
from ..ui.widgets import OnEsc
from .settings import PromptSettings

QUESTION_TYPES = {
    "input": Question.input,
    "int": Question.int,
    "float": Question.float,
    "confirm": Question.confirm,
    "password": Question.password,
    "editor": Question.editor,
    "select": Question.select,
    "raw_select": Question.raw_select,
    "multi_select": Question.multi_select,
    "order_select": Question.order_select,
    "expand": Question.expand,
}

LIST_TYPES = {"select", "raw_select", "multi_select", "order_select", "expand"}

# Keys the kinds accept from a file (hooks can't be written in JSON)
KIND_KEYS = {
    "input": {"default"},
    "int": {"default"},
    "float": {"default"},
    "confirm": {"default"},
    "password": {"mask"},
    "editor": {"default", "extension", "editor"},
    "select": {"choices", "default", "page_size", "should_loop"},
    "raw_select": {"choices", "default", "page_size", "should_loop"},
    "multi_select": {"choices", "default", "page_size", "should_loop"},
    "order_select": {"choices", "page_size", "should_loop"},
    "expand": {"choices", "default", "page_size", "should_loop"},
}


def parse_choice(item, expand: bool = False):
    """A choice from JSON: a plain value, {"separator": text} or {"key": k, "text": t}."""
    if isinstance(item, dict):
        if "separator" in item:
            text = item["separator"]
            return DefaultSeparator() if text is None else Separator(text)
        if expand and "key" in item:
            return item["key"], item.get("text", "")
        raise ValueError(f"unrecognized choice: {item!r}")
    return item


def parse_when(when, name: str):
    """A `when` value: a boolean, or {"question": name, "equals": value}."""
    if isinstance(when, bool):
        return when
    if isinstance(when, dict) and "question" in when:
        other = when["question"]
        if "equals" in when:
            expected = when["equals"]

            def condition(answers: Answers) -> bool:
                return other in answers and answers[other].to_json() == expected
        else:
            def condition(answers: Answers) -> bool:
                return other in answers
        return condition
    raise ValueError(f"question {name!r}: invalid when condition {when!r}")


def parse_question(data: dict, settings: PromptSettings | None = None) -> Question:
    """Turn one question definition into a Question."""
    if not isinstance(data, dict):
        raise ValueError(f"question definitions must be objects, got {data!r}")

    kind = data.get("type")
    name = data.get("name")
    if kind not in QUESTION_TYPES:
        raise ValueError(f"question {name!r}: unknown type {kind!r}")
    if not name:
        raise ValueError("every question needs a name")

    kwargs = {}
    if kind in LIST_TYPES and settings is not None:
        kwargs.update(settings.list_options())

    for key, value in data.items():
        if key in ("type", "name"):
            continue
        if key == "message":
            kwargs["message"] = value
        elif key == "ask_if_answered":
            kwargs["ask_if_answered"] = bool(value)
        elif key == "on_esc":
            kwargs["on_esc"] = OnEsc(value)
        elif key == "when":
            kwargs["when"] = parse_when(value, name)
        elif key == "choices" and kind in LIST_TYPES:
            kwargs["choices"] = [parse_choice(c, expand=kind == "expand") for c in value]
        elif key in KIND_KEYS[kind]:
            kwargs[key] = value
        else:
            raise ValueError(f"question {name!r}: unknown option {key!r} for {kind}")

    return QUESTION_TYPES[kind](name, **kwargs)


def load_questions(source, settings: PromptSettings | None = None) -> list[Question]:
    """
    Load questions from a JSON file path or an already-parsed list.

    Raises:
        ValueError: The file isn't valid JSON or a definition is invalid
        OSError: The file can't be read
    """
    if isinstance(source, (str, Path)):
        with open(source, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"{source}: invalid JSON: {e}") from None
    else:
        data = source

    if not isinstance(data, list):
        raise ValueError("a questionnaire must be a list of questions")
    return [parse_question(item, settings) for item in data]
