"""
Asking a sequence of questions.

Questions are taken from the iterable one at a time, so a generator can
decide what to ask next from the answers given so far.
"""

from typing import Iterable

from ..core.logging import debug_log
from ..ui.primitives import Backend, EventSource, TerminalBackend, TerminalEvents
from .answer import Answer, Answers
from .question import Question


class PromptModule:
    """
    Questions plus the answers collected so far.

    Answers given up front (with_answers) count as answered: those questions
    are skipped unless they set ask_if_answered.
    """

    def __init__(self, questions: Iterable[Question], answers: Answers | None = None):
        self.questions = iter(questions)
        self.answers = answers if answers is not None else Answers()

    def with_answers(self, answers: Answers) -> "PromptModule":
        self.answers = answers
        return self

    def ask_question(self, question: Question, backend: Backend,
                     events: EventSource) -> Answer | None:
        """Ask one question. Returns None if it was skipped."""
        options = question.options
        answers = self.answers

        if not options.resolve_when(answers):
            debug_log(f"skipping {question.name}: condition not met")
            return None
        if question.name in answers and not options.ask_if_answered:
            debug_log(f"skipping {question.name}: already answered")
            return None

        message = options.resolve_message(answers)
        on_esc = options.resolve_on_esc(answers)
        answer = question.kind.ask(message, answers, backend, events, on_esc)
        if answer is None:
            debug_log(f"skipping {question.name}: esc pressed")
            return None

        debug_log(f"answered {question.name}")
        return answers.insert(question.name, answer)

    def prompt_with(self, backend: Backend, events: EventSource) -> tuple[str, Answer] | None:
        """Ask until a question is answered. Returns (name, answer), or None when none are left."""
        for question in self.questions:
            answer = self.ask_question(question, backend, events)
            if answer is not None:
                return question.name, answer
        return None

    def prompt_all_with(self, backend: Backend, events: EventSource) -> Answers:
        while self.prompt_with(backend, events) is not None:
            pass
        return self.answers

    def prompt(self) -> tuple[str, Answer] | None:
        return self.prompt_with(TerminalBackend(), TerminalEvents())

    def prompt_all(self) -> Answers:
        return self.prompt_all_with(TerminalBackend(), TerminalEvents())


def prompt_with(questions: Iterable[Question], backend: Backend, events: EventSource) -> Answers:
    """Ask all questions and return the answers."""
    return PromptModule(questions).prompt_all_with(backend, events)


def prompt(questions: Iterable[Question]) -> Answers:
    """Ask all questions on the terminal."""
    return prompt_with(questions, TerminalBackend(), TerminalEvents())


def prompt_one_with(question: Question, backend: Backend, events: EventSource) -> Answer | None:
    """Ask a single question. Returns None if it was skipped."""
    return PromptModule([question]).ask_question(question, backend, events)


def prompt_one(question: Question) -> Answer | None:
    return prompt_one_with(question, TerminalBackend(), TerminalEvents())
