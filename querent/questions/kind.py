"""
Base class for question kinds.

A kind builds the prompt widget for one question, runs it through the
input driver, then replaces it on screen with the one-line summary.
"""

from abc import ABC, abstractmethod

from ..ui.components import Layout, PromptHeader, Widget, write_finished_message
from ..ui.primitives import Backend, EventSource, KeyEvent
from ..ui.widgets import Input, OnEsc, Prompt, Select
from .answer import Answer, Answers


class LinePrompt(Prompt):
    """A header with an input widget continuing on the same line."""

    def __init__(self, header: PromptHeader, input_widget: Widget):
        self.header = header
        self.input = input_widget

    def height(self, layout: Layout) -> int:
        return self.header.height(layout) + self.input.height(layout) - 1

    def render(self, layout: Layout, backend: Backend):
        self.header.render(layout, backend)
        self.input.render(layout, backend)

    def cursor_pos(self, layout: Layout) -> tuple[int, int]:
        layout = layout.copy()
        self.header.height(layout)
        return self.input.cursor_pos(layout)

    def handle_key(self, key: KeyEvent) -> bool:
        return self.input.handle_key(key)


class ListPrompt(Prompt):
    """A header with a select list below it."""

    def __init__(self, header: PromptHeader, select: Select):
        self.header = header
        self.select = select

    def height(self, layout: Layout) -> int:
        return self.header.height(layout) + self.select.height(layout) - 1

    def render(self, layout: Layout, backend: Backend):
        self.header.render(layout, backend)
        self.select.render(layout, backend)

    def cursor_pos(self, layout: Layout) -> tuple[int, int]:
        return self.header.cursor_pos(layout)

    def handle_key(self, key: KeyEvent) -> bool:
        return self.select.handle_key(key)


class QuestionKind(ABC):
    """Kind-specific configuration and hooks of a question."""

    # Hide the terminal cursor while the prompt runs (list questions)
    hide_cursor = False

    # transform(value, answers, backend) replaces the default answer summary
    transform = None

    @abstractmethod
    def build_prompt(self, message: str, answers: Answers) -> Prompt:
        ...

    @abstractmethod
    def to_answer(self, value) -> Answer:
        ...

    @abstractmethod
    def write_answer(self, value, backend: Backend):
        """Default rendering of the answer on the summary line."""

    def ask(self, message: str, answers: Answers, backend: Backend, events: EventSource,
            on_esc: OnEsc = OnEsc.IGNORE) -> Answer | None:
        """Run the question. Returns None if the user skipped it with Esc."""
        prompt = self.build_prompt(message, answers)
        try:
            value = Input(prompt, backend, on_esc, hide_cursor=self.hide_cursor).run(events)
        finally:
            prompt.close()

        if value is None:
            write_finished_message(backend, message, skipped=True)
            backend.flush()
            return None

        write_finished_message(backend, message)
        if self.transform is not None:
            self.transform(value, answers, backend)
        else:
            self.write_answer(value, backend)
        backend.write("\n")
        backend.flush()
        return self.to_answer(value)
