"""
Editor question: the answer is written in the user's own text editor.

Enter hands the terminal to $VISUAL (or $EDITOR, or a platform default)
opened on a temporary file, and reads the file back once the editor exits.
"""

import os
import shlex
import subprocess
import sys
import tempfile

from ..core.errors import ValidationError
from ..core.logging import debug_log
from ..ui.components import Delimiter, Layout, PromptHeader
from ..ui.primitives import Backend
from ..ui.primitives.colors import MUTED
from ..ui.widgets import Prompt, Validation
from .answer import Answer, Answers
from .kind import QuestionKind
from .options import check

EDITOR_HINT = "Press <enter> to launch your preferred editor."


def get_editor() -> list[str]:
    """Editor command from the environment, split into arguments."""
    editor = os.environ.get("VISUAL") or os.environ.get("EDITOR")
    if not editor:
        editor = "notepad" if sys.platform == "win32" else "vim"
    return shlex.split(editor, posix=sys.platform != "win32")


class EditorPrompt(Prompt):

    def __init__(self, message: str, question: "Editor", answers: Answers):
        self.header = PromptHeader(message, hint=EDITOR_HINT, delimiter=Delimiter.NONE)
        self.question = question
        self.answers = answers
        self.path: str | None = None
        self.value = ""

    def _create_file(self) -> str:
        fd, path = tempfile.mkstemp(suffix=self.question.extension or "", prefix="querent-")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(self.question.default or "")
        return path

    def height(self, layout: Layout) -> int:
        return self.header.height(layout)

    def render(self, layout: Layout, backend: Backend):
        self.header.render(layout, backend)

    def cursor_pos(self, layout: Layout) -> tuple[int, int]:
        return self.header.cursor_pos(layout)

    def open_editor(self):
        """Run the editor on the answer file. Raises ValidationError if it fails."""
        if self.path is None:
            self.path = self._create_file()

        command = self.question.editor or get_editor()
        debug_log(f"launching editor: {' '.join(command)}")
        try:
            with self.session.suspended():
                result = subprocess.run([*command, self.path])
        except OSError as e:
            debug_log(f"editor failed: {e}")
            raise ValidationError("Could not open editor") from None
        if result.returncode != 0:
            debug_log(f"editor exited with {result.returncode}")
            raise ValidationError("Could not open editor")

        with open(self.path, encoding="utf-8") as f:
            self.value = f.read()

    def validate(self) -> Validation:
        self.open_editor()
        error = check(self.question.validate, self.value, self.answers)
        if error is not None:
            raise ValidationError(error)
        return Validation.FINISH

    def finish(self) -> str:
        if self.question.filter is not None:
            return self.question.filter(self.value, self.answers)
        return self.value

    def close(self):
        if self.path is not None:
            try:
                os.remove(self.path)
            except FileNotFoundError:
                pass
            self.path = None


class Editor(QuestionKind):
    """
    Multi-line text written in an external editor.

    Args:
        default: Initial contents of the file
        extension: Suffix of the temporary file (e.g. ".md"), so editors pick a syntax
        editor: Command to run instead of the one from the environment
        validate: validate(text, answers) -> True, False or an error message
        filter: filter(text, answers) -> the text to store
        transform: transform(text, answers, backend) writes the answer summary
    """

    def __init__(self, default: str | None = None, extension: str | None = None,
                 editor: str | list[str] | None = None, validate=None, filter=None, transform=None):
        self.default = default
        self.extension = extension
        if isinstance(editor, str):
            editor = shlex.split(editor)
        self.editor = editor
        self.validate = validate
        self.filter = filter
        self.transform = transform

    def build_prompt(self, message: str, answers: Answers) -> EditorPrompt:
        return EditorPrompt(message, self, answers)

    def to_answer(self, value: str) -> Answer:
        return Answer.string(value)

    def write_answer(self, value: str, backend: Backend):
        backend.write_styled("Received", MUTED)
