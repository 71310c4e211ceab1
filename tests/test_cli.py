"""
Tests for the querent command line.

The terminal is swapped for TestBackend/TestEvents so whole questionnaires
run without a tty.
"""

import json
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

import ask
from querent.ui.primitives import KeyCode, KeyEvent, TestBackend, symbols

from tests.conftest import DOWN, ENTER, ESC, keys

QUESTIONNAIRE = [
    {"type": "input", "name": "user", "message": "Your name?"},
    {"type": "select", "name": "size", "choices": ["S", "M", "L"]},
    {"type": "confirm", "name": "extra", "default": False},
]


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def questions_file(temp_dir):
    path = temp_dir / "questions.json"
    path.write_text(json.dumps(QUESTIONNAIRE))
    return path


def run(temp_dir, argv, *events):
    """Run main() against an in-memory terminal. Returns (exit code, backend)."""
    backend = TestBackend((80, 24))
    with patch("ask.TerminalBackend", return_value=backend), \
         patch("ask.TerminalEvents", return_value=keys(*events)):
        code = ask.main([*argv, "--settings", str(temp_dir / "settings.json")])
    return code, backend


class TestMain:
    """Tests for main()."""

    def test_prints_answers_as_json(self, temp_dir, questions_file, capsys):
        code, backend = run(temp_dir, [str(questions_file)], "Ann", ENTER, DOWN, ENTER, ENTER)

        assert code == ask.EXIT_OK
        assert json.loads(capsys.readouterr().out) == {
            "user": "Ann",
            "size": {"index": 1, "text": "M"},
            "extra": False,
        }
        assert backend.line(0) == "✔ Your name? · Ann"

    def test_output_file(self, temp_dir, questions_file, capsys):
        output = temp_dir / "answers.json"
        code, _ = run(temp_dir, [str(questions_file), "--output", str(output)],
                      "Ann", ENTER, ENTER, "y", ENTER)

        assert code == ask.EXIT_OK
        assert capsys.readouterr().out == ""
        assert json.loads(output.read_text())["extra"] is True

    def test_ascii_symbols(self, temp_dir, questions_file):
        code, backend = run(temp_dir, [str(questions_file), "--ascii"], "Ann", ENTER, ENTER, ENTER)

        assert code == ask.EXIT_OK
        assert symbols.current() is symbols.ASCII
        assert backend.line(0) == "? Your name? ~ Ann"

    def test_settings_file_used(self, temp_dir, questions_file):
        (temp_dir / "settings.json").write_text('{"symbol_set": "ascii"}')
        run(temp_dir, [str(questions_file)], "Ann", ENTER, ENTER, ENTER)
        assert symbols.current() is symbols.ASCII

    def test_invalid_settings(self, temp_dir, questions_file, capsys):
        (temp_dir / "settings.json").write_text('{"page_size": 2}')
        code, _ = run(temp_dir, [str(questions_file)])

        assert code == ask.EXIT_FAILED
        assert "Invalid settings" in capsys.readouterr().err

    def test_missing_questionnaire(self, temp_dir, capsys):
        code, _ = run(temp_dir, [str(temp_dir / "missing.json")])

        assert code == ask.EXIT_FAILED
        assert "Could not load" in capsys.readouterr().err

    def test_invalid_questionnaire(self, temp_dir, capsys):
        path = temp_dir / "questions.json"
        path.write_text('[{"type": "slider", "name": "x"}]')
        code, _ = run(temp_dir, [str(path)])

        assert code == ask.EXIT_FAILED
        assert "unknown type" in capsys.readouterr().err

    def test_ctrl_c(self, temp_dir, questions_file, capsys):
        code, _ = run(temp_dir, [str(questions_file)], "An", KeyEvent.ctrl("c"))

        assert code == ask.EXIT_INTERRUPTED
        assert "Cancelled by user." in capsys.readouterr().err

    def test_end_of_input(self, temp_dir, questions_file):
        code, _ = run(temp_dir, [str(questions_file)], KeyEvent.key(KeyCode.NULL))
        assert code == ask.EXIT_FAILED

    def test_aborted(self, temp_dir, capsys):
        path = temp_dir / "questions.json"
        path.write_text('[{"type": "input", "name": "x", "on_esc": "terminate"}]')
        code, _ = run(temp_dir, [str(path)], ESC)

        assert code == ask.EXIT_FAILED
        assert "aborted by the user" in capsys.readouterr().err

    def test_session_log(self, temp_dir, questions_file):
        log_path = temp_dir / "querent.log"
        run(temp_dir, [str(questions_file), "--log", str(log_path)], "Ann", ENTER, ENTER, ENTER)

        text = log_path.read_text()
        assert f"v{ask.__version__}" in text
        assert "loaded 3 question(s)" in text
        assert "answered extra" in text
