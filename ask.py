#!/usr/bin/env python3
"""
querent - Ask the questions of a questionnaire file on the terminal.

Reads a JSON list of question definitions, asks them one by one and prints
the answers as JSON (or writes them to --output).
"""

import argparse
import json
import sys
from pathlib import Path

from querent import __version__
from querent.config import PromptSettings, load_questions
from querent.core import Aborted, Eof, Interrupted, start_session_log, stop_session_log, debug_log
from querent.questions import PromptModule
from querent.ui import TerminalBackend, TerminalEvents

DEFAULT_SETTINGS_PATH = Path.home() / ".querent" / "settings.json"

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="querent - Ask the questions of a questionnaire file"
    )
    parser.add_argument("questions", type=Path, help="JSON file with the question definitions")
    parser.add_argument("--settings", type=Path, default=DEFAULT_SETTINGS_PATH,
                        help=f"settings file (default: {DEFAULT_SETTINGS_PATH})")
    parser.add_argument("--ascii", action="store_true", help="draw with ASCII symbols only")
    parser.add_argument("--log", type=Path, help="append a session log to this file")
    parser.add_argument("--output", type=Path, help="write the answers here instead of stdout")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def write_answers(answers: dict, output: Path | None):
    text = json.dumps(answers, indent=2, ensure_ascii=False)
    if output is None:
        print(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")


def main(argv=None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)

    settings = PromptSettings.load(args.settings)
    if args.ascii:
        settings.symbol_set = "ascii"
    try:
        settings.validate()
        settings.apply()
    except ValueError as e:
        print(f"Invalid settings in {args.settings}: {e}", file=sys.stderr)
        return EXIT_FAILED

    log_path = args.log or settings.log_path
    if log_path:
        start_session_log(Path(log_path), version=__version__)

    try:
        try:
            questions = load_questions(args.questions, settings)
        except (OSError, ValueError) as e:
            print(f"Could not load {args.questions}: {e}", file=sys.stderr)
            return EXIT_FAILED
        debug_log(f"loaded {len(questions)} question(s) from {args.questions}")

        module = PromptModule(questions)
        try:
            answers = module.prompt_all_with(TerminalBackend(), TerminalEvents())
        except Interrupted:
            print("\nCancelled by user.", file=sys.stderr)
            return EXIT_INTERRUPTED
        except (Aborted, Eof) as e:
            print(f"\n{e}", file=sys.stderr)
            return EXIT_FAILED

        write_answers(answers.to_json(), args.output)
        return EXIT_OK
    finally:
        stop_session_log()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(EXIT_INTERRUPTED)
