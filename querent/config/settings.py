"""
Prompt settings.

Manages the settings JSON file: display and list behaviour shared by every
question, persisted across runs.
"""

import json
from pathlib import Path

from ..ui.primitives import symbols
from ..ui.widgets.select import MIN_PAGE_SIZE


class PromptSettings:
    """
    Manages the prompt settings file.

    Stores:
    - Symbol set used for pointers and markers ("unicode" or "ascii")
    - Page size and looping of list questions
    - Where the session log goes (None to disable it)
    """

    DEFAULT_PAGE_SIZE = 15

    def __init__(self, path: Path | None = None):
        self.path = path
        # Glyphs: "unicode" or "ascii"
        self.symbol_set: str = "unicode"
        # Rows of a list question shown at once
        self.page_size: int = self.DEFAULT_PAGE_SIZE
        # Whether moving past the end of a list wraps around
        self.should_loop: bool = True
        # Session log file
        self.log_path: str | None = None

    @classmethod
    def load(cls, path: Path) -> "PromptSettings":
        """Load settings from file. Missing or corrupt files give the defaults."""
        settings = cls(path)

        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)

                settings.symbol_set = data.get("symbol_set", "unicode")
                settings.page_size = int(data.get("page_size", cls.DEFAULT_PAGE_SIZE))
                settings.should_loop = bool(data.get("should_loop", True))
                settings.log_path = data.get("log_path")
            except (json.JSONDecodeError, IOError, TypeError, ValueError, AttributeError):
                return cls(path)

        return settings

    def save(self):
        """Save settings to file."""
        data = {
            "symbol_set": self.symbol_set,
            "page_size": self.page_size,
            "should_loop": self.should_loop,
            "log_path": self.log_path,
        }
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)

    def validate(self):
        """Raise ValueError if a setting can't be used."""
        symbols.symbols_by_name(self.symbol_set)
        if self.page_size < MIN_PAGE_SIZE:
            raise ValueError(f"page_size must be at least {MIN_PAGE_SIZE}")

    def apply(self):
        """Install the symbol set for this process."""
        symbols.set_symbols(symbols.symbols_by_name(self.symbol_set))

    def list_options(self) -> dict:
        """Keyword arguments for list questions."""
        return {"page_size": self.page_size, "should_loop": self.should_loop}
