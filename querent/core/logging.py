"""
Logging utilities for querent.

Prompts redraw themselves on every key press, so terminal output is useless
as a log. Instead a SessionLog appends plain-text, timestamped lines to a
file, and debug_log() writes to it when one is active.
"""

import re
from datetime import datetime
from pathlib import Path

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;?]*[A-Za-z]')

_active_log = None


class SessionLog:
    """Append-only log file with a banner per session."""

    def __init__(self, log_path: Path, version: str = None):
        self.path = Path(log_path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.log_file = open(self.path, "a", encoding="utf-8")
        # Write session header with version
        self.log_file.write(f"\n{'='*60}\n")
        version_str = f" v{version}" if version else ""
        self.log_file.write(f"Session started: {datetime.now().isoformat()}{version_str}\n")
        self.log_file.write(f"{'='*60}\n\n")
        self.log_file.flush()

    def write(self, message: str):
        """Write a timestamped line, stripped of escape codes and blank lines."""
        clean = ANSI_PATTERN.sub('', message)
        timestamp = datetime.now().strftime("[%H:%M:%S]")
        for line in clean.splitlines():
            stripped = line.rstrip()
            if stripped:
                self.log_file.write(f"{timestamp} {stripped}\n")
        self.log_file.flush()

    def close(self):
        if not self.log_file.closed:
            self.log_file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def start_session_log(log_path: Path, version: str = None) -> SessionLog:
    """Open a session log and make it the target of debug_log()."""
    global _active_log
    stop_session_log()
    _active_log = SessionLog(log_path, version)
    return _active_log


def stop_session_log():
    """Close the active session log, if any."""
    global _active_log
    if _active_log is not None:
        _active_log.close()
        _active_log = None


def debug_log(message: str):
    """Log a debug message to file only (not shown to user)."""
    if _active_log is not None:
        _active_log.write(message)
    # Without an active session log (e.g., tests), silently ignore
