"""
Core utilities for querent.

Error types and the session log.
"""

from .errors import (
    PromptError,
    Interrupted,
    Eof,
    Aborted,
    FormatError,
    ValidationError,
)

from .logging import (
    SessionLog,
    start_session_log,
    stop_session_log,
    debug_log,
)

__all__ = [
    # Errors
    "PromptError",
    "Interrupted",
    "Eof",
    "Aborted",
    "FormatError",
    "ValidationError",
    # Logging
    "SessionLog",
    "start_session_log",
    "stop_session_log",
    "debug_log",
]
