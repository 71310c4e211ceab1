"""
Configuration for querent.

Config files:
- settings.json: Symbol set, list paging and the session log location
- questionnaire files: JSON lists of question definitions for the CLI
"""

from .settings import PromptSettings
from .questionnaire import load_questions, parse_question

__all__ = [
    "PromptSettings",
    "load_questions",
    "parse_question",
]
