"""Keyword priority engine.

Extracts keywords from free text and ranks them by a score that grows with
every occurrence and every explicit boost.
"""
from .config import Configuration, load_configuration
from .engine import KeywordPriorityEngine
from .errors import InvalidConfiguration, InvalidKeyword, SalienceError

__all__ = [
    "Configuration",
    "InvalidConfiguration",
    "InvalidKeyword",
    "KeywordPriorityEngine",
    "SalienceError",
    "load_configuration",
]
