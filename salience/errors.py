"""Exceptions raised by the keyword priority engine."""
from __future__ import annotations


class SalienceError(ValueError):
    """Base class for every error raised by :mod:`salience`."""


class InvalidConfiguration(SalienceError):
    """Raised when a configuration value is out of range or not an integer."""


class InvalidKeyword(SalienceError):
    """Raised when a word normalises to the empty string."""
