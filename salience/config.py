"""Engine configuration and environment loading."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .errors import InvalidConfiguration

DEFAULT_MIN_KEYWORD_LENGTH = 4
DEFAULT_THRESHOLD = 1
DEFAULT_TAKE_WORDS_MAX = 30

ENV_PREFIX = "SALIENCE_"


@dataclass(frozen=True)
class Configuration:
    """Immutable settings fixed when an engine is constructed.

    ``min_keyword_length`` gates which fed tokens are counted and emitted.
    ``threshold`` and ``take_words_max`` only shape :meth:`top_keywords`.
    """

    min_keyword_length: int = DEFAULT_MIN_KEYWORD_LENGTH
    threshold: int = DEFAULT_THRESHOLD
    take_words_max: int = DEFAULT_TAKE_WORDS_MAX

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"{field.name} must be an integer, got {value!r}")
        if self.min_keyword_length < 1:
            raise InvalidConfiguration(
                f"min_keyword_length must be at least 1, got {self.min_keyword_length}"
            )
        if self.threshold < 0:
            raise InvalidConfiguration(f"threshold must not be negative, got {self.threshold}")
        if self.take_words_max < 1:
            raise InvalidConfiguration(f"take_words_max must be at least 1, got {self.take_words_max}")


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(ENV_PREFIX + name.upper())
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise InvalidConfiguration(f"{ENV_PREFIX}{name.upper()} is not an integer: {raw!r}") from exc


def load_configuration(
    *,
    min_keyword_length: Optional[int] = None,
    threshold: Optional[int] = None,
    take_words_max: Optional[int] = None,
    dotenv: bool = True,
) -> Configuration:
    """Build a configuration from overrides, then ``SALIENCE_*`` variables, then defaults.

    When ``dotenv`` is true the nearest ``.env`` above the working directory is
    loaded first; variables already present in the environment are not
    overwritten.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    overrides = {
        "min_keyword_length": min_keyword_length,
        "threshold": threshold,
        "take_words_max": take_words_max,
    }
    values = {}
    for name, override in overrides.items():
        value = override if override is not None else _env_int(name)
        if value is not None:
            values[name] = value
    return Configuration(**values)
