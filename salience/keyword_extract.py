"""Tokenisation and normalisation shared by every engine entry point."""
from __future__ import annotations

import re
from typing import Any, Iterable, List

# Letters and digits in any script; underscore is treated as a separator.
TOKEN_PATTERN = re.compile(r"[^\W_]+")
BOUNDARY_PATTERN = re.compile(r"^[\W_]+|[\W_]+$")


def normalise(word: str) -> str:
    """Strip non-alphanumeric characters from both ends and case-fold."""
    return BOUNDARY_PATTERN.sub("", word).casefold()


def tokenize(text: Any) -> List[str]:
    """Split ``text`` into normalised tokens, in order of appearance.

    Anything that is not a non-empty ``str`` yields no tokens.
    """
    if not isinstance(text, str) or not text:
        return []
    tokens = [normalise(match.group(0)) for match in TOKEN_PATTERN.finditer(text)]
    return [tok for tok in tokens if tok]


def filter_by_length(tokens: Iterable[str], min_length: int) -> List[str]:
    return [tok for tok in tokens if len(tok) >= min_length]


def dedupe(tokens: Iterable[str]) -> List[str]:
    """Drop repeated tokens, keeping the first occurrence of each."""
    seen: set[str] = set()
    unique: List[str] = []
    for token in tokens:
        if token in seen:
            continue
        seen.add(token)
        unique.append(token)
    return unique
