"""Stateful keyword ranking."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .config import Configuration
from .errors import InvalidKeyword
from .keyword_extract import dedupe, filter_by_length, normalise, tokenize
from .report import ScoredKeyword, ScoreSnapshot

logger = logging.getLogger(__name__)

WEIGHT_INCREMENT = 1


class KeywordPriorityEngine:
    """Rank the keywords of each fed text by a score accumulated across calls.

    Every qualifying occurrence in fed text and every explicit boost adds
    ``WEIGHT_INCREMENT`` to a word's score. Scores never decrease.

    The engine holds no lock: callers sharing one instance between threads
    must serialise every call themselves.
    """

    def __init__(self, config: Optional[Configuration] = None) -> None:
        self.config = config if config is not None else Configuration()
        self._scores: Dict[str, int] = {}

    # Public API -----------------------------------------------------------------
    def feed(self, text: Any) -> str:
        """Count the keywords of ``text`` and return them ranked by score.

        Each keyword appears once in the output even if it occurs several
        times; every occurrence still adds to its score. Equal scores keep the
        order in which the words first appear in ``text``. Input that is not
        text counts as empty.
        """
        tokens = filter_by_length(tokenize(text), self.config.min_keyword_length)
        if not tokens:
            return ""

        for token in tokens:
            self._bump(token)

        ranked = sorted(dedupe(tokens), key=lambda token: -self._scores[token])
        logger.debug("Fed %d qualifying tokens, ranked %d keywords", len(tokens), len(ranked))
        return " ".join(ranked)

    def prioritize_keyword(self, word: str) -> None:
        """Boost ``word`` by one, regardless of its length.

        The boost only shows up once a later :meth:`feed` contains the word.
        """
        key = self._key(word)
        self._bump(key)
        logger.debug("Boosted %r to %d", key, self._scores[key])

    def score(self, word: str) -> int:
        return self._scores.get(self._key(word), 0)

    def scores(self) -> Dict[str, int]:
        return dict(self._scores)

    def top_keywords(self, limit: Optional[int] = None) -> str:
        """Rank the whole score table without feeding any text.

        Words below ``threshold`` or shorter than ``min_keyword_length`` are
        left out; ties keep the order in which words were first scored.
        """
        cap = self.config.take_words_max
        if limit is not None:
            if limit < 1:
                raise ValueError(f"limit must be at least 1, got {limit}")
            cap = min(limit, cap)
        return " ".join(entry.word for entry in self._visible()[:cap])

    def snapshot(self) -> ScoreSnapshot:
        entries = [
            ScoredKeyword(word=word, score=score)
            for word, score in sorted(self._scores.items(), key=lambda item: -item[1])
        ]
        return ScoreSnapshot(
            min_keyword_length=self.config.min_keyword_length,
            threshold=self.config.threshold,
            take_words_max=self.config.take_words_max,
            keywords=entries,
        )

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return normalise(word) in self._scores

    # Internals ------------------------------------------------------------------
    def _key(self, word: str) -> str:
        key = normalise(word) if isinstance(word, str) else ""
        if not key:
            raise InvalidKeyword(f"{word!r} has no alphanumeric content")
        return key

    def _bump(self, key: str) -> None:
        self._scores[key] = self._scores.get(key, 0) + WEIGHT_INCREMENT

    def _visible(self) -> List[ScoredKeyword]:
        min_length = self.config.min_keyword_length
        threshold = self.config.threshold
        candidates = [
            ScoredKeyword(word=word, score=score)
            for word, score in self._scores.items()
            if score >= threshold and len(word) >= min_length
        ]
        return sorted(candidates, key=lambda entry: -entry.score)
