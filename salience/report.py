"""Serialisable views of an engine's score table."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field
from rich.table import Table


class ScoredKeyword(BaseModel):
    word: str = Field(..., min_length=1)
    score: int = Field(..., ge=0)


class ScoreSnapshot(BaseModel):
    """Configuration plus every scored word, highest score first."""

    min_keyword_length: int
    threshold: int
    take_words_max: int
    keywords: List[ScoredKeyword] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(entry.score for entry in self.keywords)


def render_scores(snapshot: ScoreSnapshot, *, title: str = "Keyword scores") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Keyword")
    table.add_column("Score", justify="right")
    table.add_column("Ranked", justify="center")
    for rank, entry in enumerate(snapshot.keywords, start=1):
        ranked = entry.score >= snapshot.threshold and len(entry.word) >= snapshot.min_keyword_length
        table.add_row(str(rank), entry.word, str(entry.score), "yes" if ranked else "no")
    table.caption = f"{len(snapshot.keywords)} words, {snapshot.total} points"
    return table
