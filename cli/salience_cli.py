"""Command line front end for the keyword priority engine."""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from salience import KeywordPriorityEngine, SalienceError, load_configuration
from salience.report import render_scores

app = typer.Typer(
    help="Extract keywords from text and rank them by accumulated priority.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("salience.cli")

BOOST_PREFIX = "+"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _build_engine(min_length: Optional[int]) -> KeywordPriorityEngine:
    try:
        config = load_configuration(min_keyword_length=min_length)
    except SalienceError as exc:
        err_console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2)
    logger.debug("Using %s", config)
    return KeywordPriorityEngine(config)


def _boost(engine: KeywordPriorityEngine, words: Iterable[str]) -> None:
    for word in words:
        try:
            engine.prioritize_keyword(word)
        except SalienceError as exc:
            err_console.print(f"[red]Invalid keyword:[/red] {exc}")
            raise typer.Exit(code=2)


@app.command("feed")
def feed_command(
    texts: List[str] = typer.Argument(..., help="Texts to feed, in order"),
    boost: List[str] = typer.Option(
        [], "--boost", "-b", help="Boost a word before feeding (repeatable)"
    ),
    min_length: Optional[int] = typer.Option(
        None, "--min-length", "-m", help="Minimum keyword length (default 4)"
    ),
    scores: bool = typer.Option(False, "--scores", help="Print the score table afterwards"),
    as_json: bool = typer.Option(False, "--json", help="Print the score table as JSON"),
    log_level: LogLevel = typer.Option(LogLevel.WARNING, "--log-level", "-l"),
):
    """Feed each TEXT and print its ranked keywords, one line per text."""
    configure_logging(log_level)
    engine = _build_engine(min_length)
    _boost(engine, boost)

    results = [engine.feed(text) for text in texts]
    if as_json:
        typer.echo(engine.snapshot().model_dump_json(indent=2))
        return
    for line in results:
        typer.echo(line)
    if scores:
        console.print(render_scores(engine.snapshot()))


@app.command("session")
def session_command(
    path: Optional[Path] = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        allow_dash=True,
        help="Script to replay; reads stdin when omitted or '-'",
    ),
    min_length: Optional[int] = typer.Option(
        None, "--min-length", "-m", help="Minimum keyword length (default 4)"
    ),
    top: bool = typer.Option(False, "--top", help="Print the overall top keywords at the end"),
    log_level: LogLevel = typer.Option(LogLevel.WARNING, "--log-level", "-l"),
):
    """Replay a session script.

    Lines starting with '+' boost the words that follow; blank lines are
    skipped; every other line is fed and its ranked keywords printed.
    """
    configure_logging(log_level)
    engine = _build_engine(min_length)

    if path is None or str(path) == "-":
        lines = typer.get_text_stream("stdin").read().splitlines()
    else:
        lines = path.read_text(encoding="utf-8").splitlines()

    fed = 0
    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(BOOST_PREFIX):
            _boost(engine, stripped[len(BOOST_PREFIX):].split())
            continue
        typer.echo(engine.feed(stripped))
        fed += 1
    logger.info("Replayed %d lines, fed %d", len(lines), fed)

    if top:
        typer.echo(engine.top_keywords())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
