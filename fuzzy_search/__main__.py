from __future__ import annotations

import logging
import sys
from dataclasses import replace

import typer
from rich.console import Console
from rich.text import Text

from fuzzy_search import __version__
from fuzzy_search.models import MatchResult
from fuzzy_search.rendering import format_score, highlight_match
from fuzzy_search.search import DEFAULT_WEIGHTS, match

__all__ = [
    "cli",
    "rank_candidates",
    "run",
]

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fuzzy-search {__version__}")
    raise typer.Exit()


def rank_candidates(
    pattern: str,
    candidates: list[str],
    *,
    prefix_penalty: int = 0,
    max_prefix_penalty: int = 0,
    show_all: bool = False,
) -> list[tuple[str, MatchResult]]:
    weights = replace(
        DEFAULT_WEIGHTS,
        unmatched_prefix_letter_penalty=prefix_penalty,
        max_prefix_penalty=max_prefix_penalty,
    )
    scored_results: list[tuple[str, MatchResult]] = []
    for candidate in candidates:
        result = match(candidate, pattern, weights)
        if result.present or show_all:
            scored_results.append((candidate, result))

    scored_results.sort(key=lambda item: (-item[1].score, item[0]))
    return scored_results


cli = typer.Typer(
    add_completion=False,
    help="Rank candidate strings by fuzzy subsequence match against a pattern.",
)


@cli.command()
def run(
    pattern: str = typer.Argument(..., help="Pattern to search for."),
    candidates: list[str] | None = typer.Argument(
        None,
        help="Candidates to rank. Read one per line from stdin when omitted.",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Show at most this many results.",
    ),
    show_all: bool = typer.Option(
        False,
        "--show-all",
        help="Also list candidates that do not contain the pattern.",
    ),
    prefix_penalty: int = typer.Option(
        0,
        "--prefix-penalty",
        help="Score added per subject character skipped before the first match.",
    ),
    max_prefix_penalty: int = typer.Option(
        0,
        "--max-prefix-penalty",
        help="Cap on the total prefix penalty.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every scored candidate.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if not candidates:
        if sys.stdin.isatty():
            typer.echo("No candidates given on the command line or stdin.", err=True)
            raise typer.Exit(code=1)
        candidates = [line.rstrip("\n") for line in sys.stdin if line.strip()]

    results = rank_candidates(
        pattern,
        candidates,
        prefix_penalty=prefix_penalty,
        max_prefix_penalty=max_prefix_penalty,
        show_all=show_all,
    )
    logger.debug("%d of %d candidates ranked", len(results), len(candidates))
    if not any(result.present for _, result in results):
        typer.echo(f"No candidates match {pattern!r}.", err=True)
        raise typer.Exit(code=1)

    if limit is not None:
        results = results[:limit]

    console = Console(highlight=False, soft_wrap=True)
    width = max(len(str(result.score)) for _, result in results)
    for candidate, result in results:
        line = Text(format_score(result.score, width) + "  ")
        line.append_text(highlight_match(candidate, result.indices))
        if not result.present:
            line.stylize("dim")
        console.print(line)


if __name__ == "__main__":
    cli()
