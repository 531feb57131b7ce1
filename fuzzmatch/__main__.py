from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from fuzzmatch import __version__
from fuzzmatch.models import CaseMode
from fuzzmatch.rendering import format_simple, match_as_dict
from fuzzmatch.scoring import Scoring
from fuzzmatch.search import FuzzySearch
from fuzzmatch.tui import FuzzyPickerTui

__all__ = [
    "FuzzyPickerTui",
    "cli",
    "pick",
    "pick_cli",
    "run",
]


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fuzzmatch {__version__}")
    raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _resolve_scoring(preset: str, **weights: int | None) -> Scoring:
    try:
        return Scoring.from_preset(preset).replace(**weights)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


SCORING_OPTION = typer.Option(
    "word-starts",
    "--scoring",
    "-s",
    envvar="FUZZMATCH_SCORING",
    help="Scoring preset: word-starts or distance.",
)
BONUS_CONSECUTIVE_OPTION = typer.Option(
    None, "--bonus-consecutive", help="Override the consecutive run bonus."
)
BONUS_WORD_START_OPTION = typer.Option(
    None, "--bonus-word-start", help="Override the word start bonus."
)
BONUS_MATCH_CASE_OPTION = typer.Option(
    None, "--bonus-match-case", help="Override the matching case bonus."
)
PENALTY_DISTANCE_OPTION = typer.Option(
    None, "--penalty-distance", help="Override the per skipped char penalty."
)
CASE_SENSITIVE_OPTION = typer.Option(
    False, "--case-sensitive", help="Only match chars of the same case."
)
VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log search details to stderr."
)


cli = typer.Typer(
    add_completion=False,
    help="Find the best fuzzy match of QUERY in TARGET.",
)


@cli.command()
def run(
    query: str = typer.Argument(..., help="Query, whitespace is ignored."),
    target: str = typer.Argument(..., help="String to search in."),
    scoring: str = SCORING_OPTION,
    bonus_consecutive: int | None = BONUS_CONSECUTIVE_OPTION,
    bonus_word_start: int | None = BONUS_WORD_START_OPTION,
    bonus_match_case: int | None = BONUS_MATCH_CASE_OPTION,
    penalty_distance: int | None = PENALTY_DISTANCE_OPTION,
    case_sensitive: bool = CASE_SENSITIVE_OPTION,
    show_score: bool = typer.Option(
        False, "--score", help="Print the match score after the match."
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the match as JSON."
    ),
    verbose: bool = VERBOSE_OPTION,
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    _configure_logging(verbose)
    search = FuzzySearch(query, target).score_with(
        _resolve_scoring(
            scoring,
            bonus_consecutive=bonus_consecutive,
            bonus_word_start=bonus_word_start,
            bonus_match_case=bonus_match_case,
            penalty_distance=penalty_distance,
        )
    )
    if case_sensitive:
        search.case_sensitive()
    match = search.best_match()

    if as_json:
        typer.echo(json.dumps(None if match is None else match_as_dict(match)))
        return
    if match is None:
        typer.echo("No match")
        return

    typer.echo(format_simple(match, target, "<", ">"))
    if show_score:
        typer.echo(f"score: {match.score}")


pick_cli = typer.Typer(
    add_completion=False,
    help="Interactively fuzzy-filter the lines of FILE and print the chosen one.",
)


@pick_cli.command()
def pick(
    source: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="File with one candidate per line.",
    ),
    query: str = typer.Option("", "--query", "-q", help="Initial query."),
    scoring: str = SCORING_OPTION,
    bonus_consecutive: int | None = BONUS_CONSECUTIVE_OPTION,
    bonus_word_start: int | None = BONUS_WORD_START_OPTION,
    bonus_match_case: int | None = BONUS_MATCH_CASE_OPTION,
    penalty_distance: int | None = PENALTY_DISTANCE_OPTION,
    case_sensitive: bool = CASE_SENSITIVE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    _configure_logging(verbose)
    resolved_scoring = _resolve_scoring(
        scoring,
        bonus_consecutive=bonus_consecutive,
        bonus_word_start=bonus_word_start,
        bonus_match_case=bonus_match_case,
        penalty_distance=penalty_distance,
    )
    case_mode: CaseMode = "sensitive" if case_sensitive else "insensitive"
    candidates = [
        line
        for line in source.read_text(encoding="utf-8").splitlines()
        if line.strip()
    ]

    selected = FuzzyPickerTui(
        candidates,
        scoring=resolved_scoring,
        case_mode=case_mode,
        initial_query=query,
    ).run()
    if selected is None:
        raise typer.Exit(code=1)
    typer.echo(selected)


if __name__ == "__main__":
    cli()
