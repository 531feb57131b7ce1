from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fuzzmatch.models import CaseMode, Match
from fuzzmatch.search import FuzzySearch
from fuzzmatch.scoring import Scoring


@dataclass(frozen=True)
class RankedCandidate:
    text: str
    match: Match | None = None

    @property
    def score(self) -> int | None:
        return None if self.match is None else self.match.score


def rank_candidates(
    query: str,
    candidates: Iterable[str],
    *,
    scoring: Scoring | None = None,
    case_mode: CaseMode = "insensitive",
) -> list[RankedCandidate]:
    """Keep the candidates matching ``query``, best score first.

    Candidates with equal scores are ordered by their text. A query without
    any non-whitespace char keeps every candidate in its original order.
    """
    if not query.strip():
        return [RankedCandidate(text=candidate) for candidate in candidates]

    scored_results: list[tuple[int, str, Match]] = []
    for candidate in candidates:
        search = FuzzySearch(query, candidate)
        if scoring is not None:
            search.score_with(scoring)
        if case_mode == "sensitive":
            search.case_sensitive()
        match = search.best_match()
        if match is not None:
            scored_results.append((match.score, candidate, match))

    scored_results.sort(key=lambda item: (-item[0], item[1]))
    return [
        RankedCandidate(text=candidate, match=match)
        for _, candidate, match in scored_results
    ]
