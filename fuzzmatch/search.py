from __future__ import annotations

import bisect
import logging
from collections.abc import Iterable

from fuzzmatch.models import CaseMode, Match
from fuzzmatch.occurrences import Occurrence, Occurrences, build_occurrences, query_key
from fuzzmatch.query import QueryChar, process_query
from fuzzmatch.scoring import DEFAULT_SCORING, Scoring

log = logging.getLogger(__name__)

MatchKey = tuple[int, int, int]


class FuzzySearch:
    """Configurable search for the best match of ``query`` in ``target``.

    Whitespace in the query is ignored. The search is case-insensitive unless
    :meth:`case_sensitive` is called::

        result = (
            FuzzySearch("something", "Some Search Thing")
            .score_with(Scoring.emphasize_word_starts())
            .case_insensitive()
            .best_match()
        )
    """

    def __init__(self, query: str, target: str) -> None:
        self.query = query
        self.target = target
        self.scoring: Scoring | None = None
        self.case_mode: CaseMode = "insensitive"

    def score_with(self, scoring: Scoring) -> FuzzySearch:
        self.scoring = scoring
        return self

    def case_sensitive(self) -> FuzzySearch:
        """Only match chars of the same case.

        ``Scoring.bonus_match_case`` is never applied in this mode since every
        accepted char already matches case.
        """
        self.case_mode = "sensitive"
        return self

    def case_insensitive(self) -> FuzzySearch:
        self.case_mode = "insensitive"
        return self

    def best_match(self) -> Match | None:
        """Return the highest scoring alignment of the full query, if any.

        A partial alignment never counts. Empty queries and targets return
        ``None``.
        """
        query_chars = process_query(self.query)
        if not query_chars or not self.target:
            return None

        occurrences = build_occurrences(self.target, self.case_mode, query_chars)
        matcher = _Matcher(
            query_chars,
            occurrences,
            self.scoring or DEFAULT_SCORING,
            self.case_mode,
        )
        result = matcher.best_match()
        log.debug(
            "best match for %r in %r: %s (%d subtrees scored)",
            self.query,
            self.target,
            result,
            len(matcher.cache),
        )
        return result


class _Matcher:
    def __init__(
        self,
        query: list[QueryChar],
        occurrences: Occurrences,
        scoring: Scoring,
        case_mode: CaseMode,
    ) -> None:
        self.query = query
        self.occurrences = occurrences
        self.scoring = scoring
        self.case_mode = case_mode
        self.cache: dict[MatchKey, Match | None] = {}

    def best_match(self) -> Match | None:
        first = self.occurrences.get(query_key(self.query[0], self.case_mode))
        if not first:
            return None
        return _max_match(self._match(0, occurrence, 0) for occurrence in first)

    def _case_bonus(self, query_index: int, occurrence: Occurrence) -> int:
        if self.case_mode == "sensitive":
            return 0
        if self.query[query_index].original != occurrence.char:
            return 0
        return self.scoring.bonus_match_case

    def _following(self, query_index: int, after: int) -> list[Occurrence]:
        occurrences = self.occurrences.get(
            query_key(self.query[query_index], self.case_mode), []
        )
        start = bisect.bisect_right(
            occurrences, after, key=lambda occurrence: occurrence.target_index
        )
        return occurrences[start:]

    def _match(
        self, query_index: int, occurrence: Occurrence, consecutive: int
    ) -> Match | None:
        key = (query_index, occurrence.target_index, consecutive)
        if key in self.cache:
            return self.cache[key]

        score = (
            consecutive * self.scoring.bonus_consecutive
            + (self.scoring.bonus_word_start if occurrence.is_word_start else 0)
            + self._case_bonus(query_index, occurrence)
        )
        this_match = Match(
            score=score,
            consecutive=consecutive,
            matched=(occurrence.target_index,),
        )

        if query_index + 1 == len(self.query):
            self.cache[key] = this_match
            return this_match

        best_rest = _max_match(
            self._match(
                query_index + 1,
                following,
                consecutive + 1
                if following.target_index == occurrence.target_index + 1
                else 0,
            )
            for following in self._following(
                query_index + 1, occurrence.target_index
            )
        )

        result = (
            None if best_rest is None else this_match.extend(best_rest, self.scoring)
        )
        self.cache[key] = result
        return result


def _max_match(matches: Iterable[Match | None]) -> Match | None:
    # On equal scores the later candidate (further right in the target) wins.
    best: Match | None = None
    for match in matches:
        if match is None:
            continue
        if best is None or match.score >= best.score:
            best = match
    return best


def best_match(query: str, target: str) -> Match | None:
    """Case-insensitive best match of ``query`` in ``target`` with default scoring."""
    return FuzzySearch(query, target).best_match()
