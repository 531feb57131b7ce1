from __future__ import annotations

import functools
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

from fuzzmatch.scoring import Scoring

CaseMode = Literal["sensitive", "insensitive"]


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Match:
    """Score and matched target positions of one full query alignment.

    The score is not clamped and can be negative. Matches order by score only,
    so two different alignments with the same score compare equal. Positions
    are char (code point) indices into the target and strictly increase.
    """

    score: int = 0
    consecutive: int = 0
    matched: tuple[int, ...] = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self.score == other.score

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self.score < other.score

    def __hash__(self) -> int:
        return hash(self.score)

    def extend(self, other: Match, scoring: Scoring) -> Match:
        """Append ``other``, which starts after this match ends, into one match."""
        score = self.score + other.score
        consecutive = self.consecutive

        if self.matched and other.matched:
            distance = other.matched[0] - self.matched[-1]
            if distance == 1:
                consecutive += 1
                score += consecutive * scoring.bonus_consecutive
            elif distance > 1:
                consecutive = 0
                score -= (distance - 1) * scoring.penalty_distance

        return Match(
            score=score,
            consecutive=consecutive,
            matched=self.matched + other.matched,
        )

    def continuous_matches(self) -> Iterator[tuple[int, int]]:
        """Yield ``(start, length)`` for every unbroken run of matched positions."""
        run_start: int | None = None
        run_length = 0
        previous = 0

        for index in self.matched:
            if run_start is not None and index == previous + 1:
                run_length += 1
            else:
                if run_start is not None:
                    yield run_start, run_length
                run_start = index
                run_length = 1
            previous = index

        if run_start is not None:
            yield run_start, run_length
