from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from fuzzmatch.models import CaseMode
from fuzzmatch.query import QueryChar

Occurrences = dict[str, list["Occurrence"]]


@dataclass(frozen=True)
class Occurrence:
    target_index: int
    char: str
    is_word_start: bool


def is_word_separator(char: str) -> bool:
    return not char.isalnum()


def occurrence_key(char: str, case_mode: CaseMode) -> str:
    return char.lower() if case_mode == "insensitive" else char


def query_key(query_char: QueryChar, case_mode: CaseMode) -> str:
    return query_char.lower if case_mode == "insensitive" else query_char.original


def _classify(target: str) -> Iterable[tuple[int, str, bool]]:
    prev_is_upper = False
    prev_is_sep = True
    prev_is_start = False

    for index, char in enumerate(target):
        if is_word_separator(char):
            prev_is_upper = False
            prev_is_sep = True
            prev_is_start = False
            yield index, char, False
            continue

        is_upper = char.isupper()
        # A case flip directly after a start is not a new sub-word ("ABC").
        is_start = prev_is_sep or (
            not prev_is_start and is_upper != prev_is_upper
        )

        prev_is_upper = is_upper
        prev_is_sep = False
        prev_is_start = is_start
        yield index, char, is_start


def build_occurrences(
    target: str,
    case_mode: CaseMode = "insensitive",
    query: Iterable[QueryChar] | None = None,
) -> Occurrences:
    """Index every char of ``target`` by its key, flagging word starts.

    When ``query`` is given only the chars it can ask for are recorded.
    """
    wanted = (
        None
        if query is None
        else {query_key(query_char, case_mode) for query_char in query}
    )

    occurrences: defaultdict[str, list[Occurrence]] = defaultdict(list)
    for index, char, is_start in _classify(target):
        key = occurrence_key(char, case_mode)
        if wanted is not None and key not in wanted:
            continue
        occurrences[key].append(
            Occurrence(target_index=index, char=char, is_word_start=is_start)
        )
    return dict(occurrences)


def word_starts(target: str) -> list[int]:
    return [index for index, _, is_start in _classify(target) if is_start]
