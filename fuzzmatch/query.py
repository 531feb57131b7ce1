from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryChar:
    original: str
    lower: str


def process_query(query: str) -> list[QueryChar]:
    """Drop whitespace from ``query`` and keep both cases of every other char."""
    return [
        QueryChar(original=char, lower=char.lower())
        for char in query
        if not char.isspace()
    ]
