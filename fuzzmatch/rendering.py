from __future__ import annotations

import textwrap
from typing import Any

from rich.markup import escape
from rich.text import Text

from fuzzmatch.models import Match
from fuzzmatch.ranking import RankedCandidate


def format_simple(match: Match, target: str, before: str, after: str) -> str:
    """Wrap every continuous run of matched chars in ``before``/``after``."""
    pieces: list[str] = []
    cursor = 0
    for start, length in match.continuous_matches():
        pieces.append(target[cursor:start])
        pieces.append(before)
        pieces.append(target[start : start + length])
        pieces.append(after)
        cursor = start + length
    pieces.append(target[cursor:])
    return "".join(pieces)


def highlight(match: Match | None, target: str, style: str = "bold red") -> Text:
    text = Text(target)
    if match is None:
        return text
    for start, length in match.continuous_matches():
        text.stylize(style, start, start + length)
    return text


def match_as_dict(match: Match) -> dict[str, Any]:
    return {
        "score": match.score,
        "consecutive": match.consecutive,
        "matched": list(match.matched),
        "runs": [list(run) for run in match.continuous_matches()],
    }


def render_kv_box(rows: list[tuple[str, str]], width: int) -> list[str]:
    if not rows:
        return []
    label_width = max(len(label) for label, _ in rows)
    inner_width = max(30, width - 2)
    value_width = max(10, inner_width - label_width - 3)

    lines = ["╭" + ("─" * inner_width) + "╮"]
    for label, value in rows:
        wrapped = textwrap.wrap(value, width=value_width) or [""]
        lines.append(f"│ {label:<{label_width}} {wrapped[0]:<{value_width}} │")
        for continuation in wrapped[1:]:
            lines.append(f"│ {'':<{label_width}} {continuation:<{value_width}} │")
    lines.append("╰" + ("─" * inner_width) + "╯")
    return lines


def render_match_details(candidate: RankedCandidate, width: int) -> str:
    """Preview text for a candidate, as rich markup."""
    match = candidate.match
    if match is None:
        return f"{escape(candidate.text)}\n\nType to filter candidates."

    runs = ", ".join(
        f"{start}+{length}" for start, length in match.continuous_matches()
    )
    rows = [
        ("score", str(match.score)),
        ("positions", ", ".join(str(index) for index in match.matched)),
        ("runs", runs),
        ("run length", str(match.consecutive)),
    ]
    lines = [
        highlight(match, candidate.text).markup,
        "",
        *(escape(line) for line in render_kv_box(rows, width)),
    ]
    return "\n".join(lines)
