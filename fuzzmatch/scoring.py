from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

SCORING_PRESETS = ("word-starts", "distance")


@dataclass(frozen=True)
class Scoring:
    """Bonuses and penalties applied while scoring a match.

    ``bonus_consecutive`` is multiplied by the length of the current run, so the
    first consecutive char adds ``1 * bonus``, the second ``2 * bonus`` and so on.
    ``bonus_word_start`` is added when a query char lands on a word start.
    ``bonus_match_case`` is added when a case-insensitive search still matches
    the case of the target char. ``penalty_distance`` is subtracted for every
    target char skipped between two matched chars.
    """

    bonus_consecutive: int = 8
    bonus_word_start: int = 72
    bonus_match_case: int = 8
    penalty_distance: int = 4

    @classmethod
    def default(cls) -> Scoring:
        return DEFAULT_SCORING

    @classmethod
    def emphasize_word_starts(cls) -> Scoring:
        return DEFAULT_SCORING

    @classmethod
    def emphasize_distance(cls) -> Scoring:
        return cls(
            bonus_consecutive=12,
            bonus_word_start=24,
            bonus_match_case=8,
            penalty_distance=12,
        )

    @classmethod
    def from_preset(cls, name: str) -> Scoring:
        normalized = name.strip().lower().replace("_", "-")
        if normalized == "word-starts":
            return cls.emphasize_word_starts()
        if normalized == "distance":
            return cls.emphasize_distance()
        raise ValueError(
            f"Unknown scoring preset {name!r}; expected one of: "
            + ", ".join(SCORING_PRESETS)
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Scoring:
        field_names = {field.name for field in dataclasses.fields(cls)}
        unknown = sorted(set(mapping) - field_names)
        if unknown:
            raise ValueError(f"Unknown scoring weights: {', '.join(unknown)}")
        weights: dict[str, int] = {}
        for key, value in mapping.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Scoring weight {key!r} must be an integer.")
            weights[key] = value
        return dataclasses.replace(DEFAULT_SCORING, **weights)

    def replace(self, **weights: int | None) -> Scoring:
        changes = {key: value for key, value in weights.items() if value is not None}
        if not changes:
            return self
        return Scoring.from_mapping({**self.as_dict(), **changes})

    def as_dict(self) -> dict[str, int]:
        return dataclasses.asdict(self)


DEFAULT_SCORING = Scoring()
