import pytest

from fuzzmatch.scoring import DEFAULT_SCORING, Scoring


def test_default_scoring_weights() -> None:
    assert Scoring() == Scoring(
        bonus_consecutive=8,
        bonus_word_start=72,
        bonus_match_case=8,
        penalty_distance=4,
    )
    assert Scoring.default() is DEFAULT_SCORING
    assert Scoring.emphasize_word_starts() == DEFAULT_SCORING


def test_distance_preset() -> None:
    assert Scoring.emphasize_distance().as_dict() == {
        "bonus_consecutive": 12,
        "bonus_word_start": 24,
        "bonus_match_case": 8,
        "penalty_distance": 12,
    }


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("word-starts", Scoring()),
        ("Word_Starts", Scoring()),
        (" distance ", Scoring.emphasize_distance()),
    ],
)
def test_from_preset(name: str, expected: Scoring) -> None:
    assert Scoring.from_preset(name) == expected


def test_from_preset_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Unknown scoring preset 'fast'"):
        Scoring.from_preset("fast")


def test_from_mapping_fills_missing_weights_from_default() -> None:
    assert Scoring.from_mapping({"penalty_distance": 0}) == Scoring(
        penalty_distance=0
    )


def test_from_mapping_rejects_bad_weights() -> None:
    with pytest.raises(ValueError, match="Unknown scoring weights: speed"):
        Scoring.from_mapping({"speed": 1})
    with pytest.raises(ValueError, match="must be an integer"):
        Scoring.from_mapping({"bonus_word_start": "72"})
    with pytest.raises(ValueError, match="must be an integer"):
        Scoring.from_mapping({"bonus_word_start": True})


def test_replace_ignores_unset_weights() -> None:
    scoring = Scoring.emphasize_distance()

    assert scoring.replace(bonus_consecutive=None) is scoring
    assert scoring.replace(bonus_word_start=0, penalty_distance=None) == Scoring(
        bonus_consecutive=12,
        bonus_word_start=0,
        bonus_match_case=8,
        penalty_distance=12,
    )
