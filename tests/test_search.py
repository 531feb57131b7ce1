import pytest

from fuzzmatch.query import process_query
from fuzzmatch.scoring import Scoring
from fuzzmatch.search import FuzzySearch, best_match


def _is_ordered_subsequence(query: str, target: str) -> bool:
    remaining = iter(target.lower())
    return all(query_char.lower in remaining for query_char in process_query(query))


@pytest.mark.parametrize(
    ("query", "target"),
    [
        ("", "test"),
        ("test", ""),
        ("   ", "test"),
        ("", ""),
    ],
)
def test_empty_inputs_do_not_match(query: str, target: str) -> None:
    assert best_match(query, target) is None


@pytest.mark.parametrize(
    ("query", "target"),
    [
        ("scc", "SoccerCartoonController"),
        ("ba", "ab"),
        ("xyz", "The Two Towers"),
        ("tower s", "The Two Towers"),
        ("owt", "The Two Towers"),
        ("aaa", "banana"),
        ("aaaa", "banana"),
        ("rls", "some_release"),
        ("sr", "some_release"),
    ],
)
def test_matches_exactly_when_query_is_an_ordered_subsequence(
    query: str, target: str
) -> None:
    result = best_match(query, target)

    assert (result is not None) == _is_ordered_subsequence(query, target)
    if result is not None:
        assert len(result.matched) == len(process_query(query))
        assert list(result.matched) == sorted(set(result.matched))


def test_whitespace_in_query_is_ignored() -> None:
    assert best_match("t t", "The Two Towers") is not None


def test_case_insensitive_by_default() -> None:
    assert best_match("ttt", "The Two Towers") is not None
    assert best_match("TTT", "The Two Towers") is not None
    assert best_match("TTT", "the two towers") is not None


def test_matching_case_scores_higher() -> None:
    lower = best_match("ttt", "The Two Towers")
    upper = best_match("TTT", "The Two Towers")

    assert lower is not None
    assert upper is not None
    assert upper.score > lower.score
    assert upper.score - lower.score == 3 * Scoring().bonus_match_case


def test_case_sensitive_search_requires_matching_case() -> None:
    assert FuzzySearch("TTT", "the two towers").case_sensitive().best_match() is None
    assert (
        FuzzySearch("TTT", "The Two Towers").case_sensitive().best_match()
        is not None
    )


def test_case_sensitive_search_skips_match_case_bonus() -> None:
    sensitive = FuzzySearch("T", "The").case_sensitive().best_match()
    insensitive = FuzzySearch("T", "The").case_insensitive().best_match()

    assert sensitive is not None
    assert insensitive is not None
    assert sensitive.score == 72
    assert insensitive.score == 72 + 8


def test_prefers_word_starts() -> None:
    result = best_match("scc", "SccsCoolController")

    assert result is not None
    assert result.matched == (0, 4, 8)
    assert result.score == 192


def test_prefers_word_starts_over_close_chars() -> None:
    result = best_match("scc", "SoccerCartoonController")

    assert result is not None
    assert result.matched == (0, 6, 13)
    assert result.score == 172


def test_distance_preset_prefers_close_chars() -> None:
    result = (
        FuzzySearch("scc", "SoccerCartoonController")
        .score_with(Scoring.emphasize_distance())
        .best_match()
    )

    assert result is not None
    assert result.matched == (0, 2, 3)
    assert result.score == 52


def test_distance_to_first_match_is_not_penalized() -> None:
    long_prefix = best_match("release", "some_release")
    short_prefix = best_match("release", "a_release")

    assert long_prefix is not None
    assert short_prefix is not None
    assert long_prefix.score == short_prefix.score


def test_consecutive_run_is_rewarded() -> None:
    result = best_match("tes", "test")

    assert result is not None
    assert result.matched == (0, 1, 2)
    assert list(result.continuous_matches()) == [(0, 3)]


def test_positions_are_code_points() -> None:
    result = best_match("👀", "🦀 👈 👀")

    assert result is not None
    assert result.matched == (4,)


def test_equal_scores_resolve_to_the_rightmost_alignment() -> None:
    result = best_match("a", "a a")

    assert result is not None
    assert result.matched == (2,)


def test_search_is_deterministic() -> None:
    target = (
        "This is a tracking issue for the #[bench] attribute and its stability "
        "in the compiler. Currently it is not possible to use this from stable "
        "Rust as it requires extern crate test which is itself not stable."
    )
    results = [best_match("requires", target) for _ in range(3)]

    assert all(result is not None for result in results)
    assert len({result.score for result in results if result is not None}) == 1
    assert len({result.matched for result in results if result is not None}) == 1


def test_long_target_finds_whole_word() -> None:
    target = (
        "The empty benchmark is there as a baseline. An anecdote: In my first "
        "compilation of the benchmark, I forgot to add -O to the rustc command "
        "line, and wound up with a few ns/iter on an empty benchmark."
    )
    result = best_match("rustc wound", target)

    assert result is not None
    start = target.index("rustc")
    wound = target.index("wound")
    assert result.matched == tuple(range(start, start + 5)) + tuple(
        range(wound, wound + 5)
    )
