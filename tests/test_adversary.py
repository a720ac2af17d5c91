import pytest
from absurdle.engine import (
    evaluate, partition, select_largest, pattern_for, filter_candidates, build_candidates,
    EmptyCandidateSet, LengthMismatch, InvalidConfiguration,
)

WORDS = [
    "crane", "raise", "stare", "trace", "cared", "racer", "scoop", "level",
    "belle", "lemon", "arise", "berry", "ferry", "merry", "query", "adieu",
    "alone", "slate", "plate", "elate",
]


def test_scenario_arise_berry_ferry():
    cand = {"ARISE", "BERRY", "FERRY"}
    patt = evaluate("FERRY", cand, 5)
    # three singleton groups; the tie goes to the first pattern in canonical order
    assert patt == "-YY--"
    assert cand == {"ARISE"}
    assert all(pattern_for(w, "FERRY") == patt for w in cand)


def test_partition_correctness_and_non_growth():
    cand = set(build_candidates(WORDS, 5))
    for guess in ["slate", "merry", "crane"]:
        before = set(cand)
        patt = evaluate(guess, cand, 5)
        assert len(cand) <= len(before)
        assert cand <= before
        assert all(pattern_for(w, guess) == patt for w in cand)
        assert all(pattern_for(w, guess) != patt for w in before - cand)


def test_maximality():
    cand = set(build_candidates(WORDS, 5))
    groups = partition("slate", cand)
    biggest = max(len(g) for g in groups.values())
    patt = evaluate("slate", cand, 5)
    assert len(cand) == biggest
    assert len(groups[patt]) == biggest


def test_tie_prefers_absent_over_match():
    cand = {"abc", "abd", "xyz", "xyw"}
    # "GG-" and "---" both hold two words
    patt = evaluate("abq", cand, 3)
    assert patt == "---"
    assert cand == {"xyz", "xyw"}


def test_tie_prefers_present_over_match():
    # plain string order would pick "GG"; canonical order puts PRESENT first
    cand = {"ab", "ba"}
    patt = evaluate("ab", cand, 2)
    assert patt == "YY"
    assert cand == {"ba"}


def test_select_largest_first_maximum_wins():
    groups = {"GG": {"ab", "cd"}, "Y-": {"ef", "gh"}, "--": {"ij"}}
    assert select_largest(groups) == "Y-"


def test_select_largest_empty():
    with pytest.raises(EmptyCandidateSet):
        select_largest({})


def test_evaluate_empty_candidates():
    with pytest.raises(EmptyCandidateSet, match="no candidates remain"):
        evaluate("crane", set(), 5)


def test_evaluate_length_mismatch_leaves_set_untouched():
    cand = {"crane", "stare"}
    with pytest.raises(LengthMismatch, match="guess length mismatch"):
        evaluate("cranes", cand, 5)
    assert cand == {"crane", "stare"}


def test_evaluate_bad_length():
    cand = {"a"}
    with pytest.raises(InvalidConfiguration):
        evaluate("a", cand, 0)
    assert cand == {"a"}


def test_guess_need_not_be_a_word():
    cand = {"crane", "stare"}
    patt = evaluate("zzzzz", cand, 5)
    assert patt == "-----"
    assert cand == {"crane", "stare"}


def test_adversary_set_equals_history_filter():
    initial = sorted(build_candidates(WORDS, 5))
    cand = set(initial)
    history = []
    for guess in ["adieu", "query", "lemon"]:
        history.append((guess, evaluate(guess, cand, 5)))
    assert cand == set(filter_candidates(initial, history, 5))


def test_guessing_a_remaining_word_terminates():
    cand = set(build_candidates(WORDS, 5))
    size = len(cand)
    patterns = []
    while not patterns or patterns[-1] != "GGGGG":
        patterns.append(evaluate(min(cand), cand, 5))
        assert len(patterns) <= size
    assert len(cand) == 1
