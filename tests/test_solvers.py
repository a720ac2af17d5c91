import pytest
from absurdle.solvers import create_solver, get_solver_ids
from absurdle.solvers.minimax import _pattern_stats
from absurdle.harness import run_case

WORDS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone",
         "slate", "plate", "elate", "berry", "ferry", "merry"]


def test_registry_ids():
    assert get_solver_ids() == ["first_consistent", "minimax", "random_consistent"]
    with pytest.raises(ValueError):
        create_solver("nope")


@pytest.mark.parametrize("solver_id", ["first_consistent", "random_consistent", "minimax"])
def test_solver_finishes(solver_id):
    solver = create_solver(solver_id)
    r = run_case(solver, words=WORDS, N=5, seed=7)
    assert r["success"] is True
    assert r["guesses"] <= len(WORDS)


def test_random_consistent_is_seeded():
    a = run_case(create_solver("random_consistent"), words=WORDS, N=5, seed=3)
    b = run_case(create_solver("random_consistent"), words=WORDS, N=5, seed=3)
    assert a["history"] == b["history"]


def test_first_consistent_opens_alphabetically():
    r = run_case(create_solver("first_consistent"), words=WORDS, N=5)
    assert r["history"][0][0] == "adieu"


def test_minimax_always_makes_progress():
    solver = create_solver("minimax")
    solver.reset(words=WORDS, N=5, seed=0)
    consistent = ["berry", "ferry", "merry"]
    state = {"turn": 2, "N": 5, "history": [], "consistent": consistent,
             "words": solver.words, "rng": solver.rng}
    guess = solver.next_guess(state)
    worst, _ = _pattern_stats(guess, consistent)
    assert worst < len(consistent)
