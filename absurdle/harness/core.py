"""
Game driver primitives.

- new_game:      mutable candidate set for one game.
- is_finished:   the game-ending predicate over the patterns seen so far.
- share_summary: "Absurdle n/∞" followed by every rendered pattern.
- run_case:      one self-play game, a solver against the adversary.
- run_batch:     many self-play games, one per opening guess.

These functions are UI-agnostic so they can be reused by the interactive CLI,
the experiment CLI, or a notebook without changes.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, Dict, Iterable, List, Sequence, Set, Tuple
from absurdle.engine import build_candidates, evaluate, filter_candidates, is_solved, render

logger = logging.getLogger(__name__)


def new_game(words: Iterable[str], N: int) -> Set[str]:
    """Working candidate set for a fresh game (raises InvalidConfiguration if N < 1)."""
    return set(build_candidates(words, N))


def is_finished(patterns: Sequence[str]) -> bool:
    """True once the most recent pattern is all MATCH; False before any guess."""
    if not patterns:
        return False
    return is_solved(patterns[-1])


def share_summary(patterns: Sequence[str]) -> str:
    """
    Final score card, e.g.

        Absurdle 3/∞

        ⬜🟨⬜⬜⬜
        🟩⬜🟨⬜⬜
        🟩🟩🟩🟩🟩
    """
    lines = [f"Absurdle {len(patterns)}/∞", ""]
    lines += [render(p) for p in patterns]
    return "\n".join(lines)


def run_case(
        solver,
        *,
        words: Iterable[str],
        N: int,
        opener: str | None = None,
        seed: int | None = None,
        max_turns: int | None = None,
) -> Dict:
    """
    Play one game until the solver gets an all-MATCH pattern or the turn
    budget runs out.

    Args:
        solver:     an object implementing BaseSolver with next_guess(state)
        words:      the dictionary (any lengths, duplicates allowed)
        N:          word length
        opener:     force this first guess instead of asking the solver
        seed:       RNG seed to make solver choices reproducible
        max_turns:  safety cap; defaults to the starting candidate count + 1

    Returns:
        dict with keys:
            opener (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), remaining (int)
    """
    words = list(words)
    candidates = new_game(words, N)
    if max_turns is None:
        max_turns = len(candidates) + 1

    solver.reset(words=words, N=N, seed=seed)

    # What the player can deduce; mirrors the adversary's set turn by turn
    consistent: List[str] = list(solver.words)
    history: List[Tuple[str, str]] = []
    total_ms = 0.0
    success = False

    for turn in range(1, max_turns + 1):
        if turn == 1 and opener is not None:
            guess = opener
        else:
            state = {
                "turn": turn,
                "N": N,
                "history": list(history),
                "consistent": consistent,
                "words": solver.words,
                "rng": solver.rng,
            }
            guess = solver.next_guess(state)

        t0 = time.perf_counter_ns()
        patt = evaluate(guess, candidates, N)
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0
        history.append((guess, patt))

        if is_solved(patt):
            success = True
            break

        consistent = filter_candidates(consistent, [(guess, patt)], N)

    logger.info("solver=%s opener=%s success=%s guesses=%d remaining=%d",
                solver.id, history[0][0] if history else None, success,
                len(history), len(candidates))
    return {
        "opener": history[0][0] if history else "",
        "success": success,
        "guesses": len(history),
        "time_ms": total_ms,
        "history": history,
        "remaining": len(candidates),
    }


def run_batch(
        solver,
        openers: List[str],
        *,
        words: Iterable[str],
        N: int,
        seed: int | None = None,
        sample: int | None = None,
        on_case: Callable[[int, int, Dict], None] | None = None,
) -> List[Dict]:
    """
    Run one game per opening guess. If 'sample' is provided, only the first K
    openers are used to speed up quick experiments.

    Each result is stamped with `solver_id`. `on_case(idx, total, result)`, if
    given, is called after every game (progress reporting).

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    words = list(words)
    pool = list(openers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, opener in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, words=words, N=N, opener=opener, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
        if on_case is not None:
            on_case(idx, len(pool), r)
    return out
