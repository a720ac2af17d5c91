"""
Minimax solver.

Idea:
  The adversary always keeps the largest pattern group, so the value of a
  guess is the size of its worst bucket against the consistent words. Pick the
  guess with the SMALLEST worst bucket.
  Tie-break: more distinct patterns, then a consistent word (it can still win
  outright), then alphabetical.

Bucketing is quadratic, so off-list probes are only considered once the
consistent set is small.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Tuple
from .base import BaseSolver, register
from absurdle.engine import pattern_for


def _pattern_stats(guess: str, consistent: List[str]) -> Tuple[int, int]:
    """
    Return (worst_bucket_size, num_distinct_patterns) for guess.
    """
    buckets: Dict[str, int] = defaultdict(int)
    for w in consistent:
        buckets[pattern_for(w, guess)] += 1
    if not buckets:
        return 0, 0
    return max(buckets.values()), len(buckets)


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax Worst Bucket"
    version = "1.0.0"

    POOL_LIMIT = 200  # above this, only consistent words are scored

    def next_guess(self, state: dict) -> str:
        consistent: List[str] = state["consistent"]
        words: List[str] = state["words"]

        if len(consistent) <= 2:
            return min(consistent) if consistent else min(words)

        pool = words if len(consistent) <= self.POOL_LIMIT else consistent
        in_play = set(consistent)

        best_key = None
        best = None
        for g in pool:
            worst, distinct = _pattern_stats(g, consistent)
            key = (worst, -distinct, g not in in_play, g)
            if best_key is None or key < best_key:
                best_key, best = key, g
        return best
