"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the words still consistent with all
    feedback so far.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Every consistent guess either wins or strictly shrinks the adversary's
    set, so this always finishes.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Pick any consistent word uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "consistent": words matching the whole history (List[str])
                - "words":      full dictionary of length N (List[str])

        Returns:
            A single guess string of length N.
        """
        consistent: List[str] = state["consistent"]
        pool: List[str] = consistent if consistent else state["words"]
        return pool[self.rng.randrange(len(pool))]
