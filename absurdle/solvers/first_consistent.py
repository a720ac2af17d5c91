"""
First Consistent solver: always guess the alphabetically first word that is
still consistent with the history. Fully deterministic baseline.
"""

from __future__ import annotations

from .base import BaseSolver, register


@register
class FirstConsistentSolver(BaseSolver):
    id = "first_consistent"
    name = "First Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        pool = state["consistent"] or state["words"]
        return min(pool)
