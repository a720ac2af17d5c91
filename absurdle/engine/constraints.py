"""
History consistency.

Given:
  - a pool of words (e.g., the dictionary)
  - a history of (guess, pattern) pairs
  - word length N

Return:
  - words that would have produced exactly the recorded patterns.

This is what a player can deduce on their own. Because the adversary keeps
every candidate that matches its chosen pattern, its candidate set after any
number of turns equals this filter applied to the starting set.
"""

from typing import Iterable, List, Tuple
from .scoring import pattern_for

# History is a sequence of (guess, pattern) tuples returned by the engine.
History = Iterable[Tuple[str, str]]  # (guess, pattern)


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words (length == N) that reproduce every (guess, pattern) in
    `history`. Order is preserved as in `words`.
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        if len(w) != N:
            continue

        if all(pattern_for(w, g) == patt for g, patt in history):
            out.append(w)

    return out
