"""
Adversarial feedback engine.

For every guess the engine buckets the remaining candidates by the pattern the
guess would earn against each of them, keeps the biggest bucket and answers
with that bucket's pattern. The player is never told a secret word because
there isn't one: the candidate set only narrows as slowly as possible.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, Set

from .candidates import check_length
from .errors import EmptyCandidateSet, LengthMismatch
from .scoring import pattern_for, pattern_sort_key

logger = logging.getLogger(__name__)


def partition(guess: str, candidates: Iterable[str]) -> Dict[str, Set[str]]:
    """
    Group candidates by the pattern `guess` produces against each of them.
    """
    groups: Dict[str, Set[str]] = defaultdict(set)
    for w in candidates:
        groups[pattern_for(w, guess)].add(w)
    return dict(groups)


def select_largest(groups: Dict[str, Set[str]]) -> str:
    """
    Return the pattern with the biggest group.

    Patterns are scanned in canonical order (ABSENT < PRESENT < MATCH, position
    by position) and only a strictly bigger group replaces the current best,
    so on a tie the first pattern in that order wins.
    """
    best = None
    best_size = 0
    for patt in sorted(groups, key=pattern_sort_key):
        size = len(groups[patt])
        if size > best_size:
            best, best_size = patt, size
    if best is None:
        raise EmptyCandidateSet("no candidates remain")
    return best


def evaluate(guess: str, candidates: Set[str], length: int) -> str:
    """
    Answer `guess` adversarially and narrow `candidates` in place.

    Args:
      guess      : the player's guess (only its length is checked)
      candidates : mutable set of words still in play; replaced in place by
                   the largest pattern group
      length     : configured word length

    Returns:
      The winning pattern (string of 'G', 'Y', '-').

    Raises:
      EmptyCandidateSet if `candidates` is empty,
      LengthMismatch if len(guess) != length.
      Nothing is mutated when either is raised.
    """
    check_length(length)
    if not candidates:
        raise EmptyCandidateSet("no candidates remain")
    if len(guess) != length:
        raise LengthMismatch(
            f"guess length mismatch: expected {length}, got {len(guess)}")

    groups = partition(guess, candidates)
    best = select_largest(groups)
    keep = groups[best]

    logger.debug("guess=%s groups=%d kept=%d/%d pattern=%s",
                 guess, len(groups), len(keep), len(candidates), best)

    candidates.clear()
    candidates.update(keep)
    return best
