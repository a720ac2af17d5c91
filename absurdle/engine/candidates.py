"""
Candidate filter: the starting word set for one game.
"""

from typing import FrozenSet, Iterable

from .errors import InvalidConfiguration


def check_length(length: int) -> None:
    if not isinstance(length, int) or length < 1:
        raise InvalidConfiguration(f"word length must be >= 1; got {length!r}")


def build_candidates(words: Iterable[str], length: int) -> FrozenSet[str]:
    """
    Deduplicate `words` and keep only those with exactly `length` characters.

    The result is a new immutable set; iteration order carries no meaning.
    Raises InvalidConfiguration when `length` < 1.
    """
    check_length(length)
    return frozenset(w for w in words if len(w) == length)
