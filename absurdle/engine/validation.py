"""
Optional "known words only" guess check.

The engine itself only cares about guess length. The interactive game can be
started in a stricter mode where a guess must also appear in the dictionary;
this module answers "is this guess acceptable right now?" for that mode.
"""

from typing import Collection


def validate_guess(word: str, allowed: Collection[str], N: int) -> bool:
    """
    Return True if `word` is a string of length N found in `allowed`.

    Notes:
      - Pass a set for `allowed`; membership is checked as-is, so callers
        should build it once per game rather than per guess.
    """
    if not isinstance(word, str):
        return False
    if len(word) != N:
        return False
    return word in allowed
