"""
Feedback pattern for a single (word, guess) pair.

Conventions:
  - 'G'  : MATCH   = correct letter in the correct position
  - 'Y'  : PRESENT = correct letter in the wrong position
  - '-'  : ABSENT  = letter not present (or present fewer times than guessed)

Patterns are plain strings so they can be used directly as dict keys and
written to CSV. For display they are rendered as emoji squares.

Algorithm (three passes, duplicate-aware):
  1) Count every letter of the word (copies still available for credit).
  2) Mark all exact-position matches and consume one copy each. This pass
     finishes before any PRESENT marking, so a green always wins its letter.
  3) Left to right over the guess, mark PRESENT while a copy is still
     available. When a letter repeats in the guess more often than it is left
     in the word, the leftmost occurrences take the credit and the rest stay
     ABSENT.
"""

from collections import Counter
from typing import Tuple

from .errors import LengthMismatch

MATCH = "G"
PRESENT = "Y"
ABSENT = "-"

GREEN = "🟩"
YELLOW = "🟨"
GRAY = "⬜"

_SQUARES = {MATCH: GREEN, PRESENT: YELLOW, ABSENT: GRAY}

# Canonical total order over symbols: ABSENT < PRESENT < MATCH.
# Same as comparing the rendered squares by code point (U+2B1C < U+1F7E8 < U+1F7E9).
SYMBOL_RANK = {ABSENT: 0, PRESENT: 1, MATCH: 2}


def pattern_for(word: str, guess: str) -> str:
    """
    Compute the feedback pattern `guess` earns if `word` were the answer.

    Examples:
      pattern_for("level", "belle") -> "-GYYY"
      pattern_for("abide", "speed") -> "--Y-Y"   (second 'e' has no copy left)
    """
    if len(word) != len(guess):
        raise LengthMismatch(
            f"guess length mismatch: {len(guess)} != {len(word)}")

    n = len(guess)
    pattern = [ABSENT] * n

    available = Counter(word)

    # Pass 1: exact matches
    for i in range(n):
        if guess[i] == word[i]:
            pattern[i] = MATCH
            available[guess[i]] -= 1

    # Pass 2: right letter, wrong place
    for i, g in enumerate(guess):
        if pattern[i] == MATCH:
            continue
        if available[g] > 0:
            pattern[i] = PRESENT
            available[g] -= 1

    return "".join(pattern)


def pattern_sort_key(pattern: str) -> Tuple[int, ...]:
    """Key placing patterns in the canonical order used for tie-breaks."""
    return tuple(SYMBOL_RANK[s] for s in pattern)


def is_solved(pattern: str) -> bool:
    """True when the pattern holds no PRESENT and no ABSENT symbol."""
    return PRESENT not in pattern and ABSENT not in pattern


def render(pattern: str) -> str:
    """Emoji rendering, e.g. "G-Y" -> "🟩⬜🟨"."""
    return "".join(_SQUARES[s] for s in pattern)
