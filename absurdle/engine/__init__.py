from .errors import AbsurdleError, InvalidConfiguration, EmptyCandidateSet, LengthMismatch
from .scoring import (
    MATCH, PRESENT, ABSENT, pattern_for, pattern_sort_key, is_solved, render,
)
from .candidates import build_candidates
from .adversary import evaluate, partition, select_largest
from .constraints import filter_candidates
from .validation import validate_guess

__all__ = [
    "AbsurdleError", "InvalidConfiguration", "EmptyCandidateSet", "LengthMismatch",
    "MATCH", "PRESENT", "ABSENT", "pattern_for", "pattern_sort_key", "is_solved", "render",
    "build_candidates", "evaluate", "partition", "select_largest",
    "filter_candidates", "validate_guess",
]
