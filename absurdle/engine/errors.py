"""
Error taxonomy for the Absurdle engine.

Every failure is a caller-input violation, raised synchronously before the
candidate set is touched. All of them are ValueErrors so callers that already
guard bad input with `except ValueError` keep working.
"""


class AbsurdleError(ValueError):
    """Base class for invalid input to the engine."""


class InvalidConfiguration(AbsurdleError):
    """Requested word length is < 1."""


class EmptyCandidateSet(AbsurdleError):
    """evaluate() was called after the candidate set ran out."""


class LengthMismatch(AbsurdleError):
    """A guess does not have the configured word length."""
