from .validator import validate_dictionary, pretty_summary
from .io import read_tokens

__all__ = ["validate_dictionary", "pretty_summary", "read_tokens"]
