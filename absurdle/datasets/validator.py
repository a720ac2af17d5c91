"""
Dictionary validator.

What this module does:
- Inspect a dictionary file (whitespace-delimited tokens) for a word length N.
- Count tokens, unique tokens, tokens of length N and tokens of any other
  length; compute the SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line
  summary.

Wrong-length tokens and duplicates are expected in a general dictionary (the
candidate filter drops them), so they are reported but do not fail the check.
A dictionary fails only when it is missing or has no word of length N.

Typical use:
    from absurdle.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary(5, "dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import read_tokens


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    tokens: int          # all whitespace-delimited tokens
    unique: int          # distinct tokens
    usable: int          # distinct tokens of length N
    wrong_length: int    # tokens (with repeats) of any other length
    duplicates: int      # tokens - unique
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_dictionary(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Parameters
    ----------
    N : int
        Word length the game will be played with.
    path : str
        Path to the dictionary.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema).
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = DictionaryReport(N, path, False, 0, 0, 0, 0, 0, "", False, issues)
        return asdict(rep)

    tokens = read_tokens(p)
    unique = set(tokens)
    usable = {w for w in unique if len(w) == N}
    wrong_length = sum(1 for w in tokens if len(w) != N)

    if not tokens:
        issues.append("dictionary is empty")
    elif not usable:
        issues.append(f"dictionary has no words of length {N}")
    if wrong_length:
        issues.append(f"{wrong_length} token(s) of another length will be ignored")
    if len(tokens) != len(unique):
        issues.append(f"{len(tokens) - len(unique)} duplicate token(s) will be merged")

    rep = DictionaryReport(
        N=N,
        path=str(p),
        exists=True,
        tokens=len(tokens),
        unique=len(unique),
        usable=len(usable),
        wrong_length=wrong_length,
        duplicates=len(tokens) - len(unique),
        sha256=_sha256_file(p),
        passed=len(usable) > 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | dictionary=words.txt tokens=9000 (uniq=8990, usable=2315, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | dictionary={report['path']} tokens={report['tokens']} "
        f"(uniq={report['unique']}, usable={report['usable']}, sha={sha}) | {status}"
    )
