from __future__ import annotations
from pathlib import Path
from typing import List


def read_tokens(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into its whitespace-delimited tokens, in file order.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8").split()
