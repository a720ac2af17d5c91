from __future__ import annotations
import random
from typing import Dict, Iterable, List, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A scripted player. It sees only what a human would: the dictionary and
    the (guess, pattern) history, pre-digested into `state["consistent"]`.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.words: List[str] = []
        self.rng = random.Random()

    def reset(self, *, words: Iterable[str], N: int, seed: int | None = None) -> None:
        # Sorted so seeded choices don't depend on set iteration order
        self.N = int(N)
        self.words = sorted(w for w in set(words) if len(w) == self.N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
