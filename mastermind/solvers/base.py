from __future__ import annotations
import random
from typing import Dict, Type

from mastermind.engine.codespace import ALPHABET_SIZE, CODE_LENGTH

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
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = CODE_LENGTH
        self.k: int = ALPHABET_SIZE
        self.rng = random.Random()

    def reset(self, *, N: int = CODE_LENGTH, k: int = ALPHABET_SIZE,
              seed: int | None = None) -> None:
        self.N = int(N)
        self.k = int(k)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
