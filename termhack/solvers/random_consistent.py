"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with every witness so far).
  - If (unexpectedly) the candidate set is empty, fall back to the full
    word list on screen.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Baseline only; it does not try to split the candidates well.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Pick any candidate uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "candidates": words still consistent with all witnesses (List[str])
                - "words":      every word on the terminal (List[str])

        Returns:
            A single word from the pool.
        """
        candidates: List[str] = state["candidates"]
        words: List[str] = state["words"]

        pool: List[str] = candidates if candidates else words
        if not pool:
            raise ValueError("no words to guess from")

        i = self.rng.randrange(len(pool))
        return pool[i]
