"""
Expected Remaining Candidates (ERC).

Idea:
  For guess g, if CURRENT candidates partition by closeness into buckets of
  sizes {c_i}, the expected leftover after the terminal answers is:
      E[left | g] = sum_i ( (c_i / n) * c_i ) = (1/n) * sum_i c_i^2
  A guess that is itself a candidate wins outright with probability 1/n, so
  its own bucket (closeness == len(g)) does not count as leftover.
  Minimize that sum. Tie-break: smaller worst bucket, then RNG.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Tuple
from .base import BaseSolver, register
from termhack.engine import closeness


def _sum_c2_and_worst(guess: str, candidates: List[str]) -> Tuple[int, int]:
    buckets: Dict[int, int] = defaultdict(int)
    for ans in candidates:
        if ans == guess:
            continue  # solved, nothing left
        buckets[closeness(guess, ans)] += 1
    worst = max(buckets.values()) if buckets else 0
    sum_c2 = sum(c*c for c in buckets.values())
    return sum_c2, worst


@register
class ExpectedLeftSolver(BaseSolver):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        tried = set(state.get("tried", ()))

        pool = [w for w in self.words if w not in tried] or candidates
        if not pool:
            raise ValueError("no words to guess from")

        best_sum = None
        best_worst = None
        best: List[str] = []

        for g in pool:
            sum_c2, worst = _sum_c2_and_worst(g, candidates)
            if (best_sum is None) or (sum_c2 < best_sum) or (sum_c2 == best_sum and worst < best_worst):
                best_sum, best_worst, best = sum_c2, worst, [g]
            elif sum_c2 == best_sum and worst == best_worst:
                best.append(g)

        return best[self.rng.randrange(len(best))]
