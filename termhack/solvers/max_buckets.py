"""
Max Closeness Buckets.

Idea:
  For each guess g, group CURRENT candidates by their closeness to g. Each
  group is what would survive if the terminal reported that value. Pick the
  guess producing the MOST distinct closeness values.
  Tie-break: smaller worst bucket, then prefer a guess that is itself a
  candidate (it might be the password), then RNG.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Tuple
from .base import BaseSolver, register
from termhack.engine import closeness


def _bucket_stats(guess: str, candidates: List[str]) -> Tuple[int, int]:
    """
    Return (num_distinct_closeness_values, worst_bucket_size) for guess.
    """
    buckets: Dict[int, int] = defaultdict(int)
    for ans in candidates:
        buckets[closeness(guess, ans)] += 1
    if not buckets:
        return 0, 0
    return len(buckets), max(buckets.values())


@register
class MaxBucketsSolver(BaseSolver):
    id = "max_buckets"
    name = "Max Closeness Buckets"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        tried = set(state.get("tried", ()))

        # Any untried word on screen may split the candidates; a consistent one can also win.
        pool = [w for w in self.words if w not in tried] or candidates
        if not pool:
            raise ValueError("no words to guess from")
        if len(candidates) <= 2:
            return candidates[self.rng.randrange(len(candidates))] if candidates else pool[0]

        cand_set = set(candidates)
        best_key = None
        best: List[str] = []

        for g in pool:
            m, worst = _bucket_stats(g, candidates)
            key = (m, -worst, g in cand_set)
            if best_key is None or key > best_key:
                best_key, best = key, [g]
            elif key == best_key:
                best.append(g)

        return best[self.rng.randrange(len(best))]
