"""
Closeness (terminal feedback) for a single (guess, password) pair.

Closeness is the number of index positions holding the same character in both
words. Only the overlapping prefix is compared: if one word is longer, its
extra characters contribute nothing.

Properties:
  - symmetric:        closeness(a, b) == closeness(b, a)
  - self-closeness:   closeness(a, a) == len(a)
  - deterministic, no normalization (case matters)

Examples:
  closeness("abcd", "abce") -> 3
  closeness("abcd", "wxyz") -> 0
  closeness("abc",  "abcdef") -> 3
"""

from __future__ import annotations


def closeness(a: str, b: str) -> int:
    """Count positions i < min(len(a), len(b)) where a[i] == b[i]."""
    return sum(1 for x, y in zip(a, b) if x == y)
