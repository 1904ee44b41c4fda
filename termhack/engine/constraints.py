"""
Candidate filtering given witnessed closeness values.

Given:
  - the full list of records (candidates and witnesses, as read)

Return:
  - every word that, if it were the password, would reproduce the recorded
    distance of EVERY witness.

Each witness seeds a consistency set: the words of all records whose
closeness to that witness equals its recorded distance. The survivors are the
intersection of those sets. Candidates never seed a set; they only take part
as members. Sets are unordered, so callers must not rely on output order.
"""

from __future__ import annotations

from typing import Iterable, List, Set

from .errors import NoWitnessError
from .records import Record


def consistency_set(records: Iterable[Record], witness: Record) -> Set[str]:
    """
    Words of `records` whose closeness to `witness` equals its distance.

    The witness itself is a member only if its distance equals its own length.
    """
    if witness.distance is None:
        raise ValueError(f"{witness.word!r} has no known distance")
    d = witness.distance
    return {r.word for r in records if r.closeness_to(witness) == d}


def filter_candidates(records: Iterable[Record]) -> Set[str]:
    """
    Intersect the consistency sets of all witnesses in `records`.

    Returns:
      Set[str] of surviving words (each word once; may be empty).

    Raises:
      NoWitnessError if no record carries a distance.
    """
    records = list(records)

    sets: List[Set[str]] = [
        consistency_set(records, w) for w in records if w.is_witness
    ]
    if not sets:
        raise NoWitnessError()

    first, rest = sets[0], sets[1:]
    return {word for word in first if all(word in s for s in rest)}
