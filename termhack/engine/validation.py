"""
Optional uniform-length check.

Closeness silently truncates to the shorter word. Password files keep all
entries the same length, so a mixed-length input usually means a typo. The
filter CLI only runs this check under --strict-length.
"""

from typing import Iterable

from .errors import ValidationError, ValidationKind
from .records import Record


def check_uniform_length(records: Iterable[Record]) -> None:
    """
    Raise ValidationError(LengthMismatch) on the first record whose word length
    differs from the first record's. Line numbers are 1-based positions in
    `records`.
    """
    expected = None
    for idx, r in enumerate(records, start=1):
        if expected is None:
            expected = len(r.word)
            continue
        if len(r.word) != expected:
            raise ValidationError(
                ValidationKind.LENGTH_MISMATCH,
                f"{r.word!r} has length {len(r.word)}, expected {expected}",
                line=idx,
            )
