"""
Record model: one input line is either a candidate or a witness.

  Candidate : a word with no known relationship to the password
  Witness   : a word already tried, plus how many positions it got right

Both variants share one frozen dataclass; `distance is None` marks a
candidate. Line format is `<word> [<distance>]`; anything after the second
token is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .closeness import closeness
from .errors import ValidationError, ValidationKind


@dataclass(frozen=True)
class Record:
    word: str
    distance: Optional[int] = None

    @classmethod
    def candidate(cls, word: str) -> "Record":
        return cls(word)

    @classmethod
    def witness(cls, word: str, distance: int) -> "Record":
        return cls(word, int(distance))

    @property
    def is_witness(self) -> bool:
        return self.distance is not None

    @property
    def is_candidate(self) -> bool:
        return self.distance is None

    def closeness_to(self, other: "Record") -> int:
        """Positional match count between the two words (shorter length wins)."""
        return closeness(self.word, other.word)

    def __str__(self) -> str:
        return self.word if self.distance is None else f"{self.word} {self.distance}"


def _parse_distance(token: str) -> int:
    # int() alone would accept "-1", "+2" and "1_000"
    if not token.isascii() or not token.isdigit():
        raise ValidationError(ValidationKind.BAD_DISTANCE, f"not a non-negative integer: {token!r}")
    return int(token)


def parse_record(line: str) -> Record:
    """
    Parse one line into a Record.

    Raises:
      ValidationError(NoInput)     : the line holds no token at all
      ValidationError(BadDistance) : the second token is not a non-negative integer
    """
    tokens = line.rstrip("\r\n").split()
    if not tokens:
        raise ValidationError(ValidationKind.NO_INPUT, "empty line")

    word = tokens[0]
    if len(tokens) == 1:
        return Record.candidate(word)

    return Record.witness(word, _parse_distance(tokens[1]))
