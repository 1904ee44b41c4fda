"""
Error taxonomy for reading records and filtering them.

  - InputError      : the line reader itself failed (bad encoding, missing file)
  - ValidationError : a line was read but is not a valid record
  - NoWitnessError  : nothing to filter against (informational, not fatal)

Library code raises these; only the CLI turns them into exit codes.
"""

from __future__ import annotations

from enum import Enum


class ValidationKind(str, Enum):
    NO_INPUT = "NoInput"
    BAD_DISTANCE = "BadDistance"
    LENGTH_MISMATCH = "LengthMismatch"


class TermhackError(Exception):
    """Base class for every error raised by termhack."""


class InputError(TermhackError):
    def __init__(self, detail: str, line: int | None = None):
        self.detail = detail
        self.line = line
        where = f"line {line}: " if line is not None else ""
        super().__init__(f"{where}{detail}")


class ValidationError(TermhackError):
    def __init__(self, kind: ValidationKind, detail: str = "", line: int | None = None):
        self.kind = kind
        self.detail = detail
        self.line = line
        where = f" (line {line})" if line is not None else ""
        msg = f"{kind.value}{where}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)

    def at_line(self, line: int) -> "ValidationError":
        """Return a copy of this error stamped with a 1-based line number."""
        return ValidationError(self.kind, self.detail, line=line)


class NoWitnessError(TermhackError):
    MESSAGE = "At least one word must have a known distance"

    def __init__(self):
        super().__init__(self.MESSAGE)
