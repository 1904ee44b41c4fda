from .closeness import closeness
from .records import Record, parse_record
from .constraints import consistency_set, filter_candidates
from .validation import check_uniform_length
from .errors import (
    TermhackError, InputError, ValidationError, ValidationKind, NoWitnessError,
)

__all__ = [
    "closeness", "Record", "parse_record", "consistency_set", "filter_candidates",
    "check_uniform_length", "TermhackError", "InputError", "ValidationError",
    "ValidationKind", "NoWitnessError",
]
