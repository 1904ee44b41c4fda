from .validator import validate_wordlist, pretty_summary
from .io import read_records, read_records_file, decode_line

__all__ = [
    "validate_wordlist", "pretty_summary", "read_records", "read_records_file",
    "decode_line",
]
