from .core import run_case, run_batch, remaining_candidates, TERMINAL_MAX_ATTEMPTS
from .io import write_csv, write_manifest

__all__ = [
    "run_case", "run_batch", "remaining_candidates", "TERMINAL_MAX_ATTEMPTS",
    "write_csv", "write_manifest",
]
