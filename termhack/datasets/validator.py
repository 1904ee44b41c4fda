"""
Word-list validator for termhack.

What this module does:
- Validate a word list file in the `<word> [<distance>]` line format.
- Count candidates, witnesses, unique words, and invalid lines (empty lines,
  bad distances). Unlike the strict reader, every line is checked so the
  report lists all problems at once.
- Record the set of word lengths seen (a password file should have one).
- Compute the SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from termhack.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/terminal_7.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from termhack.engine import InputError, ValidationError, parse_record

from .io import decode_line


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class WordlistReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    count: int           # number of VALID records
    candidates: int      # valid records without a distance
    witnesses: int       # valid records with a distance
    unique_count: int    # unique words among valid records
    invalid_lines: int   # lines that failed to parse
    lengths: List[int] = field(default_factory=list)   # distinct word lengths, sorted
    passed: bool = False
    issues: List[str] = field(default_factory=list)    # human-friendly problems


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a word list file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema). `passed`
        is strict: file exists, has at least one valid record,
        no invalid lines (bad UTF-8 counts as invalid), and a single word length.
    """
    p = Path(path)
    if not p.is_file():
        rep = WordlistReport(str(path), False, "", 0, 0, 0, 0, 0,
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    issues: List[str] = []
    words: List[str] = []
    witnesses = 0
    invalid = 0
    first_bad: List[str] = []

    # split exactly like the strict reader: on b"\n" only
    raw_lines = p.read_bytes().split(b"\n")
    if raw_lines and raw_lines[-1] == b"":
        raw_lines.pop()

    for idx, raw in enumerate(raw_lines, start=1):
        try:
            r = parse_record(decode_line(raw, idx))
        except InputError:
            invalid += 1
            if len(first_bad) < 5:
                first_bad.append(f"{idx}:Input")
            continue
        except ValidationError as e:
            invalid += 1
            if len(first_bad) < 5:
                first_bad.append(f"{idx}:{e.kind.value}")
            continue
        words.append(r.word)
        if r.is_witness:
            witnesses += 1

    lengths = sorted({len(w) for w in words})
    unique = len(set(words))

    if not words:
        issues.append("word list contains 0 valid records")
    if invalid:
        issues.append(f"{invalid} invalid line(s) (e.g., {first_bad})")
    if len(lengths) > 1:
        issues.append(f"mixed word lengths: {lengths}")
    if unique != len(words):
        issues.append("word list contains duplicate words")

    # duplicates are reported but tolerated; the engine dedupes its output
    passed = bool(words) and invalid == 0 and len(lengths) == 1

    rep = WordlistReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        count=len(words),
        candidates=len(words) - witnesses,
        witnesses=witnesses,
        unique_count=unique,
        invalid_lines=invalid,
        lengths=lengths,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=12 (uniq=12, cand=10, wit=2, sha=abc123...) | len=[7] | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"cand={report['candidates']}, wit={report['witnesses']}, sha={sha}) "
        f"| len={report['lengths']} | invalid={report['invalid_lines']} | {status}"
    )
