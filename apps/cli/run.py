# apps/cli/run.py
"""
CLI entry point for narrowing down a terminal password.

Reads `<word> [<distance>]` lines from stdin (or a file), one per word shown
on the terminal. Words already tried carry the closeness the terminal
reported. Prints every word consistent with all of those reports, one per
line.

    $ printf 'SPIES\nSPINE 3\nSPITE\nSHINE 2\n' | python -m apps.cli.run
    SPIES

Exit status: 0 on success (including "nothing survives" and the no-witness
notice), 1 on an unreadable or malformed input line.
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from termhack.datasets import read_records, read_records_file
from termhack.engine import (
    InputError, NoWitnessError, ValidationError, check_uniform_length, filter_candidates,
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="termhack: list passwords consistent with terminal feedback")
    ap.add_argument("input", nargs="?",
                    help="file of `<word> [<distance>]` lines (default: stdin)")
    ap.add_argument("--sort", action="store_true",
                    help="print surviving words in lexicographic order")
    ap.add_argument("--strict-length", action="store_true",
                    help="reject input whose words are not all the same length")
    ap.add_argument("--count", action="store_true",
                    help="report how many words remain on stderr")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, read all records (all-or-nothing), filter, and print survivors.
    """
    args = build_parser().parse_args(argv)

    # 1) Read every line before doing anything else; the first bad line aborts.
    try:
        # raw bytes from stdin so decoding is strict UTF-8 whatever the locale
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
        records = read_records_file(args.input) if args.input else read_records(stdin)
        if args.strict_length:
            check_uniform_length(records)
    except InputError as e:
        sys.stderr.write(f"Input: {e}\n")
        return 1
    except ValidationError as e:
        sys.stderr.write(f"Validation: {e}\n")
        return 1

    # 2) Intersect the consistency sets of all witnesses
    try:
        survivors = filter_candidates(records)
    except NoWitnessError as e:
        print(e)
        return 0

    words = sorted(survivors) if args.sort else survivors
    for w in words:
        print(w)

    if args.count:
        total = len({r.word for r in records})
        sys.stderr.write(f"{len(survivors)} of {total} words remain\n")
        sys.stderr.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
