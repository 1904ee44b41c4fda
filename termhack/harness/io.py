"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-session results into a tidy CSV (one row per session).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, max_attempts: int) -> str:
    """
    Serialize a batch of session results to CSV.

    Schema (columns):
      solver, password, success, guesses, time_ms,
      guess_1, close_1, ..., guess_<max_attempts>, close_<max_attempts>

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "password", "success", "guesses", "time_ms"]
    for i in range(1, max_attempts + 1):
        fields += [f"guess_{i}", f"close_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "password": r["password"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_attempts + 1):
                if i <= len(hist):
                    g, c = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"close_{i}"] = c
                else:
                    row[f"guess_{i}"] = ""
                    row[f"close_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, words path, attempts, seed, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_cases, solved
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
