# apps/cli/simulate.py
"""
Run one or more guessing strategies against every password of a word list.

Each word in the list takes a turn as the password; the strategy picks words,
the harness feeds back their closeness, and the filtering engine narrows the
pool until login or lockout.

Writes per-solver outputs to: <outdir>/<solver_id>/run_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse, sys, time, random, zlib
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm

from termhack.datasets import validate_wordlist, pretty_summary, read_records_file
from termhack.engine import TermhackError
from termhack.harness import run_case, TERMINAL_MAX_ATTEMPTS
from termhack.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from termhack.solvers import create_solver, get_solver_ids


def _load_words(path: str) -> List[str]:
    """Strictly read a word list; distances, if any, are ignored. Order kept, duplicates dropped."""
    try:
        records = read_records_file(path)
    except TermhackError as e:
        raise SystemExit(f"Cannot load word list {path}: {e}") from e
    return list(dict.fromkeys(r.word for r in records))


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _solver_seed(base_seed: int, solver_id: str, idx: int) -> int:
    # crc32 instead of hash(): str hashes are randomized per process
    return (base_seed ^ zlib.crc32(solver_id.encode("utf-8"))) + idx * 2654435761


def _summarize(results: List[Dict]) -> Dict:
    solved = [r for r in results if r["success"]]
    avg = (sum(r["guesses"] for r in solved) / len(solved)) if solved else 0.0
    return {"num_cases": len(results), "solved": len(solved), "avg_guesses_solved": round(avg, 3)}


def _run_one_solver(solver_id: str, cases: List[str], *, words: List[str], max_attempts: int,
                    base_seed: int, outdir: Path, progress: str,
                    wordlist_report: Dict) -> Tuple[str, str, Dict]:
    solver = create_solver(solver_id)
    results = []
    total = len(cases)
    mode = _progress_mode(progress)
    iterator = tqdm(cases, ncols=80, desc=f"{solver_id}", unit="case") if mode == "bar" else cases
    start = time.time()
    last_print = 0.0

    for idx, pw in enumerate(iterator, 1):
        r = run_case(solver, pw, words=words, max_attempts=max_attempts,
                     seed=_solver_seed(base_seed, solver_id, idx))
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{solver_id}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # write outputs under <outdir>/<solver_id>/
    run_id = timestamp_id()
    sdir = outdir / solver_id
    sdir.mkdir(parents=True, exist_ok=True)
    csv_path = sdir / f"run_{run_id}.csv"
    manifest_path = sdir / f"run_{run_id}_manifest.json"

    summary = _summarize(results)
    write_csv(results, str(csv_path), max_attempts=max_attempts)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {"solver": solver_id, "max_attempts": max_attempts, "seed": base_seed,
                   "num_cases": len(cases)},
        "wordlist": wordlist_report,
        "solver_id": solver.id,
        **summary,
    }
    write_manifest(manifest, str(manifest_path))
    return str(csv_path), str(manifest_path), summary


def main(argv: List[str] | None = None) -> int:
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="termhack: evaluate guessing strategies on a word list")
    ap.add_argument("--words", required=True, help="word list, one `<word>` per line")
    ap.add_argument("--solver", dest="solvers", action="append",
                    help=f"solver id, repeatable (default: all). Registered: {', '.join(registered)}")
    ap.add_argument("--attempts", type=int, default=TERMINAL_MAX_ATTEMPTS,
                    help="guesses allowed before the terminal locks")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of passwords (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar if stderr is a terminal, else plain text).")
    args = ap.parse_args(argv)

    if args.attempts < 1:
        ap.error("--attempts must be >= 1")

    # 1) validate once and show a one-liner
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            sys.stderr.write(f"warning: {issue}\n")

    # 2) load list once (strict; a malformed line stops the run)
    words = _load_words(args.words)

    # 3) shared cases (deterministic by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(words):
        pool = list(words)
        rng.shuffle(pool)
        cases = pool[:args.sample]
    else:
        cases = list(words)

    # 4) expand solvers
    todo = args.solvers or registered
    missing = [s for s in todo if s not in registered]
    if missing:
        ap.error(f"Unknown solver ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # 5) run each solver sequentially (shared cases) with progress
    for sid in todo:
        if args.progress != "off":
            print(f"\n=== Running {sid} on {len(cases)} cases (attempts={args.attempts}) ===")
        csv_path, manifest_path, summary = _run_one_solver(
            solver_id=sid, cases=cases, words=words, max_attempts=args.attempts,
            base_seed=args.seed, outdir=outdir, progress=args.progress, wordlist_report=rep,
        )
        print(f"{sid}: solved {summary['solved']}/{summary['num_cases']} "
              f"(avg guesses {summary['avg_guesses_solved']})")
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
