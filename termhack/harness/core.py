"""
Simulation harness core primitives.

- run_case:  hack one terminal (one known password) with a given solver.
- run_batch: hack many terminals in sequence (optionally a sample prefix).
- Enforces the terminal lockout (4 attempts) at the harness layer.

Each failed attempt becomes a Witness (guess + closeness to the password) and
the remaining candidates are recomputed with the filtering engine, exactly as
a player would by feeding the terminal's answers back into the filter CLI.
"""

from __future__ import annotations
import time
from typing import Dict, List, Iterable, Tuple
from termhack.engine import Record, closeness, filter_candidates

# Attempts allowed before the terminal locks.
TERMINAL_MAX_ATTEMPTS = 4


def _assert_attempts(max_attempts: int) -> None:
    """Guardrail: an attempt budget must allow at least one guess."""
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1; got {max_attempts}")


def remaining_candidates(words: List[str], history: Iterable[Tuple[str, int]]) -> List[str]:
    """
    Words still consistent with every (guess, closeness) in `history`,
    in the order of `words`. With no history every word remains.
    """
    witnesses = [Record.witness(g, d) for g, d in history]
    if not witnesses:
        return list(words)
    records = [Record.candidate(w) for w in words] + witnesses
    survivors = filter_candidates(records)
    return [w for w in words if w in survivors]


def run_case(
        solver,
        password: str,
        *,
        words: Iterable[str],
        max_attempts: int = TERMINAL_MAX_ATTEMPTS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one session until the solver logs in or the terminal locks.

    Args:
        solver:        an object implementing BaseSolver with next_guess(state)
        password:      the hidden word for this case (must be one of `words`)
        words:         every word shown on the terminal
        max_attempts:  guesses allowed before lockout
        seed:          RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, closeness)]), password (str)
    """
    _assert_attempts(max_attempts)

    words = list(dict.fromkeys(words))
    if password not in words:
        raise ValueError(f"password {password!r} is not among the terminal words")

    solver.reset(words=words, seed=seed)

    history: List[Tuple[str, int]] = []
    candidates = list(words)

    t0 = time.time()
    for attempt in range(1, max_attempts + 1):
        state = {
            "attempt": attempt,
            "history": list(history),
            "tried": [g for g, _ in history],
            "candidates": candidates,
            "words": words,
        }

        guess = solver.next_guess(state)

        if guess == password:
            dt = (time.time() - t0) * 1000.0
            history.append((guess, len(password)))
            return {
                "success": True, "guesses": attempt, "time_ms": dt,
                "history": history, "password": password,
            }

        history.append((guess, closeness(guess, password)))
        candidates = remaining_candidates(words, history)

    dt = (time.time() - t0) * 1000.0
    return {
        "success": False, "guesses": max_attempts, "time_ms": dt,
        "history": history, "password": password,
    }


def run_batch(
        solver,
        words: List[str],
        *,
        max_attempts: int = TERMINAL_MAX_ATTEMPTS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Treat each word in turn as the password. If 'sample' is provided, only the
    first K words are used to speed up quick experiments.

    Each case's seed is derived from the base seed (seed + index).
    """
    _assert_attempts(max_attempts)

    pool = list(dict.fromkeys(words))
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, pw in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, pw, words=words, max_attempts=max_attempts, seed=case_seed)
        out.append(r)
    return out
