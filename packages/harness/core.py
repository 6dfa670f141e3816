"""
Experiment harness core primitives.

- run_case:  play a single game (one hidden secret) with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).

Games are played through the engine's public operations (submit_guess on a
caller-owned GameState), exactly like a human-facing UI would. These
functions are UI-agnostic so a CLI app, a notebook, or tests can reuse them.
"""

from __future__ import annotations
import time
from typing import Dict, List, Iterable, Tuple
from packages.engine import GameState, all_secrets, filter_candidates, is_well_formed, secret_from_str, submit_guess

# Any decent strategy finishes well within this; the browser game itself has no limit.
DEFAULT_MAX_TURNS = 10


def _check_turns(max_turns: int) -> None:
    """Guardrail: a turn budget must allow at least one guess."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def _check_secret(secret: str) -> None:
    """Guardrail: the hidden number must be 3 distinct digits, like any real game."""
    if not is_well_formed(secret):
        raise ValueError(f"secret must be 3 distinct digits 0-9; got {secret!r}")


def case_seed(seed: int | None, idx: int) -> int | None:
    """Per-game seed for the idx-th case (1-based) of a batch; None stays None."""
    return None if seed is None else seed + idx


def run_case(
        solver,
        secret: str,
        *,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:    an object implementing BaseSolver with next_guess(state)
        secret:    the hidden number for this case, e.g. "307"
        max_turns: give up after this many guesses
        seed:      RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, "xSyB")]), secret (str)

    Raises:
        ValueError for a malformed secret, a turn budget below 1, or an
        invalid guess from the solver.
    """
    _check_turns(max_turns)
    _check_secret(secret)
    solver.reset(seed=seed)

    game = GameState(secret=secret_from_str(secret))
    allowed = all_secrets()
    candidates = list(allowed)

    t0 = time.time()
    while game.attempt_count < max_turns and not game.is_over:
        state = {
            "turn": game.attempt_count + 1,
            "history": list(game.history),
            "candidates": candidates,
            "allowed": allowed,
            "rng": solver.rng,
        }
        guess = solver.next_guess(state)

        res = submit_guess(game, guess)
        if not res.ok:
            raise ValueError(f"solver {solver.id!r} proposed an invalid guess {guess!r}: {res.error}")
        game = res.value.state

        # Narrow candidate set using the new feedback before next turn
        candidates = filter_candidates(candidates, [game.history[-1]])

    dt = (time.time() - t0) * 1000.0
    history: List[Tuple[str, str]] = [(g, sr.key()) for g, sr in game.history]
    return {
        "success": game.is_over, "guesses": game.attempt_count, "time_ms": dt,
        "history": history, "secret": secret,
    }


def run_batch(
        solver,
        secrets: Iterable[str],
        *,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _check_turns(max_turns)
    if sample is not None and sample < 1:
        raise ValueError(f"sample must be >= 1; got {sample}")

    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, sec in enumerate(pool, start=1):
        r = run_case(solver, sec, max_turns=max_turns, seed=case_seed(seed, idx))
        r["solver_id"] = solver.id
        out.append(r)
    return out
