# apps/cli/run.py
"""
CLI entry point for running solver experiments.

This script:
  1) Instantiates the requested solver(s).
  2) Picks the secrets to play (all 720, or a seeded sample).
  3) Plays every game through the engine with a live progress indicator and writes:
       - CSV:  per-case results + guess/score history columns
       - JSON: manifest with config, summary stats, git commit, etc.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from packages.engine import all_secrets
from packages.harness import DEFAULT_MAX_TURNS, case_seed, run_case, summarize, write_csv, write_manifest
from packages.harness.io import timestamp_id, git_commit_or_unknown
from packages.solvers import create_solver, get_solver_ids


def _positive_int(s: str) -> int:
    n = int(s)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1; got {n}")
    return n


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_solver(solver_id: str, cases: List[str], *, base_seed: int, max_turns: int,
                    progress: str) -> List[Dict]:
    solver = create_solver(solver_id)
    total = len(cases)
    results: List[Dict] = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc=solver_id, unit="game") if progress == "bar" else cases

    for idx, sec in enumerate(iterator, 1):
        # Same per-game seeds as run_batch, so CLI and library runs agree
        r = run_case(solver, sec, max_turns=max_turns, seed=case_seed(base_seed, idx))
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{solver_id} {idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if progress == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()
    return results


def main():
    """
    Parse CLI args, run each requested solver with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="number baseball: run solver experiments")
    ap.add_argument("--solver", action="append",
                    help=f"solver id, repeatable (one of: {solver_choices}); default random_consistent")
    ap.add_argument("--sample", type=_positive_int,
                    help="play only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=_positive_int, default=DEFAULT_MAX_TURNS, help="give up after this many guesses")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()
    solver_ids = args.solver or ["random_consistent"]

    # Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    cases = all_secrets()
    if args.sample is not None and args.sample < len(cases):
        rng.shuffle(cases)
        cases = cases[: args.sample]

    mode = _progress_mode(args.progress)
    run_id = timestamp_id()
    commit = git_commit_or_unknown()

    for solver_id in solver_ids:
        results = _run_one_solver(solver_id, cases, base_seed=args.seed,
                                  max_turns=args.max_turns, progress=mode)

        outdir = Path(args.outdir) / solver_id if len(solver_ids) > 1 else Path(args.outdir)
        csv_path = outdir / f"run_{run_id}.csv"
        manifest_path = outdir / f"run_{run_id}_manifest.json"

        summary = summarize(results)
        write_csv(results, str(csv_path), max_turns=args.max_turns)
        write_manifest({
            "run_id": run_id,
            "git_commit": commit,
            "config": vars(args),
            "num_cases": len(results),
            "solver_id": solver_id,
            "summary": summary,
        }, str(manifest_path))

        avg = summary["avg_guesses"]
        print(f"{solver_id}: win_rate={summary['win_rate']:.3f} "
              f"avg_guesses={'n/a' if avg is None else f'{avg:.3f}'} max={summary['max_guesses']}")
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
