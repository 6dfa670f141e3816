"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (secrets still
    consistent with every score so far).
  - If (unexpectedly) the candidate set is empty, fall back to the allowed list.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Baseline only; it makes no attempt to split the candidates well.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Pick any candidate uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "candidates": current consistent secrets (List[str])
                - "allowed":    every legal guess (List[str])

        Returns:
            A 3-digit guess string.
        """
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]

        pool: List[str] = candidates if candidates else allowed
        return pool[self.rng.randrange(len(pool))]
