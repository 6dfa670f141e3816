"""
Max Pattern Diversity (MPD).

Idea:
  For each guess g, count how many DISTINCT scores (0S1B, 1S1B, ...) it
  produces against the CURRENT candidates. Pick the guess with the MOST.
  Tie-break: smaller worst bucket, then a guess that could itself win, then RNG.

Cheaper than entropy (no logs or probabilities), but still buckets candidates.
The guess universe is only 720 strings, so every allowed guess is evaluated.
"""

from __future__ import annotations
from typing import List

import numpy as np

from .base import BaseSolver, register
from .table import bucket_matrix


@register
class MaxPatternsSolver(BaseSolver):
    id = "max_patterns"
    name = "Max Pattern Diversity"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]

        if not candidates:
            return allowed[self.rng.randrange(len(allowed))]
        if len(candidates) <= 2:
            return candidates[0]

        counts = bucket_matrix(allowed, candidates)
        distinct = (counts > 0).sum(axis=1)
        worst = counts.max(axis=1)
        cand_set = set(candidates)
        is_cand = np.array([g in cand_set for g in allowed])

        # lexicographic: most distinct scores, smallest worst bucket, candidate first
        keys = list(zip(distinct.tolist(), (-worst).tolist(), is_cand.tolist()))
        best_key = max(keys)
        best = [g for g, k in zip(allowed, keys) if k == best_key]
        return best[self.rng.randrange(len(best))]
