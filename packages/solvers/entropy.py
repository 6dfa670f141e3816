"""
Entropy Solver (expected information gain).

Main idea:
  - For each guess g, partition CURRENT candidates by the score g would get.
  - Compute Shannon entropy H over those buckets; pick g with max H.
Tie-break:
  - smaller worst-case bucket (minimax-ish), then prefer a guess that is still
    a candidate (it can win outright), then seeded RNG.

The whole 720x720 score table is precomputed (see table.py), so every allowed
guess is evaluated each turn in one vectorized pass.
"""

from __future__ import annotations
from typing import List

import numpy as np

from .base import BaseSolver, register
from .table import bucket_matrix


def entropy_bits(counts: np.ndarray) -> np.ndarray:
    """Row-wise Shannon entropy (bits) of bucket-count rows."""
    counts = np.atleast_2d(counts).astype(float)
    n = counts.sum(axis=1, keepdims=True)
    p = np.divide(counts, n, out=np.zeros_like(counts), where=n > 0)
    logp = np.log2(p, out=np.zeros_like(p), where=p > 0)
    return -(p * logp).sum(axis=1)


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "1.0.0"

    # Entropies closer than this count as a tie
    DECIMALS = 9

    def next_guess(self, state: dict) -> str:
        """Pick the guess with maximum expected information gain."""
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]

        if not candidates:
            return allowed[self.rng.randrange(len(allowed))]
        if len(candidates) == 1:
            return candidates[0]

        counts = bucket_matrix(allowed, candidates)
        H = np.round(entropy_bits(counts), self.DECIMALS)
        worst = counts.max(axis=1)
        cand_set = set(candidates)

        keys = [(h, -w, g in cand_set) for h, w, g in zip(H.tolist(), worst.tolist(), allowed)]
        best_key = max(keys)
        best_words = [g for g, k in zip(allowed, keys) if k == best_key]
        return best_words[self.rng.randrange(len(best_words))]
